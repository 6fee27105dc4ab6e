"""
Additional points: skill transferability, provincial nomination, arranged
employment, Canadian study, French ability and relatives in Canada.
"""

from __future__ import annotations

from app.scoring.tables import (
    CANADIAN_EDUCATION_COUNTRY,
    CANADIAN_EDUCATION_POINTS,
    ENGLISH,
    ENGLISH_MIN_CLB,
    FRENCH,
    FRENCH_MIN_CLB,
    FRENCH_ONLY_POINTS,
    FRENCH_WITH_ENGLISH_POINTS,
    JOB_OFFER_SENIOR_POINTS,
    JOB_OFFER_SENIOR_PREFIX,
    JOB_OFFER_SKILLED_FIRST_DIGITS,
    JOB_OFFER_SKILLED_POINTS,
    PROVINCIAL_NOMINATION_POINTS,
    RELATIVES_IN_CANADA_POINTS,
)
from app.scoring.transferability import calculate_skill_transferability_points
from app.scoring.utils import effective_clb, find_language
from models.profile import CandidateProfile


def provincial_nomination_points(profile: CandidateProfile) -> int:
    return PROVINCIAL_NOMINATION_POINTS if profile.has_provincial_nomination else 0


def job_offer_points(profile: CandidateProfile) -> int:
    """LMIA-exempt offers score nothing; otherwise the NOC code decides the tier."""
    if not profile.has_job_offer:
        return 0
    details = profile.job_offer_details
    if details is None or details.lmia_exempt or not details.noc:
        return 0
    if details.noc.startswith(JOB_OFFER_SENIOR_PREFIX):
        return JOB_OFFER_SENIOR_POINTS
    if details.noc[0] in JOB_OFFER_SKILLED_FIRST_DIGITS:
        return JOB_OFFER_SKILLED_POINTS
    return 0


def canadian_education_points(profile: CandidateProfile) -> int:
    best = 0
    for edu in profile.education:
        if (edu.country or "").lower() != CANADIAN_EDUCATION_COUNTRY:
            continue
        best = max(best, CANADIAN_EDUCATION_POINTS.get(edu.level, 0))
    return best


def french_language_points(profile: CandidateProfile) -> int:
    french = find_language(profile.language_proficiency, FRENCH)
    french_clb = effective_clb(french) if french is not None else None
    if french_clb is None or french_clb < FRENCH_MIN_CLB:
        return 0

    english = find_language(profile.language_proficiency, ENGLISH)
    english_clb = (effective_clb(english) if english is not None else None) or 0
    if english_clb >= ENGLISH_MIN_CLB:
        return FRENCH_WITH_ENGLISH_POINTS
    return FRENCH_ONLY_POINTS


def relatives_points(profile: CandidateProfile) -> int:
    factors = profile.adaptability_factors
    if factors and factors.relatives_in_canada and factors.relatives_in_canada.has:
        return RELATIVES_IN_CANADA_POINTS
    return 0


def additional_breakdown(profile: CandidateProfile) -> dict[str, int]:
    return {
        "skill_transferability": calculate_skill_transferability_points(profile),
        "provincial_nomination": provincial_nomination_points(profile),
        "job_offer": job_offer_points(profile),
        "canadian_education": canadian_education_points(profile),
        "french_language": french_language_points(profile),
        "relatives_in_canada": relatives_points(profile),
    }


def calculate_additional_points(profile: CandidateProfile) -> int:
    """Sum of all additional factors. Only skill transferability is capped, inside its own term."""
    return sum(additional_breakdown(profile).values())
