"""
Skill transferability: combinations of education, language ability and work
experience. Each sub-factor is worth 0, 13, 25 or 50 points and the sum is
capped at 100.
"""

from __future__ import annotations

from app.scoring.tables import (
    CANADIAN_EXPERIENCE_COMBINATION_POINTS,
    CLB_COMBINATION_POINTS,
    DEGREE_LEVELS,
    FOREIGN_CANADIAN_POINTS,
    FOREIGN_LANGUAGE_POINTS,
    LONG_FOREIGN_YEARS,
    MIN_FOREIGN_YEARS,
    SKILL_TRANSFERABILITY_CAP,
)
from app.scoring.utils import highest_clb, is_canadian, is_foreign, qualifying_years
from models.profile import CandidateProfile, EducationLevel


def has_degree(profile: CandidateProfile) -> bool:
    """Bachelor's or higher; diplomas and high school do not count."""
    return any(edu.level in DEGREE_LEVELS for edu in profile.education)


def education_language_points(profile: CandidateProfile) -> int:
    if not has_degree(profile):
        return 0
    return CLB_COMBINATION_POINTS.lookup(highest_clb(profile.language_proficiency))


def education_canadian_experience_points(profile: CandidateProfile) -> int:
    if not has_degree(profile):
        return 0
    years = qualifying_years(profile.work_experience, is_canadian)
    return CANADIAN_EXPERIENCE_COMBINATION_POINTS.lookup(years)


def foreign_experience_language_points(profile: CandidateProfile) -> int:
    foreign_years = qualifying_years(profile.work_experience, is_foreign)
    if foreign_years < MIN_FOREIGN_YEARS:
        return 0
    table = FOREIGN_LANGUAGE_POINTS[foreign_years >= LONG_FOREIGN_YEARS]
    return table.lookup(highest_clb(profile.language_proficiency))


def foreign_canadian_experience_points(profile: CandidateProfile) -> int:
    foreign_years = qualifying_years(profile.work_experience, is_foreign)
    if foreign_years < MIN_FOREIGN_YEARS:
        return 0
    canadian_years = qualifying_years(profile.work_experience, is_canadian)
    table = FOREIGN_CANADIAN_POINTS[foreign_years >= LONG_FOREIGN_YEARS]
    return table.lookup(canadian_years)


def certificate_points(profile: CandidateProfile) -> int:
    """Certificate of qualification in a trade, combined with language ability."""
    if not any(edu.level == EducationLevel.CERTIFICATE for edu in profile.education):
        return 0
    return CLB_COMBINATION_POINTS.lookup(highest_clb(profile.language_proficiency))


def transferability_breakdown(profile: CandidateProfile) -> dict[str, int]:
    return {
        "education_language": education_language_points(profile),
        "education_canadian_experience": education_canadian_experience_points(profile),
        "foreign_experience_language": foreign_experience_language_points(profile),
        "foreign_canadian_experience": foreign_canadian_experience_points(profile),
        "certificate_of_qualification": certificate_points(profile),
    }


def calculate_skill_transferability_points(profile: CandidateProfile) -> int:
    return min(SKILL_TRANSFERABILITY_CAP, sum(transferability_breakdown(profile).values()))
