"""
Core human capital factors: age, education, first/second language and
Canadian work experience.

Each scorer takes the relevant slice of the profile plus `accompanied`
(True when the spouse columns apply) and returns whole points. Absent data
scores 0.
"""

from __future__ import annotations

from typing import Iterable

from app.scoring.tables import (
    AGE_POINTS,
    CANADIAN_EXPERIENCE_POINTS,
    EDUCATION_POINTS,
    FIRST_LANGUAGE_POINTS,
    SECOND_LANGUAGE_POINTS,
)
from app.scoring.utils import effective_clb, is_canadian, qualifying_years
from models.profile import CandidateProfile, EducationRecord, LanguageRecord, WorkExperienceRecord


def age_points(age: int | None, accompanied: bool) -> int:
    if age is None:
        return 0
    return AGE_POINTS[accompanied].lookup(age)


def education_points(records: Iterable[EducationRecord] | None, accompanied: bool) -> int:
    """Points for the single highest credential; unknown levels score 0."""
    column = 1 if accompanied else 0
    best = 0
    for edu in records or ():
        pair = EDUCATION_POINTS.get(edu.level)
        if pair and pair[column] > best:
            best = pair[column]
    return best


def language_points(records: list[LanguageRecord] | None, accompanied: bool) -> int:
    """
    First-language points plus at most one second-language bonus.

    Two steps: the first-language score is the best tier reached by any
    record. The bonus goes to the best record whose language differs from
    the first entry's language and which itself reaches a scoring tier.
    """
    if not records:
        return 0

    tier = FIRST_LANGUAGE_POINTS[accompanied]
    primary_language = records[0].language

    first = 0
    second = 0
    for record in records:
        clb = effective_clb(record)
        if clb is None:
            continue
        points = tier.lookup(clb)
        first = max(first, points)
        if points > 0 and record.language and record.language != primary_language:
            second = max(second, SECOND_LANGUAGE_POINTS.lookup(clb))
    return first + second


def canadian_experience_points(records: Iterable[WorkExperienceRecord] | None, accompanied: bool) -> int:
    years = qualifying_years(records, is_canadian)
    return CANADIAN_EXPERIENCE_POINTS[accompanied].lookup(years)


def core_breakdown(profile: CandidateProfile) -> dict[str, int]:
    accompanied = profile.has_accompanying_spouse
    return {
        "age": age_points(profile.age, accompanied),
        "education": education_points(profile.education, accompanied),
        "language": language_points(profile.language_proficiency, accompanied),
        "canadian_work_experience": canadian_experience_points(profile.work_experience, accompanied),
    }


def calculate_core_human_capital_points(profile: CandidateProfile) -> int:
    """Age + education + language + Canadian work experience. No cap."""
    return sum(core_breakdown(profile).values())
