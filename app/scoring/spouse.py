"""
Spouse or common-law partner factors.
"""

from __future__ import annotations

from typing import Iterable

from app.scoring.tables import (
    SPOUSE_EDUCATION_POINTS,
    SPOUSE_EXPERIENCE_POINTS,
    SPOUSE_LANGUAGE_CAP,
    SPOUSE_LANGUAGE_SKILL_POINTS,
)
from app.scoring.utils import qualifying_years
from models.profile import EducationRecord, LanguageRecord, SpouseProfile, WorkExperienceRecord


def spouse_education_points(record: EducationRecord | None) -> int:
    if record is None:
        return 0
    return SPOUSE_EDUCATION_POINTS.get(record.level, 0)


def spouse_language_points(records: Iterable[LanguageRecord] | None) -> int:
    """Each skill of each record scores on its own; the sum is capped."""
    total = 0
    for record in records or ():
        clb = record.clb_equivalent
        if clb is None:
            continue
        for skill in (clb.speaking, clb.listening, clb.reading, clb.writing):
            total += SPOUSE_LANGUAGE_SKILL_POINTS.lookup(skill)
    return min(SPOUSE_LANGUAGE_CAP, total)


def spouse_experience_points(records: Iterable[WorkExperienceRecord] | None) -> int:
    return SPOUSE_EXPERIENCE_POINTS.lookup(qualifying_years(records))


def spouse_breakdown(spouse: SpouseProfile | None) -> dict[str, int]:
    if spouse is None:
        return {"spouse_education": 0, "spouse_language": 0, "spouse_work_experience": 0}
    return {
        "spouse_education": spouse_education_points(spouse.education),
        "spouse_language": spouse_language_points(spouse.language_proficiency),
        "spouse_work_experience": spouse_experience_points(spouse.canadian_work_experience),
    }


def calculate_spouse_points(spouse: SpouseProfile | None) -> int:
    return sum(spouse_breakdown(spouse).values())
