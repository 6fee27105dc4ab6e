"""
Duration and language-benchmark helpers shared by every scorer.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Callable, Iterable

from app.scoring.tables import (
    FULL_TIME_HOURS,
    IELTS_TO_CLB,
    PART_TIME_HOURS,
    PART_TIME_WEIGHT,
    PTE_TO_CLB,
    StepTable,
)
from models.profile import LanguageRecord, WorkExperienceRecord


def months_between(start: date, end: date) -> int:
    """Whole calendar months from `start` to `end`; day of month is ignored."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def hours_weight(hours_per_week: float | None) -> float:
    if hours_per_week is None:
        return 0.0
    if hours_per_week >= FULL_TIME_HOURS:
        return 1.0
    if hours_per_week >= PART_TIME_HOURS:
        return PART_TIME_WEIGHT
    return 0.0


def qualifying_months(
    records: Iterable[WorkExperienceRecord] | None,
    predicate: Callable[[WorkExperienceRecord], bool] | None = None,
) -> float:
    """
    Weighted months of work across `records`.

    Records missing either date are skipped. An end date before the start
    date counts as zero months rather than subtracting from the total.
    """
    total = 0.0
    for exp in records or ():
        if predicate is not None and not predicate(exp):
            continue
        if exp.start_date is None or exp.end_date is None:
            continue
        weight = hours_weight(exp.hours_per_week)
        if not weight:
            continue
        months = max(0, months_between(exp.start_date, exp.end_date))
        total += months * weight
    return total


def qualifying_years(
    records: Iterable[WorkExperienceRecord] | None,
    predicate: Callable[[WorkExperienceRecord], bool] | None = None,
) -> int:
    return math.floor(qualifying_months(records, predicate) / 12)


def is_canadian(exp: WorkExperienceRecord) -> bool:
    return exp.is_canadian_experience


def is_foreign(exp: WorkExperienceRecord) -> bool:
    return not exp.is_canadian_experience


def effective_clb(record: LanguageRecord) -> int | None:
    """Lowest CLB across the four skills; `None` when the record carries no CLB data."""
    clb = record.clb_equivalent
    if clb is None:
        return None
    return min(clb.speaking or 0, clb.listening or 0, clb.reading or 0, clb.writing or 0)


def highest_clb(records: Iterable[LanguageRecord] | None) -> int:
    best = 0
    for record in records or ():
        clb = effective_clb(record)
        if clb is not None and clb > best:
            best = clb
    return best


def find_language(records: Iterable[LanguageRecord] | None, language: str) -> LanguageRecord | None:
    """First record for `language` (case-insensitive), whether or not it has CLB data."""
    for record in records or ():
        if record.language == language:
            return record
    return None


# --- Language test -> CLB conversion ---

def _celpip_to_clb(score: float | None) -> int:
    if score is None or not math.isfinite(score):
        return 0
    level = int(score)
    return level if 1 <= level <= 12 else 0


def _grid_to_clb(grid: StepTable, score: float | None) -> int:
    if score is None or not math.isfinite(score):
        return 0
    return grid.lookup(score)


def clb_from_test_scores(
    test_type: str,
    speaking: float | None,
    listening: float | None,
    reading: float | None,
    writing: float | None,
) -> tuple[int, int, int, int] | None:
    """
    Convert raw test results to CLB (speaking, listening, reading, writing).

    Supports IELTS General, CELPIP-G and PTE Core. Returns `None` for any
    other test type; a missing skill converts to CLB 0.
    """
    t = (test_type or "").lower()
    scores = (speaking, listening, reading, writing)
    if "celpip" in t:
        return tuple(_celpip_to_clb(s) for s in scores)
    if "pte" in t:
        return tuple(_grid_to_clb(PTE_TO_CLB, s) for s in scores)
    if "ielts" in t:
        return tuple(_grid_to_clb(IELTS_TO_CLB, s) for s in scores)
    return None
