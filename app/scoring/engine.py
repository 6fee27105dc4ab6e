"""
CRS (Comprehensive Ranking System) points engine for Express Entry.

Composes the core human capital, spouse and additional factors into a single
total. Every function is pure: the profile is read, never modified, and no
state survives between calls, so profiles can be scored concurrently.

Legal disclaimer: this tool is for general guidance only. Official IRCC
system results govern.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from app.scoring.additional import additional_breakdown, calculate_additional_points
from app.scoring.core import calculate_core_human_capital_points, core_breakdown
from app.scoring.spouse import calculate_spouse_points, spouse_breakdown
from app.scoring.transferability import transferability_breakdown
from models.profile import CandidateProfile

logger = logging.getLogger(__name__)


@dataclass
class PointsResult:
    """Points total with per-factor breakdown."""

    total: int = 0
    core_human_capital: int = 0
    spouse_factors: int = 0
    skill_transferability: int = 0
    additional_points: int = 0
    breakdown: dict[str, Any] = field(default_factory=dict)
    missing_or_defaulted: list[str] = field(default_factory=list)
    disclaimer: str = (
        "This tool is for general guidance only. Official IRCC system results govern. "
        "See Canada.ca Express Entry CRS calculator. Not legal advice."
    )


def _spouse_points(profile: CandidateProfile) -> int:
    if not profile.has_accompanying_spouse:
        return 0
    return calculate_spouse_points(profile.spouse_profile)


def calculate_total_score(profile: CandidateProfile) -> int:
    """Core human capital + spouse factors (0 without an accompanying spouse) + additional points."""
    return (
        calculate_core_human_capital_points(profile)
        + _spouse_points(profile)
        + calculate_additional_points(profile)
    )


def _missing_fields(profile: CandidateProfile) -> list[str]:
    missing: list[str] = []
    if profile.age is None:
        missing.append("age")
    if not any(edu.level is not None for edu in profile.education):
        missing.append("education")
    if not any(lang.clb_equivalent is not None for lang in profile.language_proficiency):
        missing.append("language_proficiency")
    if not profile.work_experience:
        missing.append("work_experience")
    return missing


def compute_points(profile: CandidateProfile) -> PointsResult:
    """
    Score a profile and keep every sub-score.

    `additional_points` includes the capped skill transferability term, so
    `total == core_human_capital + spouse_factors + additional_points`.
    """
    core = core_breakdown(profile)
    if profile.has_accompanying_spouse:
        spouse = spouse_breakdown(profile.spouse_profile)
    else:
        spouse = spouse_breakdown(None)
    additional = additional_breakdown(profile)

    core_pts = sum(core.values())
    spouse_pts = sum(spouse.values())
    add_pts = sum(additional.values())

    breakdown: dict[str, Any] = {**core, **spouse}
    breakdown["transferability"] = transferability_breakdown(profile)
    breakdown.update(additional)

    result = PointsResult(
        total=core_pts + spouse_pts + add_pts,
        core_human_capital=core_pts,
        spouse_factors=spouse_pts,
        skill_transferability=additional["skill_transferability"],
        additional_points=add_pts,
        breakdown=breakdown,
        missing_or_defaulted=_missing_fields(profile),
    )
    logger.debug(f"CRS points computed: total={result.total}, breakdown={breakdown}")
    return result
