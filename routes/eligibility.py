"""
Eligibility & CRS scoring API.

Thin HTTP layer over the points engine: the candidate profile arrives in the
request body, is scored, and the result is returned. Nothing is stored.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from app.scoring.additional import calculate_additional_points
from app.scoring.core import calculate_core_human_capital_points
from app.scoring.engine import compute_points
from app.scoring.spouse import calculate_spouse_points
from models.eligibility import PointsComputeResponse, PointsValue
from models.profile import CandidateProfile, SpouseProfile

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY_MAX = 1200

router = APIRouter(tags=["eligibility"])


@router.post("/crs/compute", response_model=PointsComputeResponse)
async def crs_compute(request: Request, profile: CandidateProfile) -> PointsComputeResponse:
    """
    Compute the Express Entry CRS score for the supplied profile.

    Missing or malformed optional fields score zero instead of failing, so a
    partially completed profile still gets a (lower) score; the fields that
    were absent are listed in `missing_or_defaulted`.
    """
    result = compute_points(profile)
    display_max = getattr(request.app.state, "display_max", DEFAULT_DISPLAY_MAX)
    logger.info(
        f"CRS computed: total={result.total}, missing={result.missing_or_defaulted or 'none'}"
    )
    return PointsComputeResponse(
        total=result.total,
        display_total=min(result.total, display_max),
        core_human_capital=result.core_human_capital,
        spouse_factors=result.spouse_factors,
        skill_transferability=result.skill_transferability,
        additional_points=result.additional_points,
        breakdown=result.breakdown,
        missing_or_defaulted=result.missing_or_defaulted,
        disclaimer=result.disclaimer,
    )


@router.post("/crs/core", response_model=PointsValue)
async def crs_core(profile: CandidateProfile) -> PointsValue:
    """Core human capital points only (age, education, language, Canadian work)."""
    return PointsValue(points=calculate_core_human_capital_points(profile))


@router.post("/crs/spouse", response_model=PointsValue)
async def crs_spouse(spouse: SpouseProfile) -> PointsValue:
    """Spouse factor points for a spouse profile on its own."""
    return PointsValue(points=calculate_spouse_points(spouse))


@router.post("/crs/additional", response_model=PointsValue)
async def crs_additional(profile: CandidateProfile) -> PointsValue:
    """Additional points, including capped skill transferability."""
    return PointsValue(points=calculate_additional_points(profile))
