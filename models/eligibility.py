"""Schemas for the CRS points API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class PointsComputeResponse(BaseModel):
    """Response for POST /eligibility/crs/compute."""

    total: int = Field(..., description="Total CRS points as computed (uncapped)")
    display_total: int = Field(..., description="Total capped at the configured display maximum")
    core_human_capital: int = Field(..., description="Points from age, education, language, Canadian work")
    spouse_factors: int = Field(0, description="Points from spouse education, language, Canadian work")
    skill_transferability: int = Field(0, description="Capped skill transferability points (included in additional_points)")
    additional_points: int = Field(0, description="Skill transferability, nomination, job offer, Canadian study, French, relatives")
    breakdown: dict[str, Any] = Field(default_factory=dict, description="Per-factor point breakdown")
    missing_or_defaulted: list[str] = Field(default_factory=list, description="Profile fields missing or defaulted")
    disclaimer: str = Field(
        default="This tool is for general guidance only. Official IRCC system results govern. See Canada.ca Express Entry CRS calculator. Not legal advice.",
        description="Legal disclaimer",
    )


class PointsValue(BaseModel):
    """Single aggregate returned by the per-section endpoints."""

    points: int = Field(..., description="Points for the requested section")
