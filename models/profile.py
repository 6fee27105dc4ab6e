"""
Candidate profile schemas consumed by the points engine.

Wire names are camelCase (`maritalStatus`, `clbEquivalent`, ...); Python code
uses snake_case. Either spelling populates a model.

Validation is deliberately lenient: a value that cannot be parsed becomes
`None` (or `False`/empty list) so the matching factor scores zero instead of
rejecting a partially completed profile.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class EducationLevel(str, Enum):
    HIGH_SCHOOL = "highSchool"
    ONE_YEAR_DIPLOMA = "oneYearDiploma"
    TWO_YEAR_DIPLOMA = "twoYearDiploma"
    BACHELORS = "bachelors"
    TWO_OR_MORE_DEGREES = "twoOrMoreDegrees"
    MASTERS = "masters"
    PHD = "phd"
    CERTIFICATE = "certificate"


_EDUCATION_ALIASES = {
    "highschool": EducationLevel.HIGH_SCHOOL,
    "secondary": EducationLevel.HIGH_SCHOOL,
    "oneyeardiploma": EducationLevel.ONE_YEAR_DIPLOMA,
    "oneyeardegree": EducationLevel.ONE_YEAR_DIPLOMA,
    "oneyear": EducationLevel.ONE_YEAR_DIPLOMA,
    "twoyeardiploma": EducationLevel.TWO_YEAR_DIPLOMA,
    "twoyeardegree": EducationLevel.TWO_YEAR_DIPLOMA,
    "twoyear": EducationLevel.TWO_YEAR_DIPLOMA,
    "bachelors": EducationLevel.BACHELORS,
    "bachelor": EducationLevel.BACHELORS,
    "bachelorsdegree": EducationLevel.BACHELORS,
    "twoormoredegrees": EducationLevel.TWO_OR_MORE_DEGREES,
    "twoormore": EducationLevel.TWO_OR_MORE_DEGREES,
    "masters": EducationLevel.MASTERS,
    "master": EducationLevel.MASTERS,
    "professional": EducationLevel.MASTERS,
    "phd": EducationLevel.PHD,
    "doctoral": EducationLevel.PHD,
    "doctorate": EducationLevel.PHD,
    "certificate": EducationLevel.CERTIFICATE,
    "certificateofqualification": EducationLevel.CERTIFICATE,
}


def normalize_education_level(value: Any) -> EducationLevel | None:
    """Map an education level (enum value, camelCase or snake_case alias) to `EducationLevel`."""
    if isinstance(value, EducationLevel):
        return value
    if not isinstance(value, str):
        return None
    key = re.sub(r"[^a-z0-9]", "", value.lower())
    return _EDUCATION_ALIASES.get(key)


def _to_float(v: Any) -> float | None:
    """Finite float or `None`; "nan", "inf" and overflowing values are treated as absent."""
    if v is None or isinstance(v, bool):
        return None
    try:
        f = float(v)
    except (TypeError, ValueError, OverflowError):
        return None
    return f if math.isfinite(f) else None


def _to_int(v: Any) -> int | None:
    f = _to_float(v)
    return int(f) if f is not None else None


def _to_bool(v: Any) -> bool:
    if v is None:
        return False
    if isinstance(v, bool):
        return v
    return str(v).strip().lower() in ("1", "true", "yes", "y")


def _to_date(v: Any) -> date | None:
    if v is None:
        return None
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    if isinstance(v, str) and v.strip():
        try:
            return datetime.fromisoformat(v.strip().replace("Z", "+00:00")).date()
        except ValueError:
            return None
    return None


def _lower_str(v: Any) -> str | None:
    if v is None:
        return None
    s = str(v).strip().lower()
    return s or None


def _dict_list(v: Any) -> list:
    """Keep only entries that can become a model; anything else is dropped."""
    if not isinstance(v, (list, tuple)):
        return []
    return [item for item in v if isinstance(item, (dict, BaseModel))]


def _dict_or_none(v: Any) -> Any:
    return v if isinstance(v, (dict, BaseModel)) else None


class ProfileModel(BaseModel):
    """Base for all profile schemas: camelCase aliases, immutable, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class ClbEquivalent(ProfileModel):
    speaking: Optional[int] = None
    listening: Optional[int] = None
    reading: Optional[int] = None
    writing: Optional[int] = None

    @field_validator("speaking", "listening", "reading", "writing", mode="before")
    @classmethod
    def _skill(cls, v: Any) -> int | None:
        return _to_int(v)


class LanguageTestScores(ProfileModel):
    """Raw per-skill results of a language test (IELTS bands, CELPIP levels, PTE scores)."""

    speaking: Optional[float] = None
    listening: Optional[float] = None
    reading: Optional[float] = None
    writing: Optional[float] = None

    @field_validator("speaking", "listening", "reading", "writing", mode="before")
    @classmethod
    def _score(cls, v: Any) -> float | None:
        return _to_float(v)


class LanguageRecord(ProfileModel):
    language: Optional[str] = Field(None, description="Language name, e.g. 'english' or 'french'")
    clb_equivalent: Optional[ClbEquivalent] = Field(None, description="CLB level per skill")
    test: Optional[str] = Field(None, description="Test type: ielts, celpip or pte")
    test_scores: Optional[LanguageTestScores] = Field(None, description="Raw test results per skill")

    @field_validator("language", "test", mode="before")
    @classmethod
    def _name(cls, v: Any) -> str | None:
        return _lower_str(v)

    @field_validator("clb_equivalent", "test_scores", mode="before")
    @classmethod
    def _nested(cls, v: Any) -> Any:
        return _dict_or_none(v)

    @model_validator(mode="before")
    @classmethod
    def _derive_clb(cls, data: Any) -> Any:
        """Fill in `clbEquivalent` from raw test results when only those were supplied."""
        if not isinstance(data, dict):
            return data
        if _dict_or_none(data.get("clbEquivalent", data.get("clb_equivalent"))) is not None:
            return data
        scores = data.get("testScores", data.get("test_scores"))
        test = data.get("test")
        if not isinstance(scores, dict) or not test:
            return data

        # Local import: app.scoring.utils imports this module
        from app.scoring.utils import clb_from_test_scores

        clb = clb_from_test_scores(
            str(test),
            _to_float(scores.get("speaking")),
            _to_float(scores.get("listening")),
            _to_float(scores.get("reading")),
            _to_float(scores.get("writing")),
        )
        if clb is None:
            return data
        speaking, listening, reading, writing = clb
        return {
            **data,
            "clbEquivalent": {
                "speaking": speaking,
                "listening": listening,
                "reading": reading,
                "writing": writing,
            },
        }


class EducationRecord(ProfileModel):
    level: Optional[EducationLevel] = None
    country: Optional[str] = None

    @field_validator("level", mode="before")
    @classmethod
    def _level(cls, v: Any) -> EducationLevel | None:
        return normalize_education_level(v)

    @field_validator("country", mode="before")
    @classmethod
    def _country(cls, v: Any) -> str | None:
        return str(v).strip() if v is not None else None


class WorkExperienceRecord(ProfileModel):
    is_canadian_experience: bool = False
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    hours_per_week: Optional[float] = None

    @field_validator("is_canadian_experience", mode="before")
    @classmethod
    def _flag(cls, v: Any) -> bool:
        return _to_bool(v)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _date(cls, v: Any) -> date | None:
        return _to_date(v)

    @field_validator("hours_per_week", mode="before")
    @classmethod
    def _hours(cls, v: Any) -> float | None:
        return _to_float(v)


class JobOfferDetails(ProfileModel):
    noc: Optional[str] = Field(None, description="National Occupation Classification code")
    lmia_exempt: bool = False

    @field_validator("noc", mode="before")
    @classmethod
    def _noc(cls, v: Any) -> str | None:
        if v is None or isinstance(v, bool):
            return None
        return str(v).strip() or None

    @field_validator("lmia_exempt", mode="before")
    @classmethod
    def _flag(cls, v: Any) -> bool:
        return _to_bool(v)


class RelativesInCanada(ProfileModel):
    has: bool = False

    @field_validator("has", mode="before")
    @classmethod
    def _flag(cls, v: Any) -> bool:
        return _to_bool(v)


class AdaptabilityFactors(ProfileModel):
    relatives_in_canada: Optional[RelativesInCanada] = None

    @field_validator("relatives_in_canada", mode="before")
    @classmethod
    def _nested(cls, v: Any) -> Any:
        return _dict_or_none(v)


class SpouseProfile(ProfileModel):
    education: Optional[EducationRecord] = None
    language_proficiency: list[LanguageRecord] = Field(default_factory=list)
    canadian_work_experience: list[WorkExperienceRecord] = Field(default_factory=list)

    @field_validator("education", mode="before")
    @classmethod
    def _education(cls, v: Any) -> Any:
        # A single record; a list keeps its first entry
        if isinstance(v, (list, tuple)):
            v = next(iter(_dict_list(v)), None)
        return _dict_or_none(v)

    @field_validator("language_proficiency", "canadian_work_experience", mode="before")
    @classmethod
    def _records(cls, v: Any) -> list:
        return _dict_list(v)


class CandidateProfile(ProfileModel):
    age: Optional[int] = None
    marital_status: Optional[str] = Field(None, description="single, married, common_law, ...")
    education: list[EducationRecord] = Field(default_factory=list)
    language_proficiency: list[LanguageRecord] = Field(default_factory=list)
    work_experience: list[WorkExperienceRecord] = Field(default_factory=list)
    has_job_offer: bool = False
    job_offer_details: Optional[JobOfferDetails] = None
    has_provincial_nomination: bool = False
    adaptability_factors: Optional[AdaptabilityFactors] = None
    spouse_profile: Optional[SpouseProfile] = None

    @field_validator("age", mode="before")
    @classmethod
    def _age(cls, v: Any) -> int | None:
        return _to_int(v)

    @field_validator("marital_status", mode="before")
    @classmethod
    def _marital(cls, v: Any) -> str | None:
        s = _lower_str(v)
        if s is None:
            return None
        s = re.sub(r"[\s-]+", "_", s)
        return "common_law" if s == "commonlaw" else s

    @field_validator("education", "language_proficiency", "work_experience", mode="before")
    @classmethod
    def _records(cls, v: Any) -> list:
        return _dict_list(v)

    @field_validator("has_job_offer", "has_provincial_nomination", mode="before")
    @classmethod
    def _flag(cls, v: Any) -> bool:
        return _to_bool(v)

    @field_validator("job_offer_details", "adaptability_factors", "spouse_profile", mode="before")
    @classmethod
    def _nested(cls, v: Any) -> Any:
        return _dict_or_none(v)

    @property
    def has_accompanying_spouse(self) -> bool:
        """Spouse columns apply when a spouse profile is present and the candidate is not single."""
        return self.spouse_profile is not None and self.marital_status != "single"
