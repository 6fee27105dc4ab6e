"""
Pytest configuration and shared fixtures.
"""

from typing import Any, Callable, Dict

import pytest

from models.profile import CandidateProfile, SpouseProfile


@pytest.fixture
def clb() -> Callable[..., Dict[str, int]]:
    """CLB levels for all four skills, individual skills overridable."""
    def _clb(level: int, **skills: int) -> Dict[str, int]:
        levels = {"speaking": level, "listening": level, "reading": level, "writing": level}
        levels.update(skills)
        return levels
    return _clb


@pytest.fixture
def language(clb) -> Callable[..., Dict[str, Any]]:
    """Language record with a uniform CLB level."""
    def _language(name: str, level: int, **skills: int) -> Dict[str, Any]:
        return {"language": name, "clbEquivalent": clb(level, **skills)}
    return _language


@pytest.fixture
def work() -> Callable[..., Dict[str, Any]]:
    """Work experience record."""
    def _work(start: str, end: str, hours: float = 40, canadian: bool = True) -> Dict[str, Any]:
        return {
            "isCanadianExperience": canadian,
            "startDate": start,
            "endDate": end,
            "hoursPerWeek": hours,
        }
    return _work


@pytest.fixture
def build_profile() -> Callable[..., CandidateProfile]:
    """Validate a camelCase profile payload into a CandidateProfile."""
    def _build(**fields: Any) -> CandidateProfile:
        return CandidateProfile.model_validate(fields)
    return _build


@pytest.fixture
def build_spouse() -> Callable[..., SpouseProfile]:
    def _build(**fields: Any) -> SpouseProfile:
        return SpouseProfile.model_validate(fields)
    return _build


@pytest.fixture
def end_to_end_payload(language, work) -> Dict[str, Any]:
    """Single 30-year-old with a bachelor's, CLB 9 English, 3 Canadian years and a nomination."""
    return {
        "age": 30,
        "maritalStatus": "single",
        "education": [{"level": "bachelors", "country": "India"}],
        "languageProficiency": [language("english", 9)],
        "workExperience": [work("2019-01-01", "2022-01-01", hours=35)],
        "hasProvincialNomination": True,
    }


@pytest.fixture
def spouse_payload(language, work) -> Dict[str, Any]:
    return {
        "education": {"level": "masters"},
        "languageProficiency": [language("english", 7)],
        "canadianWorkExperience": [work("2020-01-01", "2022-01-01")],
    }
