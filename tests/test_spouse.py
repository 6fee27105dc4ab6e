"""
Tests for spouse factor scoring.
"""

import pytest

from app.scoring.spouse import (
    calculate_spouse_points,
    spouse_breakdown,
    spouse_education_points,
    spouse_experience_points,
    spouse_language_points,
)
from models.profile import EducationRecord, LanguageRecord, WorkExperienceRecord


def _language(speaking, listening, reading, writing, name="english"):
    return LanguageRecord.model_validate({
        "language": name,
        "clbEquivalent": {"speaking": speaking, "listening": listening, "reading": reading, "writing": writing},
    })


class TestSpouseEducation:
    @pytest.mark.parametrize("level,points", [
        ("highSchool", 2), ("oneYearDiploma", 6), ("twoYearDiploma", 7), ("bachelors", 8),
        ("twoOrMoreDegrees", 9), ("masters", 10), ("phd", 10), ("certificate", 0),
    ])
    def test_levels(self, level, points):
        assert spouse_education_points(EducationRecord(level=level)) == points

    def test_missing_education(self):
        assert spouse_education_points(None) == 0
        assert spouse_education_points(EducationRecord()) == 0


class TestSpouseLanguage:
    def test_each_skill_scored_independently(self):
        assert spouse_language_points([_language(9, 7, 5, 4)]) == 9

    def test_all_skills_clb9(self):
        assert spouse_language_points([_language(9, 9, 9, 9)]) == 20

    def test_all_skills_clb7(self):
        assert spouse_language_points([_language(7, 8, 7, 8)]) == 12

    def test_capped_at_20_across_records(self):
        records = [_language(9, 9, 9, 9), _language(9, 9, 9, 9, name="french")]
        assert spouse_language_points(records) == 20

    def test_sums_across_records_below_cap(self):
        records = [_language(5, 5, 5, 5), _language(7, 7, 7, 7, name="french")]
        assert spouse_language_points(records) == 16

    def test_record_without_clb_ignored(self):
        assert spouse_language_points([LanguageRecord(language="english")]) == 0

    def test_no_records(self):
        assert spouse_language_points([]) == 0
        assert spouse_language_points(None) == 0


class TestSpouseExperience:
    def _records(self, years, hours=40):
        return [WorkExperienceRecord(
            start_date="2010-01-01", end_date=f"{2010 + years}-01-01", hours_per_week=hours
        )]

    @pytest.mark.parametrize("years,points", [(0, 0), (1, 3), (2, 5), (3, 8), (4, 8), (5, 10), (8, 10)])
    def test_tiers(self, years, points):
        assert spouse_experience_points(self._records(years)) == points

    def test_part_time_halved(self):
        assert spouse_experience_points(self._records(4, hours=20)) == 5

    def test_canadian_flag_not_required(self):
        record = WorkExperienceRecord(
            is_canadian_experience=False, start_date="2020-01-01", end_date="2021-01-01", hours_per_week=40
        )
        assert spouse_experience_points([record]) == 3


class TestSpousePoints:
    def test_sum_of_three_factors(self, build_spouse, spouse_payload):
        spouse = build_spouse(**spouse_payload)
        assert spouse_breakdown(spouse) == {
            "spouse_education": 10,
            "spouse_language": 12,
            "spouse_work_experience": 5,
        }
        assert calculate_spouse_points(spouse) == 27

    def test_absent_spouse(self):
        assert calculate_spouse_points(None) == 0

    def test_empty_spouse(self, build_spouse):
        assert calculate_spouse_points(build_spouse()) == 0
