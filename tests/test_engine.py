"""
Tests for the composed points engine: totals, breakdown, determinism.
"""

from concurrent.futures import ThreadPoolExecutor

from app.scoring.additional import calculate_additional_points
from app.scoring.core import calculate_core_human_capital_points
from app.scoring.engine import PointsResult, calculate_total_score, compute_points
from app.scoring.spouse import calculate_spouse_points


class TestEndToEnd:
    def test_reference_scenario(self, build_profile, end_to_end_payload):
        profile = build_profile(**end_to_end_payload)
        assert calculate_core_human_capital_points(profile) == 320
        assert calculate_additional_points(profile) == 700
        assert calculate_total_score(profile) == 1020

    def test_breakdown(self, build_profile, end_to_end_payload):
        result = compute_points(build_profile(**end_to_end_payload))
        assert isinstance(result, PointsResult)
        assert result.total == 1020
        assert result.core_human_capital == 320
        assert result.spouse_factors == 0
        assert result.skill_transferability == 100
        assert result.additional_points == 700
        assert result.breakdown["age"] == 105
        assert result.breakdown["education"] == 120
        assert result.breakdown["language"] == 31
        assert result.breakdown["canadian_work_experience"] == 64
        assert result.breakdown["provincial_nomination"] == 600
        assert result.breakdown["transferability"] == {
            "education_language": 50,
            "education_canadian_experience": 50,
            "foreign_experience_language": 0,
            "foreign_canadian_experience": 0,
            "certificate_of_qualification": 0,
        }
        assert result.missing_or_defaulted == []

    def test_total_is_not_capped(self, build_profile, end_to_end_payload, language):
        payload = dict(end_to_end_payload)
        payload.update(
            languageProficiency=[language("english", 10), language("french", 10)],
            hasJobOffer=True,
            jobOfferDetails={"noc": "0013"},
            adaptabilityFactors={"relativesInCanada": {"has": True}},
        )
        assert calculate_total_score(build_profile(**payload)) > 1200


class TestSpouseComposition:
    def test_accompanying_spouse_adds_spouse_points(self, build_profile, spouse_payload):
        profile = build_profile(age=25, maritalStatus="married", spouseProfile=spouse_payload)
        result = compute_points(profile)
        assert result.spouse_factors == calculate_spouse_points(profile.spouse_profile) == 27
        assert result.total == 100 + 27
        assert calculate_total_score(profile) == result.total

    def test_spouse_present_without_marital_status(self, build_profile, spouse_payload):
        profile = build_profile(age=25, spouseProfile=spouse_payload)
        assert profile.has_accompanying_spouse
        assert calculate_total_score(profile) == 127

    def test_single_candidate_spouse_ignored(self, build_profile, spouse_payload):
        profile = build_profile(age=25, maritalStatus="single", spouseProfile=spouse_payload)
        result = compute_points(profile)
        assert result.spouse_factors == 0
        assert result.total == 110

    def test_married_without_spouse_profile_uses_single_columns(self, build_profile):
        profile = build_profile(age=25, maritalStatus="married")
        assert calculate_total_score(profile) == 110


class TestTotals:
    def test_total_equals_sum_of_sections(self, build_profile, end_to_end_payload, spouse_payload):
        profile = build_profile(**{**end_to_end_payload, "maritalStatus": "married", "spouseProfile": spouse_payload})
        result = compute_points(profile)
        assert result.total == result.core_human_capital + result.spouse_factors + result.additional_points
        assert result.total == calculate_total_score(profile)

    def test_empty_profile(self, build_profile):
        result = compute_points(build_profile())
        assert result.total == 0
        assert result.missing_or_defaulted == ["age", "education", "language_proficiency", "work_experience"]
        assert "Not legal advice" in result.disclaimer


class TestDeterminism:
    def test_repeated_calls_identical(self, build_profile, end_to_end_payload):
        profile = build_profile(**end_to_end_payload)
        before = profile.model_dump()
        results = [compute_points(profile) for _ in range(10)]
        assert all(r == results[0] for r in results)
        assert profile.model_dump() == before

    def test_concurrent_scoring(self, build_profile, end_to_end_payload, language):
        profiles = [
            build_profile(**{**end_to_end_payload, "age": age, "languageProficiency": [language("english", clb)]})
            for age in range(18, 46)
            for clb in (4, 7, 9)
        ]
        expected = [calculate_total_score(p) for p in profiles]
        with ThreadPoolExecutor(max_workers=8) as pool:
            assert list(pool.map(calculate_total_score, profiles)) == expected
