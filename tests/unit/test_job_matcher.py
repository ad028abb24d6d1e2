"""
Unit tests for job description matching.

Covers the skill/goal/gap predicates, the score formula with its rounding and
clamping, tier thresholds and summary wording.
"""

import json
from pathlib import Path

import pytest

from folio.contexts.matching import EmptyJobDescriptionError, analyze
from folio.contexts.matching.job_matcher import (
    build_summary,
    compute_score,
    find_gaps,
    find_matching_goals,
    find_matching_skills,
    score_label,
)
from folio.contexts.matching.keyword_patterns import LIMITED_MATCH_SUMMARY
from folio.contexts.profile import Profile

pytestmark = pytest.mark.unit

FIXTURES_PATH = Path(__file__).resolve().parents[1] / "fixtures"


@pytest.fixture
def profile():
    data = json.loads((FIXTURES_PATH / "my_life.json").read_text(encoding="utf-8"))
    return Profile.from_dict(data)


class TestAnalyzeFixtureProfile:
    """End-to-end scoring against the fixture profile (17 skill values)."""

    def test_backend_remote_mid_level(self, profile):
        result = analyze("I need a Python backend developer, remote, mid-level", profile)

        assert result.matching_skills == ("Python",)
        assert result.matching_goals == (
            "Backend development focus",
            "Appropriate seniority level",
            "Remote work option",
        )
        assert result.gaps == ()
        # 1/17 * 60 + 3 * 20 = 63.53
        assert result.score_percentage == 64
        assert result.score_label == "GOOD MATCH (64%)"
        assert result.tier == "GOOD MATCH"
        assert result.summary == (
            "Nathan has 1 matching technical skill(s). "
            "The position aligns with 3 of Nathan's goals."
        )

    def test_senior_frontend(self, profile):
        result = analyze("Senior React frontend engineer needed", profile)

        assert result.matching_skills == ("React",)
        assert result.matching_goals == ()
        assert result.gaps == (
            "Position may require senior-level experience",
            "Position may be frontend-focused (Nathan's strength is backend)",
            "Position may require more frontend expertise than Nathan's primary focus",
        )
        assert result.score_percentage == 0
        assert result.score_label == "LOW MATCH (0%)"
        assert result.summary == (
            "Nathan has 1 matching technical skill(s). "
            "There are 3 potential gap(s) to consider."
        )

    def test_unrelated_posting(self, profile):
        result = analyze("Accountant wanted", profile)

        assert result.matching_skills == ()
        assert result.matching_goals == ()
        assert result.gaps == ()
        assert result.score_label == "LOW MATCH (0%)"
        assert result.summary == LIMITED_MATCH_SUMMARY

    def test_skills_keep_category_order(self, profile):
        result = analyze("Tools: Docker, Git. Stack: PostgreSQL, FastAPI, Python", profile)
        # "postgresql" also contains "sql"
        assert result.matching_skills == ("Python", "SQL", "FastAPI", "PostgreSQL", "Git", "Docker")

    def test_deterministic_and_profile_untouched(self, profile):
        before = Profile.from_dict(
            json.loads((FIXTURES_PATH / "my_life.json").read_text(encoding="utf-8"))
        )
        first = analyze("Remote Python API role", profile)
        second = analyze("Remote Python API role", profile)

        assert first == second
        assert profile == before

    @pytest.mark.parametrize("description", ["", "   ", "\n\t"])
    def test_blank_description_raises(self, profile, description):
        with pytest.raises(EmptyJobDescriptionError):
            analyze(description, profile)


class TestSkillMatching:
    """Tests for find_matching_skills."""

    def test_python_recognised_without_profile_entry(self):
        profile = Profile.from_dict({"technical_skills": {"languages": ["Go"]}})
        assert find_matching_skills("python and go", profile) == ["Go", "Python"]

    def test_python_not_duplicated(self, profile):
        assert find_matching_skills("python", profile).count("Python") == 1

    def test_case_insensitive(self, profile):
        result = analyze("DOCKER and FLASK", profile)
        assert result.matching_skills == ("Flask", "Docker")

    def test_empty_profile(self):
        assert find_matching_skills("sql and aws", Profile.from_dict({})) == []


class TestGoalMatching:
    """Tests for find_matching_goals."""

    def test_substring_semantics(self):
        """'rapid' contains 'api', which counts as a backend signal."""
        goals = find_matching_goals("we build rapid prototypes", Profile.from_dict({}))
        assert goals == ["Backend development focus"]

    def test_remote_requires_openness(self):
        closed = Profile.from_dict({"identity": {"open_to_remote": False}})
        opened = Profile.from_dict({"identity": {"open_to_remote": True}})

        assert find_matching_goals("fully remote", closed) == []
        assert find_matching_goals("fully remote", opened) == ["Remote work option"]

    def test_junior(self):
        assert find_matching_goals("junior engineer", Profile.from_dict({})) == [
            "Appropriate seniority level"
        ]


class TestGaps:
    """Tests for find_gaps and their exclusions."""

    def test_senior_excluded_by_mid(self, profile):
        assert find_gaps("senior or mid-level developer", profile) == []

    def test_frontend_excluded_by_backend(self, profile):
        assert find_gaps("frontend and backend work", profile) == []

    def test_frameworks_excluded_by_full_stack(self, profile):
        assert find_gaps("full stack vue developer", profile) == []

    def test_framework_gap_alone(self, profile):
        assert find_gaps("angular developer", profile) == [
            "Position may require more frontend expertise than Nathan's primary focus"
        ]

    def test_gap_text_uses_fallback_name(self):
        gaps = find_gaps("frontend developer", Profile.from_dict({}))
        assert gaps == ["Position may be frontend-focused (the candidate's strength is backend)"]


class TestScore:
    """Tests for the weighted score, rounding and clamping."""

    def test_no_signals(self):
        assert compute_score(0, 17, 0, 0) == (0, 0)

    def test_zero_skills_does_not_divide_by_zero(self):
        raw, percentage = compute_score(0, 0, 1, 0)
        assert raw == 20
        assert percentage == 20

    def test_rounds_half_up(self):
        # 3/8 * 60 = 22.5
        assert compute_score(3, 8, 0, 0)[1] == 23

    def test_clamped_at_zero(self):
        raw, percentage = compute_score(0, 10, 0, 3)
        assert raw == pytest.approx(-6)
        assert percentage == 0

    def test_clamped_at_hundred(self):
        raw, percentage = compute_score(10, 10, 3, 0)
        assert raw == 120
        assert percentage == 100

    @pytest.mark.parametrize(
        "percentage, label",
        [
            (100, "STRONG MATCH (100%)"),
            (80, "STRONG MATCH (80%)"),
            (79, "GOOD MATCH (79%)"),
            (60, "GOOD MATCH (60%)"),
            (59, "MODERATE MATCH (59%)"),
            (40, "MODERATE MATCH (40%)"),
            (39, "LOW MATCH (39%)"),
            (0, "LOW MATCH (0%)"),
        ],
    )
    def test_tier_thresholds(self, percentage, label):
        assert score_label(percentage) == label


def test_summary_capitalised_for_fallback_name():
    """Test that a summary starting with the fallback name reads as a sentence."""
    assert build_summary(2, 0, 0, "the candidate") == "The candidate has 2 matching technical skill(s)."


def test_summary_gaps_only():
    """Test the summary when only gaps were found."""
    assert build_summary(0, 0, 1, "Nathan") == "There are 1 potential gap(s) to consider."


def test_match_result_to_dict(profile):
    """Test the JSON-safe representation of a match result."""
    data = analyze("Python backend", profile).to_dict()

    assert data["matching_skills"] == ["Python"]
    assert data["matching_goals"] == ["Backend development focus"]
    assert data["gaps"] == []
    assert data["score_label"] == "LOW MATCH (24%)"
