"""
Unit tests for the Profile data structures.

Missing or mistyped fields must always become empty values, never errors.
"""

import json
from pathlib import Path

import pytest

from folio.contexts.profile import Identity, Profile, TimelineEntry

pytestmark = pytest.mark.unit

FIXTURES_PATH = Path(__file__).resolve().parents[1] / "fixtures"


@pytest.fixture
def profile():
    data = json.loads((FIXTURES_PATH / "my_life.json").read_text(encoding="utf-8"))
    return Profile.from_dict(data)


def test_from_dict_reads_all_sections(profile):
    """Test that every section of the fixture document is parsed."""
    assert profile.identity.name == "Nathan Allen"
    assert profile.identity.open_to_remote is True
    assert profile.identity.target_roles == (
        "Python Backend Developer",
        "Junior Software Engineer",
    )
    assert len(profile.career_timeline) == 5
    assert profile.core_strengths[0] == "Python backend development with FastAPI"
    assert profile.work_style_and_values.priorities[0] == "correctness"
    assert profile.professional_summary.startswith("Python backend developer")
    assert not profile.is_fallback


def test_skill_categories_in_canonical_order():
    """Test that known categories come first in canonical order, unknown ones after."""
    profile = Profile.from_dict(
        {
            "technical_skills": {
                "tools": ["Git"],
                "testing": ["Hypothesis"],
                "languages": ["Python"],
            }
        }
    )
    assert list(profile.technical_skills) == ["languages", "tools", "testing"]
    assert profile.all_skills() == ("Python", "Git", "Hypothesis")
    assert profile.total_skill_count == 3


def test_empty_document_gives_empty_profile():
    """Test that an empty JSON object parses without errors."""
    profile = Profile.from_dict({})

    assert profile.identity == Identity()
    assert dict(profile.technical_skills) == {}
    assert profile.career_timeline == ()
    assert profile.core_strengths == ()
    assert profile.work_style_and_values is None
    assert profile.professional_summary is None
    assert profile.total_skill_count == 0


def test_mistyped_fields_are_treated_as_empty():
    """Test that wrong JSON types degrade to empty values."""
    profile = Profile.from_dict(
        {
            "identity": ["not", "a", "mapping"],
            "technical_skills": {"languages": "Python", "tools": ["Git", 42, "  "]},
            "career_timeline": [{"role": "Developer"}, "garbage", None],
            "core_strengths": "Debugging",
            "work_style_and_values": "calm",
            "professional_summary": 7,
        }
    )

    assert profile.identity.name is None
    assert dict(profile.technical_skills) == {"tools": ("Git",)}
    assert profile.career_timeline == (TimelineEntry(role="Developer"),)
    assert profile.core_strengths == ()
    assert profile.work_style_and_values is None
    assert profile.professional_summary is None


def test_open_to_remote_requires_true():
    """Test that only a JSON true counts as open to remote."""
    assert Identity.from_dict({"open_to_remote": "yes"}).open_to_remote is False
    assert Identity.from_dict({"open_to_remote": True}).open_to_remote is True


def test_first_name_resolution():
    """Test preferred name, then first token of the name, then the fallback."""
    assert Identity(name="Jerome Nathan Allen", preferred_name="Nathan").first_name == "Nathan"
    assert Identity(name="Nathan Allen").first_name == "Nathan"
    assert Identity().first_name == "the candidate"
    assert Identity().display_name == "the candidate"


def test_populated_categories_skip_empty_lists():
    """Test that categories without values are left out of populated_skill_categories."""
    profile = Profile.from_dict(
        {"technical_skills": {"languages": [], "databases": ["SQLite"]}}
    )
    assert profile.populated_skill_categories() == (("databases", ("SQLite",)),)


def test_profile_is_immutable(profile):
    """Test that the profile and its skills mapping cannot be modified."""
    with pytest.raises(AttributeError):
        profile.professional_summary = "changed"

    with pytest.raises(TypeError):
        profile.technical_skills["languages"] = ("COBOL",)


def test_empty_profile_is_fallback():
    """Test the fallback profile used after a failed load."""
    profile = Profile.empty()
    assert profile.is_fallback
    assert dict(profile.technical_skills) == {}
    assert profile.career_timeline == ()
