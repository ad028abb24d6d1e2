"""
Unit tests for plain-text presentation.
"""

import json
from pathlib import Path

import pytest

from folio.contexts.matching import analyze
from folio.contexts.presentation import (
    copyright_line,
    render_answer,
    render_load_warning,
    render_match_result,
    render_skills,
    render_timeline,
)
from folio.contexts.profile import (
    Profile,
    ProfileLoadError,
    ProfileLoadResult,
    TimelineKind,
    build_timeline,
)
from folio.utils.report_formatter import Column, TableFormatter

pytestmark = pytest.mark.unit

FIXTURES_PATH = Path(__file__).resolve().parents[1] / "fixtures"


@pytest.fixture
def profile():
    data = json.loads((FIXTURES_PATH / "my_life.json").read_text(encoding="utf-8"))
    return Profile.from_dict(data)


class TestSkillsSection:
    def test_lists_categories_with_bullets(self, profile):
        text = render_skills(profile)
        lines = text.splitlines()

        assert lines[1] == "TECHNICAL SKILLS"
        assert "Languages:" in lines
        assert "  - Python" in lines
        assert "Frontend Frameworks:" in lines
        assert lines.index("Languages:") < lines.index("Tools:")

    def test_placeholder_when_empty(self):
        text = render_skills(Profile.empty())
        assert text.splitlines()[-1] == "No skills data available."


class TestTimelineSection:
    def test_experience_table(self, profile):
        text = render_timeline(build_timeline(profile.career_timeline, TimelineKind.EXPERIENCE))
        lines = text.splitlines()

        assert lines[1] == "EXPERIENCE"
        assert lines[3].startswith("Period")
        rows = [line for line in lines if line.startswith("20")]
        assert [row[:4] for row in rows] == ["2019", "2017", "2016"]
        assert "    Supported lab users and maintained workstations." in lines

    def test_education_placeholder(self):
        text = render_timeline(build_timeline((), TimelineKind.EDUCATION))
        assert text.splitlines()[-1] == "No education data available."


class TestMatchResult:
    def test_lists_findings_with_markers(self, profile):
        text = render_match_result(analyze("Senior React frontend engineer needed", profile))

        assert "LOW MATCH (0%)" in text
        assert "Matching Skills:" in text
        assert "  ✓ React" in text
        assert "Matching Goals:" not in text
        assert "  ⚠ Position may require senior-level experience" in text

    def test_goals_section(self, profile):
        text = render_match_result(analyze("Remote backend role", profile))
        assert "  ✓ Remote work option" in text
        assert "Potential Gaps:" not in text


class TestLoadWarning:
    def test_none_on_success(self, profile):
        result = ProfileLoadResult(profile=profile, source="my_life.json", success=True)
        assert render_load_warning(result) is None

    def test_warning_names_source_and_reason(self):
        error = ProfileLoadError("Could not read profile file", "missing.json")
        result = ProfileLoadResult(
            profile=Profile.empty(), source="missing.json", success=False, error=error
        )

        assert render_load_warning(result) == (
            "Warning: could not load resume data from missing.json "
            "(Could not read profile file). Showing empty placeholders instead."
        )


def test_render_answer():
    """Test the answer block layout."""
    assert render_answer("Hello.") == "Response:\n\nHello."


def test_copyright_line(profile):
    """Test footer text with and without an identity name."""
    assert copyright_line(profile, year=2026) == "© 2026 Nathan Allen. All rights reserved."
    assert copyright_line(Profile.empty(), year=2026) == "© 2026 Portfolio owner. All rights reserved."


def test_column_truncates_long_values():
    """Test that overlong cell values are cut with an ellipsis."""
    column = Column("Organization", 10)
    assert column.format_value("University of South Alabama") == "Univers..."
    assert column.format_value("Acme") == "Acme      "


def test_table_formatter_row_count_mismatch():
    """Test that add_row rejects the wrong number of values."""
    report = TableFormatter([Column("A", 5), Column("B", 5)])
    with pytest.raises(ValueError):
        report.add_row(["only one"])
