"""
Plain-text presentation of profile data, answers and match results.

Thin adapter between the contexts and whatever displays their output (the
command-line scripts in this repository). Every function takes finished values
(Profile, TimelineView, MatchResult, answer strings) and only lays them out.
"""

from datetime import date
from typing import Optional

from folio.contexts.matching import MatchResult
from folio.contexts.profile import Profile, ProfileLoadResult, TimelineKind, TimelineView
from folio.contexts.profile.profile_data_structure import category_label
from folio.utils.report_formatter import Column, TableFormatter

REPORT_WIDTH = 80

TIMELINE_TITLES = {
    TimelineKind.EXPERIENCE: "EXPERIENCE",
    TimelineKind.EDUCATION: "EDUCATION",
}

TIMELINE_COLUMNS = [
    Column("Period", 20),
    Column("Organization", 30),
    Column("Role", 28),
]

NO_SKILLS_PLACEHOLDER = "No skills data available."


def render_skills(profile: Profile) -> str:
    """Skills section: one bulleted list per populated category."""
    report = TableFormatter(total_width=REPORT_WIDTH).add_section_header("TECHNICAL SKILLS")

    categories = profile.populated_skill_categories()
    if not categories:
        return report.add_text(NO_SKILLS_PLACEHOLDER).render()

    for index, (category, values) in enumerate(categories):
        if index:
            report.add_blank_line()
        report.add_text(f"{category_label(category)}:")
        report.add_bullets(values)

    return report.render()


def render_timeline(view: TimelineView) -> str:
    """Timeline section as a period/organization/role table with details underneath."""
    report = TableFormatter(TIMELINE_COLUMNS, total_width=REPORT_WIDTH)
    report.add_section_header(TIMELINE_TITLES[view.kind])

    if view.is_empty:
        return report.add_text(view.placeholder).render()

    report.add_table_header().add_separator()
    for entry in view.entries:
        report.add_row([entry.period, entry.organization, entry.role])
        if entry.details:
            report.add_text(f"    {entry.details}")

    return report.render()


def render_answer(answer: str) -> str:
    report = TableFormatter(total_width=REPORT_WIDTH)
    return report.add_text("Response:").add_blank_line().add_text(answer).render()


def render_match_result(result: MatchResult) -> str:
    """Match analysis: score label, summary and the three finding lists (empty lists omitted)."""
    report = TableFormatter(total_width=REPORT_WIDTH).add_section_header("MATCH ANALYSIS")
    report.add_text(result.score_label).add_blank_line().add_text(result.summary)

    for title, items, marker in (
        ("Matching Skills:", result.matching_skills, "✓"),
        ("Matching Goals:", result.matching_goals, "✓"),
        ("Potential Gaps:", result.gaps, "⚠"),
    ):
        if items:
            report.add_blank_line().add_text(title).add_bullets(items, marker=marker)

    return report.render()


def render_load_warning(result: ProfileLoadResult) -> Optional[str]:
    """User-visible warning after a failed load, or None when the load succeeded."""
    if result.success:
        return None
    reason = result.error.message if result.error else "unknown error"
    return (
        f"Warning: could not load resume data from {result.source} ({reason}). "
        "Showing empty placeholders instead."
    )


def copyright_line(profile: Profile, year: Optional[int] = None) -> str:
    """Footer line, e.g. "© 2026 Jane Doe. All rights reserved."."""
    year = year or date.today().year
    holder = profile.identity.name or "Portfolio owner"
    return f"© {year} {holder}. All rights reserved."
