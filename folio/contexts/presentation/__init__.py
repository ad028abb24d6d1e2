"""
Presentation Context

Responsibilities:
- Lays out profile sections, answers and match results as plain text

Owns: Text layout, placeholders shown to the user
Never: Classifies, routes or scores anything itself
"""

from folio.contexts.presentation.text_renderer import (
    copyright_line,
    render_answer,
    render_load_warning,
    render_match_result,
    render_skills,
    render_timeline,
)

__all__ = [
    "copyright_line",
    "render_answer",
    "render_load_warning",
    "render_match_result",
    "render_skills",
    "render_timeline",
]
