"""
Response templates for the question router.

Each template takes a ResponseContext and returns the answer text, or None when
the profile has nothing to say for that topic (the router then falls back to
the default answer). Fixed prose comes from NarrativeSettings; everything else
comes from the profile.
"""

from dataclasses import dataclass
from typing import List, Optional

from folio.contexts.assistant.logger import _log_warning
from folio.contexts.profile import (
    ClassificationPolicy,
    Profile,
    TimelineEntry,
    TimelineKind,
    build_timeline,
)
from folio.contexts.profile.profile_data_structure import category_label
from folio.utils.settings import NarrativeSettings

CURRENT_PERIOD_MARKERS = ("present", "current", "now")


def _sentence(text: str) -> str:
    """Capitalize the first character (fallback names start lowercase)."""
    return text[:1].upper() + text[1:]


def _position(entry: TimelineEntry) -> str:
    if entry.role and entry.organization:
        return f"{entry.role} at {entry.organization}"
    return entry.role or entry.organization


@dataclass(frozen=True)
class ResponseContext:
    """Everything a template needs: the profile, the narrative and the timeline policy."""

    profile: Profile
    narrative: NarrativeSettings
    policy: ClassificationPolicy = ClassificationPolicy.FIELD

    @property
    def name(self) -> str:
        return self.profile.identity.display_name

    @property
    def first_name(self) -> str:
        return self.profile.identity.first_name

    def fmt(self, template: str) -> str:
        """Fill {name}/{first_name} into a narrative fragment."""
        try:
            text = template.format(name=self.name, first_name=self.first_name)
        except (KeyError, IndexError, ValueError) as e:
            _log_warning(f"Bad placeholder in narrative fragment {template!r}: {e}")
            text = template
        return _sentence(text)


def background_response(ctx: ResponseContext) -> Optional[str]:
    """Biography paragraph: narrative fragments plus the two most recent positions."""
    parts = [ctx.fmt(fragment) for fragment in ctx.narrative.biography]

    experience = build_timeline(
        ctx.profile.career_timeline, TimelineKind.EXPERIENCE, ctx.policy
    ).entries

    if experience:
        latest = experience[0]
        if any(marker in latest.period.lower() for marker in CURRENT_PERIOD_MARKERS):
            parts.append(_sentence(f"currently, {ctx.first_name} works as {_position(latest)}."))
        else:
            parts.append(
                _sentence(f"most recently, {ctx.first_name} worked as {_position(latest)}.")
            )

    if len(experience) > 1:
        parts.append(f"Previously, {ctx.first_name} worked as {_position(experience[1])}.")

    return " ".join(part for part in parts if part) or None


def strengths_response(ctx: ResponseContext) -> Optional[str]:
    lines = [ctx.fmt(ctx.narrative.strengths_intro), ""]
    for index, strength in enumerate(ctx.profile.core_strengths, start=1):
        lines.append(f"{index}. {strength}")
    lines.extend(["", ctx.fmt(ctx.narrative.strengths_closing)])
    return "\n".join(lines)


def technologies_response(ctx: ResponseContext) -> Optional[str]:
    """One "<Label>: a, b" line per populated category; empty categories are skipped."""
    lines = [ctx.fmt(ctx.narrative.technologies_intro), ""]
    for category, values in ctx.profile.populated_skill_categories():
        lines.append(f"{category_label(category)}: {', '.join(values)}")
    return "\n".join(lines).rstrip()


def seeking_response(ctx: ResponseContext) -> Optional[str]:
    identity = ctx.profile.identity
    parts = [ctx.fmt(ctx.narrative.seeking_intro)]

    if identity.target_roles:
        parts.append(
            f"Specifically, {ctx.first_name} is interested in positions as a "
            f"{' or '.join(identity.target_roles)}."
        )

    parts.extend(ctx.fmt(fragment) for fragment in ctx.narrative.seeking_closing)

    if identity.open_to_remote:
        if identity.location:
            parts.append(
                _sentence(
                    f"{ctx.first_name} is open to remote work and is located in {identity.location}."
                )
            )
        else:
            parts.append(_sentence(f"{ctx.first_name} is open to remote work."))

    return " ".join(parts)


def work_style_response(ctx: ResponseContext) -> Optional[str]:
    work_style = ctx.profile.work_style_and_values
    if work_style is None:
        return None

    parts = [ctx.fmt(ctx.narrative.work_style_intro)]
    if work_style.priorities:
        parts.append(
            _sentence(f"{ctx.first_name}'s priorities are: {', '.join(work_style.priorities)}.")
        )
    if work_style.communication_style:
        parts.append(
            _sentence(
                f"{ctx.first_name}'s communication style is {work_style.communication_style}."
            )
        )
    if work_style.beliefs:
        parts.append(_sentence(f'{ctx.first_name} believes that "{work_style.beliefs}".'))
    return " ".join(parts)


def education_response(ctx: ResponseContext) -> Optional[str]:
    """
    Education lines for every entry whose role mentions "student".

    Independent of the configured classification policy.
    """
    lines: List[str] = [ctx.fmt(ctx.narrative.education_intro), ""]
    for entry in ctx.profile.career_timeline:
        if "student" in entry.role.lower():
            lines.append(f"{entry.period}: {entry.details} ({entry.organization})")
    return "\n".join(lines).rstrip()


def default_response(ctx: ResponseContext) -> str:
    summary = ctx.profile.professional_summary or ctx.fmt(ctx.narrative.default_summary)
    return f"{ctx.fmt(ctx.narrative.default_intro)} {summary}\n\n{ctx.fmt(ctx.narrative.topics_menu)}"
