"""
Career timeline classification and ordering.

Splits the flat career timeline into experience and education entries and
orders each by start year, most recent first. Which entries count as education
is decided by a single ClassificationPolicy chosen in the session settings:

- FIELD: the entry's explicit ``classification`` value
- ROLE_HEURISTIC: the role text mentions "student" but not "assistant"
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from folio.contexts.profile.profile_data_structure import (
    EDUCATION,
    PROFESSIONAL_EXPERIENCE,
    TimelineEntry,
)

YEAR_PATTERN = re.compile(r"(\d{4})")


class TimelineKind(str, Enum):
    EXPERIENCE = "experience"
    EDUCATION = "education"


class ClassificationPolicy(str, Enum):
    FIELD = "field"
    ROLE_HEURISTIC = "role_heuristic"


NO_DATA_PLACEHOLDERS = {
    TimelineKind.EXPERIENCE: "No experience data available.",
    TimelineKind.EDUCATION: "No education data available.",
}


@dataclass(frozen=True)
class TimelineView:
    """
    Classified and sorted timeline section ready for display.

    Attributes:
        kind: Which section this is
        entries: Entries, most recent start year first
        placeholder: Text to show instead of entries when there are none
    """

    kind: TimelineKind
    entries: Tuple[TimelineEntry, ...]
    placeholder: str

    @property
    def is_empty(self) -> bool:
        return not self.entries


def is_education_by_role(role: str) -> bool:
    """Role-text heuristic: students are education, teaching/research assistants are not."""
    role = role.lower()
    return "student" in role and "assistant" not in role


def _entry_kind(entry: TimelineEntry, policy: ClassificationPolicy) -> Optional[TimelineKind]:
    if policy is ClassificationPolicy.ROLE_HEURISTIC:
        if is_education_by_role(entry.role):
            return TimelineKind.EDUCATION
        return TimelineKind.EXPERIENCE

    if entry.classification == PROFESSIONAL_EXPERIENCE:
        return TimelineKind.EXPERIENCE
    if entry.classification == EDUCATION:
        return TimelineKind.EDUCATION
    return None


def classify(
    entries: Iterable[TimelineEntry],
    kind: TimelineKind,
    policy: ClassificationPolicy = ClassificationPolicy.FIELD,
) -> Tuple[TimelineEntry, ...]:
    """
    Select the entries of one kind, preserving input order.

    Under the FIELD policy, entries without a recognised classification belong
    to neither kind.

    Args:
        entries: Career timeline entries
        kind: EXPERIENCE or EDUCATION
        policy: Classification rule

    Returns:
        Tuple of matching entries (empty when nothing matches)
    """
    kind = TimelineKind(kind)
    policy = ClassificationPolicy(policy)
    return tuple(entry for entry in entries if _entry_kind(entry, policy) is kind)


def start_year(period: str) -> int:
    """First 4-digit run in the period text, or 0 when there is none."""
    match = YEAR_PATTERN.search(period or "")
    return int(match.group(1)) if match else 0


def sort_descending_by_start_year(entries: Iterable[TimelineEntry]) -> Tuple[TimelineEntry, ...]:
    """
    Order entries most recent first.

    Entries without a year sort last. The sort is stable, so entries sharing a
    start year keep their relative order. The input is not modified.
    """
    return tuple(sorted(entries, key=lambda entry: start_year(entry.period), reverse=True))


def build_timeline(
    entries: Iterable[TimelineEntry],
    kind: TimelineKind,
    policy: ClassificationPolicy = ClassificationPolicy.FIELD,
) -> TimelineView:
    """Classify and sort one timeline section, attaching its no-data placeholder."""
    kind = TimelineKind(kind)
    selected = sort_descending_by_start_year(classify(entries, kind, policy))
    return TimelineView(kind=kind, entries=selected, placeholder=NO_DATA_PLACEHOLDERS[kind])
