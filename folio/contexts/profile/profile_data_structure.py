"""
Profile data structures for the Profile context.

Provides the immutable Profile value object built from the resume JSON document
(my_life.json). Every field is optional in the document: absent or mistyped
fields become empty values so that downstream consumers never fail on missing
data.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

# Known skill categories in display order (JSON key -> label)
SKILL_CATEGORY_LABELS: Dict[str, str] = {
    "languages": "Languages",
    "backend_frameworks": "Backend Frameworks",
    "databases": "Databases",
    "frontend_frameworks": "Frontend Frameworks",
    "cloud": "Cloud",
    "tools": "Tools",
}

PROFESSIONAL_EXPERIENCE = "professional_experience"
EDUCATION = "education"

FALLBACK_NAME = "the candidate"


def _text(value: Any) -> Optional[str]:
    """Return stripped string value, or None for missing/non-string/blank values."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _string_tuple(value: Any) -> Tuple[str, ...]:
    """Coerce a JSON list into a tuple of non-blank strings (anything else -> empty)."""
    if not isinstance(value, list):
        return ()
    return tuple(item.strip() for item in value if isinstance(item, str) and item.strip())


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def category_label(category: str) -> str:
    """Display label for a skill category key (unknown keys are title-cased)."""
    return SKILL_CATEGORY_LABELS.get(category, category.replace("_", " ").title())


@dataclass(frozen=True)
class Identity:
    """
    Who the profile describes.

    Attributes:
        name: Full display name
        preferred_name: Name used in conversational prose (optional)
        location: Free-text location
        target_roles: Roles being sought, in priority order
        open_to_remote: Whether remote positions are acceptable
    """

    name: Optional[str] = None
    preferred_name: Optional[str] = None
    location: Optional[str] = None
    target_roles: Tuple[str, ...] = ()
    open_to_remote: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Identity":
        data = _mapping(data)
        return cls(
            name=_text(data.get("name")),
            preferred_name=_text(data.get("preferred_name")),
            location=_text(data.get("location")),
            target_roles=_string_tuple(data.get("target_roles")),
            open_to_remote=data.get("open_to_remote") is True,
        )

    @property
    def display_name(self) -> str:
        return self.name or FALLBACK_NAME

    @property
    def first_name(self) -> str:
        if self.preferred_name:
            return self.preferred_name
        if self.name:
            return self.name.split()[0]
        return FALLBACK_NAME


@dataclass(frozen=True)
class TimelineEntry:
    """
    One career or education record.

    Attributes:
        organization: Employer or school
        role: Job title or "Student" style role text
        period: Free-text period, normally containing a 4-digit start year
        details: Description of the entry
        classification: "professional_experience", "education" or None
    """

    organization: str = ""
    role: str = ""
    period: str = ""
    details: str = ""
    classification: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "TimelineEntry":
        data = _mapping(data)
        return cls(
            organization=_text(data.get("organization")) or "",
            role=_text(data.get("role")) or "",
            period=_text(data.get("period")) or "",
            details=_text(data.get("details")) or "",
            classification=_text(data.get("classification")),
        )


@dataclass(frozen=True)
class WorkStyle:
    priorities: Tuple[str, ...] = ()
    communication_style: Optional[str] = None
    beliefs: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> Optional["WorkStyle"]:
        """Build from JSON; returns None when the section is absent."""
        if not isinstance(data, dict):
            return None
        return cls(
            priorities=_string_tuple(data.get("priorities")),
            communication_style=_text(data.get("communication_style")),
            beliefs=_text(data.get("beliefs")),
        )


def _skills_mapping(data: Any) -> Mapping[str, Tuple[str, ...]]:
    """
    Build the read-only skills mapping.

    Known categories come first in canonical order, followed by any other
    categories in document order. Categories whose value is not a list are
    dropped.
    """
    data = _mapping(data)
    ordered: Dict[str, Tuple[str, ...]] = {}
    for category in SKILL_CATEGORY_LABELS:
        if isinstance(data.get(category), list):
            ordered[category] = _string_tuple(data[category])
    for category, values in data.items():
        if category not in ordered and isinstance(values, list):
            ordered[category] = _string_tuple(values)
    return MappingProxyType(ordered)


@dataclass(frozen=True)
class Profile:
    """
    Resume/identity data loaded once per session.

    Created through ``from_dict`` (parsed document) or ``empty`` (fallback
    after a failed load). Instances are never mutated after construction.
    """

    identity: Identity = field(default_factory=Identity)
    technical_skills: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    career_timeline: Tuple[TimelineEntry, ...] = ()
    core_strengths: Tuple[str, ...] = ()
    work_style_and_values: Optional[WorkStyle] = None
    professional_summary: Optional[str] = None
    is_fallback: bool = False

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        """
        Build a Profile from the parsed JSON document.

        Args:
            data: Root JSON object

        Returns:
            Profile with every missing or mistyped field defaulted to empty
        """
        timeline = data.get("career_timeline")
        entries = tuple(
            TimelineEntry.from_dict(item)
            for item in (timeline if isinstance(timeline, list) else [])
            if isinstance(item, dict)
        )
        return cls(
            identity=Identity.from_dict(data.get("identity")),
            technical_skills=_skills_mapping(data.get("technical_skills")),
            career_timeline=entries,
            core_strengths=_string_tuple(data.get("core_strengths")),
            work_style_and_values=WorkStyle.from_dict(data.get("work_style_and_values")),
            professional_summary=_text(data.get("professional_summary")),
        )

    @classmethod
    def empty(cls) -> "Profile":
        """Fallback profile used when the document cannot be loaded."""
        return cls(is_fallback=True)

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    def populated_skill_categories(self) -> Tuple[Tuple[str, Tuple[str, ...]], ...]:
        """(category, values) pairs for categories with at least one value, in order."""
        return tuple((cat, values) for cat, values in self.technical_skills.items() if values)

    def all_skills(self) -> Tuple[str, ...]:
        """All skill values flattened in category order, then within-category order."""
        return tuple(skill for values in self.technical_skills.values() for skill in values)

    @property
    def total_skill_count(self) -> int:
        return sum(len(values) for values in self.technical_skills.values())
