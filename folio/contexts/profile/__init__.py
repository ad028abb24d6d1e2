"""
Profile Context

Responsibilities:
- Loads the resume JSON document once per session (file path or URL)
- Represents it as an immutable Profile with empty defaults for missing data
- Classifies and orders the career timeline into experience and education

Owns: Profile data model, one-time loading and fallback, timeline policy
Never: Produces prose answers or match scores
"""

from folio.contexts.profile.exceptions import NotLoadedError, ProfileLoadError
from folio.contexts.profile.profile_data_structure import (
    Identity,
    Profile,
    TimelineEntry,
    WorkStyle,
)
from folio.contexts.profile.profile_store import ProfileLoadResult, ProfileStore
from folio.contexts.profile.timeline import (
    ClassificationPolicy,
    TimelineKind,
    TimelineView,
    build_timeline,
    classify,
    sort_descending_by_start_year,
)

__all__ = [
    # Data structures
    "Identity",
    "Profile",
    "TimelineEntry",
    "WorkStyle",
    # Loading
    "ProfileStore",
    "ProfileLoadResult",
    "ProfileLoadError",
    "NotLoadedError",
    # Timeline
    "ClassificationPolicy",
    "TimelineKind",
    "TimelineView",
    "build_timeline",
    "classify",
    "sort_descending_by_start_year",
]
