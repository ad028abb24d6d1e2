"""
Matching Context

Responsibilities:
- Compares a pasted job description against the profile
- Reports matching skills, matching goals and potential gaps
- Produces a bounded score and a qualitative tier

Owns: Keyword tables, score weights, tier thresholds
Never: Loads data or formats results for display
"""

from folio.contexts.matching.exceptions import EmptyJobDescriptionError
from folio.contexts.matching.job_matcher import analyze
from folio.contexts.matching.match_result import MatchResult

__all__ = ["analyze", "MatchResult", "EmptyJobDescriptionError"]
