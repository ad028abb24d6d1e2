"""Match result value object returned by the job matcher."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of comparing one job description against the profile.

    Attributes:
        score_label: Tier and percentage, e.g. "GOOD MATCH (72%)"
        score_percentage: Integer score clamped to 0-100
        summary: One-paragraph summary of the counts below
        matching_skills: Profile skills found in the description
        matching_goals: Goal labels satisfied by the description
        gaps: Potential gap labels
    """

    score_label: str
    score_percentage: int
    summary: str
    matching_skills: Tuple[str, ...] = ()
    matching_goals: Tuple[str, ...] = ()
    gaps: Tuple[str, ...] = ()

    @property
    def tier(self) -> str:
        """Tier name without the percentage suffix."""
        return self.score_label.split(" (")[0]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe representation (tuples become lists)."""
        data = asdict(self)
        for key in ("matching_skills", "matching_goals", "gaps"):
            data[key] = list(data[key])
        return data
