"""
Keyword-based job description matching.

Scores a pasted job description against the profile:

    score = skill_ratio * 60 + goals * 20 - gaps * 0.1 * 20

where skill_ratio is matched skills over all profile skill values. The result
is rounded half up, clamped to 0-100 and bucketed into four tiers. Matching is
plain substring containment on the lowercased description, so "api" also hits
"rapid" and "mid" also hits "middleware".
"""

import math
from typing import List, Tuple

from folio.contexts.matching.exceptions import EmptyJobDescriptionError
from folio.contexts.matching.keyword_patterns import (
    ALWAYS_RECOGNIZED_SKILLS,
    BACKEND_GOAL,
    BACKEND_TERMS,
    FRONTEND_EXCLUSIONS,
    FRONTEND_EXPERTISE_GAP,
    FRONTEND_FOCUS_GAP,
    FRONTEND_FRAMEWORK_EXCLUSIONS,
    FRONTEND_FRAMEWORK_TERMS,
    FRONTEND_TERM,
    GAP_PENALTY,
    GAP_PENALTY_WEIGHT,
    GOAL_WEIGHT,
    LIMITED_MATCH_SUMMARY,
    REMOTE_GOAL,
    REMOTE_TERMS,
    SCORE_TIERS,
    SENIOR_EXCLUSIONS,
    SENIOR_GAP,
    SENIOR_TERM,
    SENIORITY_GOAL,
    SENIORITY_TERMS,
    SKILL_RATIO_WEIGHT,
)
from folio.contexts.matching.logger import _log_info, log_score_breakdown
from folio.contexts.matching.match_result import MatchResult
from folio.contexts.profile import Profile


def _contains_any(text: str, terms) -> bool:
    return any(term in text for term in terms)


def find_matching_skills(description: str, profile: Profile) -> List[str]:
    """
    Profile skills whose lowercased form appears in the (lowercased) description.

    Skills keep category order, then within-category order. Always-recognised
    skills such as "Python" are appended when mentioned and not already matched.
    """
    matches = [skill for skill in profile.all_skills() if skill.lower() in description]

    for term, label in ALWAYS_RECOGNIZED_SKILLS.items():
        if term in description and label not in matches:
            matches.append(label)

    return matches


def find_matching_goals(description: str, profile: Profile) -> List[str]:
    goals = []
    if _contains_any(description, BACKEND_TERMS):
        goals.append(BACKEND_GOAL)
    if _contains_any(description, SENIORITY_TERMS):
        goals.append(SENIORITY_GOAL)
    if _contains_any(description, REMOTE_TERMS) and profile.identity.open_to_remote:
        goals.append(REMOTE_GOAL)
    return goals


def find_gaps(description: str, profile: Profile) -> List[str]:
    first_name = profile.identity.first_name
    gaps = []

    if SENIOR_TERM in description and not _contains_any(description, SENIOR_EXCLUSIONS):
        gaps.append(SENIOR_GAP)

    if FRONTEND_TERM in description and not _contains_any(description, FRONTEND_EXCLUSIONS):
        gaps.append(FRONTEND_FOCUS_GAP.format(first_name=first_name))

    if _contains_any(description, FRONTEND_FRAMEWORK_TERMS) and not _contains_any(
        description, FRONTEND_FRAMEWORK_EXCLUSIONS
    ):
        gaps.append(FRONTEND_EXPERTISE_GAP.format(first_name=first_name))

    return gaps


def compute_score(
    skill_matches: int, total_skills: int, goal_matches: int, gap_count: int
) -> Tuple[float, int]:
    """
    Weighted linear score.

    Args:
        skill_matches: Number of matched skills
        total_skills: Number of skill values in the profile (floored to 1)
        goal_matches: Number of matched goals
        gap_count: Number of gaps

    Returns:
        (raw_score, percentage) where percentage is rounded half up and
        clamped to 0-100
    """
    skill_ratio = skill_matches / max(1, total_skills)
    raw_score = (
        skill_ratio * SKILL_RATIO_WEIGHT
        + goal_matches * GOAL_WEIGHT
        - gap_count * GAP_PENALTY * GAP_PENALTY_WEIGHT
    )
    percentage = int(math.floor(raw_score + 0.5))
    return raw_score, max(0, min(100, percentage))


def score_label(percentage: int) -> str:
    """Tier name with the percentage, e.g. "MODERATE MATCH (45%)"."""
    for threshold, tier in SCORE_TIERS:
        if percentage >= threshold:
            return f"{tier} ({percentage}%)"
    return f"{SCORE_TIERS[-1][1]} ({percentage}%)"


def build_summary(skills: int, goals: int, gaps: int, first_name: str) -> str:
    parts = []
    if skills:
        parts.append(f"{first_name} has {skills} matching technical skill(s).")
    if goals:
        parts.append(f"The position aligns with {goals} of {first_name}'s goals.")
    if gaps:
        parts.append(f"There are {gaps} potential gap(s) to consider.")
    if not parts:
        return LIMITED_MATCH_SUMMARY
    summary = " ".join(parts)
    return summary[:1].upper() + summary[1:]


def analyze(job_description: str, profile: Profile) -> MatchResult:
    """
    Compare a job description with the profile.

    Args:
        job_description: Free-text job posting
        profile: Loaded profile (not modified)

    Returns:
        MatchResult; identical inputs give equal results

    Raises:
        EmptyJobDescriptionError: If the description is blank
    """
    if not job_description or not job_description.strip():
        raise EmptyJobDescriptionError()

    description = job_description.lower()

    skills = find_matching_skills(description, profile)
    goals = find_matching_goals(description, profile)
    gaps = find_gaps(description, profile)

    total_skills = profile.total_skill_count
    raw_score, percentage = compute_score(len(skills), total_skills, len(goals), len(gaps))
    log_score_breakdown(len(skills), total_skills, len(goals), len(gaps), raw_score, percentage)
    label = score_label(percentage)
    _log_info(f"Job description scored {label}")

    return MatchResult(
        score_label=label,
        score_percentage=percentage,
        summary=build_summary(len(skills), len(goals), len(gaps), profile.identity.first_name),
        matching_skills=tuple(skills),
        matching_goals=tuple(goals),
        gaps=tuple(gaps),
    )
