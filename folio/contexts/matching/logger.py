"""
Matching context logger.

Provides logging interface for the matching context with automatic [match] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[match]"


def _log_info(message: str) -> None:
    """Log info message with [match] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [match] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_score_breakdown(
    skills: int, total_skills: int, goals: int, gaps: int, raw_score: float, percentage: int
) -> None:
    """Log the components behind a match score."""
    _log_debug(
        f"Skills {skills}/{total_skills}, goals {goals}, gaps {gaps} "
        f"-> raw {raw_score:.2f}, final {percentage}%"
    )
