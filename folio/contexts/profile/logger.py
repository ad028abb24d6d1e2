"""
Profile context logger.

Provides logging interface for the profile context with automatic [profile] prefix.
All profile modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[profile]"


def _log_info(message: str) -> None:
    """Log info message with [profile] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [profile] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [profile] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [profile] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_load_summary(source: str, skill_categories: int, timeline_length: int) -> None:
    """Log what a successful load produced."""
    _log_success(f"Loaded profile from {source}")
    _log_info(f"  Skill categories: {skill_categories}, timeline entries: {timeline_length}")


def log_load_failure(source: str, error: Exception) -> None:
    """Log a failed load; the session falls back to an empty profile."""
    _log_warning(f"Could not load profile from {source}, using empty fallback")
    _log_warning(f"  Error: {error}")
