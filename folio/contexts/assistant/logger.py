"""
Assistant context logger.

Provides logging interface for the assistant context with automatic [assistant] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[assistant]"


def _log_warning(message: str) -> None:
    """Log warning message with [assistant] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [assistant] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_routing_decision(question: str, rule_name: str) -> None:
    """Log which rule answered a question (question truncated for readability)."""
    preview = question if len(question) <= 60 else question[:57] + "..."
    _log_debug(f'Routed "{preview}" -> {rule_name}')
