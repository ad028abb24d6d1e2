"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers are defined in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

from folio import __version__

load_dotenv()

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

# Environment overrides recorded in every log header
PROVENANCE_ENV_VARS = ("FOLIO_CONFIG_PATH", "FOLIO_PROFILE_SOURCE")


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[dict] = None,
    level_colors: Optional[dict] = None,
    console: bool = True,
) -> Path:
    """
    Configure loguru for a session with provenance tracking.

    Replaces any existing sinks with a DEBUG file sink in log_dir and, unless
    console is False, an INFO sink on stderr. The file starts with a
    provenance header (see log_provenance).

    Args:
        context_name: Session identifier (e.g., "ask", "match", "profile")
        log_dir: Directory for this logging session
        extra_provenance: Additional key-value pairs for provenance header
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})
        console: Whether to add the INFO console sink

    Returns:
        Path to log file

    Example:
        from folio.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="match",
            log_dir=Path("outs/logs"),
            extra_provenance={"Profile source": "data/my_life.json"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    colors = {**LEVEL_COLORS, **(level_colors or {})}
    for level_name, color in colors.items():
        logger.level(level_name, color=color)

    # File sink captures everything
    logger.add(
        log_file, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}", level="DEBUG"
    )

    if console:
        logger.add(
            sys.stderr,
            format="{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>",
            level="INFO",
            colorize=True,
        )

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Log execution provenance to current logger.

    Logs the FOLIO version, the invocation, and which environment overrides
    (FOLIO_CONFIG_PATH, FOLIO_PROFILE_SOURCE) were in effect, so a log file
    shows where its profile data and settings came from.
    """
    logger.debug("=" * 80)
    logger.debug(f"FOLIO {__version__} (Python {sys.version.split()[0]})")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    for variable in PROVENANCE_ENV_VARS:
        logger.debug(f"{variable}: {os.getenv(variable, '<unset>')}")

    if extra_context:
        for key, value in extra_context.items():
            logger.debug(f"{key}: {value}")

    logger.debug("=" * 80)
