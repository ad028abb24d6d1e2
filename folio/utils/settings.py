"""
Settings for a FOLIO session.

A structured OmegaConf schema (the dataclasses below) is merged with the YAML
config file and converted back into typed dataclass instances. The config file
only needs the keys it overrides.

Resolution order (later wins):
    1. Schema defaults defined here
    2. YAML file at FOLIO_CONFIG_PATH (default: folio/config/folio.yaml)
    3. FOLIO_PROFILE_SOURCE environment variable for profile.source
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from folio.contexts.profile.timeline import ClassificationPolicy

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", Path(__file__).resolve().parents[2]))
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "config" / "folio.yaml"
CONFIG_PATH = Path(os.getenv("FOLIO_CONFIG_PATH", DEFAULT_CONFIG_PATH))
DEFAULT_PROFILE_SOURCE = PROJECT_ROOT / "data" / "my_life.json"


class InvalidSettingsError(ValueError):
    """Raised when the config file cannot be read or does not match the schema."""

    def __init__(self, message: str, config_path: Optional[Path] = None):
        self.message = message
        self.config_path = config_path
        if config_path:
            message = f"{message}\nConfig file: {config_path}"
        super().__init__(message)


@dataclass
class ProfileSettings:
    """Where the profile document lives (filesystem path or http(s) URL)."""

    source: str = str(DEFAULT_PROFILE_SOURCE)


@dataclass
class FetchSettings:
    """Timeout and retry policy for loading the profile over HTTP."""

    timeout_seconds: float = 10.0
    max_retries: int = 3
    backoff_seconds: float = 1.0


@dataclass
class TimelineSettings:
    classification_policy: str = ClassificationPolicy.FIELD.value

    @property
    def policy(self) -> ClassificationPolicy:
        return ClassificationPolicy(self.classification_policy)


@dataclass
class NarrativeSettings:
    """
    Fixed prose fragments used by the question router.

    Fragments are formatted with ``{name}`` (full name) and ``{first_name}``
    (preferred or first name) taken from the profile identity.
    """

    biography: List[str] = field(
        default_factory=lambda: [
            "{name} is a Python backend developer with over 20 years of technical experience.",
            "{first_name}'s background spans IT support, software development, databases, "
            "and cloud-based systems.",
            "{first_name} has production experience building and maintaining FastAPI "
            "applications, SQL-backed services, and AWS ETL pipelines.",
        ]
    )
    strengths_intro: str = "{first_name}'s core strengths include:"
    strengths_closing: str = (
        "The emphasis is on Python backend development, debugging and system reliability, "
        "backed by real production experience."
    )
    technologies_intro: str = "{first_name} works with the following technologies:"
    seeking_intro: str = "{first_name} is seeking a junior-to-mid-level Python backend developer role."
    seeking_closing: List[str] = field(
        default_factory=lambda: [
            "{first_name} is looking for opportunities with solid engineering practices "
            "and room to keep growing.",
            "Maintainability, clarity, and system reliability matter most in the work.",
        ]
    )
    work_style_intro: str = "{first_name}'s work style is methodical, calm, and correctness-focused."
    education_intro: str = "{first_name} has a diverse educational background:"
    default_intro: str = "Based on {first_name}'s profile:"
    default_summary: str = (
        "{first_name} is a Python backend developer with extensive technical experience."
    )
    topics_menu: str = (
        "You can ask about background, strengths, technologies, what {first_name} is "
        "looking for, work style, or education."
    )
    unavailable: str = "I apologize, but I cannot access the profile information at this time."


@dataclass
class FolioSettings:
    profile: ProfileSettings = field(default_factory=ProfileSettings)
    fetch: FetchSettings = field(default_factory=FetchSettings)
    timeline: TimelineSettings = field(default_factory=TimelineSettings)
    assistant: NarrativeSettings = field(default_factory=NarrativeSettings)


def load_settings(config_path: Optional[Path] = None) -> FolioSettings:
    """
    Load settings from the schema defaults, the YAML config and the environment.

    Args:
        config_path: Optional YAML file (defaults to FOLIO_CONFIG_PATH). An
            explicitly passed path must exist; a missing default file is
            treated as "no overrides".

    Returns:
        FolioSettings instance

    Raises:
        InvalidSettingsError: If the file is unreadable, is not valid YAML, or
            holds keys/values that do not fit the schema
    """
    schema = OmegaConf.structured(FolioSettings)

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise InvalidSettingsError("Config file not found", config_path)
    else:
        config_path = CONFIG_PATH

    try:
        if config_path.exists():
            overrides = OmegaConf.load(config_path)
            merged = OmegaConf.merge(schema, overrides)
        else:
            merged = schema

        env_source = os.getenv("FOLIO_PROFILE_SOURCE")
        if env_source:
            merged.profile.source = env_source

        settings = OmegaConf.to_object(merged)
    except (OmegaConfBaseException, yaml.YAMLError, OSError) as e:
        raise InvalidSettingsError(f"Invalid settings: {e}", config_path) from e

    if settings.fetch.max_retries < 1:
        raise InvalidSettingsError("fetch.max_retries must be at least 1", config_path)
    if settings.fetch.timeout_seconds <= 0:
        raise InvalidSettingsError("fetch.timeout_seconds must be positive", config_path)
    valid_policies = [p.value for p in ClassificationPolicy]
    if settings.timeline.classification_policy not in valid_policies:
        raise InvalidSettingsError(
            f"timeline.classification_policy must be one of {valid_policies}, "
            f"got '{settings.timeline.classification_policy}'",
            config_path,
        )

    return settings
