#!/usr/bin/env python3
"""
Print the portfolio sections populated from the profile data.

Usage:
    python scripts/show_profile.py
    python scripts/show_profile.py --section experience
    python scripts/show_profile.py --section skills --source data/my_life.json
"""

import os
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.presentation import copyright_line, render_skills, render_timeline
from folio.contexts.profile import TimelineKind
from folio.session import PortfolioSession
from folio.utils.logger import setup_logger
from folio.utils.settings import InvalidSettingsError, load_settings

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Print portfolio sections from the profile data.", add_completion=False)


class Section(str, Enum):
    ALL = "all"
    SKILLS = "skills"
    EXPERIENCE = "experience"
    EDUCATION = "education"


@app.command()
def main(
    section: Annotated[
        Section, typer.Option("--section", "-s", help="Section to print")
    ] = Section.ALL,
    source: Annotated[
        Optional[str],
        typer.Option("--source", help="Profile JSON path or URL (defaults to settings)"),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="YAML settings file", exists=True, dir_okay=False),
    ] = None,
):
    """Print skills, experience and education sections plus the footer."""
    try:
        settings = load_settings(config)
    except InvalidSettingsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    setup_logger(
        context_name="profile",
        log_dir=LOGS_PATH / f"profile_{timestamp}",
        extra_provenance={
            "Profile source": source or settings.profile.source,
            "Classification policy": settings.timeline.classification_policy,
        },
    )

    session = PortfolioSession(settings)
    session.start(source)
    if session.load_warning:
        typer.echo(session.load_warning, err=True)

    blocks = []
    if section in (Section.ALL, Section.SKILLS):
        blocks.append(render_skills(session.profile))
    if section in (Section.ALL, Section.EXPERIENCE):
        blocks.append(render_timeline(session.timeline(TimelineKind.EXPERIENCE)))
    if section in (Section.ALL, Section.EDUCATION):
        blocks.append(render_timeline(session.timeline(TimelineKind.EDUCATION)))

    typer.echo("\n\n".join(blocks))
    typer.echo()
    typer.echo(copyright_line(session.profile))


if __name__ == "__main__":
    app()
