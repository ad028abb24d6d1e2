#!/usr/bin/env python3
"""
Score a job description against the portfolio profile.

Reads the job description from a file, or from stdin when the file is omitted
or given as "-".

Usage:
    python scripts/analyze_job.py job_posting.txt
    pbpaste | python scripts/analyze_job.py
    python scripts/analyze_job.py job_posting.txt --json
"""

import json
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.matching import EmptyJobDescriptionError
from folio.contexts.presentation import render_match_result
from folio.session import EMPTY_JOB_PROMPT, PortfolioSession
from folio.utils.logger import setup_logger
from folio.utils.settings import InvalidSettingsError, load_settings

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Score a job description against the profile.", add_completion=False)


def read_job_description(job_file: Optional[Path]) -> str:
    """Read the job text from a file, or stdin for None / "-"."""
    if job_file is None or str(job_file) == "-":
        return sys.stdin.read()
    return job_file.read_text(encoding="utf-8")


@app.command()
def main(
    job_file: Annotated[
        Optional[Path],
        typer.Argument(help="Job description text file ('-' or omitted for stdin)"),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the match result as JSON")
    ] = False,
    source: Annotated[
        Optional[str],
        typer.Option("--source", help="Profile JSON path or URL (defaults to settings)"),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="YAML settings file", exists=True, dir_okay=False),
    ] = None,
):
    """Print the match score, findings and summary for one job description."""
    if job_file is not None and str(job_file) != "-" and not job_file.is_file():
        typer.echo(f"Error: Job description file not found: {job_file}", err=True)
        raise typer.Exit(code=1)

    try:
        job_description = read_job_description(job_file)
    except UnicodeDecodeError:
        typer.echo(f"Error: Job description file is not valid UTF-8 text: {job_file}", err=True)
        raise typer.Exit(code=1)

    try:
        settings = load_settings(config)
    except InvalidSettingsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    setup_logger(
        context_name="match",
        log_dir=LOGS_PATH / f"match_{timestamp}",
        extra_provenance={
            "Profile source": source or settings.profile.source,
            "Job file": job_file or "<stdin>",
        },
    )

    session = PortfolioSession(settings)
    session.start(source)
    if session.load_warning:
        typer.echo(session.load_warning, err=True)

    try:
        result = session.analyze_job(job_description)
    except EmptyJobDescriptionError:
        typer.echo(EMPTY_JOB_PROMPT, err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        typer.echo(render_match_result(result))


if __name__ == "__main__":
    app()
