#!/usr/bin/env python3
"""
Ask the portfolio assistant a question.

Usage:
    python scripts/ask_question.py "What are your strengths?"
    python scripts/ask_question.py "What is your tech stack?" --source https://example.com/my_life.json
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.presentation import render_answer
from folio.session import PortfolioSession
from folio.utils.logger import setup_logger
from folio.utils.settings import InvalidSettingsError, load_settings

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Ask the portfolio assistant a question.", add_completion=False)


@app.command()
def main(
    question: Annotated[str, typer.Argument(help='Question, e.g. "What are your strengths?"')],
    source: Annotated[
        Optional[str],
        typer.Option("--source", help="Profile JSON path or URL (defaults to settings)"),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="YAML settings file", exists=True, dir_okay=False),
    ] = None,
):
    """Answer one question from the profile data."""
    if not question.strip():
        typer.echo("Error: Please enter a question.", err=True)
        raise typer.Exit(code=1)

    try:
        settings = load_settings(config)
    except InvalidSettingsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    setup_logger(
        context_name="ask",
        log_dir=LOGS_PATH / f"ask_{timestamp}",
        extra_provenance={"Profile source": source or settings.profile.source},
    )

    session = PortfolioSession(settings)
    session.start(source)
    if session.load_warning:
        typer.echo(session.load_warning, err=True)

    typer.echo(render_answer(session.route_question(question.strip())))


if __name__ == "__main__":
    app()
