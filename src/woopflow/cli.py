"""CLI entrypoints for woopflow."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from woopflow.config import load_settings
from woopflow.errors import ValidationError
from woopflow.logging import configure_logging, get_logger
from woopflow.models.report import WoopReportRequest
from woopflow.woop.report import prepare_report

app = typer.Typer(add_completion=False, help="woopflow WOOP coaching report tools")
logger = get_logger(__name__)


@app.callback()
def main() -> None:
    """woopflow command line."""


@app.command()
def prompt(
    request_file: Path = typer.Argument(
        ...,
        help="UTF-8 JSON file with a WOOP report request (personalInfo, currentSkill, goals, ...).",
        exists=True,
        dir_okay=False,
    ),
    payload: bool = typer.Option(
        False,
        "--payload",
        help="Print the assembled RAGFlow request body instead of the prompt text.",
    ),
) -> None:
    """Render the WOOP prompt for a request without calling RAGFlow."""

    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        body = json.loads(request_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"{request_file} is not valid JSON: {e}") from e

    try:
        prepared = prepare_report(WoopReportRequest.from_body(body))
    except ValidationError as e:
        typer.echo(e.message, err=True)
        raise typer.Exit(code=1) from e

    if payload:
        typer.echo(json.dumps(prepared.payload, ensure_ascii=False, indent=2))
    else:
        typer.echo(prepared.prompt)


if __name__ == "__main__":
    app()
