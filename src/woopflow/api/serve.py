"""Uvicorn server launcher.

Console scripts must point to a callable, not an ASGI app object.
"""

from __future__ import annotations

from typing import Annotated

import typer
import uvicorn

from woopflow.config import load_settings


def main(
    host: Annotated[str | None, typer.Option(help="Bind host (defaults to HOST)")] = None,
    port: Annotated[int | None, typer.Option(help="Bind port (defaults to PORT)")] = None,
    reload: Annotated[bool, typer.Option(help="Enable auto-reload (dev)")] = False,
) -> None:
    """Start the woopflow API server."""

    settings = load_settings()
    uvicorn.run(
        "woopflow.api.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def run() -> None:
    typer.run(main)


if __name__ == "__main__":
    run()
