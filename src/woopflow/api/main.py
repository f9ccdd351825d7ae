"""ASGI entrypoint used by the server launcher."""

from __future__ import annotations

from woopflow.api.app import create_app

app = create_app()
