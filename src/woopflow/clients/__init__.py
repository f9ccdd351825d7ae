"""Clients for external services."""

from __future__ import annotations

from woopflow.clients.ragflow import RagflowClient

__all__ = ["RagflowClient"]
