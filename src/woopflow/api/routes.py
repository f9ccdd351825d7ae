"""``/api/ragflow`` routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from woopflow.clients.ragflow import RagflowClient
from woopflow.logging import get_logger
from woopflow.woop.report import WoopReportService

logger = get_logger(__name__)

router = APIRouter(prefix="/api/ragflow")


def get_ragflow_client(request: Request) -> RagflowClient:
    return request.app.state.ragflow


def get_woop_service(request: Request) -> WoopReportService:
    return request.app.state.woop


@router.post("/query")
async def run_query(
    payload: Any = Body(default=None),
    ragflow: RagflowClient = Depends(get_ragflow_client),
) -> JSONResponse:
    """Forward an arbitrary query body to RAGFlow."""

    data = await ragflow.run_query(payload if payload is not None else {})
    return JSONResponse(content=data)


@router.get("/datasets")
async def list_datasets(ragflow: RagflowClient = Depends(get_ragflow_client)) -> JSONResponse:
    data = await ragflow.list_datasets()
    return JSONResponse(content=data)


@router.post("/woop")
async def generate_woop_report(
    body: Any = Body(default=None),
    service: WoopReportService = Depends(get_woop_service),
) -> JSONResponse:
    """Generate a WOOP report prompt and return RAGFlow's raw answer."""

    logger.info("WOOP report requested")
    data = await service.generate_report(body)
    return JSONResponse(content=data)
