"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.bootstrap import get_tenant_registry
from config.settings import FiliaisConfigError

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "split-pagarme"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness: ao menos uma filial com chave secreta configurada."""
    try:
        filiais = get_tenant_registry().list_filiais()
    except FiliaisConfigError as exc:
        logger.warning("readiness_filiais_failed", extra={"error": str(exc)})
        filiais = []

    configured = [filial.id for filial in filiais if filial.secret_key]
    ready = bool(configured)
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "filiais": {
                "status": "ok" if ready else "failed",
                "configured": configured,
            },
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)
