"""Endpoint de listagem de filiais (sem chaves secretas)."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api.routes.pagarme.responses import success_response
from app.bootstrap import get_tenant_registry

router = APIRouter()


@router.get("/filiais")
async def list_filiais() -> JSONResponse:
    filiais = {filial.id: filial.public_view() for filial in get_tenant_registry().list_filiais()}
    return success_response({"success": True, "filiais": filiais})
