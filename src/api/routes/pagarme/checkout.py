"""Endpoint do checkout legado (retorna apenas checkout_url)."""

from __future__ import annotations

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from api.connectors.pagarme.results import extract_checkout_url
from api.routes.pagarme.responses import error_response, failure_response, success_response
from app.bootstrap import get_create_checkout_use_case
from app.protocols.gateway_client import GatewayError
from app.protocols.models import CreatePaymentLinkRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/checkout")
async def create_checkout(request: CreatePaymentLinkRequest) -> JSONResponse:
    result = await get_create_checkout_use_case().execute(request)
    if not result.success:
        return failure_response(result)

    try:
        checkout_url = extract_checkout_url(result.data)
    except GatewayError as exc:
        logger.warning("checkout_url_missing", extra={"link_id": result.data.get("id")})
        return error_response(str(exc), status.HTTP_502_BAD_GATEWAY)

    return success_response({"checkout_url": checkout_url})
