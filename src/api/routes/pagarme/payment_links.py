"""Endpoint de Payment Links.

O link retornado é enviado ao cliente, que preenche os próprios dados
no checkout hospedado da Pagar.me.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api.connectors.pagarme.results import map_payment_link_response
from api.routes.pagarme.responses import failure_response, success_response
from app.bootstrap import get_create_payment_link_use_case
from app.protocols.models import CreatePaymentLinkRequest

router = APIRouter()


@router.post("/payment-links")
async def create_payment_link(request: CreatePaymentLinkRequest) -> JSONResponse:
    result = await get_create_payment_link_use_case().execute(request)
    if not result.success:
        return failure_response(result)
    return success_response(map_payment_link_response(result.data))
