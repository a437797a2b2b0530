"""Endpoints de pedidos (API de Orders).

Endpoints:
- POST /orders: método informado em paymentMethod
- POST /orders/pix, /orders/boleto, /orders/credit-card: método fixo
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api.connectors.pagarme.results import map_order_response
from api.routes.pagarme.responses import failure_response, success_response
from app.bootstrap import get_create_order_use_case
from app.constants.pagarme import PaymentMethod
from app.protocols.models import CreateOrderRequest

router = APIRouter()


async def _create(request: CreateOrderRequest) -> JSONResponse:
    result = await get_create_order_use_case().execute(request)
    if not result.success:
        return failure_response(result)
    return success_response(map_order_response(result.data))


@router.post("/orders")
async def create_order(request: CreateOrderRequest) -> JSONResponse:
    return await _create(request)


@router.post("/orders/pix")
async def create_pix_order(request: CreateOrderRequest) -> JSONResponse:
    return await _create(request.model_copy(update={"payment_method": PaymentMethod.PIX.value}))


@router.post("/orders/boleto")
async def create_boleto_order(request: CreateOrderRequest) -> JSONResponse:
    return await _create(
        request.model_copy(update={"payment_method": PaymentMethod.BOLETO.value})
    )


@router.post("/orders/credit-card")
async def create_credit_card_order(request: CreateOrderRequest) -> JSONResponse:
    return await _create(
        request.model_copy(update={"payment_method": PaymentMethod.CREDIT_CARD.value})
    )
