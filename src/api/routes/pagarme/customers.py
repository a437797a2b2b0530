"""Endpoints de clientes.

Endpoints:
- POST /customers: cria cliente
- GET /customers: lista com filtros e paginação (query string)
- PUT /customers/{customer_id}: atualiza cliente
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from api.routes.pagarme.responses import failure_response, success_response
from app.bootstrap import get_customers_use_case
from app.constants.pagarme import DEFAULT_CUSTOMERS_PAGE, DEFAULT_CUSTOMERS_PAGE_SIZE
from app.protocols.models import CustomerRequest, ListCustomersRequest

router = APIRouter()


@router.post("/customers")
async def create_customer(request: CustomerRequest) -> JSONResponse:
    result = await get_customers_use_case().create_customer(request)
    if not result.success:
        return failure_response(result)
    return success_response({"success": True, "customer": result.data})


@router.get("/customers")
async def list_customers(
    filial_id: Annotated[str | None, Query(alias="filialId")] = None,
    name: Annotated[str | None, Query()] = None,
    document: Annotated[str | None, Query()] = None,
    email: Annotated[str | None, Query()] = None,
    gender: Annotated[str | None, Query()] = None,
    code: Annotated[str | None, Query()] = None,
    page: Annotated[int, Query(ge=1)] = DEFAULT_CUSTOMERS_PAGE,
    size: Annotated[int, Query(ge=1)] = DEFAULT_CUSTOMERS_PAGE_SIZE,
) -> JSONResponse:
    request = ListCustomersRequest(
        filial_id=filial_id,
        name=name,
        document=document,
        email=email,
        gender=gender,
        code=code,
        page=page,
        size=size,
    )
    result = await get_customers_use_case().list_customers(request)
    if not result.success:
        return failure_response(result)
    return success_response({"success": True, "data": result.data})


@router.put("/customers/{customer_id}")
async def update_customer(customer_id: str, request: CustomerRequest) -> JSONResponse:
    result = await get_customers_use_case().update_customer(customer_id, request)
    if not result.success:
        return failure_response(result)
    return success_response({"success": True, "customer": result.data})
