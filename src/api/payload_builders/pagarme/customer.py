"""Builders de cliente, endereço e entrega (snake_case upstream)."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from api.payload_builders.pagarme.base import compact
from app.constants.pagarme import DEFAULT_CUSTOMER_TYPE, DEFAULT_DOCUMENT_TYPE

if TYPE_CHECKING:
    from app.domain.customer import Address, Customer, Shipping
    from app.protocols.models import CustomerRequest, ListCustomersRequest

_NON_DIGITS = re.compile(r"[^0-9]")

_LIST_FILTERS = ("name", "document", "email", "gender", "code")


def clean_document(document: str) -> str:
    """Remove pontos, traços e espaços de CPF/CNPJ."""
    return _NON_DIGITS.sub("", document)


def build_address(address: Address) -> dict[str, Any]:
    return compact(
        {
            "country": address.country,
            "state": address.state,
            "city": address.city,
            "zip_code": address.zip_code,
            "line_1": address.line_1,
            "line_2": address.line_2,
        }
    )


def build_customer(customer: Customer | CustomerRequest, *, clean: bool = False) -> dict[str, Any]:
    """Constrói o objeto customer.

    type/document_type só são emitidos junto com document.

    Args:
        customer: Cliente embutido no pedido ou request de cadastro
        clean: Se True, mantém apenas dígitos do documento
    """
    payload: dict[str, Any] = {"name": customer.name}
    if customer.email:
        payload["email"] = customer.email

    if customer.document:
        payload["document"] = clean_document(customer.document) if clean else customer.document
        payload["type"] = customer.type or DEFAULT_CUSTOMER_TYPE
        payload["document_type"] = customer.document_type or DEFAULT_DOCUMENT_TYPE

    payload.update(
        compact(
            {
                "code": customer.code or None,
                "gender": customer.gender or None,
                "birthdate": customer.birthdate or None,
            }
        )
    )
    if customer.address is not None:
        payload["address"] = build_address(customer.address)
    if customer.phones is not None:
        payload["phones"] = customer.phones
    if customer.metadata is not None:
        payload["metadata"] = customer.metadata
    return payload


def build_shipping(shipping: Shipping) -> dict[str, Any]:
    payload = compact(
        {
            "amount": shipping.amount,
            "description": shipping.description,
            "recipient_name": shipping.recipient_name,
            "recipient_phone": shipping.recipient_phone,
        }
    )
    if shipping.address is not None:
        payload["address"] = build_address(shipping.address)
    return payload


class CustomerPayloadBuilder:
    """Payload de criação/atualização em /customers."""

    def build(self, request: CustomerRequest) -> dict[str, Any]:
        return build_customer(request, clean=True)

    def build_list_params(self, request: ListCustomersRequest) -> dict[str, Any]:
        return build_list_customers_params(request)


def build_list_customers_params(request: ListCustomersRequest) -> dict[str, Any]:
    """Query params de GET /customers (filtros vazios são omitidos)."""
    params: dict[str, Any] = {}
    for name in _LIST_FILTERS:
        value = getattr(request, name)
        if value:
            params[name] = value
    params["page"] = request.page
    params["size"] = request.size
    return params
