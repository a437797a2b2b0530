"""Validadores de identidade e cadastro de cliente."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.validators.pagarme.errors import (
    CustomerIdentityConflict,
    MissingCustomerId,
    MissingCustomerIdentity,
    MissingCustomerName,
)

if TYPE_CHECKING:
    from app.domain.customer import Customer
    from app.protocols.models import CustomerRequest


def validate_customer_identity(customer: Customer | None, customer_id: str | None) -> None:
    """Exige exatamente um entre customer e customer_id."""
    has_id = bool(customer_id and customer_id.strip())
    if customer is None and not has_id:
        raise MissingCustomerIdentity("Informe customer ou customer_id")
    if customer is not None and has_id:
        raise CustomerIdentityConflict("Informe apenas um entre customer e customer_id")


def validate_customer_request(request: CustomerRequest, customer_id: str | None = None) -> None:
    """Valida criação (customer_id None) ou atualização de cliente.

    Args:
        request: Dados do cliente
        customer_id: ID do cliente em atualizações; string vazia é erro
    """
    if customer_id is not None and not customer_id.strip():
        raise MissingCustomerId("customer_id é obrigatório para atualização")
    if not request.name or not request.name.strip():
        raise MissingCustomerName("Nome do cliente é obrigatório")
