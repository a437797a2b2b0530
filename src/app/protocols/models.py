"""Contratos canônicos de entrada/saída dos use cases de pagamento.

Os requests aceitam camelCase (front-end) e snake_case. Os métodos
`cart()`, `split_plan()` e `payment_selection()` projetam o request no
modelo canônico consumido por validators e payload builders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.constants.pagarme import DEFAULT_CUSTOMERS_PAGE, DEFAULT_CUSTOMERS_PAGE_SIZE
from app.domain.cart import CartItem, CartModel
from app.domain.customer import Address, Customer, Shipping
from app.domain.payment import Boleto, CreditCard, DebitCard, PaymentSelection, Pix
from app.domain.split import SplitPlan, SplitRule

_REQUEST_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


class _CartRequestMixin(BaseModel):
    model_config = _REQUEST_CONFIG

    amount: int | None = Field(None, ge=0, description="Total/fallback em centavos.")
    items: list[CartItem] | None = None
    split: list[SplitRule] | None = None

    def cart(self) -> CartModel:
        return CartModel(items=tuple(self.items or ()), fallback_amount=self.amount)

    def split_plan(self) -> SplitPlan:
        return SplitPlan.from_rules(self.split)


class CreateOrderRequest(_CartRequestMixin):
    """Pedido fechado via API de Orders."""

    filial_id: str | None = None
    code: str | None = Field(None, description="Identificador no sistema da loja.")

    customer_id: str | None = None
    customer: Customer | None = None

    payment_method: str | None = None
    credit_card: CreditCard | None = None
    debit_card: DebitCard | None = None
    pix: Pix | None = None
    boleto: Boleto | None = None

    closed: bool | None = None
    shipping: Shipping | None = None
    metadata: dict[str, str] | None = None

    def payment_selection(self) -> PaymentSelection:
        return PaymentSelection(
            method=self.payment_method,
            credit_card=self.credit_card,
            debit_card=self.debit_card,
            pix=self.pix,
            boleto=self.boleto,
        )


class CreatePaymentLinkRequest(_CartRequestMixin):
    """Payment Link (também usado pelo checkout legado)."""

    filial_id: str | None = None
    installments: int | None = Field(None, ge=1)
    statement_descriptor: str | None = None

    def computed_total(self) -> int:
        """Valor total do link: amount explícito ou soma dos itens."""
        if self.amount is not None:
            return self.amount
        return self.cart().items_total


class CustomerRequest(BaseModel):
    """Criação/atualização de cliente na Pagar.me."""

    model_config = _REQUEST_CONFIG

    filial_id: str | None = None
    name: str | None = Field(None, max_length=64)
    email: str | None = Field(None, max_length=64)
    document: str | None = None
    document_type: str | None = None
    type: str | None = None
    code: str | None = Field(None, max_length=52)
    gender: str | None = None
    birthdate: str | None = None
    address: Address | None = None
    phones: dict[str, Any] | None = None
    metadata: dict[str, str] | None = None


class ListCustomersRequest(BaseModel):
    """Filtros e paginação de listagem de clientes."""

    model_config = _REQUEST_CONFIG

    filial_id: str | None = None
    name: str | None = None
    document: str | None = None
    email: str | None = None
    gender: str | None = None
    code: str | None = None
    page: int = Field(DEFAULT_CUSTOMERS_PAGE, ge=1)
    size: int = Field(DEFAULT_CUSTOMERS_PAGE_SIZE, ge=1)


@dataclass(frozen=True, slots=True)
class PaymentOperationResult:
    """Resultado de uma operação contra o gateway.

    Attributes:
        success: True se o gateway aceitou a requisição
        data: JSON retornado pelo gateway (vazio em falha)
        error_code: VALIDATION_ERROR | GATEWAY_ERROR (None em sucesso)
        error_message: Mensagem legível para o chamador
    """

    success: bool
    data: dict[str, Any] = field(default_factory=dict)
    error_code: str | None = None
    error_message: str | None = None


__all__ = [
    "CreateOrderRequest",
    "CreatePaymentLinkRequest",
    "CustomerRequest",
    "ListCustomersRequest",
    "PaymentOperationResult",
]
