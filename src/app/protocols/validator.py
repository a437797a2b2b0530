"""Protocolos de validação de requests de pagamento."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import CreateOrderRequest, CreatePaymentLinkRequest, CustomerRequest


class ValidationError(Exception):
    """Erro de validação de request (4xx, nunca retentado).

    Attributes:
        code: Identificador estável do erro (ex: "SPLIT_SUM_MISMATCH")
    """

    code: str = "VALIDATION_ERROR"


class PaymentRequestValidatorProtocol(Protocol):
    """Contrato mínimo para validação antes do build de payload."""

    def validate_order_request(self, request: CreateOrderRequest) -> None: ...

    def validate_payment_link_request(self, request: CreatePaymentLinkRequest) -> None: ...

    def validate_checkout_request(self, request: CreatePaymentLinkRequest) -> None: ...

    def validate_customer_request(
        self,
        request: CustomerRequest,
        customer_id: str | None = None,
    ) -> None: ...
