"""Builder de Payment Link (POST /paymentlinks).

O cliente preenche os próprios dados no checkout hospedado, então o
payload não leva customer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.pagarme.cart import project_cart
from api.payload_builders.pagarme.split import build_split_rules
from app.constants.pagarme import (
    DEFAULT_ITEM_NAME,
    DEFAULT_MAX_INSTALLMENTS,
    DEFAULT_OPERATION_TYPE,
    DEFAULT_STATEMENT_DESCRIPTOR,
    MAX_FREE_INSTALLMENTS,
    MAX_STATEMENT_DESCRIPTOR_LENGTH,
    PAYMENT_LINK_INTEREST_RATE,
    PAYMENT_LINK_PIX_EXPIRES_IN_SECONDS,
    PaymentMethod,
)

if TYPE_CHECKING:
    from app.protocols.models import CreatePaymentLinkRequest


def statement_descriptor(value: str | None) -> str:
    """Descrição na fatura, truncada ao limite do emissor."""
    descriptor = value or DEFAULT_STATEMENT_DESCRIPTOR
    return descriptor[:MAX_STATEMENT_DESCRIPTOR_LENGTH]


class PaymentLinkPayloadBuilder:
    """Builder para links de pagamento com cartão e PIX."""

    def build(self, request: CreatePaymentLinkRequest) -> dict[str, Any]:
        items = project_cart(request.cart())
        max_installments = request.installments or DEFAULT_MAX_INSTALLMENTS

        payload: dict[str, Any] = {
            "is_building": False,
            "type": "order",
            "payment_settings": {
                "accepted_payment_methods": [
                    PaymentMethod.CREDIT_CARD.value,
                    PaymentMethod.PIX.value,
                ],
                "statement_descriptor": statement_descriptor(request.statement_descriptor),
                "credit_card_settings": {
                    "operation_type": DEFAULT_OPERATION_TYPE,
                    "installments_setup": {
                        "interest_type": "simple",
                        "max_installments": max_installments,
                        "free_installments": min(MAX_FREE_INSTALLMENTS, max_installments),
                        "amount": request.computed_total(),
                        "interest_rate": PAYMENT_LINK_INTEREST_RATE,
                    },
                },
                "pix_settings": {"expires_in": PAYMENT_LINK_PIX_EXPIRES_IN_SECONDS},
            },
            "cart_settings": {
                "items": [
                    {
                        "name": item.name or DEFAULT_ITEM_NAME,
                        "amount": item.amount,
                        "default_quantity": item.quantity,
                    }
                    for item in items
                ]
            },
        }

        rules = build_split_rules(request.split_plan())
        if rules:
            payload["split_settings"] = {"rules": rules}
        return payload
