"""Builder do checkout legado (também POST /paymentlinks).

Variante simplificada: PIX, boleto e cartão com prazos fixos, parcelamento
sem juros até 6x e split sempre percentual.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.pagarme.cart import project_cart
from api.payload_builders.pagarme.split import build_split_rules
from app.constants.pagarme import (
    CHECKOUT_BOLETO_DUE_IN_DAYS,
    CHECKOUT_MAX_INSTALLMENTS,
    CHECKOUT_PIX_EXPIRES_IN,
    DEFAULT_ITEM_NAME,
    DEFAULT_OPERATION_TYPE,
    PaymentMethod,
    SplitMode,
)

if TYPE_CHECKING:
    from app.protocols.models import CreatePaymentLinkRequest


class CheckoutPayloadBuilder:
    """Builder para o checkout legado."""

    def build(self, request: CreatePaymentLinkRequest) -> dict[str, Any]:
        items = project_cart(request.cart())

        payload: dict[str, Any] = {
            "type": "order",
            "payment_settings": {
                "accepted_payment_methods": [
                    PaymentMethod.PIX.value,
                    PaymentMethod.BOLETO.value,
                    PaymentMethod.CREDIT_CARD.value,
                ],
                "pix_settings": {"expires_in": CHECKOUT_PIX_EXPIRES_IN},
                "boleto_settings": {"due_in": CHECKOUT_BOLETO_DUE_IN_DAYS},
                "credit_card_settings": {
                    "operation_type": DEFAULT_OPERATION_TYPE,
                    "installments_setup": {
                        "max_installments": CHECKOUT_MAX_INSTALLMENTS,
                        "amount": request.amount or 0,
                        "interest_type": "simple",
                        "interest_rate": 0,
                        "free_installments": CHECKOUT_MAX_INSTALLMENTS,
                    },
                },
            },
            "cart_settings": {
                "items": [
                    {
                        "name": item.name or DEFAULT_ITEM_NAME,
                        "description": item.description,
                        "amount": item.amount,
                        "default_quantity": item.quantity,
                    }
                    for item in items
                ]
            },
        }

        rules = build_split_rules(request.split_plan(), force_mode=SplitMode.PERCENTAGE)
        if rules:
            payload["split_settings"] = {"rules": rules}
        return payload
