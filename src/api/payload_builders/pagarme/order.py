"""Builder de pedido fechado (POST /orders)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.pagarme.cart import project_cart
from api.payload_builders.pagarme.customer import build_customer, build_shipping
from api.payload_builders.pagarme.payment import build_payment_entry
from api.payload_builders.pagarme.split import build_split_rules
from api.validators.pagarme.customer import validate_customer_identity
from api.validators.pagarme.payment import validate_payment_selection

if TYPE_CHECKING:
    from app.domain.cart import NormalizedLineItem
    from app.protocols.models import CreateOrderRequest


def _build_item(item: NormalizedLineItem) -> dict[str, Any]:
    return {
        "amount": item.amount,
        "description": item.description,
        "quantity": item.quantity,
        "code": item.code,
    }


class OrderPayloadBuilder:
    """Builder para a API de Orders.

    O split vai dentro da única entrada de payments[].
    """

    def build(self, request: CreateOrderRequest) -> dict[str, Any]:
        """Constrói payload de pedido.

        Args:
            request: Pedido já validado pelo PagarmeRequestValidator

        Returns:
            Payload conforme POST /orders

        Raises:
            ValidationError: Carrinho, cliente ou pagamento inconsistentes
        """
        validate_customer_identity(request.customer, request.customer_id)
        method = validate_payment_selection(request.payment_selection())

        payload: dict[str, Any] = {}
        if request.code:
            payload["code"] = request.code

        payload["items"] = [_build_item(item) for item in project_cart(request.cart())]

        if request.customer is not None:
            payload["customer"] = build_customer(request.customer)
        else:
            payload["customer_id"] = request.customer_id

        payment = build_payment_entry(method, request.payment_selection())
        split = build_split_rules(request.split_plan())
        if split:
            payment["split"] = split
        payload["payments"] = [payment]

        payload["closed"] = True if request.closed is None else request.closed

        if request.shipping is not None:
            payload["shipping"] = build_shipping(request.shipping)
        if request.metadata is not None:
            payload["metadata"] = request.metadata

        return payload
