"""Builders de payload para a API Pagar.me (core v5).

Cada superfície upstream (Orders, Payment Links, checkout legado) recebe
uma árvore JSON diferente a partir do mesmo modelo canônico.
"""

from api.payload_builders.pagarme.cart import cart_total, project_cart
from api.payload_builders.pagarme.checkout import CheckoutPayloadBuilder
from api.payload_builders.pagarme.customer import (
    CustomerPayloadBuilder,
    build_list_customers_params,
)
from api.payload_builders.pagarme.factory import get_payload_adapter
from api.payload_builders.pagarme.order import OrderPayloadBuilder
from api.payload_builders.pagarme.payment_link import PaymentLinkPayloadBuilder
from api.payload_builders.pagarme.split import build_split_rules, derive_fee_flags

__all__ = [
    "CheckoutPayloadBuilder",
    "CustomerPayloadBuilder",
    "OrderPayloadBuilder",
    "PaymentLinkPayloadBuilder",
    "build_list_customers_params",
    "build_split_rules",
    "cart_total",
    "derive_fee_flags",
    "get_payload_adapter",
    "project_cart",
]
