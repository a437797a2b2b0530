"""Conector da API Pagar.me (core v5)."""

from api.connectors.pagarme.http_client import (
    PagarmeHttpClient,
    basic_auth_header,
    create_pagarme_http_client,
)
from api.connectors.pagarme.results import (
    extract_checkout_url,
    map_order_response,
    map_payment_link_response,
)

__all__ = [
    "PagarmeHttpClient",
    "basic_auth_header",
    "create_pagarme_http_client",
    "extract_checkout_url",
    "map_order_response",
    "map_payment_link_response",
]
