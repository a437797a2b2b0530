"""Factory para obter o builder correto por superfície upstream."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.pagarme.checkout import CheckoutPayloadBuilder
from api.payload_builders.pagarme.order import OrderPayloadBuilder
from api.payload_builders.pagarme.payment_link import PaymentLinkPayloadBuilder
from app.constants.pagarme import PaymentSurface

if TYPE_CHECKING:
    from app.protocols.payload_builder import PayloadAdapterProtocol

# Builders são puros e sem estado: uma instância por superfície basta
_BUILDERS: dict[PaymentSurface, PayloadAdapterProtocol] = {
    PaymentSurface.ORDER: OrderPayloadBuilder(),
    PaymentSurface.PAYMENT_LINK: PaymentLinkPayloadBuilder(),
    PaymentSurface.CHECKOUT: CheckoutPayloadBuilder(),
}


def get_payload_adapter(surface: PaymentSurface | str) -> PayloadAdapterProtocol:
    """Retorna o builder da superfície.

    Raises:
        ValueError: Se a superfície não é suportada
    """
    try:
        return _BUILDERS[PaymentSurface(surface)]
    except ValueError as exc:
        raise ValueError(f"Superfície não suportada: {surface}") from exc
