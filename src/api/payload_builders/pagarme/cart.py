"""Normalização de itens do carrinho."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from api.validators.pagarme.errors import MissingCartData
from app.constants.pagarme import FALLBACK_ITEM_CODE, FALLBACK_ITEM_NAME
from app.domain.cart import NormalizedLineItem

if TYPE_CHECKING:
    from app.domain.cart import CartModel

_MISSING_CART_MESSAGE = "Items ou amount deve ser informado"


def project_cart(cart: CartModel) -> list[NormalizedLineItem]:
    """Aplica defaults aos itens ou gera o item sintético de fallback.

    Defaults por item: description = name, quantity = 1, code = uuid4.

    Raises:
        MissingCartData: Sem itens e sem valor de fallback
    """
    if cart.is_empty:
        raise MissingCartData(_MISSING_CART_MESSAGE)

    if not cart.items:
        return [
            NormalizedLineItem(
                name=FALLBACK_ITEM_NAME,
                description=FALLBACK_ITEM_NAME,
                amount=cart.fallback_amount,
                quantity=1,
                code=FALLBACK_ITEM_CODE,
            )
        ]

    return [
        NormalizedLineItem(
            name=item.name,
            description=item.description or item.name or "",
            amount=item.amount,
            quantity=item.quantity or 1,
            code=item.code or str(uuid.uuid4()),
        )
        for item in cart.items
    ]


def cart_total(cart: CartModel) -> int:
    """Total em centavos: soma de amount x quantity, ou o fallback."""
    if cart.is_empty:
        raise MissingCartData(_MISSING_CART_MESSAGE)
    return cart.total
