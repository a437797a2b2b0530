"""Validadores de método de pagamento (Orders)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.validators.pagarme.errors import (
    MissingPaymentData,
    PaymentMethodMismatch,
    UnknownPaymentMethod,
)
from app.constants.pagarme import PaymentMethod

if TYPE_CHECKING:
    from app.domain.payment import PaymentSelection


def parse_payment_method(method: str | None) -> PaymentMethod:
    """Converte o método informado no enum, aceitando hífen (credit-card).

    Raises:
        UnknownPaymentMethod: Se ausente ou fora do enum
    """
    if not method:
        raise UnknownPaymentMethod("payment_method é obrigatório")
    normalized = method.strip().lower().replace("-", "_")
    try:
        return PaymentMethod(normalized)
    except ValueError as exc:
        accepted = ", ".join(m.value for m in PaymentMethod)
        raise UnknownPaymentMethod(
            f"Método de pagamento inválido: {method}. Aceitos: {accepted}"
        ) from exc


def validate_payment_selection(selection: PaymentSelection) -> PaymentMethod:
    """Valida que o payload específico corresponde ao método escolhido.

    PIX e boleto aceitam payload ausente (defaults do gateway).
    Cartões exigem dados: card_id, card_token ou cartão completo.

    Returns:
        Método já normalizado
    """
    method = parse_payment_method(selection.method)

    others = [name for name in selection.populated_methods() if name != method.value]
    if others:
        raise PaymentMethodMismatch(
            f"Dados de pagamento ({', '.join(others)}) não correspondem "
            f"ao método escolhido ({method.value})"
        )

    if method == PaymentMethod.CREDIT_CARD:
        card = selection.credit_card
        if card is None or not (card.card_id or card.card_token or card.has_card_data):
            raise MissingPaymentData(
                "credit_card requer card_id, card_token ou dados completos do cartão"
            )
    elif method == PaymentMethod.DEBIT_CARD:
        card = selection.debit_card
        if card is None or not card.has_card_data:
            raise MissingPaymentData("debit_card requer dados completos do cartão")

    return method
