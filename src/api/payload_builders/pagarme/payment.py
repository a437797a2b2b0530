"""Builders dos payloads específicos de cada método de pagamento."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.pagarme.base import compact
from api.payload_builders.pagarme.customer import build_address
from app.constants.pagarme import (
    DEFAULT_OPERATION_TYPE,
    DEFAULT_PIX_EXPIRES_IN_SECONDS,
    PaymentMethod,
)

if TYPE_CHECKING:
    from app.domain.payment import (
        Boleto,
        CardData,
        CreditCard,
        DebitCard,
        PaymentSelection,
        Pix,
    )


def build_card(card: CardData) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "number": card.number,
        "holder_name": card.holder_name,
        "exp_month": card.exp_month,
        "exp_year": card.exp_year,
        "cvv": card.cvv,
    }
    if card.billing_address is not None:
        payload["billing_address"] = build_address(card.billing_address)
    return payload


def build_credit_card(credit_card: CreditCard) -> dict[str, Any]:
    """card_id tem prioridade sobre card_token, que tem prioridade sobre dados abertos."""
    payload: dict[str, Any] = {
        "operation_type": credit_card.operation_type or DEFAULT_OPERATION_TYPE,
    }
    payload.update(
        compact(
            {
                "installments": credit_card.installments,
                "statement_descriptor": credit_card.statement_descriptor,
            }
        )
    )
    if credit_card.card_id:
        payload["card_id"] = credit_card.card_id
    elif credit_card.card_token:
        payload["card_token"] = credit_card.card_token
    else:
        payload["card"] = build_card(credit_card)
    return payload


def build_debit_card(debit_card: DebitCard) -> dict[str, Any]:
    payload = compact({"statement_descriptor": debit_card.statement_descriptor})
    payload["card"] = build_card(debit_card)
    return payload


def build_pix(pix: Pix | None) -> dict[str, Any]:
    expires_in = pix.expires_in if pix and pix.expires_in else DEFAULT_PIX_EXPIRES_IN_SECONDS
    return {"expires_in": expires_in}


def build_boleto(boleto: Boleto | None) -> dict[str, Any]:
    if boleto is None:
        return {}
    return compact({"instructions": boleto.instructions, "due_at": boleto.due_at})


def build_payment_entry(method: PaymentMethod, selection: PaymentSelection) -> dict[str, Any]:
    """Entrada de payments[] sem split.

    Assume seleção já validada (cartões com payload presente).
    """
    payload: dict[str, Any] = {"payment_method": method.value}
    if method == PaymentMethod.CREDIT_CARD:
        payload["credit_card"] = build_credit_card(selection.credit_card)
    elif method == PaymentMethod.DEBIT_CARD:
        payload["debit_card"] = build_debit_card(selection.debit_card)
    elif method == PaymentMethod.PIX:
        payload["pix"] = build_pix(selection.pix)
    else:
        payload["boleto"] = build_boleto(selection.boleto)
    return payload
