"""Regras de split no formato upstream e política de taxas."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.domain.split import RecipientFeeFlags

if TYPE_CHECKING:
    from app.constants.pagarme import SplitMode
    from app.domain.split import SplitPlan, SplitRule


def derive_fee_flags(rule: SplitRule) -> RecipientFeeFlags:
    """Recebedor liable absorve taxa de processamento e sobra de centavos."""
    liable = bool(rule.liable)
    return RecipientFeeFlags(charge_processing_fee=liable, charge_remainder_fee=liable)


def build_split_rule(rule: SplitRule, force_mode: SplitMode | None = None) -> dict[str, Any]:
    flags = derive_fee_flags(rule)
    mode = force_mode or rule.mode
    return {
        "amount": rule.amount,
        "type": mode.value,
        "recipient_id": rule.recipient_id,
        "options": {
            "liable": bool(rule.liable),
            "charge_processing_fee": flags.charge_processing_fee,
            "charge_remainder_fee": flags.charge_remainder_fee,
        },
    }


def build_split_rules(
    plan: SplitPlan,
    force_mode: SplitMode | None = None,
) -> list[dict[str, Any]]:
    """Projeta o plano inteiro (lista vazia para plano vazio)."""
    return [build_split_rule(rule, force_mode) for rule in plan.rules]
