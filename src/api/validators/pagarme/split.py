"""Validação de plano de split.

Política fail-fast: a primeira regra violada interrompe a validação
e o erro correspondente é levantado.

Ordem das checagens por regra:
1. recipient_id presente e com prefixo rp_/re_
2. amount presente
3. liable presente
4. amount dentro da faixa do modo da própria regra

Depois das regras, a soma é comparada com o esperado do modo canônico
(o modo da primeira regra): 100 em percentage, total do pedido em flat.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.validators.pagarme.errors import (
    InvalidRecipientId,
    MissingAmount,
    MissingLiableFlag,
    MixedSplitModes,
    SplitAmountOutOfRange,
    SplitSumMismatch,
)
from api.validators.pagarme.limits import (
    MAX_PERCENTAGE,
    MIN_FLAT_AMOUNT,
    MIN_PERCENTAGE,
    PERCENTAGE_TOTAL,
)
from app.constants.pagarme import RECIPIENT_ID_PREFIXES, SplitMode

if TYPE_CHECKING:
    from app.domain.split import SplitPlan, SplitRule


class SplitValidator:
    """Valida regras de split contra o total do pedido.

    Args:
        require_single_mode: Se True, todas as regras devem usar o modo
            da primeira. Se False, cada regra é validada apenas contra a
            faixa do seu próprio modo.
    """

    def __init__(self, require_single_mode: bool = True) -> None:
        self._require_single_mode = require_single_mode

    def validate(self, plan: SplitPlan, total_amount: int | None = None) -> None:
        """Valida o plano inteiro.

        Args:
            plan: Plano de split (vazio é válido: split é opcional)
            total_amount: Total esperado em centavos (usado só em flat)

        Raises:
            ValidationError: Subclasse correspondente à primeira violação
        """
        if plan.is_empty:
            return

        canonical_mode = plan.mode
        for rule in plan.rules:
            _validate_rule(rule)
            if self._require_single_mode and rule.mode != canonical_mode:
                raise MixedSplitModes(
                    "Todas as regras de split devem usar o mesmo tipo. "
                    f"Esperado: {canonical_mode}, recebido: {rule.mode} ({rule.recipient_id})"
                )

        actual = plan.total
        if canonical_mode == SplitMode.PERCENTAGE:
            if actual != PERCENTAGE_TOTAL:
                raise SplitSumMismatch(
                    "A soma dos percentuais do split deve ser 100%. "
                    f"Atual: {actual}%",
                    expected=PERCENTAGE_TOTAL,
                    actual=actual,
                )
            return

        expected = total_amount or 0
        if actual != expected:
            raise SplitSumMismatch(
                f"A soma dos valores do split ({actual}) deve ser igual "
                f"ao valor total ({expected})",
                expected=expected,
                actual=actual,
            )


def _validate_rule(rule: SplitRule) -> None:
    recipient_id = (rule.recipient_id or "").strip()
    if not recipient_id:
        raise InvalidRecipientId("recipientId é obrigatório")
    if not recipient_id.startswith(RECIPIENT_ID_PREFIXES):
        raise InvalidRecipientId(
            f"recipientId deve começar com 'rp_' ou 're_'. Recebido: {recipient_id}"
        )

    if rule.amount is None:
        raise MissingAmount(f"amount é obrigatório ({recipient_id})")

    if rule.liable is None:
        raise MissingLiableFlag(f"liable é obrigatório ({recipient_id})")

    if rule.mode == SplitMode.PERCENTAGE:
        if not MIN_PERCENTAGE <= rule.amount <= MAX_PERCENTAGE:
            raise SplitAmountOutOfRange(
                f"amount deve estar entre {MIN_PERCENTAGE} e {MAX_PERCENTAGE}. "
                f"Recebido: {rule.amount} ({recipient_id})"
            )
    elif rule.amount < MIN_FLAT_AMOUNT:
        raise SplitAmountOutOfRange(
            f"amount em centavos deve ser maior que zero. "
            f"Recebido: {rule.amount} ({recipient_id})"
        )
