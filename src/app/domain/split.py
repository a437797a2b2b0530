"""Modelos de domínio para split de pagamento.

Um split divide o valor de um único pagamento entre vários recebedores
cadastrados na Pagar.me. As regras são construídas por request, validadas
uma única vez e não são persistidas.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.constants.pagarme import SplitMode


class SplitRule(BaseModel):
    """Parte de um recebedor no split.

    Campos opcionais no schema para que a validação de negócio
    (SplitValidator) reporte o erro tipado, e não um 422 genérico.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    recipient_id: str | None = Field(None, description="ID do recebedor (rp_* ou re_*).")
    amount: int | None = Field(
        None,
        description="Pontos percentuais (1-100) ou centavos, conforme o modo.",
    )
    mode: SplitMode = Field(
        default=SplitMode.PERCENTAGE,
        alias="type",
        description="percentage ou flat.",
    )
    liable: bool | None = Field(
        None,
        description="True se o recebedor absorve taxas de processamento e sobras.",
    )

    @field_validator("mode", mode="before")
    @classmethod
    def _default_mode(cls, value: object) -> object:
        # type: null equivale a percentage
        return SplitMode.PERCENTAGE if value is None else value


class SplitPlan(BaseModel):
    """Sequência ordenada de regras de split (ordem apenas para determinismo)."""

    model_config = ConfigDict(frozen=True)

    rules: tuple[SplitRule, ...] = ()

    @classmethod
    def from_rules(cls, rules: list[SplitRule] | None) -> SplitPlan:
        return cls(rules=tuple(rules or ()))

    @property
    def is_empty(self) -> bool:
        return not self.rules

    @property
    def mode(self) -> SplitMode:
        """Modo canônico do plano: o da primeira regra."""
        if not self.rules:
            return SplitMode.PERCENTAGE
        return self.rules[0].mode

    @property
    def total(self) -> int:
        return sum(rule.amount or 0 for rule in self.rules)

    def with_mode(self, mode: SplitMode) -> SplitPlan:
        """Cópia do plano com todas as regras forçadas para `mode`."""
        return SplitPlan(
            rules=tuple(rule.model_copy(update={"mode": mode}) for rule in self.rules)
        )


@dataclass(frozen=True, slots=True)
class RecipientFeeFlags:
    """Flags de cobrança de taxa derivadas do liable de uma regra."""

    charge_processing_fee: bool
    charge_remainder_fee: bool


__all__ = ["RecipientFeeFlags", "SplitPlan", "SplitRule"]
