"""Modelos de domínio do carrinho.

O carrinho é neutro em relação ao provider: cada payload builder escolhe
quais campos do item normalizado emitir.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CartItem(BaseModel):
    """Item declarado pelo chamador (valor unitário em centavos)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    name: str | None = None
    description: str | None = None
    amount: int = Field(0, ge=0, description="Valor unitário em centavos.")
    quantity: int | None = Field(
        None,
        ge=1,
        alias="defaultQuantity",
        validation_alias=AliasChoices("defaultQuantity", "default_quantity", "quantity"),
    )
    code: str | None = Field(None, description="Código do item no sistema da loja.")


class CartModel(BaseModel):
    """Itens do pedido ou, na ausência deles, um valor único de fallback."""

    model_config = ConfigDict(frozen=True)

    items: tuple[CartItem, ...] = ()
    fallback_amount: int | None = Field(None, ge=0)

    @property
    def is_empty(self) -> bool:
        """Sem itens e sem fallback: não há o que cobrar."""
        return not self.items and self.fallback_amount is None

    @property
    def items_total(self) -> int:
        return sum(item.amount * (item.quantity or 1) for item in self.items)

    @property
    def total(self) -> int | None:
        """Soma dos itens, fallback quando vazio, None se não há nenhum."""
        if self.items:
            return self.items_total
        return self.fallback_amount


@dataclass(frozen=True, slots=True)
class NormalizedLineItem:
    """Item já com defaults aplicados, pronto para projeção em payload."""

    name: str | None
    description: str
    amount: int
    quantity: int
    code: str

    @property
    def subtotal(self) -> int:
        return self.amount * self.quantity


__all__ = ["CartItem", "CartModel", "NormalizedLineItem"]
