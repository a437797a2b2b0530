"""Modelos de método de pagamento (cartões, PIX e boleto)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.domain.customer import Address

_CAMEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    extra="ignore",
)


class CardData(BaseModel):
    """Dados abertos de cartão. Usar apenas em testes; produção usa token."""

    model_config = _CAMEL_CONFIG

    number: str | None = None
    holder_name: str | None = None
    exp_month: int | None = Field(None, ge=1, le=12)
    exp_year: int | None = None
    cvv: str | None = None
    billing_address: Address | None = None

    @property
    def has_card_data(self) -> bool:
        return all(
            value is not None
            for value in (
                self.number,
                self.holder_name,
                self.exp_month,
                self.exp_year,
                self.cvv,
            )
        )


class CreditCard(CardData):
    """Cartão de crédito: card_id, card_token ou dados completos."""

    card_id: str | None = None
    card_token: str | None = None
    installments: int | None = Field(None, ge=1)
    operation_type: str | None = Field(None, description="auth_only ou auth_and_capture")
    statement_descriptor: str | None = None


class DebitCard(CardData):
    """Cartão de débito (sempre com dados completos)."""

    statement_descriptor: str | None = None


class Pix(BaseModel):
    """Configuração de cobrança PIX."""

    model_config = _CAMEL_CONFIG

    expires_in: int | None = Field(None, gt=0, description="Expiração em segundos.")


class Boleto(BaseModel):
    """Configuração de boleto bancário."""

    model_config = _CAMEL_CONFIG

    instructions: str | None = None
    due_at: str | None = Field(None, description="Vencimento (YYYY-MM-DD).")


class PaymentSelection(BaseModel):
    """Método escolhido mais o payload específico correspondente."""

    model_config = ConfigDict(frozen=True)

    method: str | None = None
    credit_card: CreditCard | None = None
    debit_card: DebitCard | None = None
    pix: Pix | None = None
    boleto: Boleto | None = None

    def populated_methods(self) -> list[str]:
        """Nomes dos payloads específicos preenchidos, na ordem do enum."""
        candidates = {
            "credit_card": self.credit_card,
            "debit_card": self.debit_card,
            "pix": self.pix,
            "boleto": self.boleto,
        }
        return [name for name, value in candidates.items() if value is not None]


__all__ = [
    "Boleto",
    "CardData",
    "CreditCard",
    "DebitCard",
    "PaymentSelection",
    "Pix",
]
