"""Modelos de cliente, endereço e entrega."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_CAMEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    extra="ignore",
)


class Address(BaseModel):
    """Endereço no formato Pagar.me (line_1: número, rua, bairro)."""

    model_config = _CAMEL_CONFIG

    country: str | None = Field(None, description="Ex: BR")
    state: str | None = Field(None, description="Ex: SP")
    city: str | None = None
    zip_code: str | None = Field(None, description="Apenas números.")
    line_1: str | None = None
    line_2: str | None = Field(None, description="Complemento.")


class Customer(BaseModel):
    """Dados de um novo cliente enviados junto ao pedido."""

    model_config = _CAMEL_CONFIG

    name: str | None = None
    email: str | None = None
    type: str | None = Field(None, description="individual ou company")
    document: str | None = Field(None, description="CPF/CNPJ/passaporte")
    document_type: str | None = Field(None, description="CPF, CNPJ ou PASSPORT")
    code: str | None = None
    gender: str | None = Field(None, description="male ou female")
    birthdate: str | None = None
    address: Address | None = None
    phones: dict[str, Any] | None = None
    metadata: dict[str, str] | None = None


class Shipping(BaseModel):
    """Dados de entrega (valor em centavos)."""

    model_config = _CAMEL_CONFIG

    amount: int | None = Field(None, ge=0)
    description: str | None = None
    recipient_name: str | None = None
    recipient_phone: str | None = None
    address: Address | None = None


__all__ = ["Address", "Customer", "Shipping"]
