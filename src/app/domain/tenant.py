"""Modelos de filial (tenant) e recebedores cadastrados."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Recebedor:
    """Recebedor registrado na Pagar.me para uma filial."""

    id: str
    nome: str
    liable: bool = False

    def as_dict(self) -> dict[str, Any]:
        return {"id": self.id, "nome": self.nome, "liable": self.liable}


@dataclass(frozen=True, slots=True)
class Filial:
    """Filial com credenciais próprias na Pagar.me.

    Attributes:
        id: Identificador canônico (ex: "brauna")
        nome: Nome de exibição
        secret_key: Chave secreta (sk_*). Nunca exposta em respostas/logs.
        public_key: Chave pública (pk_*), usada pelo front para tokenização
        recebedores: Recebedores disponíveis para split
        aliases: Outros identificadores aceitos (ex: "minas-gerais")
    """

    id: str
    nome: str
    secret_key: str = field(repr=False)
    public_key: str = ""
    recebedores: tuple[Recebedor, ...] = ()
    aliases: tuple[str, ...] = ()

    def public_view(self) -> dict[str, Any]:
        """Representação sem segredo para listagem."""
        return {
            "nome": self.nome,
            "publicKey": self.public_key,
            "recebedores": [r.as_dict() for r in self.recebedores],
        }


__all__ = ["Filial", "Recebedor"]
