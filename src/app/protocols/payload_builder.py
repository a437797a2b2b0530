"""Protocolos de construção de payload para o gateway."""

from __future__ import annotations

from typing import Any, Protocol


class PayloadAdapterProtocol(Protocol):
    """Projeta o request canônico no schema de uma superfície upstream.

    Implementações são funções puras das entradas: sem IO, sem estado.
    """

    def build(self, request: Any) -> dict[str, Any]: ...
