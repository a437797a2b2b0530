"""Erros e helpers de parsing para a API Pagar.me."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from app.protocols.gateway_client import GatewayError


@dataclass(frozen=True)
class PagarmeApiError:
    """Erro retornado pela API Pagar.me (status não-2xx)."""

    status_code: int
    message: str
    errors: dict[str, Any] = field(default_factory=dict)


def parse_pagarme_error(status_code: int, body: str) -> PagarmeApiError:
    """Extrai message/errors do body de erro.

    A Pagar.me responde `{"message": ..., "errors": {campo: [motivos]}}`;
    bodies não-JSON viram a própria mensagem.
    """
    try:
        data = json.loads(body) if body else {}
    except json.JSONDecodeError:
        return PagarmeApiError(status_code=status_code, message=body)

    if not isinstance(data, dict):
        return PagarmeApiError(status_code=status_code, message=body)

    errors = data.get("errors")
    return PagarmeApiError(
        status_code=status_code,
        message=str(data.get("message") or "Erro desconhecido"),
        errors=errors if isinstance(errors, dict) else {},
    )


def build_gateway_error(status_code: int, body: str) -> GatewayError:
    """GatewayError com o body repassado sem alteração."""
    return GatewayError(
        f"Erro na API Pagar.me [{status_code}]: {body}",
        status_code=status_code,
        body=body,
    )
