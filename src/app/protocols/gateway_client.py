"""Protocolo do cliente do gateway de pagamento.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Any, Protocol


class GatewayError(Exception):
    """Falha do gateway: status não-2xx ou erro de transporte.

    O body é repassado sem alteração na mensagem para o chamador.
    """

    code = "GATEWAY_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class GatewayClientProtocol(Protocol):
    """Contrato mínimo para envio de payloads ao gateway (at-most-once)."""

    async def send(
        self,
        path: str,
        payload: dict[str, Any] | None,
        *,
        secret_key: str,
        method: str = "POST",
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]: ...
