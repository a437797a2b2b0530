"""Cliente HTTP base para conectores da camada API.

Uma única tentativa por chamada: o gateway de pagamento é chamado no
máximo uma vez por request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    base_url: str = ""
    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Erro de transporte HTTP sem dados sensíveis."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples para chamadas externas."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa a requisição e devolve a resposta já lida.

        Status não-2xx não levanta aqui: a interpretação é do conector.

        Raises:
            HttpError: Timeout ou falha de conexão
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                base_url=self._config.base_url,
                verify=self._config.verify_ssl,
                transport=self._config.transport,
                timeout=self._config.timeout_seconds,
            ) as client:
                return await client.request(
                    method,
                    path,
                    json=json,
                    params=params,
                    headers=merged_headers,
                )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"method": method, "path": path})
            raise HttpError("http_timeout") from exc
        except httpx.TransportError as exc:
            logger.warning("http_connection_error", extra={"method": method, "path": path})
            raise HttpError("http_connection_error") from exc
