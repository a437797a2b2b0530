"""Cliente HTTP especializado para a API Pagar.me (core v5).

Estende HttpClient genérico com comportamentos específicos da Pagar.me:
- Autenticação Basic com a chave secreta da filial (secret_key + ":")
- Uma única tentativa por chamada (pagamento não é retentado)
- Status não-2xx vira GatewayError com o body repassado sem alteração
- Logging estruturado sem PII (chaves, documentos, dados de cartão)
"""

from __future__ import annotations

import base64
import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.pagarme.errors import build_gateway_error, parse_pagarme_error
from api.connectors.pagarme.pagarme_logging import log_pagarme_error, log_success
from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.protocols.gateway_client import GatewayError

if TYPE_CHECKING:
    import httpx

    from config.settings import PagarmeSettings

logger: logging.Logger = logging.getLogger(__name__)


def basic_auth_header(secret_key: str) -> str:
    """Header Authorization no formato exigido pela Pagar.me."""
    credentials = f"{secret_key}:".encode()
    return "Basic " + base64.b64encode(credentials).decode("ascii")


class PagarmeHttpClient(HttpClient):
    """Implementação de GatewayClientProtocol para a Pagar.me."""

    async def send(
        self,
        path: str,
        payload: dict[str, Any] | None,
        *,
        secret_key: str,
        method: str = "POST",
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Envia request autenticado e devolve o JSON da resposta.

        Args:
            path: Caminho relativo à base URL (ex: /orders)
            payload: Corpo JSON (None em GET)
            secret_key: Chave secreta (sk_*) da filial
            method: Método HTTP
            params: Query string

        Returns:
            JSON da resposta

        Raises:
            ValueError: Se secret_key está vazio
            GatewayError: Status não-2xx, falha de transporte ou JSON inválido
        """
        if not secret_key or not secret_key.strip():
            raise ValueError("secret_key é obrigatório para chamadas à Pagar.me")

        headers = {
            "Authorization": basic_auth_header(secret_key),
            "Content-Type": "application/json",
        }
        try:
            response = await self.request(
                method,
                path,
                json=payload,
                params=params,
                headers=headers,
            )
        except HttpError as exc:
            raise GatewayError(f"Erro na API Pagar.me: {exc}") from exc

        return self._process_response(response, method, path)

    def _process_response(
        self,
        response: httpx.Response,
        method: str,
        path: str,
    ) -> dict[str, Any]:
        if not response.is_success:
            log_pagarme_error(
                parse_pagarme_error(response.status_code, response.text),
                method,
                path,
            )
            raise build_gateway_error(response.status_code, response.text)

        try:
            data = response.json()
        except json.JSONDecodeError as exc:
            logger.error("pagarme_invalid_json", extra={"method": method, "path": path})
            raise GatewayError(
                "Resposta inválida da API Pagar.me",
                status_code=response.status_code,
                body=response.text,
            ) from exc

        log_success(method, path, response.status_code)
        return data if isinstance(data, dict) else {"data": data}


def create_pagarme_http_client(
    settings: PagarmeSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PagarmeHttpClient:
    """Factory para criar cliente Pagar.me com config padrão.

    Args:
        settings: PagarmeSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx alternativo (testes)
    """
    # Import local para evitar dependência circular
    from config.settings import get_pagarme_settings

    pagarme = settings or get_pagarme_settings()
    config = HttpClientConfig(
        base_url=pagarme.api_base_url,
        timeout_seconds=pagarme.request_timeout_seconds,
        transport=transport,
    )
    return PagarmeHttpClient(config=config)
