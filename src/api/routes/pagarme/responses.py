"""Envelope de resposta das rotas de pagamento.

Sucesso: 200 com o resultado mapeado.
Falha: {"success": false, "error": <mensagem>} com 400 (validação)
ou 502 (gateway).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import status
from fastapi.responses import JSONResponse

from config.logging import get_logger

if TYPE_CHECKING:
    from fastapi import Request
    from fastapi.exceptions import RequestValidationError

    from app.protocols.models import PaymentOperationResult

logger = get_logger(__name__)

_STATUS_BY_ERROR_CODE = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "GATEWAY_ERROR": status.HTTP_502_BAD_GATEWAY,
}


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        content={"success": False, "error": message},
        status_code=status_code,
    )


def failure_response(result: PaymentOperationResult) -> JSONResponse:
    status_code = _STATUS_BY_ERROR_CODE.get(
        result.error_code or "",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    return error_response(result.error_message or "Erro desconhecido", status_code)


def success_response(content: dict[str, Any]) -> JSONResponse:
    return JSONResponse(content=content, status_code=status.HTTP_200_OK)


def _describe_schema_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        parts.append(f"{loc}: {error.get('msg')}" if loc else str(error.get("msg")))
    return "Requisição inválida: " + "; ".join(parts)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Rejeição de schema no mesmo envelope das falhas de validação (400).

    Só os caminhos dos campos são logados, nunca os valores recebidos.
    """
    logger.warning(
        "request_schema_rejected",
        extra={
            "path": request.url.path,
            "fields": [".".join(map(str, e.get("loc", ()))) for e in exc.errors()],
        },
    )
    return error_response(_describe_schema_errors(exc), status.HTTP_400_BAD_REQUEST)
