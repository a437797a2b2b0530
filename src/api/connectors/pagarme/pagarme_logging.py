"""Helpers de logging para API Pagar.me (sem PII nem chaves)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import PagarmeApiError

logger = logging.getLogger(__name__)


def log_pagarme_error(
    api_error: PagarmeApiError,
    method: str,
    path: str,
) -> None:
    """Loga erro da Pagar.me sem expor o body (pode conter documento)."""
    logger.warning(
        "pagarme_api_error",
        extra={
            "method": method,
            "path": path,
            "status_code": api_error.status_code,
            "error_message": api_error.message,
            "error_fields": sorted(api_error.errors),
        },
    )


def log_success(
    method: str,
    path: str,
    status_code: int,
) -> None:
    logger.info(
        "pagarme_request_ok",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
        },
    )
