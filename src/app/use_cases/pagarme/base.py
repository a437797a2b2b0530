"""Conversão de exceções em PaymentOperationResult, com log sem PII."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.models import PaymentOperationResult

if TYPE_CHECKING:
    from app.protocols.gateway_client import GatewayError
    from app.protocols.validator import ValidationError

logger = logging.getLogger(__name__)


def validation_failure(exc: ValidationError, operation: str) -> PaymentOperationResult:
    logger.info(
        "payment_request_rejected",
        extra={"operation": operation, "error_code": exc.code},
    )
    return PaymentOperationResult(
        success=False,
        error_code="VALIDATION_ERROR",
        error_message=str(exc),
    )


def gateway_failure(exc: GatewayError, operation: str) -> PaymentOperationResult:
    logger.warning(
        "payment_gateway_failed",
        extra={"operation": operation, "status_code": exc.status_code},
    )
    return PaymentOperationResult(
        success=False,
        error_code="GATEWAY_ERROR",
        error_message=str(exc),
    )
