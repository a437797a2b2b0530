"""Use case de criação de Payment Link."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.constants.pagarme import PAYMENT_LINKS_PATH
from app.protocols.gateway_client import GatewayError
from app.protocols.models import CreatePaymentLinkRequest, PaymentOperationResult
from app.protocols.validator import ValidationError
from app.use_cases.pagarme.base import gateway_failure, validation_failure

if TYPE_CHECKING:
    from app.protocols.gateway_client import GatewayClientProtocol
    from app.protocols.payload_builder import PayloadAdapterProtocol
    from app.protocols.tenant_resolver import TenantKeyResolverProtocol
    from app.protocols.validator import PaymentRequestValidatorProtocol

logger = logging.getLogger(__name__)


class CreatePaymentLinkUseCase:
    """Gera link de checkout hospedado com split opcional."""

    def __init__(
        self,
        tenant_resolver: TenantKeyResolverProtocol,
        validator: PaymentRequestValidatorProtocol,
        builder: PayloadAdapterProtocol,
        gateway: GatewayClientProtocol,
    ) -> None:
        self._tenant_resolver = tenant_resolver
        self._validator = validator
        self._builder = builder
        self._gateway = gateway

    async def execute(self, request: CreatePaymentLinkRequest) -> PaymentOperationResult:
        try:
            filial = self._tenant_resolver.resolve(request.filial_id)
            self._validator.validate_payment_link_request(request)
            payload = self._builder.build(request)
        except ValidationError as exc:
            return validation_failure(exc, "create_payment_link")

        try:
            link = await self._gateway.send(
                PAYMENT_LINKS_PATH,
                payload,
                secret_key=filial.secret_key,
            )
        except GatewayError as exc:
            return gateway_failure(exc, "create_payment_link")

        logger.info(
            "payment_link_created",
            extra={"filial_id": filial.id, "link_id": link.get("id")},
        )
        return PaymentOperationResult(success=True, data=link)
