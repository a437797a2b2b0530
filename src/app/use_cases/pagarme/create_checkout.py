"""Use case do checkout legado.

Filial é opcional: sem ela, usa a chave global PAGARME_API_KEY.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.constants.pagarme import PAYMENT_LINKS_PATH
from app.protocols.gateway_client import GatewayError
from app.protocols.models import CreatePaymentLinkRequest, PaymentOperationResult
from app.protocols.tenant_resolver import MissingTenantId
from app.protocols.validator import ValidationError
from app.use_cases.pagarme.base import gateway_failure, validation_failure

if TYPE_CHECKING:
    from app.protocols.gateway_client import GatewayClientProtocol
    from app.protocols.payload_builder import PayloadAdapterProtocol
    from app.protocols.tenant_resolver import TenantKeyResolverProtocol
    from app.protocols.validator import PaymentRequestValidatorProtocol

logger = logging.getLogger(__name__)


class CreateCheckoutUseCase:
    """Checkout simplificado (PIX, boleto e cartão) com split percentual."""

    def __init__(
        self,
        tenant_resolver: TenantKeyResolverProtocol,
        validator: PaymentRequestValidatorProtocol,
        builder: PayloadAdapterProtocol,
        gateway: GatewayClientProtocol,
        default_secret_key: str = "",
    ) -> None:
        self._tenant_resolver = tenant_resolver
        self._validator = validator
        self._builder = builder
        self._gateway = gateway
        self._default_secret_key = default_secret_key

    def _resolve_secret_key(self, filial_id: str | None) -> str:
        if filial_id and filial_id.strip():
            return self._tenant_resolver.resolve(filial_id).secret_key
        if not self._default_secret_key:
            raise MissingTenantId("ID da filial é obrigatório (PAGARME_API_KEY não configurada)")
        return self._default_secret_key

    async def execute(self, request: CreatePaymentLinkRequest) -> PaymentOperationResult:
        try:
            secret_key = self._resolve_secret_key(request.filial_id)
            self._validator.validate_checkout_request(request)
            payload = self._builder.build(request)
        except ValidationError as exc:
            return validation_failure(exc, "create_checkout")

        try:
            link = await self._gateway.send(PAYMENT_LINKS_PATH, payload, secret_key=secret_key)
        except GatewayError as exc:
            return gateway_failure(exc, "create_checkout")

        logger.info(
            "checkout_created",
            extra={"filial_id": request.filial_id, "link_id": link.get("id")},
        )
        return PaymentOperationResult(success=True, data=link)
