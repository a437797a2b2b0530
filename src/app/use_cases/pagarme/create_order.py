"""Use case de criação de pedido (API de Orders)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.constants.pagarme import ORDERS_PATH
from app.protocols.gateway_client import GatewayError
from app.protocols.models import CreateOrderRequest, PaymentOperationResult
from app.protocols.validator import ValidationError
from app.use_cases.pagarme.base import gateway_failure, validation_failure

if TYPE_CHECKING:
    from app.protocols.gateway_client import GatewayClientProtocol
    from app.protocols.payload_builder import PayloadAdapterProtocol
    from app.protocols.tenant_resolver import TenantKeyResolverProtocol
    from app.protocols.validator import PaymentRequestValidatorProtocol

logger = logging.getLogger(__name__)


class CreateOrderUseCase:
    """Orquestra filial, validação, build e envio do pedido."""

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

    async def execute(self, request: CreateOrderRequest) -> PaymentOperationResult:
        """Cria o pedido. Nada é enviado se qualquer validação falhar."""
        try:
            filial = self._tenant_resolver.resolve(request.filial_id)
            self._validator.validate_order_request(request)
            payload = self._builder.build(request)
        except ValidationError as exc:
            return validation_failure(exc, "create_order")

        try:
            order = await self._gateway.send(ORDERS_PATH, payload, secret_key=filial.secret_key)
        except GatewayError as exc:
            return gateway_failure(exc, "create_order")

        logger.info(
            "order_created",
            extra={
                "filial_id": filial.id,
                "order_id": order.get("id"),
                "payment_method": request.payment_method,
                "split_rules": len(request.split or ()),
            },
        )
        return PaymentOperationResult(success=True, data=order)
