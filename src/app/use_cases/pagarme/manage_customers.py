"""Use case de clientes: criação, listagem e atualização."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from app.constants.pagarme import CUSTOMERS_PATH
from app.protocols.gateway_client import GatewayError
from app.protocols.models import (
    CustomerRequest,
    ListCustomersRequest,
    PaymentOperationResult,
)
from app.protocols.validator import ValidationError
from app.use_cases.pagarme.base import gateway_failure, validation_failure

if TYPE_CHECKING:
    from app.protocols.gateway_client import GatewayClientProtocol
    from app.protocols.tenant_resolver import TenantKeyResolverProtocol
    from app.protocols.validator import PaymentRequestValidatorProtocol

logger = logging.getLogger(__name__)


class CustomerBuilderProtocol(Protocol):
    def build(self, request: CustomerRequest) -> dict[str, Any]: ...

    def build_list_params(self, request: ListCustomersRequest) -> dict[str, Any]: ...


class ManageCustomersUseCase:
    """Operações de /customers com a chave da filial."""

    def __init__(
        self,
        tenant_resolver: TenantKeyResolverProtocol,
        validator: PaymentRequestValidatorProtocol,
        builder: CustomerBuilderProtocol,
        gateway: GatewayClientProtocol,
    ) -> None:
        self._tenant_resolver = tenant_resolver
        self._validator = validator
        self._builder = builder
        self._gateway = gateway

    async def create_customer(self, request: CustomerRequest) -> PaymentOperationResult:
        try:
            filial = self._tenant_resolver.resolve(request.filial_id)
            self._validator.validate_customer_request(request)
            payload = self._builder.build(request)
        except ValidationError as exc:
            return validation_failure(exc, "create_customer")

        try:
            customer = await self._gateway.send(
                CUSTOMERS_PATH,
                payload,
                secret_key=filial.secret_key,
            )
        except GatewayError as exc:
            return gateway_failure(exc, "create_customer")

        logger.info(
            "customer_created",
            extra={"filial_id": filial.id, "customer_id": customer.get("id")},
        )
        return PaymentOperationResult(success=True, data=customer)

    async def list_customers(self, request: ListCustomersRequest) -> PaymentOperationResult:
        try:
            filial = self._tenant_resolver.resolve(request.filial_id)
        except ValidationError as exc:
            return validation_failure(exc, "list_customers")

        try:
            customers = await self._gateway.send(
                CUSTOMERS_PATH,
                None,
                secret_key=filial.secret_key,
                method="GET",
                params=self._builder.build_list_params(request),
            )
        except GatewayError as exc:
            return gateway_failure(exc, "list_customers")

        return PaymentOperationResult(success=True, data=customers)

    async def update_customer(
        self,
        customer_id: str,
        request: CustomerRequest,
    ) -> PaymentOperationResult:
        try:
            filial = self._tenant_resolver.resolve(request.filial_id)
            self._validator.validate_customer_request(request, customer_id)
            payload = self._builder.build(request)
        except ValidationError as exc:
            return validation_failure(exc, "update_customer")

        try:
            customer = await self._gateway.send(
                f"{CUSTOMERS_PATH}/{customer_id.strip()}",
                payload,
                secret_key=filial.secret_key,
                method="PUT",
            )
        except GatewayError as exc:
            return gateway_failure(exc, "update_customer")

        logger.info(
            "customer_updated",
            extra={"filial_id": filial.id, "customer_id": customer_id},
        )
        return PaymentOperationResult(success=True, data=customer)
