"""Factory de wiring para Pagar.me (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.pagarme import create_pagarme_http_client
from api.payload_builders.pagarme import CustomerPayloadBuilder, get_payload_adapter
from api.validators.pagarme import PagarmeRequestValidator
from app.constants.pagarme import PaymentSurface
from app.infra.tenants import FilialRegistry
from app.use_cases.pagarme import (
    CreateCheckoutUseCase,
    CreateOrderUseCase,
    CreatePaymentLinkUseCase,
    ManageCustomersUseCase,
)
from config.settings import get_filiais_settings, get_pagarme_settings

if TYPE_CHECKING:
    from app.protocols.gateway_client import GatewayClientProtocol
    from app.protocols.tenant_resolver import TenantKeyResolverProtocol


def create_tenant_registry() -> FilialRegistry:
    """Cria registro de filiais a partir do YAML + env."""
    return FilialRegistry(get_filiais_settings().filiais)


def create_gateway_client() -> GatewayClientProtocol:
    return create_pagarme_http_client(get_pagarme_settings())


def create_order_use_case(
    tenant_resolver: TenantKeyResolverProtocol,
    gateway: GatewayClientProtocol,
) -> CreateOrderUseCase:
    """Cria use case de pedido com dependências injetadas."""
    return CreateOrderUseCase(
        tenant_resolver=tenant_resolver,
        validator=PagarmeRequestValidator(),
        builder=get_payload_adapter(PaymentSurface.ORDER),
        gateway=gateway,
    )


def create_payment_link_use_case(
    tenant_resolver: TenantKeyResolverProtocol,
    gateway: GatewayClientProtocol,
) -> CreatePaymentLinkUseCase:
    return CreatePaymentLinkUseCase(
        tenant_resolver=tenant_resolver,
        validator=PagarmeRequestValidator(),
        builder=get_payload_adapter(PaymentSurface.PAYMENT_LINK),
        gateway=gateway,
    )


def create_checkout_use_case(
    tenant_resolver: TenantKeyResolverProtocol,
    gateway: GatewayClientProtocol,
) -> CreateCheckoutUseCase:
    """Checkout legado usa PAGARME_API_KEY quando não há filial."""
    return CreateCheckoutUseCase(
        tenant_resolver=tenant_resolver,
        validator=PagarmeRequestValidator(),
        builder=get_payload_adapter(PaymentSurface.CHECKOUT),
        gateway=gateway,
        default_secret_key=get_pagarme_settings().api_key,
    )


def create_customers_use_case(
    tenant_resolver: TenantKeyResolverProtocol,
    gateway: GatewayClientProtocol,
) -> ManageCustomersUseCase:
    return ManageCustomersUseCase(
        tenant_resolver=tenant_resolver,
        validator=PagarmeRequestValidator(),
        builder=CustomerPayloadBuilder(),
        gateway=gateway,
    )
