"""Protocolos e contratos do core da aplicação."""

from .gateway_client import GatewayClientProtocol, GatewayError
from .models import (
    CreateOrderRequest,
    CreatePaymentLinkRequest,
    CustomerRequest,
    ListCustomersRequest,
    PaymentOperationResult,
)
from .payload_builder import PayloadAdapterProtocol
from .tenant_resolver import MissingTenantId, TenantKeyResolverProtocol, TenantNotFoundError
from .validator import PaymentRequestValidatorProtocol, ValidationError

__all__ = [
    "CreateOrderRequest",
    "CreatePaymentLinkRequest",
    "CustomerRequest",
    "GatewayClientProtocol",
    "GatewayError",
    "ListCustomersRequest",
    "MissingTenantId",
    "PayloadAdapterProtocol",
    "PaymentOperationResult",
    "PaymentRequestValidatorProtocol",
    "TenantKeyResolverProtocol",
    "TenantNotFoundError",
    "ValidationError",
]
