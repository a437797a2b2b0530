"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_create_order_use_case

    # Na inicialização do serviço
    initialize_app()

    # Obter use cases (singletons)
    use_case = get_create_order_use_case()
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    FiliaisConfigError,
    get_base_settings,
    get_filiais_settings,
    get_pagarme_settings,
)

if TYPE_CHECKING:
    from app.infra.tenants import FilialRegistry
    from app.protocols.gateway_client import GatewayClientProtocol
    from app.use_cases.pagarme import (
        CreateCheckoutUseCase,
        CreateOrderUseCase,
        CreatePaymentLinkUseCase,
        ManageCustomersUseCase,
    )

# Nome do serviço para logs
SERVICE_NAME = "split_pagarme"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.
    Configura logging estruturado JSON com correlation_id.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (logging DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    environment = os.getenv("ENVIRONMENT", "development").lower()
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in get_base_settings().validate())
    errors.extend(f"pagarme: {error}" for error in get_pagarme_settings().validate())

    try:
        filiais_errors = get_filiais_settings().validate()
    except FiliaisConfigError as exc:
        filiais_errors = [str(exc)]
    errors.extend(f"filiais: {error}" for error in filiais_errors)

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_tenant_registry() -> FilialRegistry:
    """Obtém registro de filiais (singleton, somente leitura)."""
    from app.bootstrap.pagarme_factory import create_tenant_registry

    return create_tenant_registry()


@lru_cache(maxsize=1)
def get_gateway_client() -> GatewayClientProtocol:
    from app.bootstrap.pagarme_factory import create_gateway_client

    return create_gateway_client()


@lru_cache(maxsize=1)
def get_create_order_use_case() -> CreateOrderUseCase:
    from app.bootstrap.pagarme_factory import create_order_use_case

    return create_order_use_case(get_tenant_registry(), get_gateway_client())


@lru_cache(maxsize=1)
def get_create_payment_link_use_case() -> CreatePaymentLinkUseCase:
    from app.bootstrap.pagarme_factory import create_payment_link_use_case

    return create_payment_link_use_case(get_tenant_registry(), get_gateway_client())


@lru_cache(maxsize=1)
def get_create_checkout_use_case() -> CreateCheckoutUseCase:
    from app.bootstrap.pagarme_factory import create_checkout_use_case

    return create_checkout_use_case(get_tenant_registry(), get_gateway_client())


@lru_cache(maxsize=1)
def get_customers_use_case() -> ManageCustomersUseCase:
    from app.bootstrap.pagarme_factory import create_customers_use_case

    return create_customers_use_case(get_tenant_registry(), get_gateway_client())
