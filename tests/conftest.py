"""Configuração do pytest para o projeto split-pagarme."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings e singletons do bootstrap são cacheados por processo."""
    from app import bootstrap
    from config.settings import base, filiais, pagarme

    caches = (
        base.core.get_base_settings,
        filiais.get_filiais_settings,
        pagarme.get_pagarme_settings,
        bootstrap.get_tenant_registry,
        bootstrap.get_gateway_client,
        bootstrap.get_create_order_use_case,
        bootstrap.get_create_payment_link_use_case,
        bootstrap.get_create_checkout_use_case,
        bootstrap.get_customers_use_case,
    )
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()
