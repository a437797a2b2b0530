"""Agregador de settings do split-pagarme.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.filiais import (
    FiliaisConfigError,
    FiliaisSettings,
    get_filiais_settings,
    load_filiais_settings,
)
from config.settings.pagarme import (
    PAGARME_API_BASE_URL,
    PagarmeSettings,
    get_pagarme_settings,
)

__all__ = [
    "PAGARME_API_BASE_URL",
    "BaseSettings",
    "Environment",
    "FiliaisConfigError",
    "FiliaisSettings",
    "PagarmeSettings",
    "get_base_settings",
    "get_filiais_settings",
    "get_pagarme_settings",
    "load_filiais_settings",
]
