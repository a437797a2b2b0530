"""Settings específicas da Pagar.me (core v5).

As chaves secretas por filial ficam em config.settings.filiais; aqui
ficam a URL base, o timeout e a chave global do checkout legado.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

PAGARME_API_BASE_URL: str = "https://api.pagar.me/core/v5"


@dataclass(frozen=True)
class PagarmeSettings:
    """Configurações da integração Pagar.me.

    Attributes:
        api_base_url: URL base da API (core v5)
        api_key: Chave secreta global, usada pelo checkout sem filial
        request_timeout_seconds: Timeout por chamada (sem retry)
    """

    api_base_url: str = PAGARME_API_BASE_URL
    api_key: str = field(default="", repr=False)
    request_timeout_seconds: float = 30.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas da Pagar.me.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append("PAGARME_BASE_URL deve ser uma URL http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("PAGARME_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> PagarmeSettings:
    """Carrega PagarmeSettings a partir de variáveis de ambiente."""
    return PagarmeSettings(
        api_base_url=os.getenv("PAGARME_BASE_URL", PAGARME_API_BASE_URL).rstrip("/"),
        api_key=os.getenv("PAGARME_API_KEY", ""),
        request_timeout_seconds=float(os.getenv("PAGARME_REQUEST_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_pagarme_settings() -> PagarmeSettings:
    """Retorna instância cacheada de PagarmeSettings."""
    return _load_from_env()
