"""Environment Secrets: provedor de secrets via variáveis de ambiente.

Usado para as chaves secretas (sk_*) das filiais e a chave global
do checkout legado.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


class EnvSecretProvider:
    """Provedor de secrets usando variáveis de ambiente.

    Args:
        prefix: Prefixo para variáveis de ambiente (default: "")
    """

    def __init__(self, prefix: str = "") -> None:
        self._prefix = prefix.upper().rstrip("_") + "_" if prefix else ""

    def _env_key(self, key: str) -> str:
        """Converte nome de secret para variável de ambiente."""
        # brauna-secret-key -> FILIAL_BRAUNA_SECRET_KEY
        env_key = key.upper().replace("-", "_")
        return f"{self._prefix}{env_key}"

    def get(self, key: str, default: str | None = None) -> str | None:
        """Obtém secret de variável de ambiente.

        Args:
            key: Nome do secret (ex.: brauna-secret-key)
            default: Valor padrão

        Returns:
            Valor ou default
        """
        env_key = self._env_key(key)
        value = os.getenv(env_key)
        if value is None:
            logger.debug("env_secret_not_found", extra={"env_key": env_key})
            return default
        return value

    def require(self, key: str) -> str:
        """Obtém secret obrigatório de variável de ambiente.

        Raises:
            ValueError: Se variável não definida
        """
        value = self.get(key)
        if value is None:
            env_key = self._env_key(key)
            msg = f"Variável de ambiente obrigatória não definida: {env_key}"
            raise ValueError(msg)
        return value
