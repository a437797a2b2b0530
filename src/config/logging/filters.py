"""Filters de logging para injeção de contexto e mascaramento.

- CorrelationIdFilter: adiciona correlation_id e service
- SensitiveDataFilter: mascara chaves sk_* e números de cartão na mensagem
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

_SECRET_KEY_PATTERN = re.compile(r"\bsk_\w+")
_CARD_NUMBER_PATTERN = re.compile(r"\b\d{13,19}\b")

MASK = "***"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


def mask_sensitive(text: str) -> str:
    """Substitui chaves secretas e sequências com cara de PAN por MASK."""
    text = _SECRET_KEY_PATTERN.sub(MASK, text)
    return _CARD_NUMBER_PATTERN.sub(MASK, text)


class SensitiveDataFilter(logging.Filter):
    """Mascara dados sensíveis na mensagem final do record.

    Atua sobre a mensagem já interpolada: os args são consumidos aqui.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = mask_sensitive(message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True
