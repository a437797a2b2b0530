"""Registro em memória de filiais (TenantKeyResolver).

Carregado uma vez a partir de FiliaisSettings e somente leitura depois.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.tenant_resolver import MissingTenantId, TenantNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.tenant import Filial

logger = logging.getLogger(__name__)


class FilialRegistry:
    """Resolve ID de filial (ou alias) para a filial com suas credenciais.

    A busca ignora maiúsculas/minúsculas: "minasgerais", "minasGerais" e o
    alias "minas-gerais" apontam para a mesma filial.
    """

    def __init__(self, filiais: Iterable[Filial]) -> None:
        self._filiais = tuple(filiais)
        self._index: dict[str, Filial] = {}
        for filial in self._filiais:
            for key in (filial.id, *filial.aliases):
                self._index[key.strip().lower()] = filial

    def resolve(self, tenant_id: str | None) -> Filial:
        """Retorna a filial com chave secreta configurada.

        Raises:
            MissingTenantId: ID vazio
            TenantNotFoundError: Filial desconhecida ou sem chave
        """
        if not tenant_id or not tenant_id.strip():
            raise MissingTenantId("ID da filial é obrigatório")

        filial = self._index.get(tenant_id.strip().lower())
        if filial is None or not filial.secret_key:
            logger.info("tenant_not_resolved", extra={"tenant_id": tenant_id})
            raise TenantNotFoundError(
                f"Filial não encontrada ou sem chave configurada: {tenant_id}"
            )
        return filial

    def list_filiais(self) -> list[Filial]:
        return list(self._filiais)
