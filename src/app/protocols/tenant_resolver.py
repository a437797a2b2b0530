"""Protocolo de resolução de filial (tenant) -> credenciais."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from .validator import ValidationError

if TYPE_CHECKING:
    from app.domain.tenant import Filial


class TenantNotFoundError(ValidationError):
    """Filial desconhecida ou sem chave configurada."""

    code = "TENANT_NOT_FOUND"


class TenantKeyResolverProtocol(Protocol):
    """Contrato mínimo para lookup de filial."""

    def resolve(self, tenant_id: str | None) -> Filial: ...

    def list_filiais(self) -> list[Filial]: ...


class MissingTenantId(ValidationError):
    """Request sem ID de filial onde ele é obrigatório."""

    code = "MISSING_TENANT_ID"
