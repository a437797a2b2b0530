"""Testes do FilialRegistry (resolução de tenant)."""

from __future__ import annotations

import pytest

from app.domain.tenant import Filial, Recebedor
from app.infra.tenants import FilialRegistry
from app.protocols.tenant_resolver import MissingTenantId, TenantNotFoundError


@pytest.fixture
def registry() -> FilialRegistry:
    return FilialRegistry(
        [
            Filial(
                id="brauna",
                nome="Villaggio Braúna",
                secret_key="sk_brauna",
                public_key="pk_brauna",
                recebedores=(Recebedor(id="rp_1", nome="Loja", liable=True),),
            ),
            Filial(
                id="minasGerais",
                nome="Villaggio Minas Gerais",
                secret_key="sk_minas",
                aliases=("minas-gerais",),
            ),
            Filial(id="semChave", nome="Sem chave", secret_key=""),
        ]
    )


class TestFilialRegistry:
    """Busca por id e aliases, sem diferenciar caixa."""

    def test_resolves_by_id(self, registry: FilialRegistry) -> None:
        assert registry.resolve("brauna").secret_key == "sk_brauna"

    @pytest.mark.parametrize(
        "tenant_id",
        ["minasGerais", "minasgerais", "MINAS-GERAIS", " minas-gerais "],
    )
    def test_resolves_case_insensitive_and_aliases(
        self, registry: FilialRegistry, tenant_id: str
    ) -> None:
        assert registry.resolve(tenant_id).id == "minasGerais"

    def test_unknown_tenant(self, registry: FilialRegistry) -> None:
        with pytest.raises(TenantNotFoundError, match="Filial não encontrada"):
            registry.resolve("saoPaulo")

    def test_tenant_without_secret_is_not_found(self, registry: FilialRegistry) -> None:
        with pytest.raises(TenantNotFoundError):
            registry.resolve("semChave")

    @pytest.mark.parametrize("tenant_id", [None, "", "  "])
    def test_missing_tenant_id(self, registry: FilialRegistry, tenant_id: str | None) -> None:
        with pytest.raises(MissingTenantId):
            registry.resolve(tenant_id)

    def test_list_filiais_keeps_order(self, registry: FilialRegistry) -> None:
        assert [f.id for f in registry.list_filiais()] == ["brauna", "minasGerais", "semChave"]

    def test_public_view_hides_secret(self, registry: FilialRegistry) -> None:
        view = registry.resolve("brauna").public_view()

        assert view == {
            "nome": "Villaggio Braúna",
            "publicKey": "pk_brauna",
            "recebedores": [{"id": "rp_1", "nome": "Loja", "liable": True}],
        }
        assert "sk_brauna" not in repr(registry.resolve("brauna"))
