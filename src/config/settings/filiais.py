"""Settings de filiais (tenants) da Pagar.me.

A tabela de filiais vem de um YAML (FILIAIS_CONFIG_PATH, default o
filiais.yaml ao lado deste módulo). Chaves secretas nunca ficam no YAML:
são lidas de FILIAL_<ID>_SECRET_KEY via EnvSecretProvider.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from app.domain.tenant import Filial, Recebedor
from app.infra.secrets.env_secrets import EnvSecretProvider

logger = logging.getLogger(__name__)

DEFAULT_FILIAIS_CONFIG_PATH = Path(__file__).resolve().parent / "filiais.yaml"


class FiliaisConfigError(Exception):
    """YAML de filiais ausente ou mal-formado."""


@dataclass(frozen=True)
class FiliaisSettings:
    """Tabela de filiais carregada uma vez na inicialização.

    Attributes:
        config_path: Arquivo YAML de origem
        filiais: Filiais na ordem do arquivo
    """

    config_path: str = str(DEFAULT_FILIAIS_CONFIG_PATH)
    filiais: tuple[Filial, ...] = ()

    def validate(self) -> list[str]:
        """Valida que existe ao menos uma filial e que todas têm chave."""
        errors: list[str] = []

        if not self.filiais:
            errors.append(f"Nenhuma filial configurada em {self.config_path}")

        for filial in self.filiais:
            if not filial.secret_key:
                env_key = secret_env_key(filial.id)
                errors.append(f"{env_key} não configurado (filial {filial.id})")

        return errors


def secret_env_key(filial_id: str) -> str:
    """Nome da variável de ambiente com a chave secreta da filial."""
    return "FILIAL_" + filial_id.upper().replace("-", "_") + "_SECRET_KEY"


def _parse_recebedores(raw: Any, filial_id: str) -> tuple[Recebedor, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise FiliaisConfigError(f"recebedores da filial {filial_id} deve ser uma lista")
    return tuple(
        Recebedor(
            id=str(item["id"]),
            nome=str(item.get("nome", "")),
            liable=bool(item.get("liable", False)),
        )
        for item in raw
    )


def parse_filiais(data: Any, secrets: EnvSecretProvider | None = None) -> tuple[Filial, ...]:
    """Converte o conteúdo do YAML em filiais.

    Args:
        data: Conteúdo do YAML já decodificado
        secrets: Provedor das chaves secretas (default: env com prefixo FILIAL)

    Raises:
        FiliaisConfigError: Se a estrutura não for a esperada
    """
    if not isinstance(data, dict) or not isinstance(data.get("filiais"), dict):
        raise FiliaisConfigError("YAML de filiais deve conter o mapa 'filiais'")

    provider = secrets or EnvSecretProvider(prefix="FILIAL")
    filiais: list[Filial] = []
    for filial_id, raw in data["filiais"].items():
        if not isinstance(raw, dict):
            raise FiliaisConfigError(f"Filial {filial_id} mal-formada")
        filiais.append(
            Filial(
                id=str(filial_id),
                nome=str(raw.get("nome", filial_id)),
                secret_key=(provider.get(f"{filial_id}-secret-key", "") or "").strip(),
                public_key=str(raw.get("public_key", "")),
                recebedores=_parse_recebedores(raw.get("recebedores"), filial_id),
                aliases=tuple(str(alias) for alias in raw.get("aliases") or ()),
            )
        )
    return tuple(filiais)


def load_filiais_settings(path: str | Path | None = None) -> FiliaisSettings:
    """Lê o YAML de filiais.

    Raises:
        FiliaisConfigError: Se arquivo não existir ou YAML inválido
    """
    config_path = Path(path or os.getenv("FILIAIS_CONFIG_PATH") or DEFAULT_FILIAIS_CONFIG_PATH)
    if not config_path.exists():
        raise FiliaisConfigError(f"Arquivo de filiais não encontrado: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise FiliaisConfigError(f"YAML de filiais inválido: {config_path}") from exc

    filiais = parse_filiais(data)
    logger.info(
        "filiais_loaded",
        extra={"path": str(config_path), "filiais": [f.id for f in filiais]},
    )
    return FiliaisSettings(config_path=str(config_path), filiais=filiais)


@lru_cache(maxsize=1)
def get_filiais_settings() -> FiliaisSettings:
    """Retorna instância cacheada de FiliaisSettings."""
    return load_filiais_settings()
