"""Secrets: integração com provedores de segredos."""

from __future__ import annotations

from app.infra.secrets.env_secrets import EnvSecretProvider

__all__ = ["EnvSecretProvider"]
