"""Tenants: lookup de filiais e credenciais Pagar.me."""

from __future__ import annotations

from app.infra.tenants.registry import FilialRegistry

__all__ = ["FilialRegistry"]
