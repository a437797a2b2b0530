"""Helpers comuns dos payload builders Pagar.me."""

from __future__ import annotations

from typing import Any


def compact(data: dict[str, Any]) -> dict[str, Any]:
    """Remove chaves com valor None (campos opcionais não informados)."""
    return {key: value for key, value in data.items() if value is not None}
