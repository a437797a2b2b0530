"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (pagamentos, clientes, filiais, health)
- Delegação para use cases via app.bootstrap
- Envelope de resposta e status HTTP

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
