"""Connectors: adapters HTTP para gateways externos.

Estrutura:
- pagarme/: API Pagar.me core v5 (orders, paymentlinks, customers)
"""

__all__: list[str] = []
