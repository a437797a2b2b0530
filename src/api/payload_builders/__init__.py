"""Payload builders: construção de payloads para gateways externos.

Estrutura:
- pagarme/: Orders, Payment Links, checkout legado e customers
"""

__all__: list[str] = []
