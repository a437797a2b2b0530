"""API: camada de borda: HTTP de entrada e gateway de saída.

Responsabilidades:
- Expor endpoints HTTP de pagamento (routes/)
- Validar requests de pagamento e planos de split (validators/)
- Construir payloads para as superfícies Pagar.me (payload_builders/)
- Chamar a API Pagar.me e mapear respostas (connectors/)

NÃO PODE conter: wiring de dependências ou orquestração de use cases.
"""
