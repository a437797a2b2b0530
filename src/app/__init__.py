"""App: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso de pagamento (sem IO direto)
- domain/: modelos de split, carrinho, pagamento, cliente e filial
- infra/: implementações concretas de IO (HTTP, secrets, filiais)
- protocols/: contratos/interfaces entre app e api
- observability/: correlation_id por request
- constants/: enums e constantes da Pagar.me

Padrão: app executa; api adapta.
"""
