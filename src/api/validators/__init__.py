"""Validators: validação de requests antes do build de payload.

Estrutura:
- pagarme/: split, método de pagamento, cliente e carrinho
"""

__all__: list[str] = []
