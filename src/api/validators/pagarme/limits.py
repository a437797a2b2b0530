"""Limites de validação de split e pagamento."""

from __future__ import annotations

# Soma exigida no modo percentage
PERCENTAGE_TOTAL = 100

# Faixa de cada regra no modo percentage (pontos percentuais inteiros)
MIN_PERCENTAGE = 1
MAX_PERCENTAGE = 100

# Valor mínimo de cada regra no modo flat (centavos)
MIN_FLAT_AMOUNT = 1
