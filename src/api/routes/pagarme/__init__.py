"""Rotas HTTP de pagamento (Pagar.me)."""
