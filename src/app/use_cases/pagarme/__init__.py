"""Use cases de pagamento Pagar.me."""

from app.use_cases.pagarme.create_checkout import CreateCheckoutUseCase
from app.use_cases.pagarme.create_order import CreateOrderUseCase
from app.use_cases.pagarme.create_payment_link import CreatePaymentLinkUseCase
from app.use_cases.pagarme.manage_customers import ManageCustomersUseCase

__all__ = [
    "CreateCheckoutUseCase",
    "CreateOrderUseCase",
    "CreatePaymentLinkUseCase",
    "ManageCustomersUseCase",
]
