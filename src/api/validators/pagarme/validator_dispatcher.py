"""Validador principal de requests Pagar.me.

Roteia para validadores especializados conforme a superfície e define
o total esperado pelo split em modo flat:
- Orders: amount declarado ou total do carrinho
- Payment Links: total computado (amount explícito ou soma dos itens)
- Checkout legado: sempre percentual, total não se aplica
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.validators.pagarme.customer import (
    validate_customer_identity,
    validate_customer_request,
)
from api.validators.pagarme.errors import MissingCartData, MissingCustomerName
from api.validators.pagarme.payment import validate_payment_selection
from api.validators.pagarme.split import SplitValidator
from app.constants.pagarme import SplitMode

if TYPE_CHECKING:
    from app.domain.cart import CartModel
    from app.protocols.models import (
        CreateOrderRequest,
        CreatePaymentLinkRequest,
        CustomerRequest,
    )


class PagarmeRequestValidator:
    """Validador de requests para as superfícies Pagar.me.

    Fail-fast: o primeiro erro encontrado é levantado.
    """

    def __init__(self, split_validator: SplitValidator | None = None) -> None:
        self._split_validator = split_validator or SplitValidator()

    def validate_order_request(self, request: CreateOrderRequest) -> None:
        """Valida pedido completo antes do build.

        Raises:
            ValidationError: Se request inválido
        """
        validate_customer_identity(request.customer, request.customer_id)
        if request.customer is not None and not (request.customer.name or "").strip():
            raise MissingCustomerName("Nome do cliente é obrigatório")

        validate_payment_selection(request.payment_selection())

        cart = request.cart()
        _require_cart(cart)
        expected = request.amount if request.amount is not None else cart.total
        self._split_validator.validate(request.split_plan(), expected)

    def validate_payment_link_request(self, request: CreatePaymentLinkRequest) -> None:
        _require_cart(request.cart())
        self._split_validator.validate(request.split_plan(), request.computed_total())

    def validate_checkout_request(self, request: CreatePaymentLinkRequest) -> None:
        _require_cart(request.cart())
        plan = request.split_plan().with_mode(SplitMode.PERCENTAGE)
        self._split_validator.validate(plan)

    def validate_customer_request(
        self,
        request: CustomerRequest,
        customer_id: str | None = None,
    ) -> None:
        validate_customer_request(request, customer_id)


def _require_cart(cart: CartModel) -> None:
    if cart.is_empty:
        raise MissingCartData("Items ou amount deve ser informado")
