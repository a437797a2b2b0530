"""Testes dos payload builders Pagar.me (Orders, Payment Links, checkout)."""

from __future__ import annotations

import pytest

from api.payload_builders.pagarme import (
    CheckoutPayloadBuilder,
    CustomerPayloadBuilder,
    OrderPayloadBuilder,
    PaymentLinkPayloadBuilder,
    build_list_customers_params,
    build_split_rules,
    cart_total,
    derive_fee_flags,
    get_payload_adapter,
    project_cart,
)
from api.payload_builders.pagarme.payment_link import statement_descriptor
from api.validators.pagarme import MissingCartData, PagarmeRequestValidator
from api.validators.pagarme.errors import UnknownPaymentMethod
from app.constants.pagarme import PaymentSurface, SplitMode
from app.domain.cart import CartItem, CartModel
from app.domain.split import SplitPlan, SplitRule
from app.protocols.models import (
    CreateOrderRequest,
    CreatePaymentLinkRequest,
    CustomerRequest,
    ListCustomersRequest,
)

SCENARIO_A_SPLIT = [
    {"recipientId": "rp_1", "amount": 90, "liable": True},
    {"recipientId": "rp_2", "amount": 10, "liable": False},
]


def _order(**overrides: object) -> CreateOrderRequest:
    data: dict[str, object] = {
        "customerId": "cus_123",
        "paymentMethod": "pix",
        "amount": 10000,
        "items": [{"name": "Camisa", "amount": 5000, "defaultQuantity": 2, "code": "sku-1"}],
    }
    data.update(overrides)
    return CreateOrderRequest.model_validate(data)


class TestCartProjector:
    """Normalização do carrinho."""

    def test_defaults_applied(self) -> None:
        cart = CartModel(items=(CartItem(name="Camisa", amount=1500),))

        [item] = project_cart(cart)

        assert item.description == "Camisa"
        assert item.quantity == 1
        assert item.code
        assert item.subtotal == 1500

    def test_explicit_values_kept(self) -> None:
        cart = CartModel(
            items=(
                CartItem(name="Camisa", description="Azul", amount=1500, quantity=3, code="c1"),
            )
        )

        [item] = project_cart(cart)

        assert (item.description, item.quantity, item.code) == ("Azul", 3, "c1")

    def test_generated_codes_are_unique(self) -> None:
        cart = CartModel(items=(CartItem(amount=100), CartItem(amount=200)))

        first, second = project_cart(cart)

        assert first.code != second.code
        assert first.description == ""

    def test_fallback_item(self) -> None:
        [item] = project_cart(CartModel(fallback_amount=5000))

        assert item.name == "Pagamento"
        assert item.description == "Pagamento"
        assert item.amount == 5000
        assert item.quantity == 1
        assert item.code == "item-1"

    def test_empty_cart_without_fallback_fails(self) -> None:
        with pytest.raises(MissingCartData) as exc_info:
            project_cart(CartModel())
        assert str(exc_info.value) == "Items ou amount deve ser informado"

    def test_cart_total(self) -> None:
        cart = CartModel(
            items=(CartItem(amount=1000, quantity=2), CartItem(amount=500)),
            fallback_amount=99999,
        )
        assert cart_total(cart) == 2500
        assert cart_total(CartModel(fallback_amount=700)) == 700

    def test_cart_total_empty_fails(self) -> None:
        with pytest.raises(MissingCartData):
            cart_total(CartModel())


class TestSplitRules:
    """Projeção de regras e política de taxas."""

    def test_fee_flags_follow_liable(self) -> None:
        liable = derive_fee_flags(SplitRule(recipient_id="rp_1", amount=50, liable=True))
        other = derive_fee_flags(SplitRule(recipient_id="rp_2", amount=50, liable=False))

        assert liable.charge_processing_fee is True
        assert liable.charge_remainder_fee is True
        assert other.charge_processing_fee is False
        assert other.charge_remainder_fee is False

    def test_rule_shape(self) -> None:
        plan = SplitPlan.from_rules(
            [SplitRule(recipient_id="rp_1", amount=3000, mode=SplitMode.FLAT, liable=True)]
        )

        assert build_split_rules(plan) == [
            {
                "amount": 3000,
                "type": "flat",
                "recipient_id": "rp_1",
                "options": {
                    "liable": True,
                    "charge_processing_fee": True,
                    "charge_remainder_fee": True,
                },
            }
        ]

    def test_force_mode(self) -> None:
        plan = SplitPlan.from_rules(
            [SplitRule(recipient_id="rp_1", amount=100, mode=SplitMode.FLAT, liable=True)]
        )
        [rule] = build_split_rules(plan, force_mode=SplitMode.PERCENTAGE)
        assert rule["type"] == "percentage"

    def test_empty_plan(self) -> None:
        assert build_split_rules(SplitPlan()) == []


class TestOrderPayloadBuilder:
    """Payload de POST /orders."""

    def test_scenario_liable_flags_in_payment_split(self) -> None:
        request = _order(split=SCENARIO_A_SPLIT)
        PagarmeRequestValidator().validate_order_request(request)

        payload = OrderPayloadBuilder().build(request)

        rp_1, rp_2 = payload["payments"][0]["split"]
        assert rp_1["recipient_id"] == "rp_1"
        assert rp_1["options"]["charge_processing_fee"] is True
        assert rp_2["options"]["charge_processing_fee"] is False
        assert "split" not in payload

    def test_payload_shape_pix(self) -> None:
        payload = OrderPayloadBuilder().build(_order(code="pedido-42"))

        assert payload["code"] == "pedido-42"
        assert payload["customer_id"] == "cus_123"
        assert "customer" not in payload
        assert payload["items"] == [
            {"amount": 5000, "description": "Camisa", "quantity": 2, "code": "sku-1"}
        ]
        assert payload["payments"] == [{"payment_method": "pix", "pix": {"expires_in": 86400}}]
        assert payload["closed"] is True

    def test_closed_false_and_metadata(self) -> None:
        payload = OrderPayloadBuilder().build(
            _order(closed=False, metadata={"origem": "site"})
        )
        assert payload["closed"] is False
        assert payload["metadata"] == {"origem": "site"}

    def test_inline_customer_and_shipping(self) -> None:
        request = _order(
            customerId=None,
            customer={
                "name": "Tony Stark",
                "email": "tony@stark.com",
                "document": "123.456.789-00",
                "address": {"country": "BR", "zipCode": "01311000", "line_1": "1, Av Paulista"},
            },
            shipping={"amount": 1000, "description": "Sedex", "recipientName": "Tony"},
        )

        payload = OrderPayloadBuilder().build(request)

        customer = payload["customer"]
        assert customer["name"] == "Tony Stark"
        assert customer["document"] == "123.456.789-00"
        assert customer["type"] == "individual"
        assert customer["document_type"] == "CPF"
        assert customer["address"] == {
            "country": "BR",
            "zip_code": "01311000",
            "line_1": "1, Av Paulista",
        }
        assert "customer_id" not in payload
        assert payload["shipping"] == {
            "amount": 1000,
            "description": "Sedex",
            "recipient_name": "Tony",
        }

    def test_credit_card_with_token(self) -> None:
        request = _order(
            paymentMethod="credit-card",
            creditCard={"cardToken": "token_abc", "installments": 3},
        )

        [payment] = OrderPayloadBuilder().build(request)["payments"]

        assert payment["payment_method"] == "credit_card"
        assert payment["credit_card"] == {
            "operation_type": "auth_and_capture",
            "installments": 3,
            "card_token": "token_abc",
        }

    def test_credit_card_id_wins_over_token(self) -> None:
        request = _order(
            paymentMethod="credit_card",
            creditCard={"cardId": "card_1", "cardToken": "token_abc"},
        )
        [payment] = OrderPayloadBuilder().build(request)["payments"]
        assert payment["credit_card"]["card_id"] == "card_1"
        assert "card_token" not in payment["credit_card"]

    def test_boleto(self) -> None:
        request = _order(paymentMethod="boleto", boleto={"instructions": "Pagar até amanhã"})
        [payment] = OrderPayloadBuilder().build(request)["payments"]
        assert payment == {"payment_method": "boleto", "boleto": {"instructions": "Pagar até amanhã"}}

    def test_fallback_item_when_no_items(self) -> None:
        payload = OrderPayloadBuilder().build(_order(items=None, amount=5000))
        assert payload["items"] == [
            {"amount": 5000, "description": "Pagamento", "quantity": 1, "code": "item-1"}
        ]

    def test_empty_cart_fails(self) -> None:
        with pytest.raises(MissingCartData):
            OrderPayloadBuilder().build(_order(items=None, amount=None))

    def test_invalid_method_fails(self) -> None:
        with pytest.raises(UnknownPaymentMethod):
            OrderPayloadBuilder().build(_order(paymentMethod="cash"))


class TestPaymentLinkPayloadBuilder:
    """Payload de POST /paymentlinks."""

    def test_payload_shape(self) -> None:
        request = CreatePaymentLinkRequest.model_validate(
            {
                "items": [{"name": "Curso", "amount": 2500, "defaultQuantity": 4}, {"amount": 100}],
                "installments": 2,
                "split": SCENARIO_A_SPLIT,
            }
        )

        payload = PaymentLinkPayloadBuilder().build(request)

        assert payload["is_building"] is False
        assert payload["type"] == "order"
        settings = payload["payment_settings"]
        assert settings["accepted_payment_methods"] == ["credit_card", "pix"]
        assert settings["pix_settings"] == {"expires_in": 3600}
        setup = settings["credit_card_settings"]["installments_setup"]
        assert setup["max_installments"] == 2
        assert setup["free_installments"] == 2
        assert setup["amount"] == 10100
        assert setup["interest_rate"] == 1
        assert payload["cart_settings"]["items"] == [
            {"name": "Curso", "amount": 2500, "default_quantity": 4},
            {"name": "Item", "amount": 100, "default_quantity": 1},
        ]
        assert len(payload["split_settings"]["rules"]) == 2
        assert "customer" not in payload

    @pytest.mark.parametrize("key", ["defaultQuantity", "default_quantity", "quantity"])
    def test_item_quantity_accepts_every_spelling(self, key: str) -> None:
        request = CreatePaymentLinkRequest.model_validate(
            {"items": [{"name": "Curso", "amount": 1000, key: 3}]}
        )

        payload = PaymentLinkPayloadBuilder().build(request)

        assert request.computed_total() == 3000
        assert payload["cart_settings"]["items"] == [
            {"name": "Curso", "amount": 1000, "default_quantity": 3}
        ]
        setup = payload["payment_settings"]["credit_card_settings"]["installments_setup"]
        assert setup["amount"] == 3000

    def test_default_installments_and_explicit_amount(self) -> None:
        request = CreatePaymentLinkRequest(amount=5000)

        payload = PaymentLinkPayloadBuilder().build(request)

        setup = payload["payment_settings"]["credit_card_settings"]["installments_setup"]
        assert setup["max_installments"] == 12
        assert setup["free_installments"] == 3
        assert setup["amount"] == 5000
        assert "split_settings" not in payload

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, "Pagamento"), ("Loja", "Loja"), ("Loja Braúna Centro", "Loja Braúna C")],
    )
    def test_statement_descriptor(self, value: str | None, expected: str) -> None:
        assert statement_descriptor(value) == expected


class TestCheckoutPayloadBuilder:
    """Checkout legado."""

    def test_payload_shape(self) -> None:
        request = CreatePaymentLinkRequest.model_validate(
            {
                "amount": 10000,
                "items": [{"name": "Curso", "amount": 10000}],
                "split": [
                    {"recipientId": "rp_1", "amount": 70, "type": "flat", "liable": True},
                    {"recipientId": "rp_2", "amount": 30, "type": "flat", "liable": False},
                ],
            }
        )

        payload = CheckoutPayloadBuilder().build(request)

        settings = payload["payment_settings"]
        assert settings["accepted_payment_methods"] == ["pix", "boleto", "credit_card"]
        assert settings["pix_settings"] == {"expires_in": 72000}
        assert settings["boleto_settings"] == {"due_in": 50}
        setup = settings["credit_card_settings"]["installments_setup"]
        assert setup["max_installments"] == 6
        assert setup["free_installments"] == 6
        assert setup["interest_rate"] == 0
        assert setup["amount"] == 10000
        assert payload["cart_settings"]["items"] == [
            {"name": "Curso", "description": "Curso", "amount": 10000, "default_quantity": 1}
        ]
        types = {rule["type"] for rule in payload["split_settings"]["rules"]}
        assert types == {"percentage"}

    def test_amount_defaults_to_zero(self) -> None:
        request = CreatePaymentLinkRequest.model_validate({"items": [{"amount": 300}]})
        payload = CheckoutPayloadBuilder().build(request)
        setup = payload["payment_settings"]["credit_card_settings"]["installments_setup"]
        assert setup["amount"] == 0

    def test_empty_cart_fails(self) -> None:
        with pytest.raises(MissingCartData):
            CheckoutPayloadBuilder().build(CreatePaymentLinkRequest())


class TestFactory:
    """Seleção de builder por superfície."""

    @pytest.mark.parametrize(
        ("surface", "builder_type"),
        [
            (PaymentSurface.ORDER, OrderPayloadBuilder),
            ("payment_link", PaymentLinkPayloadBuilder),
            (PaymentSurface.CHECKOUT, CheckoutPayloadBuilder),
        ],
    )
    def test_returns_builder(self, surface: PaymentSurface | str, builder_type: type) -> None:
        assert isinstance(get_payload_adapter(surface), builder_type)

    def test_unknown_surface(self) -> None:
        with pytest.raises(ValueError, match="Superfície não suportada"):
            get_payload_adapter("subscription")


class TestCustomerPayloadBuilder:
    """Cadastro e listagem de clientes."""

    def test_build_cleans_document(self) -> None:
        request = CustomerRequest(
            name="Tony Stark",
            email="tony@stark.com",
            document="123.456.789-00",
            documentType="CPF",
            code="",
        )

        payload = CustomerPayloadBuilder().build(request)

        assert payload == {
            "name": "Tony Stark",
            "email": "tony@stark.com",
            "document": "12345678900",
            "type": "individual",
            "document_type": "CPF",
        }

    def test_build_without_document_omits_types(self) -> None:
        payload = CustomerPayloadBuilder().build(CustomerRequest(name="Tony", type="company"))
        assert payload == {"name": "Tony"}

    def test_list_params(self) -> None:
        request = ListCustomersRequest(name="Tony", email="", page=2)

        assert build_list_customers_params(request) == {"name": "Tony", "page": 2, "size": 10}
        assert CustomerPayloadBuilder().build_list_params(request) == {
            "name": "Tony",
            "page": 2,
            "size": 10,
        }
