"""Enums e constantes de domínio para a API Pagar.me (core v5)."""

from __future__ import annotations

from enum import StrEnum


class SplitMode(StrEnum):
    """Forma de expressar a parte de cada recebedor no split."""

    PERCENTAGE = "percentage"
    FLAT = "flat"


class PaymentMethod(StrEnum):
    """Métodos de pagamento aceitos pela API de Orders."""

    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    PIX = "pix"
    BOLETO = "boleto"


class PaymentSurface(StrEnum):
    """Superfícies upstream que recebem payloads distintos."""

    ORDER = "order"
    PAYMENT_LINK = "payment_link"
    CHECKOUT = "checkout"


# Paths relativos à base URL (https://api.pagar.me/core/v5)
ORDERS_PATH = "/orders"
PAYMENT_LINKS_PATH = "/paymentlinks"
CUSTOMERS_PATH = "/customers"

# Prefixos válidos de recipient_id (rp_ = recebedor, re_ = legado)
RECIPIENT_ID_PREFIXES: tuple[str, ...] = ("rp_", "re_")

# Item sintético quando o carrinho chega vazio
FALLBACK_ITEM_NAME = "Pagamento"
FALLBACK_ITEM_CODE = "item-1"
DEFAULT_ITEM_NAME = "Item"

# Orders
DEFAULT_OPERATION_TYPE = "auth_and_capture"
DEFAULT_PIX_EXPIRES_IN_SECONDS = 86400  # 24h
DEFAULT_DOCUMENT_TYPE = "CPF"
DEFAULT_CUSTOMER_TYPE = "individual"

# Payment Links
MAX_STATEMENT_DESCRIPTOR_LENGTH = 13
DEFAULT_STATEMENT_DESCRIPTOR = "Pagamento"
DEFAULT_MAX_INSTALLMENTS = 12
MAX_FREE_INSTALLMENTS = 3
PAYMENT_LINK_INTEREST_RATE = 1
PAYMENT_LINK_PIX_EXPIRES_IN_SECONDS = 3600  # 1h

# Checkout legado
CHECKOUT_PIX_EXPIRES_IN = 50 * 24 * 60  # 50 dias em minutos
CHECKOUT_BOLETO_DUE_IN_DAYS = 50
CHECKOUT_MAX_INSTALLMENTS = 6

# Customers (listagem)
DEFAULT_CUSTOMERS_PAGE = 1
DEFAULT_CUSTOMERS_PAGE_SIZE = 10
