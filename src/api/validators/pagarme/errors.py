"""Erros tipados de validação de requests Pagar.me.

Todos derivam de `app.protocols.validator.ValidationError` e carregam um
`code` estável, usado no envelope de erro e nos logs.
"""

from __future__ import annotations

from app.protocols.tenant_resolver import MissingTenantId
from app.protocols.validator import ValidationError


class InvalidRecipientId(ValidationError):
    code = "INVALID_RECIPIENT_ID"


class MissingAmount(ValidationError):
    code = "MISSING_AMOUNT"


class MissingLiableFlag(ValidationError):
    code = "MISSING_LIABLE_FLAG"


class SplitAmountOutOfRange(ValidationError):
    code = "SPLIT_AMOUNT_OUT_OF_RANGE"


class MixedSplitModes(ValidationError):
    code = "MIXED_SPLIT_MODES"


class SplitSumMismatch(ValidationError):
    """Soma das regras diferente do esperado (100 ou total do pedido)."""

    code = "SPLIT_SUM_MISMATCH"

    def __init__(self, message: str, *, expected: int, actual: int) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class MissingCartData(ValidationError):
    code = "MISSING_CART_DATA"


class MissingCustomerIdentity(ValidationError):
    code = "MISSING_CUSTOMER_IDENTITY"


class CustomerIdentityConflict(ValidationError):
    code = "CUSTOMER_IDENTITY_CONFLICT"


class UnknownPaymentMethod(ValidationError):
    code = "UNKNOWN_PAYMENT_METHOD"


class MissingPaymentData(ValidationError):
    code = "MISSING_PAYMENT_DATA"


class PaymentMethodMismatch(ValidationError):
    code = "PAYMENT_METHOD_MISMATCH"


class MissingCustomerName(ValidationError):
    code = "MISSING_CUSTOMER_NAME"


class MissingCustomerId(ValidationError):
    code = "MISSING_CUSTOMER_ID"


__all__ = [
    "CustomerIdentityConflict",
    "InvalidRecipientId",
    "MissingAmount",
    "MissingCartData",
    "MissingCustomerId",
    "MissingCustomerIdentity",
    "MissingCustomerName",
    "MissingLiableFlag",
    "MissingPaymentData",
    "MissingTenantId",
    "MixedSplitModes",
    "PaymentMethodMismatch",
    "SplitAmountOutOfRange",
    "SplitSumMismatch",
    "UnknownPaymentMethod",
    "ValidationError",
]
