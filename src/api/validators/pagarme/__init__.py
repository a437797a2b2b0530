"""Validadores de requests para a API Pagar.me.

Uso:
    from api.validators.pagarme import (
        PagarmeRequestValidator,
        ValidationError,
    )

    validator = PagarmeRequestValidator()
    validator.validate_order_request(request)
"""

from api.validators.pagarme.errors import (
    InvalidRecipientId,
    MissingAmount,
    MissingCartData,
    MissingLiableFlag,
    MixedSplitModes,
    SplitAmountOutOfRange,
    SplitSumMismatch,
    ValidationError,
)
from api.validators.pagarme.split import SplitValidator
from api.validators.pagarme.validator_dispatcher import PagarmeRequestValidator

__all__ = [
    "InvalidRecipientId",
    "MissingAmount",
    "MissingCartData",
    "MissingLiableFlag",
    "MixedSplitModes",
    "PagarmeRequestValidator",
    "SplitAmountOutOfRange",
    "SplitSumMismatch",
    "SplitValidator",
    "ValidationError",
]
