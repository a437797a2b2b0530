"""Testes do SplitValidator (fail-fast, percentage e flat)."""

from __future__ import annotations

import pytest

from api.validators.pagarme import (
    InvalidRecipientId,
    MissingAmount,
    MissingLiableFlag,
    MixedSplitModes,
    SplitAmountOutOfRange,
    SplitSumMismatch,
    SplitValidator,
    ValidationError,
)
from app.constants.pagarme import SplitMode
from app.domain.split import SplitPlan, SplitRule


def _plan(*rules: dict) -> SplitPlan:
    return SplitPlan.from_rules([SplitRule.model_validate(rule) for rule in rules])


class TestPercentageSplit:
    """Modo percentage: soma deve ser exatamente 100."""

    def test_sum_100_passes(self) -> None:
        plan = _plan(
            {"recipientId": "rp_1", "amount": 90, "liable": True},
            {"recipientId": "rp_2", "amount": 10, "liable": False},
        )
        SplitValidator().validate(plan, 10000)

    def test_sum_95_fails_with_expected_and_actual(self) -> None:
        plan = _plan(
            {"recipientId": "rp_1", "amount": 90, "liable": True},
            {"recipientId": "rp_2", "amount": 5, "liable": False},
        )
        with pytest.raises(SplitSumMismatch) as exc_info:
            SplitValidator().validate(plan, 10000)

        assert exc_info.value.expected == 100
        assert exc_info.value.actual == 95
        assert "Atual: 95%" in str(exc_info.value)

    @pytest.mark.parametrize("total", [99, 101, 200])
    def test_any_sum_other_than_100_fails(self, total: int) -> None:
        first = min(total - 1, 100)
        plan = _plan(
            {"recipientId": "rp_1", "amount": first, "liable": True},
            {"recipientId": "re_2", "amount": total - first, "liable": False},
        )
        with pytest.raises(SplitSumMismatch):
            SplitValidator().validate(plan)

    def test_total_amount_is_ignored(self) -> None:
        plan = _plan({"recipientId": "rp_1", "amount": 100, "liable": True})
        SplitValidator().validate(plan, 1)

    @pytest.mark.parametrize("amount", [0, 101, -5])
    def test_amount_out_of_range(self, amount: int) -> None:
        plan = _plan({"recipientId": "rp_1", "amount": amount, "liable": True})
        with pytest.raises(SplitAmountOutOfRange):
            SplitValidator().validate(plan)


class TestFlatSplit:
    """Modo flat: soma deve bater com o total do pedido."""

    def test_sum_equal_total_passes(self) -> None:
        plan = _plan(
            {"recipientId": "rp_1", "amount": 3000, "type": "flat", "liable": True},
            {"recipientId": "rp_2", "amount": 7000, "type": "flat", "liable": False},
        )
        SplitValidator().validate(plan, 10000)

    def test_sum_different_from_total_fails(self) -> None:
        plan = _plan(
            {"recipientId": "rp_1", "amount": 3000, "type": "flat", "liable": True},
            {"recipientId": "rp_2", "amount": 7000, "type": "flat", "liable": False},
        )
        with pytest.raises(SplitSumMismatch) as exc_info:
            SplitValidator().validate(plan, 9000)

        assert exc_info.value.expected == 9000
        assert exc_info.value.actual == 10000

    def test_zero_amount_out_of_range(self) -> None:
        plan = _plan({"recipientId": "rp_1", "amount": 0, "type": "flat", "liable": True})
        with pytest.raises(SplitAmountOutOfRange):
            SplitValidator().validate(plan, 0)

    def test_flat_amount_above_100_is_valid_range(self) -> None:
        plan = _plan({"recipientId": "rp_1", "amount": 15000, "type": "flat", "liable": True})
        SplitValidator().validate(plan, 15000)


class TestRuleChecks:
    """Checagens por regra, na ordem fail-fast."""

    def test_empty_plan_is_valid(self) -> None:
        SplitValidator().validate(SplitPlan(), None)

    @pytest.mark.parametrize("recipient_id", [None, "", "   ", "ab_123", "RP_1"])
    def test_invalid_recipient_id(self, recipient_id: str | None) -> None:
        plan = _plan({"recipientId": recipient_id, "amount": 100, "liable": True})
        with pytest.raises(InvalidRecipientId):
            SplitValidator().validate(plan)

    def test_missing_amount(self) -> None:
        plan = _plan({"recipientId": "rp_1", "liable": True})
        with pytest.raises(MissingAmount):
            SplitValidator().validate(plan)

    def test_missing_liable(self) -> None:
        plan = _plan({"recipientId": "rp_1", "amount": 100})
        with pytest.raises(MissingLiableFlag):
            SplitValidator().validate(plan)

    def test_first_violation_wins(self) -> None:
        plan = _plan(
            {"recipientId": "rp_1", "amount": 50},
            {"recipientId": "bad", "amount": 50, "liable": True},
        )
        with pytest.raises(MissingLiableFlag):
            SplitValidator().validate(plan)

    def test_recipient_checked_before_amount(self) -> None:
        plan = _plan({"recipientId": "x", "liable": True})
        with pytest.raises(InvalidRecipientId):
            SplitValidator().validate(plan)

    def test_errors_are_validation_errors_with_code(self) -> None:
        plan = _plan({"recipientId": "rp_1", "amount": 100})
        with pytest.raises(ValidationError) as exc_info:
            SplitValidator().validate(plan)
        assert exc_info.value.code == "MISSING_LIABLE_FLAG"


class TestModeConsistency:
    """Modo canônico é o da primeira regra."""

    def test_mixed_modes_rejected_by_default(self) -> None:
        plan = _plan(
            {"recipientId": "rp_1", "amount": 50, "liable": True},
            {"recipientId": "rp_2", "amount": 5000, "type": "flat", "liable": False},
        )
        with pytest.raises(MixedSplitModes):
            SplitValidator().validate(plan, 5000)

    def test_mixed_modes_allowed_uses_first_mode_for_sum(self) -> None:
        plan = _plan(
            {"recipientId": "rp_1", "amount": 100, "liable": True},
            {"recipientId": "rp_2", "amount": 5000, "type": "flat", "liable": False},
        )
        with pytest.raises(SplitSumMismatch) as exc_info:
            SplitValidator(require_single_mode=False).validate(plan, 5000)
        assert exc_info.value.expected == 100

    def test_mixed_modes_allowed_still_checks_each_range(self) -> None:
        plan = _plan(
            {"recipientId": "rp_1", "amount": 100, "liable": True},
            {"recipientId": "rp_2", "amount": 0, "type": "flat", "liable": False},
        )
        with pytest.raises(SplitAmountOutOfRange):
            SplitValidator(require_single_mode=False).validate(plan)

    @pytest.mark.parametrize("payload", [{}, {"type": None}])
    def test_missing_or_null_type_defaults_to_percentage(self, payload: dict) -> None:
        rule = SplitRule.model_validate(
            {"recipientId": "rp_1", "amount": 100, "liable": True, **payload}
        )

        assert rule.mode == SplitMode.PERCENTAGE
        SplitValidator().validate(SplitPlan.from_rules([rule]))

    def test_with_mode_forces_percentage(self) -> None:
        plan = _plan(
            {"recipientId": "rp_1", "amount": 60, "type": "flat", "liable": True},
            {"recipientId": "rp_2", "amount": 40, "type": "flat", "liable": False},
        )
        forced = plan.with_mode(SplitMode.PERCENTAGE)

        assert forced.mode == SplitMode.PERCENTAGE
        SplitValidator().validate(forced)
        assert plan.mode == SplitMode.FLAT
