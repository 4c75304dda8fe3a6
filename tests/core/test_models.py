"""
Tests for input record normalisation.
"""

from datetime import datetime, timezone

import pytest

from depositlab.core.errors import InvestmentDataError
from depositlab.core.kinds import InvestmentStatus, LedgerStatus, ProductType
from depositlab.core.models import Installment, Investment, Payout

UTC = timezone.utc


class TestProductTypeParse:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("fd", ProductType.FD),
            ("FD", ProductType.FD),
            ("fd_plus", ProductType.FD_PLUS),
            ("fd-plus", ProductType.FD_PLUS),
            ("fdplus", ProductType.FD_PLUS),
            ("fd+", ProductType.FD_PLUS),
            (" rd ", ProductType.RD),
            (ProductType.RD, ProductType.RD),
        ],
    )
    def test_known(self, raw, expected):
        assert ProductType.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["bond", "", None, 3])
    def test_unknown_is_none(self, raw):
        assert ProductType.parse(raw) is None

    def test_labels(self):
        assert ProductType.FD.label == "Fixed Deposit"
        assert ProductType.FD_PLUS.label == "FD Plus"
        assert ProductType.RD.label == "Recurring Deposit"


class TestInvestmentFromDict:
    def test_full_fd_record(self):
        inv = Investment.from_dict(
            {
                "id": "inv-1",
                "type": "fd",
                "principalAmount": "100000",
                "interestRate": 0.05,
                "activationDate": "2025-01-15T00:00:00Z",
                "status": "Active",
                "lockInPeriodMonths": 12,
                "payoutHistory": [
                    {"payoutDate": "2025-02-15", "status": "paid"},
                    {"payoutDate": "2025-03-15", "status": "pending"},
                ],
            }
        )

        assert inv.id == "inv-1"
        assert inv.product is ProductType.FD
        assert inv.principal_amount == 100_000.0
        assert inv.activation_date == datetime(2025, 1, 15, tzinfo=UTC)
        assert inv.status is InvestmentStatus.ACTIVE
        assert inv.is_active
        assert inv.lock_in_period_months == 12
        assert [p.status for p in inv.payout_history] == [
            LedgerStatus.PAID,
            LedgerStatus.PENDING,
        ]

    def test_mongo_style_id(self):
        assert Investment.from_dict({"_id": "abc", "type": "rd"}).id == "abc"

    def test_missing_fields_default_to_zero(self):
        inv = Investment.from_dict({"type": "rd"})
        assert inv.principal_amount == 0.0
        assert inv.interest_rate == 0.0
        assert inv.activation_date is None
        assert inv.rd_period_months is None
        assert inv.installments == ()

    def test_start_date_stands_in_for_activation(self):
        inv = Investment.from_dict({"type": "fd", "startDate": "2025-04-01"})
        assert inv.activated_at == datetime(2025, 4, 1, tzinfo=UTC)

    def test_activation_date_wins_over_start_date(self):
        inv = Investment.from_dict(
            {"type": "fd", "startDate": "2025-04-01", "activationDate": "2025-04-03"}
        )
        assert inv.activated_at == datetime(2025, 4, 3, tzinfo=UTC)

    def test_unknown_type_kept_raw(self):
        inv = Investment.from_dict({"type": "bond"})
        assert inv.kind == "bond"
        assert inv.product is None

    def test_unknown_status_kept_lowercase(self):
        inv = Investment.from_dict({"type": "fd", "status": "Suspended"})
        assert inv.status == "suspended"
        assert not inv.is_active

    def test_non_positive_period_is_none(self):
        inv = Investment.from_dict({"type": "rd", "rdPeriodMonths": 0})
        assert inv.rd_period_months is None

    def test_non_finite_amount_is_zero(self):
        inv = Investment(kind="fd", principal_amount=float("nan"))
        assert inv.principal_amount == 0.0

    def test_bad_amount_raises(self):
        with pytest.raises(InvestmentDataError, match="principalAmount"):
            Investment.from_dict({"type": "fd", "principalAmount": "lots"})

    def test_bool_amount_raises(self):
        with pytest.raises(InvestmentDataError):
            Investment.from_dict({"type": "fd", "interestRate": True})

    def test_bad_date_raises(self):
        with pytest.raises(InvestmentDataError, match="activationDate"):
            Investment.from_dict({"type": "fd", "activationDate": "not-a-date"})

    @pytest.mark.parametrize("entry", [None, "2025-02-15", 3])
    def test_non_object_payout_entry_raises(self, entry):
        with pytest.raises(InvestmentDataError, match="payoutHistory"):
            Investment.from_dict({"type": "fd", "payoutHistory": [entry]})

    def test_non_object_installment_entry_raises(self):
        with pytest.raises(InvestmentDataError, match="installments"):
            Investment.from_dict({"type": "rd", "installments": [None]})

    def test_ledger_field_must_be_a_list(self):
        with pytest.raises(InvestmentDataError, match="expected a JSON array"):
            Investment.from_dict(
                {"type": "fd", "payoutHistory": {"payoutDate": "2025-02-15"}}
            )

    def test_null_ledger_field_is_empty(self):
        inv = Investment.from_dict({"type": "fd", "payoutHistory": None})
        assert inv.payout_history == ()

    def test_not_a_dict_raises(self):
        with pytest.raises(InvestmentDataError):
            Investment.from_dict(["fd"])

    def test_records_are_frozen(self):
        inv = Investment.from_dict({"type": "fd"})
        with pytest.raises(AttributeError):
            inv.principal_amount = 5


class TestLedgerRecords:
    def test_payout_defaults_to_paid(self):
        assert Payout.from_dict({"payoutDate": "2025-02-01"}).is_paid

    def test_installment_defaults_to_pending(self):
        inst = Installment.from_dict({"dueDate": "2025-02-01"})
        assert not inst.is_paid
        assert inst.amount_expected is None

    def test_installment_amount_coerced(self):
        inst = Installment.from_dict(
            {"dueDate": "2025-02-01", "status": "paid", "amountExpected": "1500"}
        )
        assert inst.amount_expected == 1500.0
