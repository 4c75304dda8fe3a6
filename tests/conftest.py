"""
Shared fixtures for DepositLab tests.
"""

from datetime import datetime, timezone

import pytest

from depositlab.core.dates import add_months
from depositlab.core.models import Installment, Investment, Payout

UTC = timezone.utc
ACTIVATION = datetime(2025, 1, 15, 0, 0, tzinfo=UTC)


@pytest.fixture
def activation():
    return ACTIVATION


@pytest.fixture
def make_fd():
    """Factory for FD investments with ``paid`` paid and ``pending`` pending payouts."""

    def _make(
        principal=100_000.0,
        rate=0.05,
        paid=0,
        pending=0,
        lock_in=12,
        activation=ACTIVATION,
        status="active",
    ):
        payouts = [Payout(add_months(activation, i + 1), "paid") for i in range(paid)]
        payouts += [
            Payout(add_months(activation, paid + i + 1), "pending") for i in range(pending)
        ]
        return Investment(
            id="fd-1",
            kind="fd",
            principal_amount=principal,
            interest_rate=rate,
            activation_date=activation,
            status=status,
            lock_in_period_months=lock_in,
            payout_history=payouts,
        )

    return _make


@pytest.fixture
def make_fd_plus():
    """Factory for FD+ investments with a 20-payout schedule, first ``paid`` paid."""

    def _make(principal=20_000.0, paid=0, scheduled=20, activation=ACTIVATION, rate=0.0):
        payouts = [
            Payout(add_months(activation, i + 1), "paid" if i < paid else "pending")
            for i in range(max(paid, scheduled))
        ]
        return Investment(
            id="fdp-1",
            kind="fd_plus",
            principal_amount=principal,
            interest_rate=rate,
            activation_date=activation,
            payout_history=payouts,
        )

    return _make


@pytest.fixture
def make_rd():
    """Factory for RD investments; installment k is due k months after activation."""

    def _make(
        installment=1_000.0,
        rate=0.24,
        paid=0,
        period=12,
        activation=ACTIVATION,
        amounts=None,
    ):
        installments = [
            Installment(
                due_date=add_months(activation, k),
                status="paid" if k < paid else "pending",
                amount_expected=(amounts[k] if amounts else installment),
            )
            for k in range(period or paid)
        ]
        return Investment(
            id="rd-1",
            kind="rd",
            principal_amount=installment,
            interest_rate=rate,
            activation_date=activation,
            rd_period_months=period,
            installments=installments,
        )

    return _make
