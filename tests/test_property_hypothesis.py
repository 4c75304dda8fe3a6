"""
Property-based tests using Hypothesis for accrual and series properties.

These tests are optional and will be skipped if Hypothesis is not installed.
Run `pip install hypothesis` to enable them.
"""

from datetime import datetime, timedelta, timezone

import pytest

# Try to import Hypothesis
try:
    from hypothesis import given
    from hypothesis import strategies as st

    HAS_HYPOTHESIS = True
except ImportError:
    HAS_HYPOTHESIS = False

    # Dummy decorator for when Hypothesis is not available
    def given(*args, **kwargs):
        def decorator(func):
            func._hypothesis_internal_skip = True
            return func

        return decorator

    st = None

from depositlab import engine
from depositlab.core.accrual import accrue
from depositlab.core.dates import add_months
from depositlab.core.models import Installment, Investment, Payout

# Skip entire module if Hypothesis is not available
pytestmark = pytest.mark.skipif(
    not HAS_HYPOTHESIS,
    reason="Hypothesis not installed - run 'pip install hypothesis' to enable property tests",
)

START = datetime(2025, 1, 15, tzinfo=timezone.utc)


if HAS_HYPOTHESIS:
    amount_strategy = st.floats(
        min_value=1.0, max_value=10_000_000.0, allow_infinity=False, allow_nan=False
    ).map(lambda x: round(x, 2))

    annual_rate_strategy = st.floats(
        min_value=0.001, max_value=1.0, allow_infinity=False, allow_nan=False
    )

    seconds_strategy = st.integers(min_value=-10**8, max_value=10**9)

    class TestAccrualProperties:
        @given(principal=amount_strategy, rate=annual_rate_strategy, seconds=seconds_strategy)
        def test_never_negative(self, principal, rate, seconds):
            now = START + timedelta(seconds=seconds)
            assert accrue(principal, rate, START, now) >= 0

        @given(
            principal=amount_strategy,
            rate=annual_rate_strategy,
            a=st.integers(min_value=0, max_value=10**8),
            b=st.integers(min_value=0, max_value=10**8),
        )
        def test_monotonic_in_time(self, principal, rate, a, b):
            early, late = sorted((a, b))
            assert accrue(principal, rate, START, START + timedelta(seconds=early)) <= accrue(
                principal, rate, START, START + timedelta(seconds=late)
            )

    class TestFdPlusProperties:
        @given(principal=amount_strategy, paid=st.integers(min_value=0, max_value=30))
        def test_value_bounded_by_double_principal(self, principal, paid):
            inv = Investment(
                id="p",
                kind="fd_plus",
                principal_amount=principal,
                activation_date=START,
                payout_history=[
                    Payout(add_months(START, i + 1), "paid") for i in range(paid)
                ],
            )
            snap = engine.snapshot(inv, add_months(START, 40))
            assert 0 <= snap.total_gain <= principal + 1e-6
            assert snap.current_value <= 2 * principal + 1e-6

    class TestRecurringDepositProperties:
        @given(
            installment=amount_strategy,
            rate=annual_rate_strategy,
            paid=st.integers(min_value=0, max_value=24),
        )
        def test_history_ends_on_projection(self, installment, rate, paid):
            inv = Investment(
                id="r",
                kind="rd",
                principal_amount=installment,
                interest_rate=rate,
                activation_date=START,
                rd_period_months=24,
                installments=[
                    Installment(add_months(START, k), "paid" if k < paid else "pending")
                    for k in range(24)
                ],
            )
            history = engine.history(inv, add_months(START, 30))
            projection = engine.project("rd", installment, rate, paid)

            assert len(history) == paid + 1
            assert history[-1].value == pytest.approx(projection[-1].value)

        @given(installment=amount_strategy, paid=st.integers(min_value=0, max_value=24))
        def test_invested_counts_paid_only(self, installment, paid):
            inv = Investment(
                id="r",
                kind="rd",
                principal_amount=installment,
                interest_rate=0.12,
                activation_date=START,
                rd_period_months=24,
                installments=[
                    Installment(add_months(START, k), "paid" if k < paid else "pending")
                    for k in range(24)
                ],
            )
            snap = engine.snapshot(inv, add_months(START, 30))
            assert snap.principal_invested == pytest.approx(installment * paid)
