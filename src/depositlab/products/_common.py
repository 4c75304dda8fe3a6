"""
Shared helpers for product rules.
"""

from __future__ import annotations

import math
from datetime import datetime

from depositlab.core.dates import add_months
from depositlab.core.kinds import InvestmentStatus, P
from depositlab.core.models import Investment
from depositlab.core.results import ValuationSnapshot


def positive(x) -> bool:
    """True for finite numbers > 0."""
    return x is not None and math.isfinite(x) and x > 0


def triangular_interest(installment: float, annual_rate: float, n: int) -> float:
    """
    Simple interest on ``n`` equal monthly installments, each held for the months
    since it was deposited: installment * annual_rate * n(n+1)/2 / 12.
    """
    if n <= 0 or not positive(installment) or not positive(annual_rate):
        return 0.0
    return installment * annual_rate * (n * (n + 1) / 2) / P.MONTHS_PER_YEAR


def next_payout_date(
    last_paid_at: datetime | None, activated_at: datetime | None
) -> datetime | None:
    """One month after the latest paid payout, else one month after activation."""
    anchor = last_paid_at or activated_at
    return add_months(anchor, 1) if anchor is not None else None


def sparkline_span(confirmed: int, cap: int) -> int:
    """Months a history series walks: confirmed months bounded by the term, min 3."""
    return max(P.SPARKLINE_MIN_POINTS, min(max(0, confirmed), cap))


def inactive_snapshot(investment: Investment) -> ValuationSnapshot:
    """Completed investments no longer hold live money."""
    status = investment.status
    label = status.value if isinstance(status, InvestmentStatus) else str(status)
    return ValuationSnapshot.zero(status=label)
