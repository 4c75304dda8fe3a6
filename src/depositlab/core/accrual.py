"""
Continuous simple-interest accrual.

This is the function behind every ticking value: interest grows linearly,
prorated to the second, with no compounding.
"""

from __future__ import annotations

import math
from datetime import datetime

from .kinds import P


def per_second(principal: float, annual_rate: float) -> float:
    """
    Interest earned per second on ``principal`` at ``annual_rate``.

    Returns 0.0 for missing, non-positive or non-finite inputs.
    """
    if not _usable(principal) or not _usable(annual_rate):
        return 0.0
    return principal * annual_rate / P.SECONDS_PER_YEAR


def accrue(
    principal: float,
    annual_rate: float,
    start: datetime | None,
    now: datetime | None,
) -> float:
    """
    Simple interest accrued on ``principal`` between ``start`` and ``now``.

    interest = principal * annual_rate / (365*24*3600) * max(0, now - start)

    **Args:**
        principal: Amount earning interest
        annual_rate: Annual rate as a decimal fraction (0.60 = 60 % p.a.)
        start: Instant interest starts accruing
        now: Instant of evaluation

    **Returns:**
        Accrued interest, never negative. Clock skew (``now < start``) and
        missing inputs yield 0.0.

    **Example:**
        ```python
        from datetime import datetime, timedelta, timezone
        start = datetime(2025, 1, 1, tzinfo=timezone.utc)
        accrue(100_000, 0.60, start, start + timedelta(days=365))
        # 60000.0
        ```
    """
    if start is None or now is None:
        return 0.0
    rate = per_second(principal, annual_rate)
    if rate == 0.0:
        return 0.0
    seconds = max(0.0, (now - start).total_seconds())
    return rate * seconds


def _usable(x) -> bool:
    return x is not None and math.isfinite(x) and x > 0
