"""
Fixed Deposit rule (kind: 'fd').
"""

from __future__ import annotations

import logging
from datetime import datetime

import numpy as np

from depositlab.core.accrual import accrue, per_second
from depositlab.core.dates import add_months, month_label, months_elapsed
from depositlab.core.interfaces import IProductRule
from depositlab.core.kinds import P, ProductType
from depositlab.core.ledger import reduce_payouts
from depositlab.core.models import Investment
from depositlab.core.results import (
    FdDetails,
    ProjectionPoint,
    Quote,
    SeriesPoint,
    TenureOption,
    Valuation,
    ValuationSnapshot,
)

from ._common import inactive_snapshot, next_payout_date, positive, sparkline_span

log = logging.getLogger(__name__)


class RuleFixedDeposit(IProductRule):
    """
    Fixed Deposit: lump-sum principal earning a flat monthly rate.

    ``interest_rate`` is a *monthly* fraction (0.05 = 5 % per month). The live
    value accrues continuously at the equivalent annual rate (12x monthly) from
    activation; payouts are read from the ledger, paid records only.

    Status is 'Unlocked' once the whole calendar months since activation reach
    ``lock_in_period_months``, otherwise 'Locked'.
    """

    def value(self, investment: Investment, now: datetime) -> Valuation:
        principal = investment.principal_amount
        rate = investment.interest_rate
        start = investment.activated_at
        lock_in = investment.lock_in_period_months or 0

        monthly_payout = principal * rate if positive(principal) and positive(rate) else 0.0
        ledger = reduce_payouts(investment.payout_history, monthly_payout)

        elapsed = max(0, months_elapsed(start, now)) if start is not None else 0
        status = "Unlocked" if elapsed >= lock_in else "Locked"

        details = FdDetails(
            monthly_payout=monthly_payout,
            payouts_paid=ledger.paid_count,
            payouts_pending=ledger.pending_count,
            total_received=ledger.total_paid,
            status=status,
            lock_remaining=max(0, lock_in - elapsed),
            next_payout_date=next_payout_date(ledger.last_paid_at, start),
            maturity_date=add_months(start, lock_in) if start and lock_in else None,
        )

        if not investment.is_active:
            snapshot = inactive_snapshot(investment)
        elif not (positive(principal) and positive(rate)) or start is None:
            log.debug("fd %s: incomplete record, zero snapshot", investment.id)
            snapshot = ValuationSnapshot.zero(status=status)
        else:
            annual_rate = rate * P.MONTHS_PER_YEAR
            snapshot = ValuationSnapshot.build(
                principal_invested=principal,
                total_gain=accrue(principal, annual_rate, start, now),
                gain_per_second=per_second(principal, annual_rate),
                status=status,
            )

        return Valuation(investment.id, ProductType.FD, snapshot, details)

    def project(self, principal: float, rate: float, months: int) -> list[ProjectionPoint]:
        """value(m) = principal + principal * rate * m"""
        if not positive(principal) or not positive(rate) or months is None or months < 0:
            return []
        m = np.arange(int(months) + 1)
        values = principal + principal * rate * m
        return [ProjectionPoint(int(i), float(v)) for i, v in zip(m, values)]

    def history(self, investment: Investment, now: datetime) -> list[SeriesPoint]:
        principal = investment.principal_amount
        rate = investment.interest_rate
        start = investment.activated_at
        if start is None or not positive(principal) or not positive(rate):
            return []

        elapsed = max(0, months_elapsed(start, now))
        term = investment.lock_in_period_months or P.FD_DEFAULT_TERM_MONTHS

        points = [SeriesPoint("Start", principal, principal)]
        for i in range(1, sparkline_span(elapsed, term) + 1):
            points.append(
                SeriesPoint(
                    label=month_label(add_months(start, i)),
                    invested=principal,
                    value=principal + principal * rate * i,
                    projected=i > elapsed,
                )
            )
        return points

    def quote(self, amount: float, rate: float, months: int) -> Quote:
        payout = amount * rate if positive(amount) and positive(rate) else 0.0
        months = max(0, int(months or 0))
        interest = payout * months
        invested = amount if positive(amount) else 0.0
        return Quote(ProductType.FD, months, invested, interest, invested + interest, payout)

    def tenure_options(self, investment: Investment) -> list[TenureOption]:
        return [TenureOption(label, months) for label, months in P.FD_TENURES]

    def default_tenure(self, investment: Investment) -> int:
        return 12
