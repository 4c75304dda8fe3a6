"""
FD+ fixed plan rule (kind: 'fd_plus').
"""

from __future__ import annotations

import logging
import warnings
from datetime import datetime

import numpy as np

from depositlab.core.dates import add_months, month_label
from depositlab.core.interfaces import IProductRule
from depositlab.core.kinds import P, ProductType
from depositlab.core.ledger import reduce_payouts
from depositlab.core.models import Investment
from depositlab.core.results import (
    FdPlusDetails,
    ProjectionPoint,
    Quote,
    SeriesPoint,
    TenureOption,
    Valuation,
    ValuationSnapshot,
)

from ._common import inactive_snapshot, next_payout_date, positive, sparkline_span

log = logging.getLogger(__name__)


class RuleFdPlus(IProductRule):
    """
    FD+ fixed plan: 20 monthly payouts of 10 % of the original principal.

    Each payout is 5 % principal returned plus 5 % interest, so after month m:

        total_gain        = principal * 0.05 * m
        current_value     = principal + total_gain   (remaining principal + all payouts)
        total_received    = principal * 0.10 * m

    ``m`` is the number of *paid* payouts, capped at 20; calendar time plays no
    part, and ``interest_rate`` is not used. At m = 20 the gain equals the
    principal and the value is exactly twice the principal.
    """

    def value(self, investment: Investment, now: datetime) -> Valuation:
        principal = investment.principal_amount
        start = investment.activated_at
        term = P.FD_PLUS_TERM_MONTHS

        if positive(principal):
            monthly_payout = principal * P.FD_PLUS_MONTHLY_RETURN
        else:
            principal, monthly_payout = 0.0, 0.0
        ledger = reduce_payouts(investment.payout_history, monthly_payout)
        completed = min(term, ledger.paid_count)
        returned = principal * P.FD_PLUS_PRINCIPAL_RETURN * completed
        status = "Completed" if completed >= term else "Active"

        details = FdPlusDetails(
            monthly_payout=monthly_payout,
            months_completed=completed,
            remaining_months=term - completed,
            total_received=monthly_payout * completed,
            principal_returned=returned,
            remaining_principal=principal - returned,
            status=status,
            next_payout_date=(
                None if completed >= term else next_payout_date(ledger.last_paid_at, start)
            ),
            maturity_date=add_months(start, term) if start is not None else None,
        )

        if not investment.is_active:
            snapshot = inactive_snapshot(investment)
        elif not positive(principal):
            log.debug("fd_plus %s: no principal, zero snapshot", investment.id)
            snapshot = ValuationSnapshot.zero(status=status)
        else:
            snapshot = ValuationSnapshot.build(
                principal_invested=principal,
                total_gain=float(self._gain(principal, completed)),
                gain_per_second=0.0,
                status=status,
            )

        return Valuation(investment.id, ProductType.FD_PLUS, snapshot, details)

    @staticmethod
    def _gain(principal: float, months):
        # months may be an int or an ndarray of month indices
        return principal * P.FD_PLUS_INTEREST * np.minimum(months, P.FD_PLUS_TERM_MONTHS)

    def project(self, principal: float, rate: float, months: int) -> list[ProjectionPoint]:
        """Value frozen from month 20 onwards; ``rate`` is ignored."""
        if not positive(principal) or months is None or months < 0:
            return []
        m = np.arange(int(months) + 1)
        values = principal + self._gain(principal, m)
        return [ProjectionPoint(int(i), float(v)) for i, v in zip(m, values)]

    def history(self, investment: Investment, now: datetime) -> list[SeriesPoint]:
        principal = investment.principal_amount
        start = investment.activated_at
        if start is None or not positive(principal):
            return []

        completed = min(P.FD_PLUS_TERM_MONTHS, reduce_payouts(investment.payout_history).paid_count)

        points = [SeriesPoint("Start", principal, principal)]
        for i in range(1, sparkline_span(completed, P.FD_PLUS_TERM_MONTHS) + 1):
            points.append(
                SeriesPoint(
                    label=month_label(add_months(start, i)),
                    invested=principal,
                    value=principal + float(self._gain(principal, i)),
                    projected=i > completed,
                )
            )
        return points

    def quote(self, amount: float, rate: float, months: int) -> Quote:
        term = P.FD_PLUS_TERM_MONTHS
        if months and int(months) != term:
            warnings.warn(
                f"FD+ has a fixed {term}-month term; ignoring months={months}",
                stacklevel=3,
            )
        invested = amount if positive(amount) else 0.0
        interest = float(self._gain(invested, term))
        return Quote(
            ProductType.FD_PLUS,
            term,
            invested,
            interest,
            invested + interest,
            invested * P.FD_PLUS_MONTHLY_RETURN,
        )

    def tenure_options(self, investment: Investment) -> list[TenureOption]:
        return [TenureOption(label, months) for label, months in P.FD_PLUS_TENURES]

    def default_tenure(self, investment: Investment) -> int:
        return P.FD_PLUS_TERM_MONTHS
