"""
Recurring Deposit rule (kind: 'rd').
"""

from __future__ import annotations

import logging
import math
from datetime import datetime

import numpy as np

from depositlab.core.accrual import accrue, per_second
from depositlab.core.dates import add_months, month_label
from depositlab.core.interfaces import IProductRule
from depositlab.core.kinds import P, ProductType
from depositlab.core.ledger import reduce_installments
from depositlab.core.models import Investment
from depositlab.core.results import (
    ProjectionPoint,
    Quote,
    RdDetails,
    SeriesPoint,
    TenureOption,
    TimelineItem,
    Valuation,
    ValuationSnapshot,
)

from ._common import inactive_snapshot, positive, triangular_interest

log = logging.getLogger(__name__)


class RuleRecurringDeposit(IProductRule):
    """
    Recurring Deposit: fixed monthly installments earning simple annual interest.

    ``principal_amount`` is the installment size and ``interest_rate`` is *annual*.
    Only paid installments count as invested money.

    Two views of the interest agree at whole-month boundaries:

    - ``RdDetails.interest`` is the settled triangular form for n paid
      installments: installment * rate * n(n+1)/2 / 12.
    - ``snapshot.total_gain`` ticks live: every paid installment accrues from its
      due date to ``now``. Installment k (0-based) is due k months after
      activation, so after n months it has been held n-k months and the sum
      over k is n(n+1)/2 months, matching the triangular form up to day-count
      differences between calendar months and 365/12 days. Installments paid
      ahead of their due date neither accrue nor add to ``gain_per_second``
      until they fall due.
    """

    def value(self, investment: Investment, now: datetime) -> Valuation:
        installment = investment.principal_amount
        rate = investment.interest_rate
        start = investment.activated_at
        total_months = investment.rd_period_months or 0

        ledger = reduce_installments(investment.installments, installment)
        paid = ledger.paid_count
        status = "Matured" if total_months and paid >= total_months else "Active"

        details = RdDetails(
            monthly_installment=installment if positive(installment) else 0.0,
            months_paid=paid,
            months_pending=ledger.pending_count,
            total_months=total_months,
            total_deposited=ledger.total_deposited,
            interest=triangular_interest(installment, rate, paid),
            maturity_value=self._value_at(installment, rate, total_months),
            maturity_date=add_months(start, total_months) if start and total_months else None,
            status=status,
        )

        if not investment.is_active:
            snapshot = inactive_snapshot(investment)
        elif not (positive(installment) and positive(rate)) or start is None:
            log.debug("rd %s: incomplete record, zero snapshot", investment.id)
            snapshot = ValuationSnapshot.zero(status=status)
        else:
            earning = self._earning(investment, now)
            gain = math.fsum(accrue(amount, rate, due, now) for amount, due in earning)
            balance = math.fsum(amount for amount, _ in earning)
            snapshot = ValuationSnapshot.build(
                principal_invested=ledger.total_deposited,
                total_gain=gain,
                gain_per_second=per_second(balance, rate),
                status=status,
            )

        return Valuation(investment.id, ProductType.RD, snapshot, details)

    @staticmethod
    def _value_at(installment: float, rate: float, n: int) -> float:
        if not n or not positive(installment):
            return 0.0
        return installment * n + triangular_interest(installment, rate, n)

    @staticmethod
    def _amount(investment: Investment, inst) -> float:
        amount = (
            inst.amount_expected
            if inst.amount_expected is not None
            else investment.principal_amount
        )
        return max(0.0, amount)

    def _earning(self, investment: Investment, now: datetime) -> list[tuple[float, datetime]]:
        """(amount, due date) of every paid installment already due at ``now``."""
        start = investment.activated_at
        earning = []
        for k, inst in enumerate(investment.installments):
            if not inst.is_paid:
                continue
            due = inst.due_date or add_months(start, k)
            if due <= now:
                earning.append((self._amount(investment, inst), due))
        return earning

    def project(self, principal: float, rate: float, months: int) -> list[ProjectionPoint]:
        """
        value(m) = P*m + P*(rate/12)*m(m+1)/2 with ``rate`` annual, as stored on RDs.
        """
        if not positive(principal) or not positive(rate) or months is None or months < 0:
            return []
        m = np.arange(int(months) + 1)
        monthly = rate / P.MONTHS_PER_YEAR
        values = principal * m + principal * monthly * m * (m + 1) / 2
        return [ProjectionPoint(int(i), float(v)) for i, v in zip(m, values)]

    def history(self, investment: Investment, now: datetime) -> list[SeriesPoint]:
        """
        One point per paid installment: running deposits plus interest where each
        month the whole running balance earns one month of simple interest.
        """
        installment = investment.principal_amount
        rate = investment.interest_rate
        start = investment.activated_at
        if start is None or not positive(installment) or not positive(rate):
            return []

        monthly = rate / P.MONTHS_PER_YEAR
        limit = investment.rd_period_months
        deposited = 0.0
        interest = 0.0
        points = [SeriesPoint("Start", 0.0, 0.0)]
        for k, inst in enumerate(investment.installments):
            if not inst.is_paid:
                continue
            if limit and len(points) > limit:
                break
            due = inst.due_date or add_months(start, k)
            if due > now:
                break
            deposited += self._amount(investment, inst)
            interest += deposited * monthly
            points.append(SeriesPoint(month_label(due), deposited, deposited + interest))
        return points

    def timeline(self, investment: Investment) -> list[TimelineItem]:
        """Installment grid for the whole term: 'paid' for the first n, then 'upcoming'."""
        start = investment.activated_at
        total = investment.rd_period_months
        if start is None or not total:
            return []
        paid = reduce_installments(investment.installments).paid_count
        items = []
        for i in range(1, total + 1):
            due = add_months(start, i)
            items.append(
                TimelineItem(
                    label=month_label(due).upper(),
                    due_date=due,
                    status="paid" if i <= paid else "upcoming",
                )
            )
        return items

    def quote(self, amount: float, rate: float, months: int) -> Quote:
        months = max(0, int(months or 0))
        deposit = amount if positive(amount) else 0.0
        invested = deposit * months
        interest = triangular_interest(deposit, rate, months)
        return Quote(ProductType.RD, months, invested, interest, invested + interest, deposit)

    def tenure_options(self, investment: Investment) -> list[TenureOption]:
        total = investment.rd_period_months
        if not total:
            return []
        return [
            TenureOption(label, int(math.floor(total * fraction)))
            for label, fraction in P.RD_TENURE_FRACTIONS
        ]

    def default_tenure(self, investment: Investment) -> int:
        return investment.rd_period_months or 12
