"""
Ledger folding for payout and installment histories.

The ledger is read-only here: reducers never reorder or mutate the records
they are given.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from .models import Installment, Payout


@dataclass(frozen=True)
class LedgerSummary:
    """
    Folded view of a payout or installment list.

    Attributes:
        paid_count: Records with status 'paid'
        pending_count: All other records
        total_paid: Money disbursed to the investor (payouts)
        total_deposited: Money deposited by the investor (installments)
        last_paid_at: Latest dated paid record, None if nothing dated was paid
    """

    paid_count: int = 0
    pending_count: int = 0
    total_paid: float = 0.0
    total_deposited: float = 0.0
    last_paid_at: datetime | None = None


EMPTY_LEDGER = LedgerSummary()


def reduce_payouts(
    payouts: Iterable[Payout], amount_per_payout: float = 0.0
) -> LedgerSummary:
    """
    Fold payouts into counts and the total disbursed.

    Each paid payout is worth ``amount_per_payout``; pending payouts contribute
    nothing.
    """
    paid = 0
    pending = 0
    last = None
    for payout in payouts:
        if not payout.is_paid:
            pending += 1
            continue
        paid += 1
        if payout.payout_date is not None and (last is None or payout.payout_date > last):
            last = payout.payout_date
    return LedgerSummary(
        paid_count=paid,
        pending_count=pending,
        total_paid=paid * max(0.0, amount_per_payout),
        last_paid_at=last,
    )


def reduce_installments(
    installments: Iterable[Installment], default_amount: float = 0.0
) -> LedgerSummary:
    """
    Fold installments into counts and the total deposited.

    A paid installment without ``amount_expected`` counts ``default_amount``
    (the RD installment size).
    """
    paid = 0
    pending = 0
    deposited = 0.0
    last = None
    for inst in installments:
        if not inst.is_paid:
            pending += 1
            continue
        paid += 1
        amount = inst.amount_expected if inst.amount_expected is not None else default_amount
        deposited += max(0.0, amount)
        if inst.due_date is not None and (last is None or inst.due_date > last):
            last = inst.due_date
    return LedgerSummary(
        paid_count=paid,
        pending_count=pending,
        total_deposited=deposited,
        last_paid_at=last,
    )
