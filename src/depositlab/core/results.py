"""
Computed outputs of DepositLab.

Everything here is derived fresh on every read and never persisted. Objects are
immutable; ``to_dict()`` renders the camelCase shape the UI collaborator expects.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import NamedTuple

from .dates import to_iso
from .kinds import ProductType


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _plain(value):
    if isinstance(value, datetime):
        return to_iso(value)
    if isinstance(value, ProductType):
        return value.value
    return value


class _Renderable:
    def to_dict(self) -> dict:
        return {_camel(f.name): _plain(getattr(self, f.name)) for f in fields(self)}


@dataclass(frozen=True)
class ValuationSnapshot(_Renderable):
    """
    Live valuation of one investment at one instant.

    Attributes:
        principal_invested: Money the investor has put in
        current_value: principal_invested + total_gain
        total_gain: Interest / return accrued so far
        gain_percentage: total_gain as a percentage of principal_invested
        gain_per_second: Rate the live value ticks at (0 for monthly-quantised products)
        status: Product status label ('Locked', 'Active', 'Matured', ...)
    """

    principal_invested: float = 0.0
    current_value: float = 0.0
    total_gain: float = 0.0
    gain_percentage: float = 0.0
    gain_per_second: float = 0.0
    status: str = ""

    @classmethod
    def zero(cls, status: str = "") -> ValuationSnapshot:
        return cls(status=status)

    @classmethod
    def build(
        cls,
        principal_invested: float,
        total_gain: float,
        gain_per_second: float,
        status: str,
    ) -> ValuationSnapshot:
        """Assemble a snapshot, deriving current value and gain percentage."""
        pct = total_gain / principal_invested * 100 if principal_invested > 0 else 0.0
        return cls(
            principal_invested=principal_invested,
            current_value=principal_invested + total_gain,
            total_gain=total_gain,
            gain_percentage=pct,
            gain_per_second=gain_per_second,
            status=status,
        )


@dataclass(frozen=True)
class FdDetails(_Renderable):
    monthly_payout: float = 0.0
    payouts_paid: int = 0
    payouts_pending: int = 0
    total_received: float = 0.0
    status: str = "Locked"
    lock_remaining: int = 0
    next_payout_date: datetime | None = None
    maturity_date: datetime | None = None


@dataclass(frozen=True)
class FdPlusDetails(_Renderable):
    monthly_payout: float = 0.0
    months_completed: int = 0
    remaining_months: int = 0
    total_received: float = 0.0
    principal_returned: float = 0.0
    remaining_principal: float = 0.0
    status: str = "Active"
    next_payout_date: datetime | None = None
    maturity_date: datetime | None = None


@dataclass(frozen=True)
class RdDetails(_Renderable):
    monthly_installment: float = 0.0
    months_paid: int = 0
    months_pending: int = 0
    total_months: int = 0
    total_deposited: float = 0.0
    interest: float = 0.0
    maturity_value: float = 0.0
    maturity_date: datetime | None = None
    status: str = "Active"


ProductDetails = FdDetails | FdPlusDetails | RdDetails


@dataclass(frozen=True)
class Valuation:
    """Snapshot plus the product-specific breakdown for one investment."""

    investment_id: str
    kind: ProductType
    snapshot: ValuationSnapshot
    details: ProductDetails

    def to_dict(self) -> dict:
        return {
            "id": self.investment_id,
            "type": self.kind.value,
            **self.snapshot.to_dict(),
            "details": self.details.to_dict(),
        }


class SeriesPoint(NamedTuple):
    """
    One point of a historical chart series.

    ``projected`` marks trailing points beyond what the ledger/clock confirms.
    """

    label: str
    invested: float
    value: float
    projected: bool = False

    def to_dict(self) -> dict:
        return self._asdict()


class ProjectionPoint(NamedTuple):
    month: int
    value: float

    def to_dict(self) -> dict:
        return self._asdict()


class TimelineItem(NamedTuple):
    """One month of an RD installment timeline."""

    label: str
    due_date: datetime
    status: str  # 'paid' | 'upcoming'

    def to_dict(self) -> dict:
        return {"label": self.label, "dueDate": to_iso(self.due_date), "status": self.status}


class TenureOption(NamedTuple):
    label: str
    months: int


@dataclass(frozen=True)
class Quote(_Renderable):
    """
    Calculator result for a prospective investment.

    ``monthly`` is the FD payout, the RD deposit, or the FD+ combined return.
    """

    kind: ProductType
    months: int
    invested: float
    interest: float
    total: float
    monthly: float
