"""
Input records for DepositLab.

Investments arrive from the data-fetch collaborator as JSON-shaped dicts with
camelCase keys. ``Investment.from_dict`` is the only place raw input is
interpreted; everything downstream works on these normalised, immutable records.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime

from .dates import parse_instant
from .errors import InvestmentDataError
from .kinds import InvestmentStatus, LedgerStatus, ProductType


@dataclass(frozen=True)
class Payout:
    """One FD / FD+ disbursement event."""

    payout_date: datetime | None
    status: LedgerStatus = LedgerStatus.PAID

    def __post_init__(self) -> None:
        object.__setattr__(self, "payout_date", _instant("payoutDate", self.payout_date))
        object.__setattr__(self, "status", _ledger_status(self.status))

    @property
    def is_paid(self) -> bool:
        return self.status is LedgerStatus.PAID

    @classmethod
    def from_dict(cls, raw: dict) -> Payout:
        if not isinstance(raw, dict):
            raise InvestmentDataError("payoutHistory", raw, "expected a JSON object")
        return cls(payout_date=raw.get("payoutDate"), status=raw.get("status", "paid"))


@dataclass(frozen=True)
class Installment:
    """One RD deposit cycle."""

    due_date: datetime | None
    status: LedgerStatus = LedgerStatus.PENDING
    amount_expected: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "due_date", _instant("dueDate", self.due_date))
        object.__setattr__(self, "status", _ledger_status(self.status))
        if self.amount_expected is not None:
            object.__setattr__(
                self,
                "amount_expected",
                _amount("amountExpected", self.amount_expected),
            )

    @property
    def is_paid(self) -> bool:
        return self.status is LedgerStatus.PAID

    @classmethod
    def from_dict(cls, raw: dict) -> Installment:
        if not isinstance(raw, dict):
            raise InvestmentDataError("installments", raw, "expected a JSON object")
        return cls(
            due_date=raw.get("dueDate"),
            status=raw.get("status", "pending"),
            amount_expected=raw.get("amountExpected"),
        )


@dataclass(frozen=True)
class Investment:
    """
    A single FD, FD+ or RD investment as supplied by the data-fetch collaborator.

    Attributes:
        id: Investment identifier
        kind: Product discriminant; a ProductType, or the raw string when the
            product is not recognised (dispatch raises on it later)
        principal_amount: Lump sum (FD, FD+) or monthly installment size (RD)
        interest_rate: Decimal fraction; monthly for FD, annual for RD, unused by FD+
        activation_date: Instant the investment went live
        start_date: Contractual start; stands in for activation_date when that is absent
        status: 'active' or 'completed'
        lock_in_period_months: FD lock-in
        rd_period_months: RD term in installments
        payout_history: Date-ordered FD / FD+ payouts
        installments: Date-ordered RD installments

    Note:
        Missing numbers default to 0 and missing periods to None so that a
        partially loaded record values to zero instead of raising.
    """

    id: str = ""
    kind: ProductType | str = ProductType.FD
    principal_amount: float = 0.0
    interest_rate: float = 0.0
    activation_date: datetime | None = None
    start_date: datetime | None = None
    status: InvestmentStatus | str = InvestmentStatus.ACTIVE
    lock_in_period_months: int | None = None
    rd_period_months: int | None = None
    payout_history: tuple[Payout, ...] = field(default_factory=tuple)
    installments: tuple[Installment, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        parsed = ProductType.parse(self.kind)
        object.__setattr__(self, "kind", parsed if parsed is not None else self.kind)
        object.__setattr__(
            self, "principal_amount", _amount("principalAmount", self.principal_amount)
        )
        object.__setattr__(
            self, "interest_rate", _amount("interestRate", self.interest_rate)
        )
        object.__setattr__(
            self, "activation_date", _instant("activationDate", self.activation_date)
        )
        object.__setattr__(self, "start_date", _instant("startDate", self.start_date))
        object.__setattr__(self, "status", _investment_status(self.status))
        object.__setattr__(
            self,
            "lock_in_period_months",
            _period("lockInPeriodMonths", self.lock_in_period_months),
        )
        object.__setattr__(
            self, "rd_period_months", _period("rdPeriodMonths", self.rd_period_months)
        )
        object.__setattr__(self, "payout_history", tuple(self.payout_history or ()))
        object.__setattr__(self, "installments", tuple(self.installments or ()))

    @property
    def activated_at(self) -> datetime | None:
        """Instant accrual starts: activation date, falling back to start date."""
        return self.activation_date or self.start_date

    @property
    def product(self) -> ProductType | None:
        return self.kind if isinstance(self.kind, ProductType) else None

    @property
    def is_active(self) -> bool:
        return self.status is InvestmentStatus.ACTIVE

    @classmethod
    def from_dict(cls, raw: dict) -> Investment:
        """
        Build an Investment from a JSON-shaped dict.

        **Example:**
            ```python
            inv = Investment.from_dict({
                "id": "inv-1",
                "type": "fd",
                "principalAmount": 100000,
                "interestRate": 0.05,
                "activationDate": "2025-01-15T00:00:00Z",
                "lockInPeriodMonths": 12,
                "payoutHistory": [{"payoutDate": "2025-02-15", "status": "paid"}],
            })
            ```

        Raises:
            InvestmentDataError: If a present field holds an uncoercible value
        """
        if not isinstance(raw, dict):
            raise InvestmentDataError("investment", raw, "expected a JSON object")
        return cls(
            id=str(raw.get("id") or raw.get("_id") or ""),
            kind=raw.get("type", ""),
            principal_amount=raw.get("principalAmount"),
            interest_rate=raw.get("interestRate"),
            activation_date=raw.get("activationDate"),
            start_date=raw.get("startDate"),
            status=raw.get("status") or InvestmentStatus.ACTIVE,
            lock_in_period_months=raw.get("lockInPeriodMonths"),
            rd_period_months=raw.get("rdPeriodMonths"),
            payout_history=[
                Payout.from_dict(p)
                for p in _records("payoutHistory", raw.get("payoutHistory"))
            ],
            installments=[
                Installment.from_dict(i)
                for i in _records("installments", raw.get("installments"))
            ],
        )


def _records(name: str, raw) -> list:
    if raw is None:
        return []
    if not isinstance(raw, (list, tuple)):
        raise InvestmentDataError(name, raw, "expected a JSON array")
    return list(raw)


def _amount(name: str, raw) -> float:
    if raw is None or raw == "":
        return 0.0
    if isinstance(raw, bool):
        raise InvestmentDataError(name, raw, "expected a number")
    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        raise InvestmentDataError(name, raw, "expected a number") from e
    # NaN/inf must never reach a money display
    return value if math.isfinite(value) else 0.0


def _period(name: str, raw) -> int | None:
    value = _amount(name, raw)
    if value <= 0:
        return None
    return int(value)


def _instant(name: str, raw) -> datetime | None:
    try:
        return parse_instant(raw)
    except ValueError as e:
        raise InvestmentDataError(name, raw, str(e)) from e


def _ledger_status(raw) -> LedgerStatus:
    if isinstance(raw, LedgerStatus):
        return raw
    if isinstance(raw, str) and raw.strip().lower() == LedgerStatus.PAID.value:
        return LedgerStatus.PAID
    return LedgerStatus.PENDING


def _investment_status(raw) -> InvestmentStatus | str:
    if isinstance(raw, InvestmentStatus):
        return raw
    key = str(raw).strip().lower()
    try:
        return InvestmentStatus(key)
    except ValueError:
        return key
