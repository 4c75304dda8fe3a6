"""
DepositLab product kinds and constants.
"""

from __future__ import annotations

from enum import Enum


class ProductType(str, Enum):
    """
    Closed set of investment products the engine can value.

    The value is the wire discriminant sent by the data-fetch collaborator.
    """

    FD = "fd"  # Fixed Deposit: lump sum, monthly interest payouts, lock-in
    FD_PLUS = "fd_plus"  # 20-month combined principal + interest plan
    RD = "rd"  # Recurring Deposit: fixed monthly installments

    @classmethod
    def parse(cls, raw: str | ProductType | None) -> ProductType | None:
        """
        Map a wire discriminant to a ProductType.

        Accepts the aliases screens have historically sent ('fd-plus', 'fdplus').
        Returns None when the value is not a known product.
        """
        if isinstance(raw, ProductType):
            return raw
        if not isinstance(raw, str):
            return None
        key = raw.strip().lower().replace("-", "_").replace("+", "_plus")
        return _ALIASES.get(key)

    @property
    def label(self) -> str:
        return _LABELS[self]


_ALIASES: dict[str, ProductType] = {
    "fd": ProductType.FD,
    "fd_plus": ProductType.FD_PLUS,
    "fdplus": ProductType.FD_PLUS,
    "rd": ProductType.RD,
}

_LABELS: dict[ProductType, str] = {
    ProductType.FD: "Fixed Deposit",
    ProductType.FD_PLUS: "FD Plus",
    ProductType.RD: "Recurring Deposit",
}


class InvestmentStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"


class LedgerStatus(str, Enum):
    """Status of a single payout or installment record."""

    PAID = "paid"
    PENDING = "pending"


class P:
    # === Time ===
    SECONDS_PER_YEAR = 365 * 24 * 3600
    MONTHS_PER_YEAR = 12

    # === FD+ fixed plan ===
    FD_PLUS_TERM_MONTHS = 20
    FD_PLUS_PRINCIPAL_RETURN = 0.05  # share of principal handed back each month
    FD_PLUS_INTEREST = 0.05  # interest on original principal each month
    FD_PLUS_MONTHLY_RETURN = FD_PLUS_PRINCIPAL_RETURN + FD_PLUS_INTEREST

    # === Calculator defaults ===
    CALCULATOR_FD_RATE = 0.05  # monthly
    CALCULATOR_RD_RATE = 0.24  # annual

    # === Series ===
    SPARKLINE_MIN_POINTS = 3
    FD_DEFAULT_TERM_MONTHS = 12  # history window when no lock-in is set

    # === Tenure previews ===
    FD_TENURES = (
        ("3M", 3),
        ("6M", 6),
        ("1Y", 12),
        ("3Y", 36),
        ("5Y", 60),
        ("10Y", 120),
        ("20Y", 240),
    )
    FD_PLUS_TENURES = (("5M", 5), ("10M", 10), ("15M", 15), ("20M", 20))
    RD_TENURE_FRACTIONS = (("25%", 0.25), ("50%", 0.5), ("75%", 0.75), ("Full", 1.0))
