"""
Display-only money formatting for DepositLab.

Engine arithmetic stays in unrounded floats; rounding here is presentation and
must never be fed back into a computation.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal
from enum import Enum
import math


class RoundingPolicy(Enum):
    """Rounding policies for displayed amounts."""

    BANKERS = ROUND_HALF_EVEN
    HALF_UP = ROUND_HALF_UP


class Currency:
    """
    Currency definition with display precision, symbol and digit grouping.

    Attributes:
        code: ISO currency code (e.g., 'INR')
        decimals: Number of decimal places shown
        symbol: Prefix used by ``format``
        grouping: 'indian' (12,34,567) or 'western' (1,234,567)
        rounding: Rounding policy for display
    """

    def __init__(
        self,
        code: str,
        decimals: int = 2,
        symbol: str = "",
        grouping: str = "western",
        rounding: RoundingPolicy = RoundingPolicy.HALF_UP,
    ):
        self.code = code.upper()
        self.decimals = decimals
        self.symbol = symbol
        self.grouping = grouping
        self.rounding = rounding

    def quantize(self, amount: float | Decimal) -> Decimal:
        """Quantize amount to display precision. Non-finite input shows as 0."""
        if isinstance(amount, float) and not math.isfinite(amount):
            amount = 0.0
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        quantum = Decimal("1").scaleb(-self.decimals)
        return value.quantize(quantum, rounding=self.rounding.value)

    def format(self, amount: float | Decimal) -> str:
        """
        Render an amount for display.

        Example:
            INR.format(1234567.891)  # '₹12,34,567.89'
        """
        q = self.quantize(amount)
        sign = "-" if q < 0 else ""
        text = f"{abs(q):.{self.decimals}f}"
        whole, _, frac = text.partition(".")
        grouped = _group_indian(whole) if self.grouping == "indian" else f"{int(whole):,}"
        body = f"{grouped}.{frac}" if frac else grouped
        return f"{sign}{self.symbol}{body}"

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Currency('{self.code}', decimals={self.decimals})"


def _group_indian(digits: str) -> str:
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


INR = Currency("INR", decimals=2, symbol="₹", grouping="indian")
USD = Currency("USD", decimals=2, symbol="$")
EUR = Currency("EUR", decimals=2, symbol="€")

CURRENCIES: dict[str, Currency] = {
    "INR": INR,
    "USD": USD,
    "EUR": EUR,
}


def get_currency(code: str) -> Currency:
    """Get currency by code; unknown codes get 2 decimals and no symbol."""
    code = code.upper()
    if code not in CURRENCIES:
        return Currency(code, decimals=2)
    return CURRENCIES[code]
