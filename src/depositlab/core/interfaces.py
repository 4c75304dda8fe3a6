"""
Product rule protocol for DepositLab.
Defines the contract every product implementation must satisfy.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from .models import Investment
from .results import ProjectionPoint, Quote, SeriesPoint, TenureOption, Valuation


@runtime_checkable
class IProductRule(Protocol):
    """
    Contract for a product's valuation and series rules.

    Every method is a pure function of its arguments: implementations hold no
    state and never read the clock.
    """

    def value(self, investment: Investment, now: datetime) -> Valuation:
        """Live snapshot plus product breakdown at ``now``."""
        ...

    def project(
        self, principal: float, rate: float, months: int
    ) -> list[ProjectionPoint]:
        """
        Forward projection for months 0..months, ignoring the clock and ledger.

        ``rate`` carries the product's native semantics.
        """
        ...

    def history(self, investment: Investment, now: datetime) -> list[SeriesPoint]:
        """Chart series over the months that have actually elapsed."""
        ...

    def quote(self, amount: float, rate: float, months: int) -> Quote:
        """Calculator figures for a prospective investment."""
        ...

    def tenure_options(self, investment: Investment) -> list[TenureOption]:
        """Preview horizons offered for this product."""
        ...

    def default_tenure(self, investment: Investment) -> int:
        ...


__all__ = ["IProductRule"]
