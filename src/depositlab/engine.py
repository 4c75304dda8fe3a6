"""
Public entry points of the valuation and projection engine.

Every function here is a pure function of its arguments. ``now`` is always
passed in explicitly; callers animate ticking values by calling ``value`` or
``snapshot`` again on their own timer.

Example:
    ```python
    from datetime import datetime, timezone
    from depositlab import engine

    inv = {
        "id": "inv-1",
        "type": "fd",
        "principalAmount": 100000,
        "interestRate": 0.05,
        "activationDate": "2025-01-15T00:00:00Z",
        "lockInPeriodMonths": 12,
    }
    now = datetime(2025, 7, 1, tzinfo=timezone.utc)

    engine.snapshot(inv, now).current_value
    engine.project("fd", 100000, 0.05, 12)
    engine.history(inv, now)
    ```
"""

from __future__ import annotations

from datetime import datetime

import pandas as pd

import depositlab.products  # noqa: F401  registers the default rules
from depositlab.core.dates import parse_instant
from depositlab.core.kinds import P, ProductType
from depositlab.core.models import Investment
from depositlab.core.registry import resolve_rule
from depositlab.core.results import (
    ProjectionPoint,
    Quote,
    SeriesPoint,
    TenureOption,
    TimelineItem,
    Valuation,
    ValuationSnapshot,
)


def as_investment(investment: Investment | dict) -> Investment:
    """Accept either a normalised Investment or its JSON-shaped dict."""
    if isinstance(investment, Investment):
        return investment
    return Investment.from_dict(investment)


def as_instant(now) -> datetime:
    instant = parse_instant(now)
    if instant is None:
        raise ValueError("now is required; pass the evaluation instant explicitly")
    return instant


def value(investment: Investment | dict, now: datetime | str) -> Valuation:
    """
    Live valuation of one investment: snapshot plus product breakdown.

    Raises:
        UnsupportedProductTypeError: If the investment's type is not fd, fd_plus or rd
    """
    inv = as_investment(investment)
    rule = resolve_rule(inv.kind, inv.id)
    return rule.value(inv, as_instant(now))


def snapshot(investment: Investment | dict, now: datetime | str) -> ValuationSnapshot:
    """The Valuation Snapshot alone; see ``value``."""
    return value(investment, now).snapshot


def project(
    kind: ProductType | str,
    principal: float,
    rate: float,
    horizon_months: int,
) -> list[ProjectionPoint]:
    """
    Forward projection for months 0..horizon_months, independent of the clock.

    ``rate`` uses the product's native semantics: monthly for FD, annual for RD,
    ignored for FD+.
    """
    return resolve_rule(kind).project(principal, rate, horizon_months)


def project_investment(
    investment: Investment | dict, horizon_months: int | None = None
) -> list[ProjectionPoint]:
    """Project an existing investment, defaulting to its product's preview tenure."""
    inv = as_investment(investment)
    rule = resolve_rule(inv.kind, inv.id)
    if horizon_months is None:
        horizon_months = rule.default_tenure(inv)
    return rule.project(inv.principal_amount, inv.interest_rate, horizon_months)


def history(investment: Investment | dict, now: datetime | str) -> list[SeriesPoint]:
    """Chart series over the months actually elapsed since activation."""
    inv = as_investment(investment)
    return resolve_rule(inv.kind, inv.id).history(inv, as_instant(now))


def tenure_options(investment: Investment | dict) -> list[TenureOption]:
    inv = as_investment(investment)
    return resolve_rule(inv.kind, inv.id).tenure_options(inv)


def default_tenure(investment: Investment | dict) -> int:
    inv = as_investment(investment)
    return resolve_rule(inv.kind, inv.id).default_tenure(inv)


def rd_timeline(investment: Investment | dict) -> list[TimelineItem]:
    """Installment grid for an RD; empty for other products."""
    inv = as_investment(investment)
    rule = resolve_rule(inv.kind, inv.id)
    if inv.product is not ProductType.RD:
        return []
    return rule.timeline(inv)


def quote(
    kind: ProductType | str,
    amount: float,
    months: int,
    rate: float | None = None,
) -> Quote:
    """
    Calculator figures for a prospective investment.

    When ``rate`` is omitted the advertised rates apply: 5 % monthly for FD,
    24 % annual for RD. FD+ always runs its fixed 20-month term.
    """
    rule = resolve_rule(kind)
    if rate is None:
        rate = default_rate(kind)
    return rule.quote(amount, rate, months)


def default_rate(kind: ProductType | str) -> float:
    """Advertised calculator rate in the product's native terms (unused by FD+)."""
    if ProductType.parse(kind) is ProductType.RD:
        return P.CALCULATOR_RD_RATE
    return P.CALCULATOR_FD_RATE


def series_frame(points: list[SeriesPoint] | list[ProjectionPoint]) -> pd.DataFrame:
    """
    Tidy DataFrame of a series, one row per point.

    History series get columns label/invested/value/projected; projections get
    month/value.
    """
    if not points:
        return pd.DataFrame(columns=list(SeriesPoint._fields))
    return pd.DataFrame([p._asdict() for p in points])
