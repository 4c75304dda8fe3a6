"""
Portfolio aggregation across many investments.

A customer's dashboard sums the live snapshots of every investment they hold.
One malformed or unsupported record must not blank the whole dashboard, so
such records are skipped and logged rather than raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

import pandas as pd

from depositlab.core.errors import DepositLabError
from depositlab.engine import as_instant, as_investment, value

log = logging.getLogger(__name__)

FRAME_COLUMNS = [
    "id",
    "type",
    "principal_invested",
    "current_value",
    "total_gain",
    "gain_percentage",
    "gain_per_second",
    "status",
]


@dataclass(frozen=True)
class PortfolioSummary:
    """
    Totals across a set of investments.

    Attributes:
        total_invested: Sum of principal invested
        current_value: Sum of live values
        total_gain: current_value - total_invested
        gain_percentage: total_gain / total_invested * 100 (0 when nothing invested)
        gain_per_second: Combined tick rate of the live total
        count: Investments that were valued
        skipped: IDs of investments that could not be valued
        by_type: Count of valued investments per product type
    """

    total_invested: float = 0.0
    current_value: float = 0.0
    total_gain: float = 0.0
    gain_percentage: float = 0.0
    gain_per_second: float = 0.0
    count: int = 0
    skipped: tuple[str, ...] = ()
    by_type: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "totalInvested": self.total_invested,
            "currentValue": self.current_value,
            "totalGain": self.total_gain,
            "gainPercentage": self.gain_percentage,
            "gainPerSecond": self.gain_per_second,
            "count": self.count,
            "skipped": list(self.skipped),
            "byType": dict(self.by_type),
        }


def _valued_rows(investments, now: datetime) -> tuple[list[dict], list[str]]:
    rows = []
    skipped = []
    for raw in investments:
        try:
            inv = as_investment(raw)
            result = value(inv, now)
        except DepositLabError as e:
            ident = raw.get("id", "") if isinstance(raw, dict) else getattr(raw, "id", "")
            log.warning("skipping investment %s: %s", ident or "<unknown>", e)
            skipped.append(str(ident))
            continue
        snap = result.snapshot
        rows.append(
            {
                "id": result.investment_id,
                "type": result.kind.value,
                "principal_invested": snap.principal_invested,
                "current_value": snap.current_value,
                "total_gain": snap.total_gain,
                "gain_percentage": snap.gain_percentage,
                "gain_per_second": snap.gain_per_second,
                "status": snap.status,
            }
        )
    return rows, skipped


def portfolio_frame(investments, now: datetime | str) -> pd.DataFrame:
    """
    One row per valued investment with its snapshot fields.

    Args:
        investments: Iterable of Investment objects or JSON-shaped dicts
        now: Evaluation instant

    Returns:
        DataFrame with FRAME_COLUMNS (empty when nothing could be valued)
    """
    rows, _ = _valued_rows(investments, as_instant(now))
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def portfolio_summary(investments, now: datetime | str) -> PortfolioSummary:
    """
    Aggregate live snapshots into portfolio totals.

    Example:
        ```python
        summary = portfolio_summary(customer_investments, now)
        summary.current_value, summary.gain_percentage
        ```
    """
    rows, skipped = _valued_rows(investments, as_instant(now))
    if not rows:
        return PortfolioSummary(skipped=tuple(skipped))

    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    invested = float(df["principal_invested"].sum())
    current = float(df["current_value"].sum())
    gain = current - invested
    pct = gain / invested * 100 if invested > 0 else 0.0
    return PortfolioSummary(
        total_invested=invested,
        current_value=current,
        total_gain=gain,
        gain_percentage=pct,
        gain_per_second=float(df["gain_per_second"].sum()),
        count=len(df),
        skipped=tuple(skipped),
        by_type={k: int(v) for k, v in df["type"].value_counts().sort_index().items()},
    )
