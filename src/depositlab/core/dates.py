"""
Calendar helpers for DepositLab.

All instants handled by the engine are timezone-aware UTC ``datetime`` objects.
Month arithmetic is whole calendar months (year*12 + month), never day counts.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

import pandas as pd


def parse_instant(value) -> datetime | None:
    """
    Normalise an ISO-8601 string, ``date`` or ``datetime`` to an aware UTC datetime.

    **Args:**
        value: ISO string (``"2025-01-15T10:00:00Z"``, ``"2025-01-15"``), ``date``,
            ``datetime``, ``pd.Timestamp`` or None

    **Returns:**
        Aware UTC datetime, or None for None/empty input

    **Raises:**
        ValueError: If a string cannot be parsed as a date

    **Example:**
        ```python
        parse_instant("2025-01-15")
        # datetime(2025, 1, 15, 0, 0, tzinfo=timezone.utc)
        ```

    **Note:**
        Naive values are taken to be UTC.
    """
    if value is None:
        return None
    if isinstance(value, str):
        if not value.strip():
            return None
        ts = pd.Timestamp(value.strip())
    elif isinstance(value, (datetime, date)):
        ts = pd.Timestamp(value)
    else:
        raise ValueError(f"cannot interpret {type(value).__name__} as a date")

    if pd.isna(ts):
        return None
    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    else:
        ts = ts.tz_convert("UTC")
    return ts.to_pydatetime()


def utcnow() -> datetime:
    """Current wall-clock instant. Only the CLI reads the clock."""
    return datetime.now(timezone.utc)


def months_elapsed(start: datetime, end: datetime) -> int:
    """
    Whole calendar months from ``start`` to ``end``.

    Day of month is ignored: Jan 31 -> Feb 1 counts as one month. The result is
    negative when ``end`` precedes ``start``.
    """
    return (end.year - start.year) * 12 + (end.month - start.month)


def add_months(instant: datetime, months: int) -> datetime:
    """
    Shift an instant by calendar months, clamping to month end (Jan 31 + 1 -> Feb 28).
    """
    return (pd.Timestamp(instant) + pd.DateOffset(months=int(months))).to_pydatetime()


def month_label(instant: datetime) -> str:
    """Abbreviated calendar month used as a chart label (e.g. 'Jan')."""
    return instant.strftime("%b")


def to_iso(instant: datetime | None) -> str | None:
    """ISO-8601 with a trailing 'Z' for UTC instants."""
    if instant is None:
        return None
    return instant.isoformat().replace("+00:00", "Z")
