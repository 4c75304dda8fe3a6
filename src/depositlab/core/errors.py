"""
Error classes for DepositLab.

The engine favours zero-valued results over exceptions for partially loaded
records. Exceptions are reserved for input the engine cannot interpret at all.
"""

from __future__ import annotations


class DepositLabError(Exception):
    """Base class for all DepositLab errors."""


class UnsupportedProductTypeError(DepositLabError, ValueError):
    """
    Raised when an investment's ``type`` is outside the supported products.

    Callers rendering a list of investments are expected to catch this and
    show a fallback card for the offending record instead of failing the screen.

    Attributes:
        product_type: The raw discriminant that could not be resolved
        investment_id: ID of the offending investment (if known)

    **Example Usage:**
        ```python
        from depositlab import value
        from depositlab.core.errors import UnsupportedProductTypeError

        try:
            result = value(investment, now)
        except UnsupportedProductTypeError as e:
            render_placeholder(e.investment_id)
        ```
    """

    def __init__(self, product_type, investment_id: str | None = None):
        self.product_type = product_type
        self.investment_id = investment_id
        super().__init__(self._fmt())

    def _fmt(self) -> str:
        prefix = f"[Investment {self.investment_id}] " if self.investment_id else ""
        return f"{prefix}unsupported product type {self.product_type!r}"


class InvestmentDataError(DepositLabError, ValueError):
    """
    Raised when an investment record holds a value that cannot be coerced.

    Missing fields are not errors (they default to zero/empty); this covers
    present-but-malformed values such as ``"activationDate": "not-a-date"``.
    """

    def __init__(self, field: str, value, reason: str = ""):
        self.field = field
        self.value = value
        detail = f": {reason}" if reason else ""
        super().__init__(f"invalid value for '{field}': {value!r}{detail}")
