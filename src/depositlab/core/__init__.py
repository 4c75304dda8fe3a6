"""
Core components for DepositLab.

This package holds the product-independent building blocks: input records,
output types, the accrual function, ledger reducers, calendar helpers and the
product rule registry.
"""

from .accrual import accrue, per_second
from .currency import INR, Currency, RoundingPolicy, get_currency
from .dates import add_months, months_elapsed, parse_instant
from .errors import DepositLabError, InvestmentDataError, UnsupportedProductTypeError
from .interfaces import IProductRule
from .kinds import InvestmentStatus, LedgerStatus, P, ProductType
from .ledger import LedgerSummary, reduce_installments, reduce_payouts
from .models import Installment, Investment, Payout
from .registry import ProductRegistry, resolve_rule
from .results import (
    FdDetails,
    FdPlusDetails,
    ProjectionPoint,
    Quote,
    RdDetails,
    SeriesPoint,
    TenureOption,
    TimelineItem,
    Valuation,
    ValuationSnapshot,
)

__all__ = [
    # Accrual
    "accrue",
    "per_second",
    # Display
    "Currency",
    "RoundingPolicy",
    "INR",
    "get_currency",
    # Dates
    "add_months",
    "months_elapsed",
    "parse_instant",
    # Errors
    "DepositLabError",
    "InvestmentDataError",
    "UnsupportedProductTypeError",
    # Kinds
    "ProductType",
    "InvestmentStatus",
    "LedgerStatus",
    "P",
    # Ledger
    "LedgerSummary",
    "reduce_payouts",
    "reduce_installments",
    # Records
    "Investment",
    "Payout",
    "Installment",
    # Registry
    "IProductRule",
    "ProductRegistry",
    "resolve_rule",
    # Results
    "ValuationSnapshot",
    "Valuation",
    "FdDetails",
    "FdPlusDetails",
    "RdDetails",
    "SeriesPoint",
    "ProjectionPoint",
    "TimelineItem",
    "TenureOption",
    "Quote",
]
