"""
DepositLab - Valuation & Projection Engine for FD, FD+ and RD Investments

DepositLab computes, for a single retail investment or a whole portfolio, what
it is worth right now, how much interest has accrued, how much has been paid
out, and the growth curve to chart. It is stateless: every figure is derived
fresh from the investment record and an explicit ``now``.

Key Features:
- **Live Accrual**: Simple interest prorated to the second for ticking values
- **Ledger-aware**: Payout and installment histories drive disbursed totals
- **Product Rules**: One rule per product, selected by the ``type`` discriminant
- **Projection & History**: Chart series that agree between forward and backward views
- **Defensive**: Partially loaded records value to zero instead of raising

Products:
    - 'fd': Fixed Deposit - lump sum, monthly rate, optional lock-in
    - 'fd_plus': FD+ - 20 monthly payouts of 5 % principal + 5 % interest
    - 'rd': Recurring Deposit - monthly installments, annual rate

Quick Start:
    ```python
    from datetime import datetime, timezone
    from depositlab import Investment, value, project, history

    inv = Investment.from_dict({
        "id": "inv-1",
        "type": "rd",
        "principalAmount": 1000,
        "interestRate": 0.24,
        "activationDate": "2025-01-01T00:00:00Z",
        "rdPeriodMonths": 12,
        "installments": [
            {"dueDate": "2025-01-01T00:00:00Z", "status": "paid", "amountExpected": 1000},
            {"dueDate": "2025-02-01T00:00:00Z", "status": "pending", "amountExpected": 1000},
        ],
    })
    now = datetime(2025, 1, 20, tzinfo=timezone.utc)

    result = value(inv, now)
    result.snapshot.current_value
    history(inv, now)
    project("rd", 1000, 0.24, 12)
    ```
"""

# Version information
__version__ = "0.1.0"
__author__ = "DepositLab Team"
__description__ = "Valuation & Projection Engine for FD, FD+ and RD Investments"

import depositlab.products

from .core import (
    DepositLabError,
    FdDetails,
    FdPlusDetails,
    Installment,
    Investment,
    InvestmentDataError,
    InvestmentStatus,
    LedgerStatus,
    Payout,
    ProductType,
    ProjectionPoint,
    Quote,
    RdDetails,
    SeriesPoint,
    TenureOption,
    TimelineItem,
    UnsupportedProductTypeError,
    Valuation,
    ValuationSnapshot,
    accrue,
)
from .engine import (
    default_rate,
    default_tenure,
    history,
    project,
    project_investment,
    quote,
    rd_timeline,
    series_frame,
    snapshot,
    tenure_options,
    value,
)
from .portfolio import PortfolioSummary, portfolio_frame, portfolio_summary

# Import chart functions (optional - requires plotly)
try:
    from .charts import (
        PLOTLY_AVAILABLE,
        allocation_by_type,
        growth_chart,
        projection_chart,
        save_chart,
    )

    CHARTS_AVAILABLE = PLOTLY_AVAILABLE
except ImportError:
    CHARTS_AVAILABLE = False

__all__ = [
    # Records
    "Investment",
    "Payout",
    "Installment",
    "ProductType",
    "InvestmentStatus",
    "LedgerStatus",
    # Results
    "Valuation",
    "ValuationSnapshot",
    "FdDetails",
    "FdPlusDetails",
    "RdDetails",
    "SeriesPoint",
    "ProjectionPoint",
    "TimelineItem",
    "TenureOption",
    "Quote",
    # Errors
    "DepositLabError",
    "InvestmentDataError",
    "UnsupportedProductTypeError",
    # Engine
    "accrue",
    "value",
    "snapshot",
    "project",
    "project_investment",
    "history",
    "tenure_options",
    "default_tenure",
    "default_rate",
    "rd_timeline",
    "quote",
    "series_frame",
    # Portfolio
    "PortfolioSummary",
    "portfolio_frame",
    "portfolio_summary",
    # Version info
    "__version__",
    "__author__",
    "__description__",
]

# Add chart functions to __all__ if available
if CHARTS_AVAILABLE:
    __all__.extend(
        [
            "growth_chart",
            "projection_chart",
            "allocation_by_type",
            "save_chart",
        ]
    )
