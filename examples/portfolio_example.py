"""
Value a small customer portfolio and chart one RD's growth.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone

from depositlab import engine
from depositlab.charts import PLOTLY_AVAILABLE, growth_chart
from depositlab.core.currency import INR
from depositlab.portfolio import portfolio_frame, portfolio_summary

NOW = datetime(2025, 7, 15, tzinfo=timezone.utc)


def rd_record() -> dict:
    installments = []
    for month in range(1, 13):
        installments.append(
            {
                "dueDate": f"2025-{month:02d}-15T00:00:00Z",
                "status": "paid" if month <= 6 else "pending",
                "amountExpected": 1000,
            }
        )
    return {
        "id": "rd-demo",
        "type": "rd",
        "principalAmount": 1000,
        "interestRate": 0.24,
        "activationDate": "2025-01-15T00:00:00Z",
        "rdPeriodMonths": 12,
        "installments": installments,
    }


def fd_plus_record() -> dict:
    return {
        "id": "fdp-demo",
        "type": "fd_plus",
        "principalAmount": 20000,
        "activationDate": "2025-01-15T00:00:00Z",
        "payoutHistory": [
            {"payoutDate": f"2025-{month:02d}-15T00:00:00Z", "status": "paid"}
            for month in range(2, 7)
        ],
    }


def main() -> None:
    investments = [rd_record(), fd_plus_record()]

    summary = portfolio_summary(investments, NOW)
    print(json.dumps(summary.to_dict(), indent=2))
    print(portfolio_frame(investments, NOW).to_string(index=False))

    rd = engine.value(rd_record(), NOW)
    print(f"RD maturity value: {INR.format(rd.details.maturity_value)}")
    for item in engine.rd_timeline(rd_record()):
        print(f"  {item.label} {item.status}")

    if not PLOTLY_AVAILABLE:
        return
    fig, _ = growth_chart(engine.history(rd_record(), NOW), title="RD growth")
    fig.write_html("rd_growth.html")


if __name__ == "__main__":
    main()
