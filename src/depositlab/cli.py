"""
Command-line interface for DepositLab.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from depositlab import __version__, engine
from depositlab.core.currency import get_currency
from depositlab.core.dates import parse_instant, utcnow
from depositlab.core.errors import DepositLabError
from depositlab.portfolio import portfolio_summary

EXAMPLE = {
    "id": "inv-demo",
    "type": "fd",
    "principalAmount": 100000,
    "interestRate": 0.05,
    "activationDate": "2025-01-15T00:00:00Z",
    "status": "active",
    "lockInPeriodMonths": 12,
    "payoutHistory": [
        {"payoutDate": "2025-02-15T00:00:00Z", "status": "paid"},
        {"payoutDate": "2025-03-15T00:00:00Z", "status": "paid"},
        {"payoutDate": "2025-04-15T00:00:00Z", "status": "pending"},
    ],
}


def _load_json(path: str):
    """Load JSON from file path ('-' reads stdin)."""
    if path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _dump(data) -> None:
    json.dump(data, sys.stdout, indent=2)
    sys.stdout.write("\n")


def _now(args):
    return parse_instant(args.now) if args.now else utcnow()


def cmd_example(args) -> int:
    """Print a minimal investment JSON."""
    _dump(EXAMPLE)
    return 0


def cmd_value(args) -> int:
    """Value one investment at --now (default: current time)."""
    result = engine.value(_load_json(args.input), _now(args))
    if args.format == "json":
        _dump(result.to_dict())
        return 0

    money = get_currency(args.currency).format
    snap = result.snapshot
    print(f"{result.kind.label} {result.investment_id}".strip())
    print(f"  Invested:      {money(snap.principal_invested)}")
    print(f"  Current value: {money(snap.current_value)}")
    print(f"  Total gain:    {money(snap.total_gain)} ({snap.gain_percentage:.2f}%)")
    print(f"  Per second:    {snap.gain_per_second:.6f}")
    print(f"  Status:        {snap.status}")
    for key, val in result.details.to_dict().items():
        if key == "status":
            continue
        print(f"  {key}: {val}")
    return 0


def cmd_history(args) -> int:
    """Print the historical chart series of one investment."""
    points = engine.history(_load_json(args.input), _now(args))
    if args.format == "json":
        _dump([p.to_dict() for p in points])
        return 0
    money = get_currency(args.currency).format
    for p in points:
        marker = " (projected)" if p.projected else ""
        print(f"{p.label:>6}  {money(p.invested):>16}  {money(p.value):>16}{marker}")
    return 0


def cmd_project(args) -> int:
    """Print a forward projection for a product."""
    rate = args.rate if args.rate is not None else engine.default_rate(args.type)
    points = engine.project(args.type, args.principal, rate, args.months)
    if args.format == "json":
        _dump([p.to_dict() for p in points])
        return 0
    money = get_currency(args.currency).format
    for p in points:
        print(f"{p.month:>4}  {money(p.value):>16}")
    return 0


def cmd_portfolio(args) -> int:
    """Aggregate a JSON list of investments."""
    data = _load_json(args.input)
    if isinstance(data, dict):
        data = data.get("investments", [])
    summary = portfolio_summary(data, _now(args))
    if args.format == "json":
        _dump(summary.to_dict())
        return 0
    money = get_currency(args.currency).format
    print(f"Investments:   {summary.count}")
    print(f"Invested:      {money(summary.total_invested)}")
    print(f"Current value: {money(summary.current_value)}")
    print(f"Total gain:    {money(summary.total_gain)} ({summary.gain_percentage:.1f}%)")
    if summary.skipped:
        print(f"Skipped:       {', '.join(summary.skipped)}")
    return 0


def _add_output_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format", choices=["human", "json"], default="human", help="Output format"
    )
    parser.add_argument(
        "--currency", default="INR", help="Currency used for display (default: INR)"
    )


def _add_now_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--now", help="Evaluation instant, ISO-8601 (default: current time)"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="depositlab", description="DepositLab - FD, FD+ and RD valuation engine"
    )
    parser.add_argument(
        "--version", action="version", version=f"DepositLab {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(
        dest="cmd", required=True, help="Available commands"
    )

    example_parser = subparsers.add_parser(
        "example", help="Print a minimal investment JSON"
    )
    example_parser.set_defaults(func=cmd_example)

    value_parser = subparsers.add_parser("value", help="Value one investment")
    value_parser.add_argument(
        "-i", "--input", required=True, help="Investment JSON file ('-' for stdin)"
    )
    _add_now_arg(value_parser)
    _add_output_args(value_parser)
    value_parser.set_defaults(func=cmd_value)

    history_parser = subparsers.add_parser(
        "history", help="Historical chart series of one investment"
    )
    history_parser.add_argument(
        "-i", "--input", required=True, help="Investment JSON file ('-' for stdin)"
    )
    _add_now_arg(history_parser)
    _add_output_args(history_parser)
    history_parser.set_defaults(func=cmd_history)

    project_parser = subparsers.add_parser(
        "project", help="Forward projection for a product"
    )
    project_parser.add_argument(
        "--type", required=True, help="Product type: fd, fd_plus or rd"
    )
    project_parser.add_argument(
        "--principal", type=float, required=True, help="Principal or RD installment"
    )
    project_parser.add_argument(
        "--rate",
        type=float,
        default=None,
        help=(
            "Rate as a decimal (FD monthly, RD annual; ignored for FD+). "
            "Defaults to the calculator rate: 0.05 for FD, 0.24 for RD"
        ),
    )
    project_parser.add_argument(
        "--months", type=int, default=12, help="Horizon in months (default: 12)"
    )
    _add_output_args(project_parser)
    project_parser.set_defaults(func=cmd_project)

    portfolio_parser = subparsers.add_parser(
        "portfolio", help="Aggregate a JSON list of investments"
    )
    portfolio_parser.add_argument(
        "-i", "--input", required=True, help="JSON list of investments ('-' for stdin)"
    )
    _add_now_arg(portfolio_parser)
    _add_output_args(portfolio_parser)
    portfolio_parser.set_defaults(func=cmd_portfolio)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (DepositLabError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
