"""Command Line Interface for Trade Analytics.

Provides CLI access to analytics functions:
- report: Show a user's performance report
- snapshot: Recompute and store a user's default-period snapshot
- verify: Verify data directories

Usage:
    python -m trade_analytics report USER [--period 3m] [--json]
    python -m trade_analytics report USER --start 2024-01-01 --end 2024-06-30
    python -m trade_analytics snapshot USER
    python -m trade_analytics verify
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from trade_analytics import __version__
from trade_analytics.infrastructure import (
    DataPaths,
    DEFAULT_CONFIG,
    MatchedTradeRepository,
    RepositoryError,
    SnapshotRepository,
)
from trade_analytics.application import AnalyticsQuery, AnalyticsService


def _paths(args: argparse.Namespace) -> DataPaths:
    return DataPaths(root=Path(args.root))


def cmd_report(args: argparse.Namespace) -> int:
    """Show a user's performance report."""
    config = replace(DEFAULT_CONFIG, histogram_bins=args.bins)
    service = AnalyticsService(paths=_paths(args), config=config)

    try:
        query = AnalyticsQuery.from_params(
            period=args.period,
            start_date=args.start,
            end_date=args.end,
        )
        result = service.get_user_analytics(args.user, query)
    except ValueError as e:
        print(f"Invalid query: {e}")
        return 1
    except RepositoryError as e:
        print(f"User not found: {args.user} ({e})")
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return 0

    s = result.snapshot
    summary = result.summary

    print(f"Trade Analytics v{__version__}")
    print("=" * 50)
    print(f"User: {args.user}")
    if summary.start is not None:
        print(f"Period: {summary.start} to {summary.end} ({summary.total_trades} trades)")
    else:
        print("Period: no trades")
    if result.used_precomputed:
        print("(stored snapshot)")
    print()

    print("[PNL]")
    print(f"  Net PNL: {s.total_net_profit_loss:+,.2f}")
    print(f"  Gross profit: {s.gross_profit:,.2f}")
    print(f"  Gross loss: {s.gross_loss:,.2f}")
    print(f"  Profit factor: {s.profit_factor}")
    print()

    print("[Win Rate]")
    print(f"  Winning trades: {s.winning_trades:,}")
    print(f"  Losing trades: {s.losing_trades:,}")
    print(f"  Total trades: {s.total_trades:,}")
    print(f"  Win rate: {s.win_rate:.1f}%")
    print(f"  Avg win: {s.avg_profit_per_win:,.2f}  Avg loss: {s.avg_loss_per_loss:,.2f}")
    print()

    print("[Risk]")
    print(f"  Max drawdown: {s.max_drawdown:,.2f} ({s.max_drawdown_percent:.1f}%)")
    print(f"  Avg drawdown: {s.avg_drawdown:,.2f}")
    print(f"  Longest win streak: {s.longest_win_streak}")
    print(f"  Longest loss streak: {s.longest_loss_streak}")
    print(f"  Profitable days: {s.profitable_days}  Loss days: {s.loss_days}")

    symbols = result.chart_data.symbol_performance
    if symbols:
        print()
        print("[Top Symbols]")
        print(f"{'Symbol':<10} {'Trades':>6} {'Total PNL':>14} {'Avg PNL':>12}")
        print("-" * 45)
        for row in symbols:
            print(f"{row.symbol:<10} {row.trades:>6} "
                  f"{row.total_pnl:>+14,.2f} {row.avg_pnl:>+12,.2f}")

    return 0


def cmd_snapshot(args: argparse.Namespace) -> int:
    """Recompute and store a user's default-period snapshot."""
    paths = _paths(args)
    service = AnalyticsService(paths=paths)

    try:
        snapshot = service.default_snapshot(args.user)
    except RepositoryError as e:
        print(f"User not found: {args.user} ({e})")
        return 1

    SnapshotRepository(paths).save(args.user, snapshot)
    print(f"Stored snapshot: {paths.user_snapshot_path(args.user)}")
    print(f"  Trades: {snapshot.total_trades:,}  Net PNL: {snapshot.total_net_profit_loss:+,.2f}")
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """Verify data directories."""
    paths = _paths(args)

    print("[Data Verification]")
    print("=" * 50)

    errors = []

    # 1. Check directories exist
    print("\n1. Checking data directories...")
    missing = paths.validate()
    if missing:
        for m in missing:
            print(f"  ✗ Missing: {m}")
            errors.append(f"Missing directory: {m}")
    else:
        print("  ✓ Data directories present")

    # 2. Check every user's trades load
    print("\n2. Checking matched trades...")
    repo = MatchedTradeRepository(paths)
    users = repo.list_users()
    print(f"  Users: {len(users)}")
    for user_id in users:
        try:
            trades = repo.get_user(user_id)
            print(f"  ✓ {user_id}: {len(trades):,} trades")
        except RepositoryError as e:
            print(f"  ✗ {user_id}: {e}")
            errors.append(str(e))

    # 3. Check stored snapshots parse
    print("\n3. Checking stored snapshots...")
    try:
        snapshots = SnapshotRepository(paths).get_all()
        print(f"  Snapshots: {len(snapshots)}")
    except RepositoryError as e:
        print(f"  ✗ Error: {e}")
        errors.append(str(e))

    print("\n" + "=" * 50)
    if errors:
        print(f"❌ Found {len(errors)} problem(s)")
        return 1
    else:
        print("✅ All checks passed")
        return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="trade_analytics",
        description="Trade Analytics - Matched Trade Performance Analysis",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Project root containing the data/ directory",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # report command
    report_parser = subparsers.add_parser("report", help="Show performance report")
    report_parser.add_argument("user", help="User identifier")
    report_parser.add_argument(
        "-p", "--period",
        default=DEFAULT_CONFIG.default_period,
        help="Relative period: 1m, 3m, 6m, 1y (default: %(default)s)",
    )
    report_parser.add_argument("--start", help="Range start (YYYY-MM-DD)")
    report_parser.add_argument("--end", help="Range end (YYYY-MM-DD)")
    report_parser.add_argument(
        "--bins",
        type=int,
        default=DEFAULT_CONFIG.histogram_bins,
        help="Histogram bins (default: %(default)s)",
    )
    report_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON",
    )

    # snapshot command
    snapshot_parser = subparsers.add_parser("snapshot", help="Store default snapshot")
    snapshot_parser.add_argument("user", help="User identifier")

    # verify command
    subparsers.add_parser("verify", help="Verify data directories")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "report": cmd_report,
        "snapshot": cmd_snapshot,
        "verify": cmd_verify,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
