"""Entry point for running trade_analytics as a module.

Usage:
    python -m trade_analytics [command] [options]

Commands:
    report      Show a user's performance report
    snapshot    Store a user's default-period snapshot
    verify      Verify data directories

Examples:
    python -m trade_analytics report user_123 --period 3m
    python -m trade_analytics report user_123 --json
    python -m trade_analytics snapshot user_123
    python -m trade_analytics verify
"""

import sys

from trade_analytics.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
