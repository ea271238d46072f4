"""
Trade Journal - command line report

Usage:
    python main.py --trades trades.json               # Report on an exported journal
    python main.py --trades trades.json --profile me.json
    python main.py --sample 150                       # Report on a generated journal
"""

import argparse
import json
import sys
from datetime import datetime

from analytics.report import JournalReport
from analytics.violations import ViolationRules
from config.settings import get_settings
from journal.sample_data import generate_sample_trades
from journal.store import JournalStoreError, TradeStore
from models.profile import UserProfile
from utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Performance report and rule checks for a trade journal"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--trades",
        help="JSON file with a list of trades (or a {\"data\": [...]} response)",
    )
    source.add_argument(
        "--sample",
        type=int,
        metavar="N",
        help="Generate N sample trades instead of loading a file",
    )
    parser.add_argument(
        "--profile",
        help="JSON file with the user profile (default: settings)",
    )
    parser.add_argument(
        "--recent",
        type=int,
        default=None,
        help="Number of recent trades to list (default: settings)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: settings)",
    )
    return parser.parse_args(argv)


def load_profile(path, defaults: UserProfile) -> UserProfile:
    """Read a profile file, falling back to ``defaults`` per field."""
    if not path:
        return defaults
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    # Profile endpoint wraps the payload like the trades endpoint
    if isinstance(data, dict) and isinstance(data.get("data"), dict):
        data = data["data"]
    return UserProfile.from_dict(data, defaults=defaults)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    settings = get_settings()

    setup_logging(
        level=args.log_level or settings.log_level,
        log_to_file=settings.log_to_file,
        log_path=settings.log_path,
    )

    try:
        profile = load_profile(args.profile, UserProfile.from_settings(settings.profile))
        store = TradeStore()
        if args.trades:
            store.load_json(args.trades)
        else:
            for trade in generate_sample_trades(args.sample, datetime(2023, 1, 1)):
                store.add(trade)
    except (OSError, ValueError, JournalStoreError) as e:
        logger.error(f"Could not load journal: {e}")
        return 1

    report = JournalReport(
        store.list(),
        profile=profile,
        rules=ViolationRules.from_settings(settings.risk),
    )
    report.print_summary()
    report.print_strategies()
    recent = args.recent if args.recent is not None else settings.recent_trades_limit
    report.print_trades(limit=recent)
    report.print_violations()
    return 0


if __name__ == "__main__":
    sys.exit(main())
