#!/usr/bin/env python3
"""
Sleeper Weekly Dashboard CLI

Loads one week of a Sleeper league and prints the top performers and
team leaderboards.

Usage:
    python dashboard_cli.py --league-id 1234567890 --week 3
    python dashboard_cli.py --week 3 --output web/data/dashboard_week_3.json
"""

import argparse
import logging
import sys

from sleeperdash import DataLoader, LoadError, build_dashboard, config_from_env, format_dashboard_text
from sleeperdash.logging_config import setup_logging
from sleeperdash.utils import save_json


def main():
    parser = argparse.ArgumentParser(description="Sleeper weekly fantasy football dashboard")
    parser.add_argument(
        "--league-id", "-l",
        default=None,
        help="Sleeper league id (defaults to SLEEPER_LEAGUE_ID)",
    )
    parser.add_argument(
        "--week", "-w",
        type=int,
        default=None,
        help="Week number (defaults to SLEEPER_WEEK)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write the dashboard view model to this JSON file",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Don't print the tables",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = config_from_env()
    overrides = {}
    if args.league_id:
        overrides["league_id"] = args.league_id
    if args.week is not None:
        overrides["week"] = args.week
    if overrides:
        config = config.model_validate({**config.model_dump(), **overrides})

    loader = DataLoader(config)
    try:
        loader.load()
    except LoadError as e:
        print(f"❌ {e.message}")
        sys.exit(1)
    finally:
        loader.client.close()

    view = build_dashboard(loader)

    if not args.quiet:
        print(format_dashboard_text(view))

    if args.output:
        save_json(args.output, view)
        print(f"Dashboard written: {args.output}")


if __name__ == "__main__":
    main()
