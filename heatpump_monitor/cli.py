"""
Command Line Interface for Heat Pump Monitor
"""

import argparse
import csv
import json
import logging
import sys
from typing import List, Optional

from .core.config import MonitorConfig
from .core.exceptions import HeatPumpMonitorError
from .core.monitor import HeatPumpMonitor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Heat Pump Monitor - scrape listings and summarize their history'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    scrape = subparsers.add_parser('scrape', help='Fetch current listings and save them to CSV')
    scrape.add_argument(
        '--url',
        type=str,
        help='Listing page URL (default: HEATPUMP_SCRAPE_URL or the Samsung category page)'
    )

    summary = subparsers.add_parser('summary', help='Summarize the saved listing history')
    summary.add_argument(
        '--top',
        type=int,
        help='Number of top features to report (default: 5)'
    )

    for sub in (scrape, summary):
        sub.add_argument(
            '--csv',
            type=str,
            help='CSV history file (default: HEATPUMP_CSV_PATH or heat_pumps.csv)'
        )
        sub.add_argument(
            '--verbose',
            action='store_true',
            help='Enable verbose logging'
        )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO

    try:
        config = MonitorConfig.from_env()
        if args.csv:
            config.csv_path = args.csv
        if getattr(args, 'url', None):
            config.scrape_url = args.url

        with HeatPumpMonitor(config=config, log_level=log_level) as monitor:
            if args.command == 'scrape':
                result = monitor.scrape_and_save()
                print(json.dumps(result.to_dict(), indent=2))
            else:
                summary = monitor.summarize(top_feature_limit=args.top)
                print(json.dumps(summary.to_dict(), indent=2))
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except (HeatPumpMonitorError, OSError, ValueError, csv.Error) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
