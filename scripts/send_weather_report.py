#!/usr/bin/env python3
"""
Daily weather report script for cron jobs and manual triggering.

Usage:
    # Fetch, analyze and email the report
    python -m scripts.send_weather_report

    # Build the report and print it without sending
    python -m scripts.send_weather_report --dry-run

Exit codes:
    0 - Success
    2 - Failure (configuration, forecast provider or email delivery)
"""

import argparse
import asyncio
import logging
import os
import sys

# Make the package importable when run from scripts/ or repo root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from weather_mailer.core.config import get_settings
from weather_mailer.core.exceptions import AppException
from weather_mailer.reports.service import ReportService


# Configure logging for cron-friendly output
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
# httpx logs full request URLs, which include the API key
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


async def main() -> int:
    parser = argparse.ArgumentParser(
        description="Send the daily laundry & umbrella weather report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the report instead of emailing it",
    )
    args = parser.parse_args()

    service = ReportService(get_settings())

    if args.dry_run:
        try:
            report = await service.build_report()
        except AppException as e:
            logger.error(f"Failed to build weather report: {e.detail}")
            return 2
        print(report.subject)
        print()
        print(report.text)
        return 0

    result = await service.send_daily_report()
    if result.status == "failed":
        logger.error(f"Weather report failed: {result.error}")
        return 2

    logger.info(f"Weather report sent for {result.location} (MessageId: {result.message_id})")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
