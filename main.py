"""ccusage Slack status updater - Main entrypoint.

Fetches this month's Claude Code spend with ccusage and sets it as the Slack
profile status for every configured account, once at startup and then on a
fixed interval.
"""

import argparse
import asyncio
import sys

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from config import load_settings
from domains.cost_status.catalog import load_catalog
from domains.cost_status.errors import ConfigError
from jobs import cost_status_update, register_cost_status_update
from logger import logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Mirror monthly Claude Code cost into Slack profile statuses",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                 # run now, then every minute
  python main.py --once          # single update, then exit
  python main.py --once --dry-run --catalog messages.json
"""
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single update and exit"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log the status instead of sending it to Slack"
    )
    parser.add_argument(
        "--catalog",
        help="Path to a message catalog JSON (overrides MESSAGE_CATALOG_PATH)"
    )
    return parser


async def run_forever(settings, catalog, dry_run: bool = False):
    """Start the scheduler and block until cancelled."""
    scheduler = AsyncIOScheduler()
    register_cost_status_update(scheduler, settings, catalog, dry_run=dry_run)
    scheduler.start()
    logger.info(f"Scheduled to run every {settings.interval_minutes} minute(s). Press Ctrl+C to stop.")

    try:
        await asyncio.Event().wait()
    finally:
        scheduler.shutdown(wait=False)


def main(argv=None) -> int:
    """Entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
        catalog = load_catalog(args.catalog or settings.catalog_path)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    logger.info("Starting ccusage-slack...")

    if args.once:
        results = asyncio.run(cost_status_update(settings, catalog, dry_run=args.dry_run))
        if results is None or not all(r.ok for r in results):
            return 1
        return 0

    try:
        asyncio.run(run_forever(settings, catalog, dry_run=args.dry_run))
    except KeyboardInterrupt:
        logger.info("Stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
