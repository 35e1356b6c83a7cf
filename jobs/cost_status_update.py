"""Claude cost Slack status scheduled job.

Runs every minute (and once at startup): fetches this month's Claude Code
spend from ccusage and mirrors it into each configured Slack profile status.

Ticks may overlap when ccusage is slow; up to settings.max_overlapping_ticks
run at once and nothing serializes them.
"""

import random
from datetime import datetime
from typing import Optional

from config import Settings
from domains.cost_status.catalog import MessageCatalog
from domains.cost_status.errors import DataError, FetchError
from domains.cost_status.formatter import build_status
from domains.cost_status.services import fetch_latest_usage, publish_status
from domains.cost_status.types import PublishResult
from logger import logger

JOB_ID = "cost_status_update"


async def cost_status_update(
    settings: Settings,
    catalog: MessageCatalog,
    rng: Optional[random.Random] = None,
    dry_run: bool = False,
) -> Optional[list[PublishResult]]:
    """Run one fetch + format + publish tick.

    Returns:
        Per-account results, or None if the usage fetch failed.
    """
    try:
        report = await fetch_latest_usage(settings.usage_command)
    except (FetchError, DataError) as e:
        logger.error(f"Error updating cost info: {e}")
        return None

    logger.info(f"Latest month ({report.month}): ${report.total_cost:.2f}")

    status = build_status(report, catalog, settings.subscription_price, rng)

    if dry_run:
        logger.info(f"[dry run] Would set status: {status.emoji} {status.text}")
        return []

    results = await publish_status(settings.accounts, status)

    failed = [r.account for r in results if not r.ok]
    if failed:
        logger.warning(f"Status update failed for {len(failed)}/{len(results)} account(s): {', '.join(failed)}")

    return results


def register_cost_status_update(scheduler, settings: Settings, catalog: MessageCatalog, dry_run: bool = False):
    """Register the cost status job with the scheduler.

    The first run fires immediately, then every settings.interval_minutes.
    """
    scheduler.add_job(
        cost_status_update,
        'interval',
        args=[settings, catalog],
        kwargs={"dry_run": dry_run},
        minutes=settings.interval_minutes,
        next_run_time=datetime.now(),
        max_instances=settings.max_overlapping_ticks,
        coalesce=False,
        id=JOB_ID
    )
    logger.info(
        f"Registered cost status job (every {settings.interval_minutes} min, "
        f"{len(settings.accounts)} account(s))"
    )
