"""Monthly Claude Code cost via the ccusage CLI.

Runs `npx ccusage@latest monthly --json` and picks the most recent month.
ccusage lists months newest first, so the first entry wins.
"""

import asyncio
import json
import math
import shutil
import subprocess
import sys
from typing import Optional, Sequence

from logger import logger
from utils.log_sanitizer import sanitize_for_log
from ..errors import DataError, FetchError
from ..types import UsageReport

DEFAULT_USAGE_COMMAND = ("npx", "ccusage@latest", "monthly", "--json")

# Windows subprocess config
IS_WINDOWS = sys.platform == "win32"
if IS_WINDOWS:
    STARTUPINFO = subprocess.STARTUPINFO()
    STARTUPINFO.dwFlags |= subprocess.STARTF_USESHOWWINDOW
    STARTUPINFO.wShowWindow = subprocess.SW_HIDE
    CREATE_NO_WINDOW = subprocess.CREATE_NO_WINDOW
else:
    STARTUPINFO = None
    CREATE_NO_WINDOW = 0


def _resolve_command(command: Sequence[str]) -> list[str]:
    """Resolve the executable so npx.cmd is found on Windows."""
    argv = list(command)
    resolved = shutil.which(argv[0])
    if resolved:
        argv[0] = resolved
    return argv


async def run_usage_command(command: Sequence[str] = DEFAULT_USAGE_COMMAND) -> str:
    """Run the usage command and return its stdout.

    Raises:
        FetchError: if the command can't be started or exits non-zero.
    """
    argv = _resolve_command(command)
    try:
        result = await asyncio.to_thread(
            subprocess.run,
            argv,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            startupinfo=STARTUPINFO,
            creationflags=CREATE_NO_WINDOW,
        )
    except OSError as e:
        raise FetchError(f"Could not run {command[0]}: {e}") from e

    if result.returncode != 0:
        raise FetchError(
            f"{' '.join(command)} exited with code {result.returncode}: "
            f"{sanitize_for_log(result.stderr.strip())}"
        )

    return result.stdout


def parse_usage_output(stdout: str) -> dict:
    """Parse the command output as a JSON object.

    Raises:
        FetchError: if the output isn't a JSON object.
    """
    try:
        data = json.loads(stdout)
    except (json.JSONDecodeError, TypeError) as e:
        raise FetchError(f"Usage output is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise FetchError(f"Usage output must be a JSON object, got {type(data).__name__}")

    return data


def get_latest_month_cost(data: dict) -> UsageReport:
    """Extract the latest month's total cost.

    Raises:
        DataError: if there is no monthly data or the cost is unusable.
    """
    monthly = data.get("monthly")
    if not isinstance(monthly, list) or not monthly:
        raise DataError("No monthly data available")

    latest = monthly[0]
    if not isinstance(latest, dict):
        raise DataError("Latest monthly entry is not an object")

    total_cost = latest.get("totalCost")
    if isinstance(total_cost, bool) or not isinstance(total_cost, (int, float)):
        raise DataError(f"Latest month has no numeric totalCost (got {total_cost!r})")
    if not math.isfinite(total_cost) or total_cost < 0:
        raise DataError(f"Latest month has an invalid totalCost: {total_cost!r}")

    return UsageReport(
        month=str(latest.get("month") or "unknown"),
        total_cost=float(total_cost),
    )


async def fetch_latest_usage(command: Optional[Sequence[str]] = None) -> UsageReport:
    """Fetch the most recent month's usage from ccusage.

    Raises:
        FetchError: command failed or output unparseable.
        DataError: no usable monthly entry.
    """
    command = tuple(command or DEFAULT_USAGE_COMMAND)
    logger.info("Fetching Claude usage data...")
    stdout = await run_usage_command(command)
    return get_latest_month_cost(parse_usage_output(stdout))
