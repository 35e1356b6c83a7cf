"""Global configuration for the ccusage Slack status updater."""

import math
import os
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from domains.cost_status.errors import ConfigError
from domains.cost_status.types import Account

load_dotenv()

# Slack - either a single token or "name=token,name2=token2"
SLACK_TOKEN = os.getenv("SLACK_TOKEN")
SLACK_TOKENS = os.getenv("SLACK_TOKENS")

# Claude Max subscription price the monthly cost is compared against
CLAUDE_MAX_COST = os.getenv("CLAUDE_MAX_COST", "200")

# Usage reporting CLI
CCUSAGE_COMMAND = os.getenv("CCUSAGE_COMMAND", "npx ccusage@latest monthly --json")

# Schedule
UPDATE_INTERVAL_MINUTES = os.getenv("UPDATE_INTERVAL_MINUTES", "1")
MAX_OVERLAPPING_TICKS = os.getenv("MAX_OVERLAPPING_TICKS", "3")

# Optional message catalog override
MESSAGE_CATALOG_PATH = os.getenv("MESSAGE_CATALOG_PATH")

# Logging
LOG_DIR = Path(os.getenv("LOG_DIR") or Path(os.getenv("LOCALAPPDATA", ".")) / "ccusage-slack" / "logs")
LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class Settings:
    """Validated runtime settings, built once at startup."""
    accounts: tuple[Account, ...]
    subscription_price: float
    usage_command: tuple[str, ...]
    interval_minutes: int
    max_overlapping_ticks: int
    catalog_path: Optional[Path] = None


def _check_token(name: str, token: str):
    # HTTP headers must be ASCII; a pasted full-width character would only fail at send time
    if not token.isascii() or any(c.isspace() for c in token):
        raise ConfigError(f"Token for account '{name}' contains non-ASCII or whitespace characters")


def parse_accounts(single_token: Optional[str], multi_tokens: Optional[str]) -> tuple[Account, ...]:
    """Build the account list from SLACK_TOKEN / SLACK_TOKENS.

    SLACK_TOKENS entries look like ``name=token`` and are comma separated.
    SLACK_TOKEN, when set, adds an account called ``default``.
    """
    accounts = []
    seen = set()

    if multi_tokens:
        for entry in multi_tokens.split(","):
            entry = entry.strip()
            if not entry:
                continue
            name, sep, token = entry.partition("=")
            name, token = name.strip(), token.strip()
            if not sep or not name or not token:
                raise ConfigError(f"Malformed SLACK_TOKENS entry for '{name or '?'}' (expected name=token)")
            if name in seen:
                raise ConfigError(f"Duplicate account name in SLACK_TOKENS: {name}")
            _check_token(name, token)
            seen.add(name)
            accounts.append(Account(name=name, token=token))

    if single_token and single_token.strip():
        if "default" in seen:
            raise ConfigError("SLACK_TOKEN conflicts with a SLACK_TOKENS account named 'default'")
        _check_token("default", single_token.strip())
        accounts.append(Account(name="default", token=single_token.strip()))

    if not accounts:
        raise ConfigError("SLACK_TOKEN or SLACK_TOKENS environment variable is required")

    return tuple(accounts)


def _positive_number(name: str, raw: str, cast=float):
    try:
        value = cast(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Validate configuration from the environment.

    Args:
        env: Mapping to read from; defaults to the module-level values
            populated from os.environ / .env.

    Raises:
        ConfigError: if credentials are missing or a value is invalid.
    """
    if env is None:
        env = {
            "SLACK_TOKEN": SLACK_TOKEN,
            "SLACK_TOKENS": SLACK_TOKENS,
            "CLAUDE_MAX_COST": CLAUDE_MAX_COST,
            "CCUSAGE_COMMAND": CCUSAGE_COMMAND,
            "UPDATE_INTERVAL_MINUTES": UPDATE_INTERVAL_MINUTES,
            "MAX_OVERLAPPING_TICKS": MAX_OVERLAPPING_TICKS,
            "MESSAGE_CATALOG_PATH": MESSAGE_CATALOG_PATH,
        }

    accounts = parse_accounts(env.get("SLACK_TOKEN"), env.get("SLACK_TOKENS"))

    price = _positive_number("CLAUDE_MAX_COST", env.get("CLAUDE_MAX_COST") or "200")
    interval = _positive_number("UPDATE_INTERVAL_MINUTES", env.get("UPDATE_INTERVAL_MINUTES") or "1", int)
    max_ticks = _positive_number("MAX_OVERLAPPING_TICKS", env.get("MAX_OVERLAPPING_TICKS") or "3", int)

    command = tuple(shlex.split(env.get("CCUSAGE_COMMAND") or "npx ccusage@latest monthly --json"))
    if not command:
        raise ConfigError("CCUSAGE_COMMAND must not be empty")

    catalog_path = env.get("MESSAGE_CATALOG_PATH")

    return Settings(
        accounts=accounts,
        subscription_price=price,
        usage_command=command,
        interval_minutes=interval,
        max_overlapping_ticks=max_ticks,
        catalog_path=Path(catalog_path) if catalog_path else None,
    )
