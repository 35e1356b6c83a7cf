"""Cost status domain - mirror monthly ccusage spend into Slack profile statuses."""

from .errors import CostStatusError, ConfigError, FetchError, DataError, PublishError
from .types import UsageReport, Account, StatusUpdate, PublishResult

__all__ = [
    "CostStatusError",
    "ConfigError",
    "FetchError",
    "DataError",
    "PublishError",
    "UsageReport",
    "Account",
    "StatusUpdate",
    "PublishResult",
]
