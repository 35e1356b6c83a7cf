"""Error types for the cost status updater.

ConfigError is fatal at startup. FetchError / DataError abort a single tick.
PublishError is scoped to one Slack account.
"""


class CostStatusError(Exception):
    """Base class for all cost status errors."""


class ConfigError(CostStatusError):
    """Missing or invalid credentials, settings or message catalog."""


class FetchError(CostStatusError):
    """The usage command failed or produced unparseable output."""


class DataError(CostStatusError):
    """The usage report parsed but has no usable monthly data."""


class PublishError(CostStatusError):
    """A Slack status update failed for one account."""

    def __init__(self, account_name: str, message: str):
        super().__init__(f"[{account_name}] {message}")
        self.account_name = account_name
        self.reason = message
