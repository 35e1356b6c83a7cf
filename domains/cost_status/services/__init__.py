"""Cost status domain services."""

from .usage_fetcher import fetch_latest_usage
from .slack_profile import publish_status

__all__ = ["fetch_latest_usage", "publish_status"]
