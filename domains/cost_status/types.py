"""Type definitions for the cost status updater."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class UsageReport:
    """Latest month from the usage report."""
    month: str
    total_cost: float


@dataclass(frozen=True)
class Account:
    """A Slack workspace account whose profile status gets updated."""
    name: str
    token: str = field(repr=False)


@dataclass(frozen=True)
class StatusUpdate:
    """Rendered profile status, ready to publish."""
    text: str
    emoji: str
    scenario: str
    month: str
    total_cost: float
    savings: float


@dataclass(frozen=True)
class PublishResult:
    """Outcome of one account's status update."""
    account: str
    ok: bool
    error: Optional[str] = None
