"""Status text formatting.

Turns a monthly cost into the Slack status text and emoji:
- savings vs. the subscription price pick one of three message tiers
- the tier's template is filled in with the numbers
- the total cost picks an emoji bucket
"""

import random
import re
from typing import Mapping, Optional

from .catalog import MessageCatalog
from .config import INDICATOR_BREAKPOINTS, OVERFLOW_EMOJI
from .types import StatusUpdate, UsageReport

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def select_message(savings: float, catalog: MessageCatalog, rng: random.Random) -> tuple[str, str]:
    """Pick the message for a savings amount.

    Args:
        savings: total cost minus subscription price (may be negative)
        catalog: message catalog
        rng: random source used for the low-usage tier

    Returns:
        (scenario, message) where scenario is one of
        "comparison", "steady_state", "low_usage"
    """
    if savings > catalog.comparison_min:
        for comparison in catalog.comparisons:
            if savings <= comparison.threshold_usd:
                return "comparison", comparison.label
        return "comparison", catalog.exceeds_all_label

    if savings > catalog.steady_state_min:
        return "steady_state", catalog.steady_state_label

    return "low_usage", rng.choice(catalog.low_usage_messages)


def get_indicator(total_cost: float) -> str:
    """Map a total cost to its emoji bucket."""
    for upper_bound, emoji in INDICATOR_BREAKPOINTS:
        if total_cost < upper_bound:
            return emoji
    return OVERFLOW_EMOJI


def render_template(template: str, values: Mapping[str, object]) -> str:
    """Substitute {name} placeholders; unknown ones are left as-is."""
    def _replace(match: re.Match) -> str:
        key = match.group(1)
        if key in values:
            return str(values[key])
        return match.group(0)

    return _PLACEHOLDER.sub(_replace, template)


def format_usd(amount: float) -> str:
    return f"${amount:.2f}"


def build_status(
    report: UsageReport,
    catalog: MessageCatalog,
    subscription_price: float,
    rng: Optional[random.Random] = None,
) -> StatusUpdate:
    """Build the full status update for a usage report."""
    rng = rng or random.Random()
    savings = report.total_cost - subscription_price

    scenario, message = select_message(savings, catalog, rng)
    text = render_template(catalog.templates[scenario], {
        "message": message,
        "item": message,
        "total_cost": format_usd(report.total_cost),
        "savings": format_usd(savings),
        "month": report.month,
    })

    return StatusUpdate(
        text=text,
        emoji=get_indicator(report.total_cost),
        scenario=scenario,
        month=report.month,
        total_cost=report.total_cost,
        savings=savings,
    )
