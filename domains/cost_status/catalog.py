"""Message catalog - thresholds, labels and templates driving status text.

The catalog is loaded once at startup and passed around explicitly. A JSON
document can override any part of the built-in defaults:

    {
        "comparisons": [{"threshold_usd": 20, "label": "ChatGPT Plus"}],
        "exceeds_all_label": "...",
        "steady_state_label": "...",
        "low_usage_messages": ["..."],
        "templates": {"low_usage": "{message} ({total_cost})"},
        "comparison_min": 12,
        "steady_state_min": 0
    }
"""

import json
import math
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

from logger import logger
from .config import (
    COMPARISON_MIN,
    STEADY_STATE_MIN,
    DEFAULT_COMPARISONS,
    DEFAULT_EXCEEDS_ALL_LABEL,
    DEFAULT_STEADY_STATE_LABEL,
    DEFAULT_LOW_USAGE_MESSAGES,
    DEFAULT_TEMPLATES,
)
from .errors import ConfigError

SCENARIOS = ("comparison", "steady_state", "low_usage")


@dataclass(frozen=True)
class Comparison:
    """Something you could have bought with the savings."""
    threshold_usd: float
    label: str


@dataclass(frozen=True)
class MessageCatalog:
    """Immutable message catalog."""
    comparisons: tuple[Comparison, ...]
    exceeds_all_label: str
    steady_state_label: str
    low_usage_messages: tuple[str, ...]
    templates: Mapping[str, str]
    comparison_min: float
    steady_state_min: float


def _number(value, name: str, allow_negative: bool = True) -> float:
    # bool is an int subclass but never a sensible threshold
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ConfigError(f"Catalog field '{name}' must be a finite number, got {value!r}")
    if not allow_negative and value < 0:
        raise ConfigError(f"Catalog field '{name}' must not be negative, got {value!r}")
    return float(value)


def _text(value, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"Catalog field '{name}' must be a non-empty string")
    return value


def _comparisons(raw) -> tuple[Comparison, ...]:
    if not isinstance(raw, list) or not raw:
        raise ConfigError("Catalog field 'comparisons' must be a non-empty list")

    items = []
    for i, entry in enumerate(raw):
        if isinstance(entry, dict):
            threshold = entry.get("threshold_usd", entry.get("usd"))
            label = entry.get("label", entry.get("item"))
        elif isinstance(entry, (list, tuple)) and len(entry) == 2:
            threshold, label = entry
        else:
            raise ConfigError(f"Catalog comparison #{i} must be an object with threshold_usd and label")
        items.append(Comparison(
            threshold_usd=_number(threshold, f"comparisons[{i}].threshold_usd", allow_negative=False),
            label=_text(label, f"comparisons[{i}].label"),
        ))

    # Stable sort keeps the declared order for equal thresholds
    return tuple(sorted(items, key=lambda c: c.threshold_usd))


def catalog_from_dict(data: Mapping) -> MessageCatalog:
    """Build a catalog from a parsed JSON document, defaulting missing keys.

    Raises:
        ConfigError: if any supplied field fails validation.
    """
    if not isinstance(data, Mapping):
        raise ConfigError("Message catalog must be a JSON object")

    known = {
        "comparisons", "exceeds_all_label", "steady_state_label",
        "low_usage_messages", "templates", "comparison_min", "steady_state_min",
    }
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"Unknown catalog field(s): {', '.join(sorted(unknown))}")

    comparisons = _comparisons(data.get("comparisons", [list(c) for c in DEFAULT_COMPARISONS]))

    low_usage = data.get("low_usage_messages", DEFAULT_LOW_USAGE_MESSAGES)
    if not isinstance(low_usage, list) or not low_usage:
        raise ConfigError("Catalog field 'low_usage_messages' must be a non-empty list")
    low_usage = tuple(_text(m, f"low_usage_messages[{i}]") for i, m in enumerate(low_usage))

    raw_templates = data.get("templates", {})
    if not isinstance(raw_templates, Mapping):
        raise ConfigError("Catalog field 'templates' must be an object")
    templates = dict(DEFAULT_TEMPLATES)
    for scenario, template in raw_templates.items():
        if scenario not in SCENARIOS:
            raise ConfigError(f"Unknown template scenario '{scenario}' (expected one of {', '.join(SCENARIOS)})")
        templates[scenario] = _text(template, f"templates.{scenario}")

    comparison_min = _number(data.get("comparison_min", COMPARISON_MIN), "comparison_min")
    steady_state_min = _number(data.get("steady_state_min", STEADY_STATE_MIN), "steady_state_min")
    if comparison_min < steady_state_min:
        raise ConfigError(
            f"comparison_min ({comparison_min}) must not be below steady_state_min ({steady_state_min})"
        )

    return MessageCatalog(
        comparisons=comparisons,
        exceeds_all_label=_text(data.get("exceeds_all_label", DEFAULT_EXCEEDS_ALL_LABEL), "exceeds_all_label"),
        steady_state_label=_text(data.get("steady_state_label", DEFAULT_STEADY_STATE_LABEL), "steady_state_label"),
        low_usage_messages=low_usage,
        templates=MappingProxyType(templates),
        comparison_min=comparison_min,
        steady_state_min=steady_state_min,
    )


DEFAULT_CATALOG = catalog_from_dict({})


def load_catalog(path: Optional[Union[str, Path]] = None) -> MessageCatalog:
    """Load the message catalog.

    Args:
        path: Optional JSON file. None or a missing file means the built-in
            defaults.

    Raises:
        ConfigError: if the file is unreadable, not JSON, or fails validation.
    """
    if path is None:
        return DEFAULT_CATALOG

    path = Path(path)
    if not path.exists():
        logger.warning(f"Message catalog {path} not found, using built-in defaults")
        return DEFAULT_CATALOG

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Could not read message catalog {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Message catalog {path} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Message catalog {path} is not valid JSON: {e}") from e

    catalog = catalog_from_dict(data)
    logger.info(
        f"Loaded message catalog from {path} "
        f"({len(catalog.comparisons)} comparisons, {len(catalog.low_usage_messages)} low-usage messages)"
    )
    return catalog
