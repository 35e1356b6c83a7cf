"""Log sanitizer - keeps Slack tokens and other credentials out of log files.

Subprocess stderr and HTTP error strings can echo headers or environment
values, so they pass through here before being logged.
"""

import re
from typing import Union

# Patterns to detect and redact sensitive data
SENSITIVE_PATTERNS = [
    # Slack tokens (user, bot, app, refresh, config)
    (r'\bxox[abeprs]-[A-Za-z0-9-]+', '[SLACK_TOKEN]'),
    (r'\bxapp-[A-Za-z0-9-]+', '[SLACK_TOKEN]'),

    # Bearer / Basic auth headers
    (r'(Bearer|Basic)\s+[A-Za-z0-9\-_\.=]+', r'\1 [REDACTED]'),

    # token=..., api_key: ..., SLACK_TOKENS=name=...
    (r'(password|secret|token|tokens|api_key|apikey|auth|credential)(["\s:=]+)[^\s,}"\']{8,}',
     r'\1\2[REDACTED]'),

    # npm auth tokens
    (r'\bnpm_[A-Za-z0-9]{36}\b', '[NPM_TOKEN]'),

    # Generic long alphanumeric strings that look like keys (40+ chars)
    (r'\b[A-Za-z0-9]{40,}\b', '[LONG_TOKEN]'),
]

_COMPILED_PATTERNS = [(re.compile(p, re.IGNORECASE), r) for p, r in SENSITIVE_PATTERNS]


def sanitize_log(text: str) -> str:
    """Remove credentials from text for safe logging."""
    if not text:
        return text

    result = text
    for pattern, replacement in _COMPILED_PATTERNS:
        result = pattern.sub(replacement, result)

    return result


def sanitize_for_log(value: Union[str, bytes, None], max_length: int = 300) -> str:
    """Sanitize and truncate a value for logging.

    Args:
        value: The value to sanitize (string or bytes)
        max_length: Maximum length of returned string

    Returns:
        Sanitized, truncated string safe for logging
    """
    if value is None:
        return "<None>"

    if isinstance(value, bytes):
        text = value.decode("utf-8", errors="replace")
    else:
        text = str(value)

    sanitized = sanitize_log(text)

    if len(sanitized) > max_length:
        return sanitized[:max_length] + f"... [{len(text)} chars total]"

    return sanitized
