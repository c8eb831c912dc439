"""Display masking for credentials.

Masking only affects what is printed; stored values are never changed.
"""

from collections.abc import Mapping
from typing import Any

NOT_SET = "(not set)"

# Template placeholders that mean "no credential filled in yet"
PLACEHOLDER_PREFIXES = ("sk-", "ms-", "sk-kimi-")

SENSITIVE_KEY_MARKERS = ("token", "key", "secret", "password")


def mask_sensitive_value(value: str) -> str:
    """Mask a credential for display.

    Examples:
        >>> mask_sensitive_value("")
        '(not set)'
        >>> mask_sensitive_value("sk-")
        '(not set)'
        >>> mask_sensitive_value("abcd")
        '****'
        >>> mask_sensitive_value("sk-ant-1234567890")
        'sk-a*********7890'
    """
    if not value or value in PLACEHOLDER_PREFIXES:
        return NOT_SET

    if len(value) <= 8:
        return "*" * len(value)

    return value[:4] + "*" * (len(value) - 8) + value[-4:]


def is_sensitive_key(key: str) -> bool:
    lowered = key.lower()
    return any(marker in lowered for marker in SENSITIVE_KEY_MARKERS)


def mask_env(env: Mapping[str, Any]) -> dict[str, str]:
    """Copy of env with sensitive values masked and everything stringified."""
    masked = {}
    for key, value in env.items():
        text = value if isinstance(value, str) else str(value)
        masked[key] = mask_sensitive_value(text) if is_sensitive_key(key) else text
    return masked


__all__ = [
    "NOT_SET",
    "PLACEHOLDER_PREFIXES",
    "is_sensitive_key",
    "mask_env",
    "mask_sensitive_value",
]
