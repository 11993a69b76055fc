"""Typed access to the process environment."""

import os
import re

# Mirrors C atoi(): optional whitespace and sign, then leading digits.
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def get_env_string(key: str, default: str | None = None) -> str | None:
    """Return the environment value for key, or default when unset."""
    return os.environ.get(key, default)


def get_env_int(key: str, default: int = 0) -> int:
    """Return the environment value for key as an integer.

    Unset keys give ``default``. Set values are parsed leniently: a leading
    integer prefix is used and anything unparseable becomes 0.
    """
    value = get_env_string(key)
    if value is None:
        return default
    match = _LEADING_INT_RE.match(value)
    return int(match.group(1)) if match else 0
