"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
import re
from datetime import timedelta
from logging import getLogger

log = getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_DURATION_UNITS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def get_env(name: str, default: str | None = None) -> str | None:
    """Return a stripped environment variable, treating blank values as unset."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def get_int_env(name: str, default: int) -> int:
    value = get_env(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        log.warning("Ignoring non-integer %s=%r, using %s", name, value, default)
        return default


def get_bool_env(name: str, default: bool) -> bool:
    value = get_env(name)
    if value is None:
        return default
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    log.warning("Ignoring non-boolean %s=%r, using %s", name, value, default)
    return default


def get_duration_env(name: str, default: timedelta) -> timedelta:
    value = get_env(name)
    if value is None:
        return default
    try:
        return parse_duration(value)
    except ValueError:
        log.warning("Ignoring invalid duration %s=%r, using %s", name, value, default)
        return default


def parse_duration(value: str) -> timedelta:
    """Parse a duration such as ``30s``, ``1m30s`` or ``250ms``.

    A bare number is read as seconds. Negative durations are accepted with a
    leading ``-`` and left for the caller to reject.
    """

    text = value.strip()
    if not text:
        raise ValueError("Empty duration")

    sign = 1.0
    if text[0] in "+-":
        sign = -1.0 if text[0] == "-" else 1.0
        text = text[1:]

    try:
        return timedelta(seconds=sign * float(text))
    except OverflowError as exc:
        raise ValueError(f"Invalid duration: {value}") from exc
    except ValueError:
        pass

    position = 0
    seconds = 0.0
    for match in _DURATION_PART.finditer(text):
        if match.start() != position:
            break
        seconds += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        position = match.end()

    if position == 0 or position != len(text):
        raise ValueError(f"Invalid duration: {value}")

    try:
        return timedelta(seconds=sign * seconds)
    except OverflowError as exc:
        raise ValueError(f"Invalid duration: {value}") from exc
