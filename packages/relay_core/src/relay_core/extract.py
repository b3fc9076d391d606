"""Best-effort value extraction from loosely shaped JSON payloads.

Vapi sends a different structure for each event type, so every lookup here
tolerates missing keys and non-mapping intermediates by returning None.
"""

import json
from collections.abc import Mapping
from typing import Any

_MISSING = object()


def is_present(value: Any) -> bool:
    """Whether ``value`` counts as supplied.

    None, False, the empty string, numeric zero and NaN are absent.
    Containers are always present, even when empty.
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value == value and value != 0
    return True


def lookup(data: Any, path: str) -> Any:
    """Follow a dotted ``path`` through nested mappings.

    Returns None as soon as a step is missing or the current value is not a
    mapping.
    """
    current = data
    for key in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(key, _MISSING)
        if current is _MISSING:
            return None
    return current


def first_present(data: Any, *paths: str, default: Any = None) -> Any:
    """Value at the first path whose value is present, else ``default``."""
    for path in paths:
        value = lookup(data, path)
        if is_present(value):
            return value
    return default


def first_of(*values: Any, default: Any = None) -> Any:
    """First present value among ``values``, else ``default``."""
    for value in values:
        if is_present(value):
            return value
    return default


def stringify(value: Any) -> str:
    """Render a JSON scalar the way the CRM expects to receive it."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)
