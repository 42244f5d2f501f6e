"""Miscellaneous utility functions for ChatUIX."""

import json
import math
from typing import Any


def compact_json(obj: Any) -> str:
    """Return compact JSON text (no spaces after separators, unicode kept)."""
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))


def has_data(payload: Any) -> bool:
    """Whether an action payload is worth echoing back.

    Only null, false, zero, nan and the empty string count as no data; empty
    mappings and lists are still data and are echoed as ``{}`` / ``[]``.
    """
    if payload is None or payload is False or payload == "":
        return False
    if isinstance(payload, (int, float)) and not isinstance(payload, bool):
        return payload != 0 and not math.isnan(payload)
    return True


def format_number(value: float) -> str:
    """Format a number for chat text.

    Integral floats drop the trailing ``.0``; everything else (including nan
    and inf) is shown as Python prints it.
    """
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def make_human_readable_values(data: Any) -> Any:
    """Recursively clean and humanize all values in a dict.

    Without changing the overall structure (lists stay lists,
    dicts stay dicts). Floats go through `format_number`.
    """
    if isinstance(data, dict):
        return {k: make_human_readable_values(v) for k, v in data.items()}

    if isinstance(data, list):
        return [make_human_readable_values(v) for v in data]

    # primitives → return cleaned version
    if isinstance(data, str):
        return data.strip()

    if isinstance(data, float):
        return format_number(data)

    return data


def json_safe(data: Any) -> Any:
    """Replace non-finite floats with None, recursively."""
    if isinstance(data, dict):
        return {k: json_safe(v) for k, v in data.items()}

    if isinstance(data, (list, tuple)):
        return [json_safe(v) for v in data]

    if isinstance(data, float) and not math.isfinite(data):
        return None

    return data
