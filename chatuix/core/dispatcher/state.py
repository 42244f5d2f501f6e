"""Conversation context schema and helpers.

The context is a plain mapping handed to `dispatch` and handed back, possibly
changed, with every reply. Callers replace what they hold with the returned
mapping. Nested sub-objects are replaced wholesale too, so a handler that
wants to keep earlier nested keys must spread them explicitly.

Known keys:
    calculator: ``{num1, num2}`` operands of the calculator flow.
    bookingFlow: ``{step, date, time, confirmed}`` booking wizard progress.
    formType: kind of form last offered from free text.
    user: fields of the last submitted signup form.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from loguru import logger

Context = Dict[str, Any]

CALCULATOR_KEY = "calculator"
BOOKING_KEY = "bookingFlow"
FORM_TYPE_KEY = "formType"
USER_KEY = "user"


def make_context(overrides: Mapping[str, Any] | None = None) -> Context:
    """Create a fresh context, optionally seeded with `overrides`."""
    context: Context = dict(overrides or {})
    logger.debug(f"Created context with keys: {sorted(context)}")
    return context


def with_keys(context: Mapping[str, Any], **updates: Any) -> Context:
    """Return a new context with top-level `updates` applied."""
    return {**context, **updates}


def spread_nested(context: Mapping[str, Any], key: str, **updates: Any) -> Context:
    """Return a new context whose `key` sub-object is re-spread with `updates`.

    The previous sub-object's keys survive unless overwritten; a missing or
    non-mapping previous value counts as empty.
    """
    previous = context.get(key)
    nested = dict(previous) if isinstance(previous, Mapping) else {}
    nested.update(updates)
    return {**context, key: nested}


def nested_get(context: Mapping[str, Any], key: str, field: str) -> Any:
    """Read ``context[key][field]``, returning None when either level is absent."""
    nested = context.get(key)
    if not isinstance(nested, Mapping):
        return None
    return nested.get(field)
