"""Public API for the dispatcher subpackage."""

from .core import dispatch, resolve_action, respond
from .errors import (
    BadPayloadError,
    DispatchError,
    EmptyHistoryError,
    UnknownActionError,
)
from .reply import Reply, fallback_reply
from .state import Context, make_context

__all__ = [
    "BadPayloadError",
    "Context",
    "DispatchError",
    "EmptyHistoryError",
    "Reply",
    "UnknownActionError",
    "dispatch",
    "fallback_reply",
    "make_context",
    "resolve_action",
    "respond",
]
