"""Predicates used to route free text to a reply."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from loguru import logger

from chatuix.core.dispatcher.errors import EmptyHistoryError

TextPredicate = Callable[[str], bool]


def last_text(history: Sequence[Any]) -> str:
    """Get the lower-cased text of the last message in `history`.

    Messages may be `Message` models or plain mappings with a ``content`` key.

    Raises:
        EmptyHistoryError: If there is no message to read.
    """
    if not history:
        raise EmptyHistoryError("No message to reply to.")
    last = history[-1]
    if hasattr(last, "content"):
        content = last.content
    elif isinstance(last, dict):
        content = last.get("content")
    else:
        content = last
    return str(content or "").lower()


def contains_any(*keywords: str) -> TextPredicate:
    """Build a predicate that is true when the text contains any keyword.

    Matching is substring based ("lists" contains "list"), on text that is
    already lower-cased.
    """
    needles = tuple(k.lower() for k in keywords)

    def _predicate(text: str) -> bool:
        hit = next((k for k in needles if k in text), None)
        if hit is not None:
            logger.debug(f"Keyword '{hit}' matched")
        return hit is not None

    _predicate.__name__ = f"contains_any({', '.join(needles)})"
    return _predicate
