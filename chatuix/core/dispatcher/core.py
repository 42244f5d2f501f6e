"""Dispatcher: maps a conversation turn to a reply.

A turn is either free text (the last message of `history`) or a widget
action with an optional payload. The dispatcher keeps no state of its own:
everything that must survive between turns travels in the context, which is
passed in and returned with the reply.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from loguru import logger

from chatuix.core.dispatcher.action_replies import (
    ACTION_HANDLERS,
    PREFIX_RULES,
    ActionHandler,
)
from chatuix.core.dispatcher.conditions import last_text
from chatuix.core.dispatcher.errors import UnknownActionError
from chatuix.core.dispatcher.reply import Reply, fallback_reply
from chatuix.core.dispatcher.state import Context
from chatuix.core.dispatcher.text_replies import DEFAULT_TEXT_HANDLER, TEXT_RULES
from chatuix.utils.misc import compact_json, has_data


def resolve_action(action: str) -> ActionHandler:
    """Find the handler for `action`: exact id first, then prefix rules.

    Raises:
        UnknownActionError: If nothing in the catalog matches.
    """
    handler = ACTION_HANDLERS.get(action)
    if handler is not None:
        return handler
    for prefix, prefixed_handler in PREFIX_RULES:
        if action.startswith(prefix):
            logger.debug(f"Action '{action}' matched prefix '{prefix}'")
            return prefixed_handler
    raise UnknownActionError(action)


def echo_action(action: str, payload: Any, context: Context) -> Reply:
    """Generic acknowledgement for actions outside the catalog."""
    content = f'Action "{action}" received!'
    if has_data(payload):
        content += f" Data: {compact_json(payload)}"
    return Reply(content=content, context=context)


def dispatch(
    history: Sequence[Any],
    context: Optional[Mapping[str, Any]] = None,
    action: Optional[str] = None,
    payload: Any = None,
) -> Reply:
    """Compute the reply for one turn.

    Args:
        history: Transcript so far; text mode reads its last message.
        context: Conversation context; treated as read-only.
        action: Widget action id. When given, the turn is in action mode and
            `history` is not read.
        payload: Data submitted with the action.

    Returns:
        Reply: Prose, optional components and the context to carry forward.

    Raises:
        DispatchError: On an unusable payload or an empty history, and any
            other exception a handler raises. Use `respond` for the
            never-raising boundary.
    """
    ctx: Context = dict(context or {})

    if action:
        try:
            handler = resolve_action(action)
        except UnknownActionError:
            logger.debug(f"No handler for action '{action}'; echoing it back")
            return echo_action(action, payload, ctx)
        logger.debug(f"Dispatching action '{action}' to {handler.__name__}")
        return handler(action, payload, ctx)

    text = last_text(history)
    for predicate, text_handler in TEXT_RULES:
        if predicate(text):
            logger.debug(f"Text routed to {text_handler.__name__}")
            return text_handler(text, ctx)
    logger.debug("No keyword matched; offering quick actions")
    return DEFAULT_TEXT_HANDLER(text, ctx)


def respond(
    history: Sequence[Any],
    context: Optional[Mapping[str, Any]] = None,
    action: Optional[str] = None,
    payload: Any = None,
) -> Reply:
    """Like `dispatch`, but any failure becomes the fixed fallback reply.

    The fallback carries no context (``reply.failed`` is True), so the caller
    keeps the context it held before the turn.
    """
    try:
        return dispatch(history, context, action=action, payload=payload)
    except Exception:
        logger.exception(f"Dispatch failed (action={action!r})")
        return fallback_reply()
