"""Event handlers for the Gradio widget.

Every handler takes the per-user `ChatSession` held in `gr.State` and returns
the (possibly new) session plus the refreshed chatbot value, so the wiring
can use ``outputs=[state, chatbot]`` throughout.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

import gradio as gr
from loguru import logger

from chatuix.core.session import ChatSession
from chatuix.widget.constants import MAX_INPUT_LENGTH, USER_FRIENDLY_EXC
from chatuix.widget.render import to_chatbot_messages

HandlerResult = Tuple[ChatSession, List[Dict[str, Any]]]


def validate_chat_input(user_input: str) -> Optional[str]:
    """Validate user input before it is sent.

    Returns:
        A message describing the problem, or None if the input is fine.
    """
    if len(user_input) > MAX_INPUT_LENGTH:
        return f"Input is too long. Max chars: {MAX_INPUT_LENGTH}"
    return None


def _ensure_session(session: Optional[ChatSession]) -> ChatSession:
    if session is None:
        logger.debug("No session in state yet; creating one")
        return ChatSession.create()
    return session


def on_load(session: Optional[ChatSession]) -> HandlerResult:
    """Create the session for a newly connected client."""
    session = _ensure_session(session)
    return session, to_chatbot_messages(session.messages)


def on_user_message(
    user_input: str, session: Optional[ChatSession]
) -> Tuple[ChatSession, List[Dict[str, Any]], str]:
    """Handle a submitted chat message; also clears the textbox."""
    session = _ensure_session(session)
    problem = validate_chat_input(user_input or "")
    if problem:
        raise gr.Error(problem)
    try:
        result = session.send_text(user_input or "")
    except Exception:
        logger.exception("Error while handling a chat message")
        raise gr.Error(USER_FRIENDLY_EXC)
    if result is not None and result.failed:
        gr.Warning(result.message.content)
    return session, to_chatbot_messages(session.messages), ""


def on_action(
    action: str, session: Optional[ChatSession], payload: Any = None
) -> HandlerResult:
    """Handle a click on a button or card action."""
    session = _ensure_session(session)
    logger.debug(f"Widget action '{action}'")
    try:
        result = session.send_action(action, payload)
    except Exception:
        logger.exception(f"Error while handling action '{action}'")
        raise gr.Error(USER_FRIENDLY_EXC)
    if result.failed:
        gr.Warning(result.message.content)
    return session, to_chatbot_messages(session.messages)


def on_value_action(
    action: str, session: Optional[ChatSession], value: Any
) -> HandlerResult:
    """Handle an input or select submission, sent as ``{"value": ...}``."""
    return on_action(action, session, {"value": value})


def on_form_action(
    action: str,
    field_names: Sequence[str],
    session: Optional[ChatSession],
    *values: Any,
) -> HandlerResult:
    """Handle a form submission, sent as a field-name keyed mapping."""
    return on_action(action, session, dict(zip(field_names, values)))


def cleanup(session: Optional[ChatSession]) -> None:
    """Log the end of a client's session when its state is dropped."""
    if session is None:
        return
    logger.debug(
        f"Dropping chat session {session.session_id} after {session.turns} turns"
    )
