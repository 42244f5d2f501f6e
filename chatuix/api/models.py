"""Pydantic models (request/response schemas) for the API.

Defines the schema used by FastAPI to validate requests and shape
responses. These models also drive the generated OpenAPI spec.

Notes/Assumptions:
    - Wire names are camelCase (``actionData``, ``sessionId``) to match what
      browser clients send and expect.
    - `ChatRequest` is validated inside the route, not by FastAPI, so that a
      malformed body gets the same fallback reply as any other failure.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from chatuix.core.components import UIComponent
from chatuix.core.messages import Message
from chatuix.utils.serde import SerdeMixin


class ChatRequest(SerdeMixin):
    """Request body for a single stateless chat exchange.

    Attributes:
        messages (List[Message]): Transcript so far, last message last.
        context (Dict[str, Any]): Context returned by the previous exchange.
        action (Optional[str]): Widget action id, if this turn is an action.
        action_data (Any): Payload submitted with the action.
    """

    messages: List[Message]
    context: Dict[str, Any] = Field(default_factory=dict)
    action: Optional[str] = None
    action_data: Any = None


class ChatResponse(SerdeMixin):
    """Reply to a chat exchange.

    Attributes:
        content (str): Reply text.
        components (Optional[List[UIComponent]]): Widgets to render.
        context (Optional[Dict[str, Any]]): Context for the next exchange.
    """

    content: str
    components: Optional[List[UIComponent]] = None
    context: Optional[Dict[str, Any]] = None


class SendTextRequest(SerdeMixin):
    """Free text sent into a session.

    Attributes:
        text (str): What the user typed.
    """

    text: str = Field(..., json_schema_extra={"example": "Show me a chart"})


class SendActionRequest(SerdeMixin):
    """Widget action sent into a session.

    Attributes:
        action (str): Action id from a rendered component.
        data (Any): Optional payload (``{"value": ...}`` or form fields).
    """

    action: str = Field(..., json_schema_extra={"example": "set_num1"})
    data: Any = None


class TurnResponse(SerdeMixin):
    """Outcome of one session turn.

    Attributes:
        message (Optional[Message]): Assistant message appended, None if the
            input was blank and ignored.
        failed (bool): True when the fallback reply was used.
        context (Dict[str, Any]): Session context after the turn.
    """

    message: Optional[Message] = None
    failed: bool = False
    context: Dict[str, Any] = Field(default_factory=dict)


class SessionResponse(SerdeMixin):
    """Full session snapshot.

    Attributes:
        session_id (str): Registry id of the session.
        messages (List[Message]): Transcript.
        context (Dict[str, Any]): Current context.
        turns (int): Number of user turns taken.
    """

    session_id: str
    messages: List[Message] = Field(default_factory=list)
    context: Dict[str, Any] = Field(default_factory=dict)
    turns: int = 0
