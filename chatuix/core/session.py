"""Chat session that drives the dispatcher turn by turn."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, NamedTuple, Optional
from uuid import uuid4

from loguru import logger
from pydantic import BaseModel, Field, computed_field

from chatuix.core.components import UIComponent
from chatuix.core.constants import GREETING_MSG
from chatuix.core.dispatcher import Reply, make_context, respond
from chatuix.core.messages import Message
from chatuix.utils.misc import compact_json, has_data


class TurnResult(NamedTuple):
    """Outcome of one turn: the appended assistant message and failure flag."""

    message: Message
    failed: bool


class ChatSession(BaseModel):
    """Transcript plus context for a single conversation.

    The session is the only holder of the context. After each successful turn
    it replaces its context with the one returned by the dispatcher; after a
    failed turn it keeps the context it had.
    """

    session_id: str = Field(default_factory=lambda: uuid4().hex)
    messages: List[Message] = Field(default_factory=list)
    context: Dict[str, Any] = Field(default_factory=make_context)
    created_ts: datetime = Field(default_factory=datetime.now)

    @computed_field(return_type=int)
    def turns(self) -> int:
        """Number of user turns taken."""
        return sum(1 for m in self.messages if m.role == "user")

    @classmethod
    def create(
        cls,
        greeting: bool = True,
        context: Optional[Dict[str, Any]] = None,
    ) -> "ChatSession":
        """Create a new session, seeded with the assistant greeting by default."""
        session = cls(context=make_context(context))
        if greeting:
            session.messages.append(Message.assistant(GREETING_MSG))
        logger.debug(f"Created chat session {session.session_id}")
        return session

    def send_text(self, text: str) -> Optional[TurnResult]:
        """Send free text. Blank text is ignored and returns None."""
        if not text or not text.strip():
            logger.debug("Ignoring blank input")
            return None
        self.messages.append(Message.user(text))
        return self._take_turn(action=None, payload=None)

    def send_action(self, action: str, payload: Any = None) -> TurnResult:
        """Send a widget action, recorded in the transcript as a user message."""
        label = f"Action: {action}"
        if has_data(payload):
            label += f" with data: {compact_json(payload)}"
        self.messages.append(Message.user(label))
        return self._take_turn(action=action, payload=payload)

    def latest_components(self) -> List[UIComponent]:
        """Components of the most recent assistant message, if any."""
        for message in reversed(self.messages):
            if message.role == "assistant":
                return list(message.components or [])
        return []

    def to_dict(self) -> Dict[str, Any]:
        """Export transcript and context in wire form."""
        return {
            "sessionId": self.session_id,
            "messages": [m.to_dict() for m in self.messages],
            "context": self.context,
            "turns": self.turns,
        }

    def _take_turn(self, action: Optional[str], payload: Any) -> TurnResult:
        reply: Reply = respond(
            list(self.messages), self.context, action=action, payload=payload
        )
        message = Message.assistant(reply.content, reply.components)
        self.messages.append(message)
        if reply.failed:
            logger.warning(
                f"Turn failed in session {self.session_id}; keeping prior context"
            )
        else:
            self.context = reply.context or {}
        return TurnResult(message=message, failed=reply.failed)
