"""Transcript message model."""

from __future__ import annotations

import time
from typing import List, Literal, Optional
from uuid import uuid4

from pydantic import ConfigDict, Field

from chatuix.core.components import UIComponent
from chatuix.utils.serde import SerdeMixin

Role = Literal["user", "assistant"]


def _now_ms() -> int:
    return int(time.time() * 1000)


class Message(SerdeMixin):
    """A single transcript entry. Immutable once appended.

    Attributes:
        id (str): Unique message id.
        role (Role): Who wrote it.
        content (str): Prose shown in the bubble.
        components (Optional[List[UIComponent]]): Widgets rendered under the
            prose (assistant messages only in practice).
        timestamp (int): Creation time in epoch milliseconds.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    role: Role
    content: str
    components: Optional[List[UIComponent]] = None
    timestamp: int = Field(default_factory=_now_ms)

    @classmethod
    def user(cls, content: str) -> "Message":
        """Build a user message."""
        return cls(role="user", content=content)

    @classmethod
    def assistant(
        cls, content: str, components: Optional[List[UIComponent]] = None
    ) -> "Message":
        """Build an assistant message."""
        return cls(role="assistant", content=content, components=components)
