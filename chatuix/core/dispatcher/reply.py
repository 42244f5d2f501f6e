"""Reply model returned by the dispatcher."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field

from chatuix.core.components import UIComponent
from chatuix.core.constants import ERROR_REPLY
from chatuix.utils.serde import SerdeMixin


class Reply(SerdeMixin):
    """Prose plus optional components, and the context to carry forward.

    Attributes:
        content (str): Reply text.
        components (Optional[List[UIComponent]]): Widgets to render, in order.
        context (Optional[Dict[str, Any]]): Context replacing the caller's.
            None only on the fallback reply, where the caller keeps its own.
    """

    model_config = ConfigDict(frozen=True)

    content: str
    components: Optional[List[UIComponent]] = None
    context: Optional[Dict[str, Any]] = Field(default=None)

    @property
    def failed(self) -> bool:
        """True for the fallback reply produced on a processing failure."""
        return self.context is None


def fallback_reply() -> Reply:
    """The fixed reply substituted for any processing failure."""
    return Reply(content=ERROR_REPLY, components=[])
