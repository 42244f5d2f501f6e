"""Simple in-memory registry for ChatSession instances.

This module encapsulates a minimal service layer for storing and
retrieving live `ChatSession` objects keyed by their session id.

Notes/Assumptions:
    - This is *not* persistent. A process restart clears the registry.
    - Not multiprocess-safe. Run the API with a single worker.
"""

from __future__ import annotations

from typing import Dict, Optional

from loguru import logger

from chatuix.core.session import ChatSession


class SessionRegistry:
    """In-memory registry of ChatSession instances.

    Attributes:
        _store (Dict[str, ChatSession]): Internal map of id -> session.
    """

    def __init__(self) -> None:
        """Initialize the registry."""
        self._store: Dict[str, ChatSession] = {}

    def create(self, greeting: bool = True) -> ChatSession:
        """Create and store a new ChatSession.

        Args:
            greeting (bool): Seed the transcript with the assistant greeting.

        Returns:
            ChatSession: The new session.
        """
        session = ChatSession.create(greeting=greeting)
        self._store[session.session_id] = session
        logger.debug(f"Registered session {session.session_id}")
        return session

    def get(self, session_id: str) -> Optional[ChatSession]:
        """Retrieve a ChatSession by ID.

        Args:
            session_id (str): Identifier assigned at creation.

        Returns:
            Optional[ChatSession]: The found session or None.
        """
        return self._store.get(session_id)

    def remove(self, session_id: str) -> None:
        """Remove a ChatSession by ID.

        Args:
            session_id (str): Identifier assigned at creation.
        """
        self._store.pop(session_id, None)

    def __len__(self) -> int:
        """Number of live sessions."""
        return len(self._store)


_registry = SessionRegistry()


def get_registry() -> SessionRegistry:
    """FastAPI dependency provider for the global registry.

    Returns:
        SessionRegistry: The singleton registry instance.
    """
    return _registry
