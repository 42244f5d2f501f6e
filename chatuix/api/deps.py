"""Dependency utilities for route handlers.

Provides reusable dependency functions for resolving shared services
and objects (e.g., looking up a ChatSession by ID).
"""

from fastapi import Depends, HTTPException

from chatuix.api.services.registry import SessionRegistry, get_registry
from chatuix.core.session import ChatSession


def get_session(
    session_id: str, registry: SessionRegistry = Depends(get_registry)
) -> ChatSession:
    """Resolve a ChatSession from the registry.

    Args:
        session_id (str): Identifier of a session in the registry.
        registry (SessionRegistry): The in-memory registry (injected).

    Returns:
        ChatSession: The session instance.

    Raises:
        HTTPException: If the session ID is not found in the registry.
    """
    session = registry.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session
