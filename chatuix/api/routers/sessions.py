"""Session routes (create, inspect, send text, send action, delete)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from chatuix.api.deps import get_session
from chatuix.api.models import (
    SendActionRequest,
    SendTextRequest,
    SessionResponse,
    TurnResponse,
)
from chatuix.api.services.registry import SessionRegistry, get_registry
from chatuix.api.settings import settings
from chatuix.core.session import ChatSession, TurnResult
from chatuix.utils.misc import json_safe

router = APIRouter()


# ---------------------------
# Helpers
# ---------------------------


def _snapshot(session: ChatSession, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=json_safe(session.to_dict()), status_code=status_code)


def _turn(session: ChatSession, result: TurnResult | None) -> JSONResponse:
    body = TurnResponse(
        message=result.message if result else None,
        failed=result.failed if result else False,
        context=session.context,
    )
    return JSONResponse(content=json_safe(body.to_dict(exclude_none=False)))


# ---------------------------
# Routes
# ---------------------------


@router.post(
    "/sessions",
    response_model=SessionResponse,
    status_code=201,
    summary="Create a new chat session",
)
def create_session(registry: SessionRegistry = Depends(get_registry)) -> JSONResponse:
    """Create a session and register it."""
    session = registry.create(greeting=settings.greeting)
    return _snapshot(session, status_code=201)


@router.get(
    "/sessions/{session_id}",
    response_model=SessionResponse,
    summary="Get transcript and context",
)
def get_session_state(session: ChatSession = Depends(get_session)) -> JSONResponse:
    """Return the session snapshot."""
    return _snapshot(session)


@router.post(
    "/sessions/{session_id}/messages",
    response_model=TurnResponse,
    summary="Send free text; blank text is ignored",
)
def send_text(
    body: SendTextRequest, session: ChatSession = Depends(get_session)
) -> JSONResponse:
    """Take a free-text turn."""
    return _turn(session, session.send_text(body.text))


@router.post(
    "/sessions/{session_id}/actions",
    response_model=TurnResponse,
    summary="Send a widget action with optional data",
)
def send_action(
    body: SendActionRequest, session: ChatSession = Depends(get_session)
) -> JSONResponse:
    """Take an action turn."""
    return _turn(session, session.send_action(body.action, body.data))


@router.delete(
    "/sessions/{session_id}",
    status_code=204,
    response_class=Response,
)
def delete_session(
    session_id: str, registry: SessionRegistry = Depends(get_registry)
) -> Response:
    """Delete a session from the registry."""
    registry.remove(session_id)
    return Response(status_code=204)
