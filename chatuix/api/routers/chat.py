"""Stateless chat route: the client sends transcript and context each turn."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from loguru import logger

from chatuix.api.models import ChatRequest, ChatResponse
from chatuix.core.dispatcher import dispatch, fallback_reply
from chatuix.utils.misc import json_safe

router = APIRouter()


@router.post(
    "/chat",
    response_model=ChatResponse,
    response_model_exclude_none=True,
    summary="Reply to free text or a widget action",
    responses={500: {"description": "Processing failed; fixed fallback reply"}},
)
async def chat(request: Request) -> JSONResponse:
    """Compute the reply for one exchange.

    The body is validated here rather than by FastAPI so that malformed input
    gets the same fallback reply (status 500) as any other failure.
    """
    try:
        body = ChatRequest.from_json((await request.body()).decode("utf-8"))
        reply = dispatch(
            body.messages,
            body.context,
            action=body.action,
            payload=body.action_data,
        )
        return JSONResponse(content=json_safe(reply.to_dict()))
    except Exception:
        logger.exception("Chat API error")
        return JSONResponse(content=fallback_reply().to_dict(), status_code=500)
