"""Main entrypoint for the ChatUIX API.

Sets up the FastAPI application, middleware, and routes. Serves the
auto-generated OpenAPI/Swagger UI at `/docs` and Redoc at `/redoc`.

Example:
    Run the API server using uvicorn:

        uvicorn chatuix.api.main:app --reload

Notes/Assumptions:
    - CORS is wide-open by default for dev convenience; lock it down in prod.
    - The `app` object is created at import time so uvicorn can discover it.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chatuix.api.routers import chat, sessions
from chatuix.api.settings import settings


def create_app() -> FastAPI:
    """Create and configure the FastAPI app.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    app = FastAPI(
        title="ChatUIX API",
        version="0.1.0",
        description="Chat replies with inline interactive UI components",
    )

    if settings.cors_allow_all:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Route registration
    app.include_router(chat.router, prefix="/api", tags=["chat"])
    app.include_router(sessions.router, prefix="/v1", tags=["sessions"])

    @app.get("/health", tags=["meta"])
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
