"""API package for ChatUIX.

This package exposes a FastAPI application that wraps the dispatcher and
the `ChatSession` shell to provide HTTP endpoints for stateless chat
exchanges and for server-held sessions.

The package layout follows a standard FastAPI structure with routers,
dependency helpers, service layer (a simple in-memory registry), and
Pydantic models.

Notes:
    - Keep this package lightweight; heavy lifting belongs in `core/`.
"""
