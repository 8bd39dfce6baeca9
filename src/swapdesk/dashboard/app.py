"""FastAPI dashboard application factory exposing the swap session as JSON."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from swapdesk.dashboard.routes import actions, api
from swapdesk.exceptions import (
    InvalidSlippage,
    SessionStateError,
    SubmissionInProgress,
    TokenNotFound,
)


async def _conflict(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=409, content={"detail": str(exc)})


async def _not_found(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def _unprocessable(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_dashboard_app(lifespan: Any = None) -> FastAPI:
    """Create and configure the dashboard application.

    Args:
        lifespan: Optional async context manager for application lifespan events.
                  Used by main.py to start the session and close the feed.

    Returns:
        FastAPI application. Route handlers read the session from
        app.state.session, which the caller must set.
    """
    app = FastAPI(
        title="Swap Desk",
        lifespan=lifespan,
    )

    app.state.session = None

    app.add_exception_handler(SubmissionInProgress, _conflict)
    app.add_exception_handler(SessionStateError, _conflict)
    app.add_exception_handler(TokenNotFound, _not_found)
    app.add_exception_handler(InvalidSlippage, _unprocessable)

    app.include_router(api.router, prefix="/api")
    app.include_router(actions.router, prefix="/api")

    return app
