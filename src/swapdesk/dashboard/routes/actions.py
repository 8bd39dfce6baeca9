"""POST endpoints carrying user intents into the swap session.

Each handler returns the updated session snapshot. Exceptions raised by
the session are mapped to status codes by the app's exception handlers.
"""

from __future__ import annotations

from decimal import Decimal

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

log = structlog.get_logger(__name__)

router = APIRouter()


class AmountBody(BaseModel):
    value: str


class TokenBody(BaseModel):
    symbol: str


class SlippageBody(BaseModel):
    preset: Decimal | None = None
    custom: str | None = None


@router.post("/amount")
async def set_amount(request: Request, body: AmountBody) -> JSONResponse:
    session = request.app.state.session
    session.set_amount(body.value)
    return JSONResponse(content=session.get_status())


@router.post("/source")
async def select_source(request: Request, body: TokenBody) -> JSONResponse:
    session = request.app.state.session
    session.select_source(body.symbol)
    return JSONResponse(content=session.get_status())


@router.post("/dest")
async def select_dest(request: Request, body: TokenBody) -> JSONResponse:
    session = request.app.state.session
    session.select_dest(body.symbol)
    return JSONResponse(content=session.get_status())


@router.post("/flip")
async def flip(request: Request) -> JSONResponse:
    session = request.app.state.session
    session.flip()
    return JSONResponse(content=session.get_status())


@router.post("/submit")
async def submit(request: Request) -> JSONResponse:
    """Validate and submit; waits for the (simulated) submission to finish."""
    session = request.app.state.session
    outcome = await session.submit()
    if not outcome.is_executable:
        log.info("submit_rejected_via_dashboard", violations=[v.value for v in outcome])
    return JSONResponse(content=session.get_status())


@router.post("/slippage")
async def set_slippage(request: Request, body: SlippageBody) -> JSONResponse:
    """Apply a preset or free-form slippage value (preset wins if both given)."""
    session = request.app.state.session
    if body.preset is not None:
        session.slippage.choose_preset(body.preset)
    else:
        session.slippage.set_custom(body.custom or "")
    return JSONResponse(content=session.get_status())
