"""Read-only JSON endpoints: session status and token picker search."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get("/session")
async def get_session(request: Request) -> JSONResponse:
    """Current session snapshot (state, selection, amounts, notices)."""
    session = request.app.state.session
    return JSONResponse(content=session.get_status())


@router.get("/tokens")
async def get_tokens(request: Request, query: str = "") -> JSONResponse:
    """Catalog entries whose symbol contains query, with display balances."""
    session = request.app.state.session
    ledger = session.ledger
    result = []
    for token in session.catalog.search(query):
        result.append({
            "symbol": token.symbol,
            "price_usd": str(token.unit_price_usd),
            "as_of": token.as_of.isoformat(),
            "balance": str(ledger.display_balance(token.symbol)),
        })
    return JSONResponse(content=result)
