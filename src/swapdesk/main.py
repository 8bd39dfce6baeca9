"""Entry point for the swap desk.

Wires components together and serves the dashboard API. The session is
started inside the FastAPI lifespan so the price fetch runs on uvicorn's
event loop.

Component wiring order (in _build_components):
1. HttpPriceFeed (price endpoint client)
2. RateCalculator
3. SwapValidator
4. BalanceLedger (static demo balances)
5. SimulatedSubmitter (delay / failure from SessionSettings)
6. SwapSession
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI

from swapdesk.config import AppSettings
from swapdesk.execution.simulated_submitter import SimulatedSubmitter
from swapdesk.feed.http_feed import HttpPriceFeed
from swapdesk.ledger import BalanceLedger
from swapdesk.logging import get_logger, setup_logging
from swapdesk.pricing.rate_calculator import RateCalculator
from swapdesk.risk.validator import SwapValidator
from swapdesk.session import SwapSession


def _build_components(settings: AppSettings) -> dict[str, Any]:
    """Build the feed and a fresh swap session from settings.

    Does NOT start the session -- that happens in the lifespan (dashboard
    mode) or run() (headless mode).

    Args:
        settings: Application-wide settings.

    Returns:
        Dict mapping component names to instances.
    """
    feed = HttpPriceFeed(settings.feed)
    ledger = BalanceLedger.default()

    session = SwapSession(
        feed=feed,
        calculator=RateCalculator(),
        validator=SwapValidator(),
        ledger=ledger,
        submitter=SimulatedSubmitter(settings.session),
        settings=settings.session,
    )

    return {
        "feed": feed,
        "ledger": ledger,
        "session": session,
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the session on startup, close the feed client on shutdown.

    A failed price fetch does not abort startup: the session is left in
    FAILED(api) and the API reports it.
    """
    logger = get_logger("swapdesk.main")
    components = app.state.components

    app.state.session = components["session"]

    await components["session"].start()
    logger.info("lifespan_started", state=components["session"].state.value)

    yield

    await components["feed"].close()
    logger.info("swapdesk_stopped")


async def run() -> None:
    """Run the swap desk.

    With the dashboard enabled (DASHBOARD_ENABLED=true, the default) the API
    is served by uvicorn. Otherwise the session is started once, its status
    is logged and the process exits.
    """
    settings = AppSettings()

    setup_logging(settings.log_level)
    logger = get_logger("swapdesk.main")

    components = _build_components(settings)

    if settings.dashboard.enabled:
        from swapdesk.dashboard.app import create_dashboard_app

        app = create_dashboard_app(lifespan=lifespan)
        app.state.settings = settings
        app.state.components = components

        logger.info(
            "starting_with_dashboard",
            host=settings.dashboard.host,
            port=settings.dashboard.port,
            feed_url=settings.feed.url,
        )

        config = uvicorn.Config(
            app,
            host=settings.dashboard.host,
            port=settings.dashboard.port,
            log_level="warning",  # Suppress uvicorn access logs
        )
        server = uvicorn.Server(config)
        await server.serve()
    else:
        session = components["session"]
        try:
            await session.start()
            logger.info("session_status", **session.get_status())
        finally:
            await components["feed"].close()


def main() -> None:
    """Synchronous entry point."""
    asyncio.run(run())


if __name__ == "__main__":
    main()
