"""Shared test fixtures for the swap desk."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from swapdesk.config import AppSettings, SessionSettings
from swapdesk.execution.simulated_submitter import SimulatedSubmitter
from swapdesk.feed.client import PriceFeed
from swapdesk.ledger import BalanceLedger
from swapdesk.models import TokenQuote
from swapdesk.pricing.rate_calculator import RateCalculator
from swapdesk.risk.validator import SwapValidator
from swapdesk.session import SwapSession

AS_OF = datetime(2023, 8, 29, 7, 10, 40, tzinfo=timezone.utc)


def make_quote(symbol: str, price: str) -> TokenQuote:
    return TokenQuote(symbol=symbol, as_of=AS_OF, unit_price_usd=Decimal(price))


@pytest.fixture
def mock_settings() -> AppSettings:
    """Return AppSettings with test defaults (no submit delay)."""
    return AppSettings(
        log_level="DEBUG",
        session=SessionSettings(submit_delay_seconds=0.0),
    )


@pytest.fixture
def session_settings(mock_settings: AppSettings) -> SessionSettings:
    return mock_settings.session


@pytest.fixture
def quotes() -> list[TokenQuote]:
    """Feed order: WBTC first, so pinning is observable."""
    return [
        make_quote("WBTC", "60000"),
        make_quote("USDC", "1"),
        make_quote("ETH", "100"),
    ]


@pytest.fixture
def ledger() -> BalanceLedger:
    return BalanceLedger({
        "ETH": Decimal("10.5"),
        "USDC": Decimal("245.8"),
        "WBTC": Decimal("0.025"),
    })


@pytest.fixture
def feed(quotes: list[TokenQuote]) -> AsyncMock:
    mock = AsyncMock(spec=PriceFeed)
    mock.fetch.return_value = quotes
    return mock


@pytest.fixture
def session(
    feed: AsyncMock, ledger: BalanceLedger, session_settings: SessionSettings
) -> SwapSession:
    """Unstarted session backed by the mock feed and a zero-delay submitter."""
    return SwapSession(
        feed=feed,
        calculator=RateCalculator(),
        validator=SwapValidator(),
        ledger=ledger,
        submitter=SimulatedSubmitter(session_settings),
        settings=session_settings,
    )
