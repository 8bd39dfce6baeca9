"""Tests for SimulatedSubmitter.

Verifies:
- Settles with a sim_ receipt carrying the quoted destination amount
- Waits the configured delay
- Raises SubmissionFailed when configured to fail or given an incomplete request
"""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest

from swapdesk.config import SessionSettings
from swapdesk.exceptions import SubmissionFailed
from swapdesk.execution.simulated_submitter import SimulatedSubmitter
from swapdesk.models import SwapQuote, SwapRequest, TokenQuote

NOW = datetime(2023, 8, 29, tzinfo=timezone.utc)
ETH = TokenQuote("ETH", NOW, Decimal("100"))
USDC = TokenQuote("USDC", NOW, Decimal("1"))
QUOTE = SwapQuote(rate=Decimal("100"), dest_amount="200.00000000", computed_at=NOW)


@pytest.mark.asyncio
async def test_settles_with_receipt() -> None:
    submitter = SimulatedSubmitter(SessionSettings(submit_delay_seconds=0.0))

    receipt = await submitter.submit(SwapRequest(ETH, USDC, "2"), QUOTE)

    assert receipt.submission_id.startswith("sim_")
    assert len(receipt.submission_id) == len("sim_") + 12
    assert receipt.source_symbol == "ETH"
    assert receipt.dest_symbol == "USDC"
    assert receipt.source_amount == Decimal("2")
    assert receipt.dest_amount == "200.00000000"
    assert receipt.is_simulated is True


@pytest.mark.asyncio
async def test_waits_configured_delay() -> None:
    submitter = SimulatedSubmitter(SessionSettings(submit_delay_seconds=2.0))

    with patch(
        "swapdesk.execution.simulated_submitter.asyncio.sleep", new=AsyncMock()
    ) as sleep:
        await submitter.submit(SwapRequest(ETH, USDC, "2"), QUOTE)

    sleep.assert_awaited_once_with(2.0)


@pytest.mark.asyncio
async def test_configured_failure_raises() -> None:
    submitter = SimulatedSubmitter(
        SessionSettings(submit_delay_seconds=0.0, simulate_failure=True)
    )

    with pytest.raises(SubmissionFailed):
        await submitter.submit(SwapRequest(ETH, USDC, "2"), QUOTE)


@pytest.mark.asyncio
async def test_incomplete_request_raises() -> None:
    submitter = SimulatedSubmitter(SessionSettings(submit_delay_seconds=0.0))

    with pytest.raises(SubmissionFailed):
        await submitter.submit(SwapRequest(ETH, None, "2"), None)
    with pytest.raises(SubmissionFailed):
        await submitter.submit(SwapRequest(ETH, USDC, "two"), None)
