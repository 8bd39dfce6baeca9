"""Simulated swap submission with a fixed delay.

Nothing is sent anywhere and no balance changes: the submitter waits,
then either returns a receipt or raises SubmissionFailed.
"""

import asyncio
from datetime import datetime, timezone
from uuid import uuid4

from swapdesk.config import SessionSettings
from swapdesk.exceptions import SubmissionFailed
from swapdesk.execution.submitter import Submitter
from swapdesk.logging import get_logger
from swapdesk.models import SubmissionReceipt, SwapQuote, SwapRequest
from swapdesk.pricing.amounts import parse_amount

logger = get_logger(__name__)


class SimulatedSubmitter(Submitter):
    """Submitter that sleeps, then settles (or fails if configured to).

    Args:
        settings: Delay and failure switch.
    """

    def __init__(self, settings: SessionSettings) -> None:
        self._delay = settings.submit_delay_seconds
        self._fail = settings.simulate_failure

    async def submit(
        self, request: SwapRequest, quote: SwapQuote | None
    ) -> SubmissionReceipt:
        if request.source is None or request.dest is None:
            raise SubmissionFailed("Both tokens must be selected")
        amount = parse_amount(request.source_amount)
        if amount is None:
            raise SubmissionFailed(f"Unparseable amount: {request.source_amount!r}")

        await asyncio.sleep(self._delay)

        if self._fail:
            logger.warning(
                "simulated_swap_failed",
                source=request.source.symbol,
                dest=request.dest.symbol,
                amount=str(amount),
            )
            raise SubmissionFailed("Simulated submission failure")

        submission_id = f"sim_{uuid4().hex[:12]}"
        dest_amount = quote.dest_amount if quote is not None else ""

        logger.info(
            "simulated_swap_settled",
            submission_id=submission_id,
            source=request.source.symbol,
            dest=request.dest.symbol,
            amount=str(amount),
            dest_amount=dest_amount,
        )

        return SubmissionReceipt(
            submission_id=submission_id,
            source_symbol=request.source.symbol,
            dest_symbol=request.dest.symbol,
            source_amount=amount,
            dest_amount=dest_amount,
            submitted_at=datetime.now(timezone.utc),
        )
