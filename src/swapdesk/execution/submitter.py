"""Abstract swap submitter interface.

The session calls only this contract, so the simulated submitter can be
replaced by an immediate stub in tests or a real venue later.
"""

from abc import ABC, abstractmethod

from swapdesk.models import SubmissionReceipt, SwapQuote, SwapRequest


class Submitter(ABC):
    """Abstract base class for swap submitters."""

    @abstractmethod
    async def submit(
        self, request: SwapRequest, quote: SwapQuote | None
    ) -> SubmissionReceipt:
        """Submit an already-validated swap.

        Args:
            request: Tokens and amount; both tokens are set and the amount
                parses as a positive Decimal.
            quote: Quote displayed to the user at submit time, if any.

        Returns:
            SubmissionReceipt describing the accepted swap.

        Raises:
            SubmissionFailed: If the swap is rejected.
        """
        ...
