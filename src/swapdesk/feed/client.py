"""Abstract price feed interface.

The session depends only on this contract, so tests and alternative
sources can stand in for the HTTP endpoint.
"""

from abc import ABC, abstractmethod

from swapdesk.models import TokenQuote


class PriceFeed(ABC):
    """Abstract base class for token price sources."""

    @abstractmethod
    async def fetch(self) -> list[TokenQuote]:
        """Fetch the raw quote list, in feed order, duplicates included.

        Raises:
            FeedUnavailable: If the source cannot be reached or its
                response cannot be parsed.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release any underlying connections."""
        ...
