"""Normalized token catalog built from the raw price feed.

Pure transform: deduplicates by symbol (first occurrence wins) and pins
ETH then USDC to the front. Everything else keeps feed order.
"""

from collections.abc import Iterable, Iterator

from swapdesk.exceptions import TokenNotFound
from swapdesk.logging import get_logger
from swapdesk.models import TokenQuote

logger = get_logger(__name__)

PINNED_SYMBOLS = ("ETH", "USDC")


class PriceCatalog:
    """Ordered, symbol-unique sequence of token quotes.

    Build instances with PriceCatalog.build(); the constructor trusts its
    input to already be deduplicated and ordered.
    """

    def __init__(self, quotes: tuple[TokenQuote, ...] = ()) -> None:
        self._quotes = quotes
        self._by_symbol = {q.symbol: q for q in quotes}

    @classmethod
    def build(cls, raw_quotes: Iterable[TokenQuote]) -> "PriceCatalog":
        """Deduplicate and order raw feed quotes.

        Later duplicates of a symbol are dropped without error. Price
        validity is not checked here; a garbage price surfaces later as an
        unusable rate.
        """
        unique: dict[str, TokenQuote] = {}
        dropped = 0
        for quote in raw_quotes:
            if quote.symbol in unique:
                dropped += 1
                continue
            unique[quote.symbol] = quote

        # sorted() is stable, so unpinned symbols keep feed order
        ordered = sorted(unique.values(), key=_pin_rank)

        logger.debug("catalog_built", size=len(ordered), duplicates_dropped=dropped)
        return cls(tuple(ordered))

    def __iter__(self) -> Iterator[TokenQuote]:
        return iter(self._quotes)

    def __len__(self) -> int:
        return len(self._quotes)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._by_symbol

    @property
    def symbols(self) -> list[str]:
        return [q.symbol for q in self._quotes]

    def find(self, symbol: str) -> TokenQuote | None:
        """Return the entry for symbol, or None."""
        return self._by_symbol.get(symbol)

    def get(self, symbol: str) -> TokenQuote:
        """Return the entry for symbol.

        Raises:
            TokenNotFound: If the symbol is not in the catalog.
        """
        quote = self._by_symbol.get(symbol)
        if quote is None:
            raise TokenNotFound(f"Unknown token: {symbol}")
        return quote

    def search(self, query: str) -> list[TokenQuote]:
        """Case-insensitive substring match on symbol, in catalog order.

        A blank query returns the whole catalog.
        """
        needle = query.strip().lower()
        if not needle:
            return list(self._quotes)
        return [q for q in self._quotes if needle in q.symbol.lower()]

    def default_selection(
        self, source: str = "ETH", dest: str = "USDC"
    ) -> tuple[TokenQuote | None, TokenQuote | None]:
        """Default (source, dest) pair; each side is None when absent."""
        return self.find(source), self.find(dest)


def _pin_rank(quote: TokenQuote) -> int:
    try:
        return PINNED_SYMBOLS.index(quote.symbol)
    except ValueError:
        return len(PINNED_SYMBOLS)
