"""Cross-rate and destination amount for a token pair.

The destination amount (8 fractional digits) and the displayed exchange
rate (6 fractional digits) are rounded independently from the same
unrounded rate.
"""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, DecimalException

from swapdesk.logging import get_logger
from swapdesk.models import SwapQuote, TokenQuote
from swapdesk.pricing.amounts import parse_amount

logger = get_logger(__name__)

AMOUNT_STEP = Decimal("0.00000001")
RATE_DISPLAY_STEP = Decimal("0.000001")


def cross_rate(source: TokenQuote, dest: TokenQuote) -> Decimal | None:
    """source price / dest price, or None if either price is unusable."""
    if source.unit_price_usd <= 0 or dest.unit_price_usd <= 0:
        return None
    try:
        return source.unit_price_usd / dest.unit_price_usd
    except DecimalException:
        return None


class RateCalculator:
    """Stateless quote computation, re-run on every amount or token change."""

    def quote(
        self,
        source: TokenQuote | None,
        dest: TokenQuote | None,
        source_amount_text: str,
    ) -> SwapQuote | None:
        """Quote a swap of source_amount_text units of source into dest.

        Returns None (nothing to show yet) when the amount does not parse,
        is <= 0, or either token is absent or unpriced.
        """
        amount = parse_amount(source_amount_text)
        if amount is None or amount <= 0 or source is None or dest is None:
            return None

        rate = cross_rate(source, dest)
        if rate is None:
            logger.debug(
                "unusable_rate",
                source=source.symbol,
                dest=dest.symbol,
                source_price=str(source.unit_price_usd),
                dest_price=str(dest.unit_price_usd),
            )
            return None

        try:
            dest_amount = (amount * rate).quantize(AMOUNT_STEP, rounding=ROUND_HALF_UP)
        except DecimalException:
            # Result overflows or is too large to carry 8 fractional digits
            logger.debug("quote_out_of_range", source=source.symbol, amount=str(amount))
            return None

        return SwapQuote(
            rate=rate,
            dest_amount=format(dest_amount, "f"),
            computed_at=datetime.now(timezone.utc),
        )

    def display_rate(self, source: TokenQuote | None, dest: TokenQuote | None) -> str:
        """'1 source = N dest' figure with 6 fractional digits, or '0'."""
        if source is None or dest is None:
            return "0"
        rate = cross_rate(source, dest)
        if rate is None:
            return "0"
        try:
            return format(rate.quantize(RATE_DISPLAY_STEP, rounding=ROUND_HALF_UP), "f")
        except DecimalException:
            return format(rate, "f")
