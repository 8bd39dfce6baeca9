"""Slippage tolerance preference, held in session memory only.

Displayed to the user; not consumed by rate or validation logic.
"""

from decimal import Decimal

from swapdesk.exceptions import InvalidSlippage
from swapdesk.logging import get_logger
from swapdesk.pricing.amounts import parse_amount

logger = get_logger(__name__)

SLIPPAGE_PRESETS = (Decimal("0.1"), Decimal("0.5"), Decimal("1.0"), Decimal("3.0"))
DEFAULT_SLIPPAGE = Decimal("0.5")
MIN_SLIPPAGE = Decimal("0.1")
MAX_SLIPPAGE = Decimal("50")


class SlippageTolerance:
    """Current slippage tolerance in percent."""

    def __init__(self, value: Decimal = DEFAULT_SLIPPAGE) -> None:
        self._value = value

    @property
    def value(self) -> Decimal:
        return self._value

    @property
    def is_preset(self) -> bool:
        return self._value in SLIPPAGE_PRESETS

    def choose_preset(self, value: Decimal) -> Decimal:
        """Select one of the preset buttons.

        Raises:
            InvalidSlippage: If value is not a preset.
        """
        if value not in SLIPPAGE_PRESETS:
            raise InvalidSlippage(f"{value}% is not a slippage preset")
        self._value = value
        logger.info("slippage_changed", value=str(value), preset=True)
        return self._value

    def set_custom(self, text: str) -> Decimal:
        """Apply free-form input.

        Unparseable or zero input falls back to the default; anything else
        is clamped to [MIN_SLIPPAGE, MAX_SLIPPAGE].
        """
        parsed = parse_amount(text)
        if parsed is None or parsed == 0:
            value = DEFAULT_SLIPPAGE
        else:
            value = min(max(parsed, MIN_SLIPPAGE), MAX_SLIPPAGE)
        self._value = value
        logger.info("slippage_changed", value=str(value), preset=False, raw=text)
        return self._value
