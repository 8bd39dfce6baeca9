"""Tests for RateCalculator quotes and display rate.

Verifies:
- rate = source price / dest price
- dest amount rounded half-up to 8 fractional digits, fixed-point string
- No quote for non-positive, non-numeric or empty amounts
- No quote when a token is missing or a price is unusable
- Display rate uses 6 fractional digits, independent of the amount rounding
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from swapdesk.models import TokenQuote
from swapdesk.pricing.rate_calculator import RateCalculator, cross_rate


def _quote(symbol: str, price: str) -> TokenQuote:
    return TokenQuote(
        symbol=symbol,
        as_of=datetime(2023, 8, 29, tzinfo=timezone.utc),
        unit_price_usd=Decimal(price),
    )


@pytest.fixture
def calculator() -> RateCalculator:
    return RateCalculator()


@pytest.fixture
def eth() -> TokenQuote:
    return _quote("ETH", "100")


@pytest.fixture
def usdc() -> TokenQuote:
    return _quote("USDC", "1")


def test_eth_to_usdc_scenario(
    calculator: RateCalculator, eth: TokenQuote, usdc: TokenQuote
) -> None:
    """2 ETH at $100 into USDC at $1 gives exactly 200 with 8 decimals."""
    quote = calculator.quote(eth, usdc, "2")
    assert quote is not None
    assert quote.rate == Decimal("100")
    assert quote.dest_amount == "200.00000000"


def test_dest_amount_rounds_to_eight_digits(calculator: RateCalculator) -> None:
    # 1 / 3 = 0.333333333... -> 0.33333333
    quote = calculator.quote(_quote("A", "1"), _quote("B", "3"), "1")
    assert quote is not None
    assert quote.dest_amount == "0.33333333"


def test_dest_amount_rounds_half_up(calculator: RateCalculator) -> None:
    # 2 / 3 = 0.666666666... -> 0.66666667
    quote = calculator.quote(_quote("A", "2"), _quote("B", "3"), "1")
    assert quote is not None
    assert quote.dest_amount == "0.66666667"


def test_tiny_amount_renders_fixed_point(calculator: RateCalculator) -> None:
    quote = calculator.quote(_quote("A", "1"), _quote("B", "1"), "0.00000001")
    assert quote is not None
    assert quote.dest_amount == "0.00000001"


@pytest.mark.parametrize("amount", ["", "   ", "0", "-1", "abc", "NaN", "Infinity", "1,5"])
def test_no_quote_for_unusable_amount(
    calculator: RateCalculator, eth: TokenQuote, usdc: TokenQuote, amount: str
) -> None:
    assert calculator.quote(eth, usdc, amount) is None


def test_no_quote_when_token_missing(
    calculator: RateCalculator, eth: TokenQuote, usdc: TokenQuote
) -> None:
    assert calculator.quote(None, usdc, "1") is None
    assert calculator.quote(eth, None, "1") is None
    assert calculator.quote(None, None, "1") is None


def test_no_quote_for_zero_dest_price(calculator: RateCalculator, eth: TokenQuote) -> None:
    assert calculator.quote(eth, _quote("BROKEN", "0"), "1") is None
    assert cross_rate(eth, _quote("BROKEN", "0")) is None


def test_quote_does_not_mutate_inputs(
    calculator: RateCalculator, eth: TokenQuote, usdc: TokenQuote
) -> None:
    first = calculator.quote(eth, usdc, "1.5")
    second = calculator.quote(eth, usdc, "1.5")
    assert first is not None and second is not None
    assert first.dest_amount == second.dest_amount == "150.00000000"
    assert eth.unit_price_usd == Decimal("100")


def test_display_rate_six_digits(calculator: RateCalculator) -> None:
    # 1 / 3 rate shown with 6 digits while the amount keeps 8
    a, b = _quote("A", "1"), _quote("B", "3")
    assert calculator.display_rate(a, b) == "0.333333"
    quote = calculator.quote(a, b, "1")
    assert quote is not None
    assert quote.dest_amount == "0.33333333"


def test_display_rate_without_tokens(calculator: RateCalculator, eth: TokenQuote) -> None:
    assert calculator.display_rate(eth, None) == "0"
    assert calculator.display_rate(None, None) == "0"


def test_whitespace_around_amount_accepted(
    calculator: RateCalculator, eth: TokenQuote, usdc: TokenQuote
) -> None:
    quote = calculator.quote(eth, usdc, " 0.5 ")
    assert quote is not None
    assert quote.dest_amount == "50.00000000"


@pytest.mark.parametrize("amount", ["1E+999999", "9.99E+999999"])
def test_overflowing_amount_gives_no_quote(
    calculator: RateCalculator, eth: TokenQuote, usdc: TokenQuote, amount: str
) -> None:
    """Amounts whose product overflows the Decimal context are not quotable."""
    assert calculator.quote(eth, usdc, amount) is None


def test_huge_amount_beyond_eight_digit_precision_gives_no_quote(
    calculator: RateCalculator, eth: TokenQuote, usdc: TokenQuote
) -> None:
    assert calculator.quote(eth, usdc, "1E+30") is None
