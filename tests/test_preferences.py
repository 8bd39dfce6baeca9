"""Tests for SlippageTolerance preference handling."""

from decimal import Decimal

import pytest

from swapdesk.exceptions import InvalidSlippage
from swapdesk.preferences import DEFAULT_SLIPPAGE, SlippageTolerance


def test_default_is_half_percent() -> None:
    slippage = SlippageTolerance()
    assert slippage.value == Decimal("0.5")
    assert slippage.is_preset


@pytest.mark.parametrize("preset", ["0.1", "0.5", "1.0", "3.0", "1", "3"])
def test_choose_preset(preset: str) -> None:
    slippage = SlippageTolerance()
    assert slippage.choose_preset(Decimal(preset)) == Decimal(preset)
    assert slippage.is_preset


def test_non_preset_rejected() -> None:
    slippage = SlippageTolerance()
    with pytest.raises(InvalidSlippage):
        slippage.choose_preset(Decimal("2"))
    assert slippage.value == DEFAULT_SLIPPAGE


def test_custom_value_accepted() -> None:
    slippage = SlippageTolerance()
    assert slippage.set_custom("2.5") == Decimal("2.5")
    assert not slippage.is_preset


@pytest.mark.parametrize("text", ["", "abc", "0"])
def test_custom_falls_back_to_default(text: str) -> None:
    slippage = SlippageTolerance(Decimal("3.0"))
    assert slippage.set_custom(text) == DEFAULT_SLIPPAGE


@pytest.mark.parametrize(
    "text,expected",
    [("0.01", Decimal("0.1")), ("-4", Decimal("0.1")), ("75", Decimal("50"))],
)
def test_custom_clamped_to_bounds(text: str, expected: Decimal) -> None:
    slippage = SlippageTolerance()
    assert slippage.set_custom(text) == expected
