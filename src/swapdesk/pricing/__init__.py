"""Pricing layer -- amount parsing and cross-rate quotes."""

from swapdesk.pricing.amounts import parse_amount
from swapdesk.pricing.rate_calculator import RateCalculator, cross_rate

__all__ = ["RateCalculator", "cross_rate", "parse_amount"]
