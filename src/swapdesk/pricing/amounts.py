"""Parsing of raw amount text typed by the user."""

from decimal import Decimal, InvalidOperation


def parse_amount(text: str | None) -> Decimal | None:
    """Parse user-entered amount text as a finite Decimal.

    Surrounding whitespace is ignored. Returns None for empty,
    non-numeric, NaN or infinite input, and for text with digit-group
    underscores or non-ASCII digits. Sign is preserved; callers decide
    what a non-positive amount means.
    """
    if text is None:
        return None
    stripped = text.strip()
    if not stripped:
        return None
    # Decimal() also takes PEP 515 underscores and non-ASCII digits
    if not stripped.isascii() or "_" in stripped:
        return None
    try:
        value = Decimal(stripped)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value
