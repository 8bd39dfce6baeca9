"""Static per-token balances available to the swap form.

The ledger is read-only: swaps are simulated and never debit it.
"""

from collections.abc import Mapping
from decimal import Decimal

DEFAULT_BALANCES: Mapping[str, Decimal] = {
    "ETH": Decimal("10.5"),
    "USDC": Decimal("245.8"),
    "WBTC": Decimal("0.025"),
    "BLUR": Decimal("1200"),
    "GMX": Decimal("5.2"),
    "ATOM": Decimal("150"),
    "OSMO": Decimal("890"),
    "OKB": Decimal("15.8"),
    "OKT": Decimal("45.2"),
    "ZIL": Decimal("5000"),
}


class BalanceLedger:
    """Read-only mapping from token symbol to available balance.

    Args:
        balances: Symbol to non-negative balance. Copied on construction.

    Raises:
        ValueError: If any balance is negative.
    """

    def __init__(self, balances: Mapping[str, Decimal]) -> None:
        for symbol, amount in balances.items():
            if amount < 0:
                raise ValueError(f"Negative balance for {symbol}: {amount}")
        self._balances = dict(balances)

    @classmethod
    def default(cls) -> "BalanceLedger":
        """Ledger seeded with the built-in demo balances."""
        return cls(DEFAULT_BALANCES)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._balances

    def get(self, symbol: str) -> Decimal | None:
        """Balance for symbol, or None when the ledger has no entry."""
        return self._balances.get(symbol)

    def display_balance(self, symbol: str) -> Decimal:
        """Balance shown next to a token; unknown tokens show zero."""
        return self._balances.get(symbol, Decimal("0"))
