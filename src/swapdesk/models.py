"""Shared data models for the swap desk.

CRITICAL: All monetary values use Decimal. Never use float for prices, amounts or balances.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class Violation(str, Enum):
    """Named reason a swap request cannot proceed.

    Declaration order is the order violations are reported in.
    """

    INVALID_AMOUNT = "InvalidAmount"
    INSUFFICIENT_BALANCE = "InsufficientBalance"
    MISSING_TOKEN_SELECTION = "MissingTokenSelection"
    IDENTICAL_TOKENS = "IdenticalTokens"


class SessionState(str, Enum):
    """Swap session lifecycle state."""

    IDLE = "idle"
    FETCHING = "fetching"
    READY = "ready"
    EDITING = "editing"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SETTLED = "settled"
    FAILED = "failed"


class FailureKind(str, Enum):
    """Which path put the session into FAILED."""

    API = "api"
    SUBMIT = "submit"


@dataclass(frozen=True)
class TokenQuote:
    """A token's USD price as reported by the feed. Identity key is symbol."""

    symbol: str
    as_of: datetime
    unit_price_usd: Decimal


@dataclass(frozen=True)
class SwapRequest:
    """Proposed swap, rebuilt from the session on every change.

    None on either token means "not selected". source_amount is the raw
    user input, unparsed.
    """

    source: TokenQuote | None
    dest: TokenQuote | None
    source_amount: str


@dataclass(frozen=True)
class SwapQuote:
    """Derived cross-rate and destination amount for a SwapRequest."""

    rate: Decimal
    dest_amount: str  # fixed-point, 8 fractional digits
    computed_at: datetime


@dataclass(frozen=True)
class ValidationOutcome:
    """Set of violations found for a request. Empty means executable."""

    violations: frozenset[Violation] = frozenset()
    source_symbol: str | None = None

    @property
    def is_executable(self) -> bool:
        return not self.violations

    def __iter__(self) -> Iterator[Violation]:
        return (v for v in Violation if v in self.violations)

    def __contains__(self, violation: object) -> bool:
        return violation in self.violations

    def __len__(self) -> int:
        return len(self.violations)

    def messages(self) -> list[str]:
        """User-facing message per violation, in reporting order."""
        result = []
        for violation in self:
            if violation is Violation.INVALID_AMOUNT:
                result.append("Please enter a valid amount")
            elif violation is Violation.INSUFFICIENT_BALANCE:
                result.append(f"Insufficient {self.source_symbol} balance")
            elif violation is Violation.MISSING_TOKEN_SELECTION:
                result.append("Please select both tokens")
            else:
                result.append("Cannot swap the same token")
        return result


@dataclass
class SubmissionReceipt:
    """Result of an accepted (simulated) swap submission."""

    submission_id: str
    source_symbol: str
    dest_symbol: str
    source_amount: Decimal
    dest_amount: str
    submitted_at: datetime
    is_simulated: bool = True
