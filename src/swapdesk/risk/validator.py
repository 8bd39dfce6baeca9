"""Business-rule validation for a proposed swap.

Every rule is evaluated independently, so all applicable violations are
reported together:
  - InvalidAmount: amount empty, non-numeric or <= 0
  - InsufficientBalance: amount exceeds the ledger balance of the source token
  - MissingTokenSelection: either side unselected
  - IdenticalTokens: both sides carry the same symbol

Two edge behaviours are kept for compatibility with earlier form releases:
  - A source token with no ledger entry skips the balance rule entirely.
  - Two unselected tokens compare equal, so MissingTokenSelection and
    IdenticalTokens are reported together. This looks unintended.
"""

from swapdesk.ledger import BalanceLedger
from swapdesk.logging import get_logger
from swapdesk.models import SwapRequest, ValidationOutcome, Violation
from swapdesk.pricing.amounts import parse_amount

logger = get_logger(__name__)


class SwapValidator:
    """Applies swap business rules against an injected balance ledger."""

    def validate(
        self, request: SwapRequest, ledger: BalanceLedger
    ) -> ValidationOutcome:
        """Return every violation that applies to request.

        Pure: no side effects beyond a debug log line, no I/O.

        Args:
            request: Tokens and raw amount text to check.
            ledger: Balances used for the InsufficientBalance rule.

        Returns:
            ValidationOutcome; empty means the swap may be submitted.
        """
        violations: set[Violation] = set()
        amount = parse_amount(request.source_amount)

        if amount is None or amount <= 0:
            violations.add(Violation.INVALID_AMOUNT)

        if request.source is not None and amount is not None:
            balance = ledger.get(request.source.symbol)
            if balance is not None and amount > balance:
                violations.add(Violation.INSUFFICIENT_BALANCE)

        if request.source is None or request.dest is None:
            violations.add(Violation.MISSING_TOKEN_SELECTION)

        source_symbol = request.source.symbol if request.source is not None else None
        dest_symbol = request.dest.symbol if request.dest is not None else None
        if source_symbol == dest_symbol:
            violations.add(Violation.IDENTICAL_TOKENS)

        outcome = ValidationOutcome(
            violations=frozenset(violations),
            source_symbol=source_symbol,
        )

        if not outcome.is_executable:
            logger.debug(
                "swap_request_rejected",
                violations=[v.value for v in outcome],
                source=source_symbol,
                dest=dest_symbol,
                amount=request.source_amount,
            )

        return outcome
