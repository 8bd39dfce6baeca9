"""Swap session -- coordinates fetch, edit, validate and submit.

Lifecycle:
    IDLE -> FETCHING -> READY -> (EDITING <-> VALIDATING) -> SUBMITTING
         -> SETTLED | FAILED(submit)
    FETCHING -> FAILED(api) is terminal: the form stays hidden and every
    later edit or submit is rejected.

The session exclusively owns the catalog, selection, amounts and derived
quote. Renderers read them through properties or get_status(). Every
mutating edit recomputes the quote explicitly; there are no reactive
subscriptions.

The fetch and the submission are the only suspension points. Each is
gated by moving the state synchronously before the first await, so a
second start() or submit() on the same event loop is rejected instead of
issuing a duplicate request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

from swapdesk.exceptions import SessionStateError, SubmissionInProgress
from swapdesk.logging import bind_session_context, get_logger
from swapdesk.market_data.catalog import PriceCatalog
from swapdesk.models import (
    FailureKind,
    SessionState,
    SubmissionReceipt,
    SwapQuote,
    SwapRequest,
    TokenQuote,
    ValidationOutcome,
)
from swapdesk.preferences import SlippageTolerance

if TYPE_CHECKING:
    from swapdesk.config import SessionSettings
    from swapdesk.execution.submitter import Submitter
    from swapdesk.feed.client import PriceFeed
    from swapdesk.ledger import BalanceLedger
    from swapdesk.pricing.rate_calculator import RateCalculator
    from swapdesk.risk.validator import SwapValidator

logger = get_logger(__name__)

API_ERROR_MESSAGE = "Failed to load token prices. Please refresh the page."
SUBMIT_ERROR_MESSAGE = "Swap failed. Please try again."

_EDITABLE_STATES = frozenset({
    SessionState.READY,
    SessionState.EDITING,
    SessionState.SETTLED,
    SessionState.FAILED,
})


class SwapSession:
    """Single active instance of swap form state.

    Args:
        feed: Price source queried once by start().
        calculator: Quote computation.
        validator: Business rules applied at submit time.
        ledger: Static balances injected into the validator.
        submitter: Async submit operation (simulated in production).
        settings: Default token symbols and slippage.
    """

    def __init__(
        self,
        feed: PriceFeed,
        calculator: RateCalculator,
        validator: SwapValidator,
        ledger: BalanceLedger,
        submitter: Submitter,
        settings: SessionSettings,
    ) -> None:
        self._feed = feed
        self._calculator = calculator
        self._validator = validator
        self._ledger = ledger
        self._submitter = submitter
        self._settings = settings

        self.session_id = uuid4().hex[:12]
        self._state = SessionState.IDLE
        self._failure: FailureKind | None = None
        self._catalog = PriceCatalog()
        self._source: TokenQuote | None = None
        self._dest: TokenQuote | None = None
        self._source_amount = ""
        self._dest_amount = ""
        self._quote: SwapQuote | None = None
        self._violations = ValidationOutcome()
        self._api_error: str | None = None
        self._submit_error: str | None = None
        self._success = False
        self._last_receipt: SubmissionReceipt | None = None
        self.slippage = SlippageTolerance(settings.default_slippage)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def failure(self) -> FailureKind | None:
        return self._failure

    @property
    def catalog(self) -> PriceCatalog:
        return self._catalog

    @property
    def ledger(self) -> BalanceLedger:
        return self._ledger

    @property
    def source(self) -> TokenQuote | None:
        return self._source

    @property
    def dest(self) -> TokenQuote | None:
        return self._dest

    @property
    def source_amount(self) -> str:
        return self._source_amount

    @property
    def dest_amount(self) -> str:
        return self._dest_amount

    @property
    def quote(self) -> SwapQuote | None:
        return self._quote

    @property
    def violations(self) -> ValidationOutcome:
        """Violations shown after the last rejected submit."""
        return self._violations

    @property
    def api_error(self) -> str | None:
        return self._api_error

    @property
    def submit_error(self) -> str | None:
        return self._submit_error

    @property
    def success(self) -> bool:
        return self._success

    @property
    def last_receipt(self) -> SubmissionReceipt | None:
        return self._last_receipt

    @property
    def is_loading(self) -> bool:
        return self._state in (SessionState.IDLE, SessionState.FETCHING)

    @property
    def form_visible(self) -> bool:
        """Form renders once prices loaded without error and both tokens are set."""
        return (
            not self.is_loading
            and self._api_error is None
            and self._source is not None
            and self._dest is not None
        )

    @property
    def can_submit(self) -> bool:
        """Whether the submit control is enabled."""
        return (
            self._state != SessionState.SUBMITTING
            and self.form_visible
            and bool(self._source_amount)
            and bool(self._dest_amount)
            and self._violations.is_executable
        )

    @property
    def _shows_rate(self) -> bool:
        # Exchange info panel renders whenever both amounts and both tokens are present
        return (
            bool(self._source_amount)
            and bool(self._dest_amount)
            and self._source is not None
            and self._dest is not None
        )

    def request(self) -> SwapRequest:
        """Snapshot of the current selection and amount."""
        return SwapRequest(
            source=self._source,
            dest=self._dest,
            source_amount=self._source_amount,
        )

    def check(self) -> ValidationOutcome:
        """Validate the current snapshot without changing session state."""
        return self._validator.validate(self.request(), self._ledger)

    def display_rate(self) -> str:
        return self._calculator.display_rate(self._source, self._dest)

    # ------------------------------------------------------------------
    # Fetch
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Fetch prices once and select the default pair.

        Any feed error moves the session to FAILED(api). There is no retry.

        Raises:
            SessionStateError: If the session was already started.
        """
        if self._state != SessionState.IDLE:
            raise SessionStateError(f"Session already started (state={self._state.value})")

        bind_session_context(self.session_id)
        self._state = SessionState.FETCHING
        logger.info("session_fetching_prices")

        try:
            raw_quotes = await self._feed.fetch()
            catalog = PriceCatalog.build(raw_quotes)
        except Exception:
            logger.warning("price_fetch_failed", exc_info=True)
            self._api_error = API_ERROR_MESSAGE
            self._failure = FailureKind.API
            self._state = SessionState.FAILED
            return

        self._catalog = catalog
        self._source, self._dest = catalog.default_selection(
            self._settings.default_source, self._settings.default_dest
        )
        self._state = SessionState.READY
        logger.info(
            "session_ready",
            tokens=len(catalog),
            source=self._source.symbol if self._source else None,
            dest=self._dest.symbol if self._dest else None,
        )

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def set_amount(self, text: str) -> SwapQuote | None:
        """Replace the source amount text and recompute the quote."""
        self._begin_edit()
        self._source_amount = text
        return self._recompute()

    def select_source(self, symbol: str) -> SwapQuote | None:
        """Select the source token by symbol.

        Raises:
            SessionStateError: If the form is not editable.
            TokenNotFound: If symbol is not in the catalog.
        """
        self._ensure_editable()
        token = self._catalog.get(symbol)
        self._begin_edit()
        self._source = token
        return self._recompute()

    def select_dest(self, symbol: str) -> SwapQuote | None:
        """Select the destination token by symbol.

        Raises:
            SessionStateError: If the form is not editable.
            TokenNotFound: If symbol is not in the catalog.
        """
        self._ensure_editable()
        token = self._catalog.get(symbol)
        self._begin_edit()
        self._dest = token
        return self._recompute()

    def flip(self) -> None:
        """Swap source/dest tokens and both displayed amounts atomically.

        A pure state transition: the quote is dropped, not recomputed, and
        nothing is validated until the next edit or submit. Applying flip
        twice restores tokens and amounts exactly.
        """
        self._begin_edit()
        self._source, self._dest = self._dest, self._source
        self._source_amount, self._dest_amount = self._dest_amount, self._source_amount
        self._quote = None
        logger.debug(
            "tokens_flipped",
            source=self._source.symbol if self._source else None,
            dest=self._dest.symbol if self._dest else None,
        )

    def _ensure_editable(self) -> None:
        if self._state == SessionState.SUBMITTING:
            raise SessionStateError("Cannot edit while a swap is being submitted")
        if self._state not in _EDITABLE_STATES or self._failure is FailureKind.API:
            raise SessionStateError(f"Form is not editable (state={self._state.value})")

    def _begin_edit(self) -> None:
        self._ensure_editable()
        self._state = SessionState.EDITING
        self._failure = None
        self._violations = ValidationOutcome()
        self._submit_error = None
        self._success = False

    def _recompute(self) -> SwapQuote | None:
        self._quote = self._calculator.quote(self._source, self._dest, self._source_amount)
        self._dest_amount = self._quote.dest_amount if self._quote is not None else ""
        return self._quote

    # ------------------------------------------------------------------
    # Submit
    # ------------------------------------------------------------------

    async def submit(self) -> ValidationOutcome:
        """Validate and, if clean, submit the current swap.

        Returns:
            The validation outcome. Non-empty means nothing was submitted;
            the violations are also exposed via the violations property.

        Raises:
            SubmissionInProgress: If a submission is already in flight.
            SessionStateError: If the form is not usable.
        """
        if self._state == SessionState.SUBMITTING:
            raise SubmissionInProgress("A swap is already being submitted")
        if self._state not in _EDITABLE_STATES or self._failure is FailureKind.API:
            raise SessionStateError(f"Cannot submit (state={self._state.value})")

        self._state = SessionState.VALIDATING
        request = self.request()
        outcome = self._validator.validate(request, self._ledger)

        if not outcome.is_executable:
            self._violations = outcome
            self._state = SessionState.EDITING
            logger.info("swap_rejected", violations=[v.value for v in outcome])
            return outcome

        self._state = SessionState.SUBMITTING
        self._violations = ValidationOutcome()
        self._submit_error = None
        self._success = False
        self._failure = None
        logger.info(
            "swap_submitting",
            source=request.source.symbol if request.source else None,
            dest=request.dest.symbol if request.dest else None,
            amount=request.source_amount,
            slippage=str(self.slippage.value),
        )

        try:
            receipt = await self._submitter.submit(request, self._quote)
        except Exception:
            logger.warning("swap_submission_failed", exc_info=True)
            self._submit_error = SUBMIT_ERROR_MESSAGE
            self._failure = FailureKind.SUBMIT
            self._state = SessionState.FAILED
            return outcome

        self._last_receipt = receipt
        self._success = True
        self._source_amount = ""
        self._dest_amount = ""
        self._quote = None
        self._state = SessionState.SETTLED
        logger.info("swap_settled", submission_id=receipt.submission_id)
        return outcome

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def get_status(self) -> dict:
        """Return a JSON-ready snapshot for renderers.

        Decimals are rendered as strings.
        """
        return {
            "session_id": self.session_id,
            "state": self._state.value,
            "failure": self._failure.value if self._failure else None,
            "loading": self.is_loading,
            "form_visible": self.form_visible,
            "source": _token_view(self._source, self._ledger),
            "dest": _token_view(self._dest, self._ledger),
            "source_amount": self._source_amount,
            "dest_amount": self._dest_amount,
            "exchange_rate": self.display_rate() if self._shows_rate else None,
            "violations": [v.value for v in self._violations],
            "messages": self._violations.messages(),
            "api_error": self._api_error,
            "submit_error": self._submit_error,
            "success": self._success,
            "can_submit": self.can_submit,
            "slippage": str(self.slippage.value),
        }


def _token_view(token: TokenQuote | None, ledger: BalanceLedger) -> dict | None:
    if token is None:
        return None
    balance = ledger.display_balance(token.symbol)
    return {
        "symbol": token.symbol,
        "price_usd": str(token.unit_price_usd),
        "as_of": token.as_of.isoformat(),
        "balance": str(balance),
    }
