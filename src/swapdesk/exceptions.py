"""Custom exceptions for the swap desk.

Session, feed and submission exceptions live here to avoid circular
imports between modules.
"""


class SwapDeskError(Exception):
    """Base exception for all swap desk errors."""


class FeedUnavailable(SwapDeskError):
    """Raised when the price feed cannot be reached or its response cannot be parsed."""


class SubmissionFailed(SwapDeskError):
    """Raised when a (simulated) swap submission is rejected."""


class SubmissionInProgress(SwapDeskError):
    """Raised when a submit is attempted while another one is in flight."""


class SessionStateError(SwapDeskError):
    """Raised when an operation is not allowed in the current session state."""


class TokenNotFound(SwapDeskError):
    """Raised when a symbol is not present in the price catalog."""


class InvalidSlippage(SwapDeskError):
    """Raised when a slippage preset outside the allowed set is chosen."""
