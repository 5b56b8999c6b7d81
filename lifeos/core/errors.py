"""Exception hierarchy for the LIFE OS ledger service.

Degraded content (unmatched patterns, unparsable model output) is never an
exception here; these types cover a malformed call and unavailable collaborators.
"""


class LifeOSError(Exception):
    """Base class for all service errors."""


class InvalidSubmissionError(LifeOSError, ValueError):
    """Raised when a submission violates the input contract (blank text, missing owner)."""


class OracleUnavailableError(LifeOSError, RuntimeError):
    """Raised when the language-generation service could not be reached or failed outright."""


class LedgerUnavailableError(LifeOSError, RuntimeError):
    """Raised when the ledger could not persist or read back records."""


class MissingOwnerError(InvalidSubmissionError):
    """Raised when a call arrives without an authenticated owner id."""
