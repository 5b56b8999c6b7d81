"""Core package: provides models, database helpers, settings, errors, and shared utilities."""

from .errors import (  # noqa: F401
    InvalidSubmissionError,
    LedgerUnavailableError,
    LifeOSError,
    MissingOwnerError,
    OracleUnavailableError,
)
from .models import Direction, PlanRecord, TransactionRecord  # noqa: F401
from .settings import Settings  # noqa: F401
from .utils import get_logger  # noqa: F401
