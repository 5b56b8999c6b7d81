"""SMS-to-expense pipeline: field extraction, category rules, then a ledger append."""

from fastapi.concurrency import run_in_threadpool

from lifeos.core.errors import InvalidSubmissionError, MissingOwnerError
from lifeos.core.models import TransactionDraft, TransactionRecord
from lifeos.core.utils import get_logger, truncate
from lifeos.extraction import classify, extract_fields
from lifeos.ledger import Ledger, LedgerView

MAX_TEXT_LOG_LEN = 120

logger = get_logger("lifeos.expenses")


def parse_transaction_text(text: str) -> TransactionDraft:
    """Extract a complete transaction draft from a notification; unmatched fields keep their defaults."""
    fields = extract_fields(text)
    return TransactionDraft(
        raw_text=text,
        amount=fields.amount,
        direction=fields.direction,
        counterpart=fields.counterpart,
        category=classify(fields.counterpart, fields.category_signal),
    )


class ExpenseService:
    """Records transaction notifications in an owner's expense ledger."""

    def __init__(self, ledger: Ledger) -> None:
        """Initialize the service with the ledger it appends to."""
        self.ledger = ledger

    async def submit(self, owner_id: str, sms_text: str) -> TransactionRecord:
        """Parse a notification and append exactly one transaction record for the owner."""
        if not owner_id:
            msg = "Authentication required. User ID missing."
            raise MissingOwnerError(msg)
        if not sms_text or not sms_text.strip():
            msg = "Please paste a transaction SMS message."
            raise InvalidSubmissionError(msg)
        draft = parse_transaction_text(sms_text)
        logger.info(
            f"Parsed SMS for owner {owner_id}: amount={draft.amount} direction={draft.direction} "
            f"counterpart={draft.counterpart!r} category={draft.category!r} "
            f"text={truncate(sms_text, MAX_TEXT_LOG_LEN)!r}"
        )
        return await run_in_threadpool(self.ledger.transactions.append, owner_id, draft)

    def history(self, owner_id: str) -> LedgerView[TransactionRecord]:
        """Return the owner's transactions, newest first."""
        if not owner_id:
            msg = "Authentication required. User ID missing."
            raise MissingOwnerError(msg)
        return self.ledger.transactions.list_descending(owner_id)
