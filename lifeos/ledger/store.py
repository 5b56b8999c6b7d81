"""Append-only, per-owner ledger over SQLAlchemy.

Records are inserted with a timestamp assigned here, on the server, and are never updated or deleted.
Reads return the owner's records newest first, ordered by that timestamp and then by insertion id for
records that share a timestamp.
"""

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from lifeos.core.db import PlanRow, TransactionRow
from lifeos.core.errors import LedgerUnavailableError, MissingOwnerError
from lifeos.core.models import PlanDraft, PlanRecord, TransactionDraft, TransactionRecord
from lifeos.core.utils import get_logger, utcnow_iso

READ_BATCH_SIZE = 100

logger = get_logger("lifeos.ledger")

RecordT = TypeVar("RecordT", TransactionRecord, PlanRecord)


class LedgerView(Generic[RecordT]):
    """A lazy, restartable newest-first listing of one owner's records.

    Nothing is read until iteration starts, and each new iteration re-runs the query, so records
    appended in the meantime show up.
    """

    def __init__(self, session_factory: sessionmaker[Session], row_cls: type, owner_id: str) -> None:
        """Initialize the view for an owner's records of one kind."""
        self.session_factory = session_factory
        self.row_cls = row_cls
        self.owner_id = owner_id

    def __iter__(self) -> Iterator[RecordT]:
        """Yield records newest first."""
        stmt = (
            select(self.row_cls)
            .where(self.row_cls.owner_id == self.owner_id)
            .order_by(self.row_cls.recorded_at.desc(), self.row_cls.id.desc())
            .execution_options(yield_per=READ_BATCH_SIZE)
        )
        session = self.session_factory()
        try:
            for row in session.scalars(stmt):
                yield row.to_record()
        except SQLAlchemyError as exc:
            msg = f"Failed to read {self.row_cls.__tablename__} for owner {self.owner_id}: {exc}"
            logger.exception(msg)
            raise LedgerUnavailableError(msg) from exc
        finally:
            session.close()


class LedgerCollection(Generic[RecordT]):
    """One kind of record (transactions or plans), partitioned by owner."""

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        row_cls: type,
        clock: Callable[[], str],
    ) -> None:
        """Initialize the collection over an ORM row class."""
        self.session_factory = session_factory
        self.row_cls = row_cls
        self.clock = clock

    def append(self, owner_id: str, draft: TransactionDraft | PlanDraft) -> RecordT:
        """Insert a new record for the owner, stamped with the server time, and return it."""
        if not owner_id:
            msg = "Owner id is required to append to the ledger."
            raise MissingOwnerError(msg)
        row = self.row_cls(owner_id=owner_id, recorded_at=self.clock(), **draft.model_dump())
        session = self.session_factory()
        try:
            session.add(row)
            session.commit()
            record = row.to_record()
        except SQLAlchemyError as exc:
            session.rollback()
            msg = f"Failed to append to {self.row_cls.__tablename__} for owner {owner_id}: {exc}"
            logger.exception(msg)
            raise LedgerUnavailableError(msg) from exc
        finally:
            session.close()
        logger.info(f"Appended {self.row_cls.__tablename__} #{record.id} for owner {owner_id}")
        return record

    def list_descending(self, owner_id: str) -> LedgerView[RecordT]:
        """Return the owner's records, newest first."""
        return LedgerView(self.session_factory, self.row_cls, owner_id)


class Ledger:
    """Per-owner ledger holding the expense and planner collections."""

    def __init__(self, session_factory: sessionmaker[Session], clock: Callable[[], str] = utcnow_iso) -> None:
        """Initialize both collections on one session factory and clock."""
        self.transactions: LedgerCollection[TransactionRecord] = LedgerCollection(
            session_factory, TransactionRow, clock
        )
        self.plans: LedgerCollection[PlanRecord] = LedgerCollection(session_factory, PlanRow, clock)
