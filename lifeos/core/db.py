"""DB models and engine helpers for the LIFE OS ledger service."""

from sqlalchemy import JSON, Column, Integer, Numeric, String, Text, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from lifeos.core.models import Direction, PlanRecord, TransactionRecord

Base = declarative_base()


class TransactionRow(Base):
    """A transaction appended to an owner's expense ledger."""

    __tablename__ = "transactions"
    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(String, nullable=False, index=True)
    raw_text = Column(Text, nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)
    direction = Column(String, nullable=False)
    counterpart = Column(String, nullable=False)
    category = Column(String, nullable=False)
    recorded_at = Column(String, nullable=False, index=True)

    def to_record(self) -> TransactionRecord:
        """Convert the row into its API record."""
        return TransactionRecord(
            id=self.id,
            owner_id=self.owner_id,
            raw_text=self.raw_text,
            amount=self.amount,
            direction=Direction(self.direction),
            counterpart=self.counterpart,
            category=self.category,
            recorded_at=self.recorded_at,
        )


class PlanRow(Base):
    """A plan appended to an owner's planner ledger."""

    __tablename__ = "plans"
    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(String, nullable=False, index=True)
    raw_input = Column(Text, nullable=False)
    parsed_schedule = Column(JSON, nullable=False)
    recorded_at = Column(String, nullable=False, index=True)

    def to_record(self) -> PlanRecord:
        """Convert the row into its API record."""
        return PlanRecord(
            id=self.id,
            owner_id=self.owner_id,
            raw_input=self.raw_input,
            parsed_schedule=self.parsed_schedule,
            recorded_at=self.recorded_at,
        )


def get_engine(database_url: str) -> Engine:
    """Create a SQLAlchemy engine for the given database URL."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Ledger calls run in the threadpool, so a connection may cross threads.
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Build the session factory used by the ledger."""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create the ledger tables if they do not exist."""
    Base.metadata.create_all(engine)
