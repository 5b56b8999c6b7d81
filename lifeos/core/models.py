"""Pydantic models for the LIFE OS ledger service.

This module defines the record shapes persisted to the ledger (transactions and plans), the drafts the
orchestrators build before a server timestamp is assigned, the tagged result of normalizing model output,
and the request bodies accepted by the API.
"""

from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

UNKNOWN_COUNTERPART = "Unknown"
UNCATEGORIZED = "Uncategorized"
# Amounts are stored with two decimal places.
CENTS = Decimal("0.01")

PLAN_ENTRY_FIELDS = ("time", "description", "category", "priority")


class Direction(StrEnum):
    """Money flow of a transaction, seen from the account holder."""

    DEBIT = "Debit"
    CREDIT = "Credit"


class TransactionDraft(BaseModel):
    """Fields extracted from a transaction notification, before persistence."""

    raw_text: str
    amount: Decimal = Field(default=Decimal("0"), ge=0)
    direction: Direction = Direction.DEBIT
    counterpart: str = UNKNOWN_COUNTERPART
    category: str = UNCATEGORIZED

    @field_validator("amount")
    @classmethod
    def _round_to_cents(cls, value: Decimal) -> Decimal:
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)


class TransactionRecord(TransactionDraft):
    """A transaction as stored in an owner's ledger."""

    id: int
    owner_id: str
    recorded_at: str


class PlanEntry(BaseModel):
    """One item of a parsed schedule.

    The values come from the language model, so nothing is rejected: missing fields default to an empty
    string, non-string scalars are stringified, and unknown keys are kept.
    """

    model_config = ConfigDict(extra="allow")

    time: str = ""
    description: str = ""
    category: str = ""
    priority: str = ""

    @model_validator(mode="before")
    @classmethod
    def _coerce_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return {"description": "" if data is None else str(data)}
        coerced = dict(data)
        for key in PLAN_ENTRY_FIELDS:
            value = coerced.get(key)
            if value is None:
                coerced[key] = ""
            elif not isinstance(value, str):
                coerced[key] = str(value)
        return coerced


class ErrorPayload(BaseModel):
    """A model response that could not be turned into a schedule, kept for later inspection."""

    error: Literal[True] = True
    raw: str
    reason: str | None = None


class ScheduleEntries(BaseModel):
    """Normalized model output holding a non-empty list of plan entries."""

    kind: Literal["sequence"] = "sequence"
    entries: list[PlanEntry]


class TaggedError(BaseModel):
    """Normalized model output that carries an error payload instead of entries."""

    kind: Literal["error"] = "error"
    payload: ErrorPayload


NormalizedResult = ScheduleEntries | TaggedError


class PlanDraft(BaseModel):
    """A plan submission and its parsed schedule, before persistence."""

    raw_input: str
    parsed_schedule: list[PlanEntry] | ErrorPayload


class PlanRecord(PlanDraft):
    """A plan as stored in an owner's ledger."""

    id: int
    owner_id: str
    recorded_at: str


class ExpenseSubmission(BaseModel):
    """Request body for a transaction notification."""

    sms_text: str


class PlanSubmission(BaseModel):
    """Request body for free-form planning text."""

    plan_input: str


class ChatMessage(BaseModel):
    """One turn of an assistant conversation."""

    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    """Request body for the assistant chat relay."""

    messages: list[ChatMessage]


class ChatReply(BaseModel):
    """Assistant reply returned by the chat relay."""

    response: str
