"""FastAPI endpoints for the LIFE OS ledger service.

This module defines the routes for recording transaction SMS messages, turning planning text into schedules,
reading back an owner's ledgers, relaying assistant chat, and health checks. The owner id is taken from the
``X-User-Id`` header set by the identity service.
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool

from lifeos.api.dependencies import get_chat_service, get_expense_service, get_owner_id, get_planner_service
from lifeos.core.errors import (
    InvalidSubmissionError,
    LedgerUnavailableError,
    LifeOSError,
    MissingOwnerError,
    OracleUnavailableError,
)
from lifeos.core.models import (
    ChatReply,
    ChatRequest,
    ExpenseSubmission,
    PlanRecord,
    PlanSubmission,
    TransactionRecord,
)
from lifeos.core.utils import get_logger
from lifeos.services.chat_service import ChatService
from lifeos.services.expense_service import ExpenseService
from lifeos.services.planner_service import PlannerService

router = APIRouter()
logger = get_logger("lifeos.api")

OWNER_RESPONSES = {
    401: {
        "description": "Missing owner id.",
        "content": {"application/json": {"example": {"detail": "Authentication required. User ID missing."}}},
    },
}
LEDGER_RESPONSES = {503: {"description": "Ledger unavailable."}}


def to_http_error(exc: LifeOSError) -> HTTPException:
    """Map a service error onto the HTTP status the caller should see."""
    if isinstance(exc, MissingOwnerError):
        return HTTPException(401, str(exc))
    if isinstance(exc, InvalidSubmissionError):
        return HTTPException(400, str(exc))
    if isinstance(exc, OracleUnavailableError):
        return HTTPException(502, str(exc))
    if isinstance(exc, LedgerUnavailableError):
        return HTTPException(503, str(exc))
    return HTTPException(500, str(exc))


@router.post(
    "/expenses",
    status_code=201,
    response_model=TransactionRecord,
    summary="Record a transaction SMS",
    description=(
        "Parse a bank or UPI transaction SMS into amount, direction, counterpart and category, "
        "and append it to the caller's expense ledger. Fields that cannot be found keep their defaults "
        "(amount 0, Debit, Unknown, Uncategorized); the message is still recorded.\n\n"
        "**Response:**\n"
        "- 201 Created: the stored transaction record.\n"
        "- 400 Bad Request: blank SMS text.\n"
        "- 401 Unauthorized: missing `X-User-Id` header.\n"
        "- 503 Service Unavailable: the ledger could not be written."
    ),
    responses={
        201: {
            "description": "Transaction recorded.",
            "content": {
                "application/json": {
                    "example": {
                        "id": 1,
                        "owner_id": "user-123",
                        "raw_text": "Rs.150.00 debited from your A/c XXXX for Swiggy. Ref No. 123456789.",
                        "amount": "150.00",
                        "direction": "Debit",
                        "counterpart": "Swiggy",
                        "category": "Food & Dining",
                        "recorded_at": "2026-10-19T08:15:02.123456+00:00",
                    }
                }
            },
        },
        **OWNER_RESPONSES,
        **LEDGER_RESPONSES,
    },
)
async def create_expense(
    submission: ExpenseSubmission,
    owner_id: str = Depends(get_owner_id),
    service: ExpenseService = Depends(get_expense_service),
) -> TransactionRecord:
    """Parse a transaction SMS and record it."""
    try:
        return await service.submit(owner_id, submission.sms_text)
    except LifeOSError as exc:
        logger.warning(f"Rejected expense submission: {exc}")
        raise to_http_error(exc) from exc


@router.get(
    "/expenses",
    response_model=list[TransactionRecord],
    summary="List recorded transactions, newest first",
    responses={**OWNER_RESPONSES, **LEDGER_RESPONSES},
)
async def list_expenses(
    owner_id: str = Depends(get_owner_id),
    service: ExpenseService = Depends(get_expense_service),
) -> list[TransactionRecord]:
    """List the caller's transactions, newest first."""
    try:
        return await run_in_threadpool(list, service.history(owner_id))
    except LifeOSError as exc:
        raise to_http_error(exc) from exc


@router.post(
    "/plans",
    status_code=201,
    response_model=PlanRecord,
    summary="Turn planning text into a schedule",
    description=(
        "Send free-form planning text to the language model and append the resulting schedule to the "
        "caller's planner ledger. When the model's answer cannot be parsed, the plan is still recorded "
        "with `parsed_schedule` set to `{'error': true, 'raw': '<model output>'}`.\n\n"
        "**Response:**\n"
        "- 201 Created: the stored plan record.\n"
        "- 400 Bad Request: blank plan text.\n"
        "- 401 Unauthorized: missing `X-User-Id` header.\n"
        "- 502 Bad Gateway: the language model could not be reached.\n"
        "- 503 Service Unavailable: the ledger could not be written."
    ),
    responses={
        201: {
            "description": "Plan recorded.",
            "content": {
                "application/json": {
                    "example": {
                        "id": 1,
                        "owner_id": "user-123",
                        "raw_input": "Gym at 7 AM, then call mom in the evening",
                        "parsed_schedule": [
                            {"time": "7:00 AM", "description": "Gym", "category": "Health", "priority": "Medium"},
                            {"time": "Evening", "description": "Call mom", "category": "Personal", "priority": "Low"},
                        ],
                        "recorded_at": "2026-10-19T08:15:02.123456+00:00",
                    }
                }
            },
        },
        502: {"description": "Language model unavailable."},
        **OWNER_RESPONSES,
        **LEDGER_RESPONSES,
    },
)
async def create_plan(
    submission: PlanSubmission,
    owner_id: str = Depends(get_owner_id),
    service: PlannerService = Depends(get_planner_service),
) -> PlanRecord:
    """Parse planning text with the language model and record it."""
    try:
        return await service.submit(owner_id, submission.plan_input)
    except LifeOSError as exc:
        logger.warning(f"Plan submission failed: {exc}")
        raise to_http_error(exc) from exc


@router.get(
    "/plans",
    response_model=list[PlanRecord],
    summary="List recorded plans, newest first",
    responses={**OWNER_RESPONSES, **LEDGER_RESPONSES},
)
async def list_plans(
    owner_id: str = Depends(get_owner_id),
    service: PlannerService = Depends(get_planner_service),
) -> list[PlanRecord]:
    """List the caller's plans, newest first."""
    try:
        return await run_in_threadpool(list, service.history(owner_id))
    except LifeOSError as exc:
        raise to_http_error(exc) from exc


@router.post(
    "/chat",
    response_model=ChatReply,
    summary="Chat with the assistant",
    description=(
        "Forward the conversation so far (user and assistant turns) to the language model and return "
        "its reply. Conversations are not stored."
    ),
    responses={
        400: {"description": "Empty conversation."},
        502: {"description": "Language model unavailable."},
        **OWNER_RESPONSES,
    },
)
async def chat(
    chat_request: ChatRequest,
    owner_id: str = Depends(get_owner_id),
    service: ChatService = Depends(get_chat_service),
) -> ChatReply:
    """Return the assistant's next reply."""
    try:
        return ChatReply(response=await service.reply(owner_id, chat_request.messages))
    except LifeOSError as exc:
        logger.warning(f"Chat request failed: {exc}")
        raise to_http_error(exc) from exc


@router.get(
    "/health",
    summary="Health check",
    description="Simple health check endpoint. Returns status ok.",
    response_description="Status ok.",
    responses={200: {"description": "API is healthy.", "content": {"application/json": {"example": {"status": "ok"}}}}},
)
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}
