"""Plan-to-schedule pipeline: prompt, model call, response normalization, then a ledger append.

A model response that cannot be used is still persisted, as an error payload, so every submission has
exactly one ledger entry. Only a failed model call (no response at all) or a failed write is an error.
"""

from collections.abc import Callable
from datetime import date, datetime
from zoneinfo import ZoneInfo

from fastapi.concurrency import run_in_threadpool

from lifeos.agents.base import PlanOracle
from lifeos.agents.normalizer import normalize_response
from lifeos.agents.prompts import build_plan_prompt
from lifeos.core.errors import InvalidSubmissionError, MissingOwnerError
from lifeos.core.models import PlanDraft, PlanRecord, ScheduleEntries
from lifeos.core.settings import Settings
from lifeos.core.utils import get_logger
from lifeos.ledger import Ledger, LedgerView

logger = get_logger("lifeos.planner")


class PlannerService:
    """Turns free-form planning text into schedule records in an owner's planner ledger."""

    def __init__(
        self,
        oracle: PlanOracle,
        ledger: Ledger,
        settings: Settings,
        today: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the service with its oracle, ledger, settings, and a source for the anchor date."""
        self.oracle = oracle
        self.ledger = ledger
        self.settings = settings
        self.today = today or self._local_today

    def _local_today(self) -> date:
        return datetime.now(ZoneInfo(self.settings.planner_timezone)).date()

    def build_prompt(self) -> str:
        """Build the planner system prompt anchored on today's date."""
        return build_plan_prompt(
            self.today(),
            self.settings.planner_locale,
            self.settings.planner_location,
            include_example=self.settings.plan_prompt_with_example,
        )

    async def submit(self, owner_id: str, plan_input: str) -> PlanRecord:
        """Ask the model for a schedule and append exactly one plan record for the owner."""
        if not owner_id:
            msg = "Authentication required. User ID missing."
            raise MissingOwnerError(msg)
        if not plan_input or not plan_input.strip():
            msg = "Invalid plan input provided."
            raise InvalidSubmissionError(msg)
        raw_output = await run_in_threadpool(self.oracle.generate, self.build_prompt(), plan_input)
        result = normalize_response(raw_output)
        if isinstance(result, ScheduleEntries):
            logger.info(f"Parsed {len(result.entries)} schedule item(s) for owner {owner_id}")
            draft = PlanDraft(raw_input=plan_input, parsed_schedule=result.entries)
        else:
            logger.warning(f"Storing unparsable schedule for owner {owner_id}: {result.payload.reason}")
            draft = PlanDraft(raw_input=plan_input, parsed_schedule=result.payload)
        return await run_in_threadpool(self.ledger.plans.append, owner_id, draft)

    def history(self, owner_id: str) -> LedgerView[PlanRecord]:
        """Return the owner's plans, newest first."""
        if not owner_id:
            msg = "Authentication required. User ID missing."
            raise MissingOwnerError(msg)
        return self.ledger.plans.list_descending(owner_id)
