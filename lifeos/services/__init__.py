"""Services package: orchestrators that turn user submissions into ledger records."""

from .expense_service import ExpenseService, parse_transaction_text  # noqa: F401
from .planner_service import PlannerService  # noqa: F401
