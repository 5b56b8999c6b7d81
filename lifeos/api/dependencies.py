"""FastAPI dependencies for DI (settings, ledger, services, owner id).

Clients are created once in the application lifespan and kept on ``app.state``; these helpers hand them to
the endpoints, which keeps the services free of global state and lets tests override any of them.
"""

from fastapi import Depends, Header, Request

from lifeos.agents.base import PlanOracle
from lifeos.agents.chat_agent import ChatAgent
from lifeos.core.settings import Settings
from lifeos.ledger import Ledger
from lifeos.services.chat_service import ChatService
from lifeos.services.expense_service import ExpenseService
from lifeos.services.planner_service import PlannerService


def get_settings(request: Request) -> Settings:
    """Provide the settings the application was started with."""
    return request.app.state.settings


def get_ledger(request: Request) -> Ledger:
    """Provide the process-wide ledger."""
    return request.app.state.ledger


def get_oracle(request: Request) -> PlanOracle:
    """Provide the language-generation backend used by the planner."""
    return request.app.state.oracle


def get_chat_agent(request: Request) -> ChatAgent:
    """Provide the chat agent."""
    return request.app.state.chat_agent


def get_owner_id(x_user_id: str | None = Header(default=None)) -> str:
    """Read the owner id supplied by the identity service; empty when absent."""
    return (x_user_id or "").strip()


def get_expense_service(ledger: Ledger = Depends(get_ledger)) -> ExpenseService:
    """Provide an ExpenseService bound to the ledger."""
    return ExpenseService(ledger)


def get_planner_service(
    oracle: PlanOracle = Depends(get_oracle),
    ledger: Ledger = Depends(get_ledger),
    settings: Settings = Depends(get_settings),
) -> PlannerService:
    """Provide a PlannerService bound to the oracle, ledger and settings."""
    return PlannerService(oracle, ledger, settings)


def get_chat_service(agent: ChatAgent = Depends(get_chat_agent)) -> ChatService:
    """Provide a ChatService bound to the chat agent."""
    return ChatService(agent)
