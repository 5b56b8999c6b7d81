"""Test doubles for the language-generation backends."""

from lifeos.agents.base import PlanOracle
from lifeos.core.models import ChatMessage

SCHEDULE_JSON = """[
  {"time": "Tomorrow 9:00 AM", "description": "Review for exam", "category": "Education", "priority": "High"},
  {"time": "Tomorrow 11:30 AM", "description": "Call with manager", "category": "Work", "priority": "High"},
  {"time": "Evening", "description": "Go for a run", "category": "Health", "priority": "Medium"}
]"""


class StubOracle(PlanOracle):
    """Deterministic oracle returning a fixed payload (or raising a fixed error) and recording calls."""

    def __init__(self, reply: str = SCHEDULE_JSON, error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def generate(self, instructions: str, user_text: str) -> str:
        self.calls.append((instructions, user_text))
        if self.error is not None:
            raise self.error
        return self.reply


class StubChatAgent:
    """Chat agent echoing the last user message."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[list[ChatMessage]] = []

    def reply(self, messages: list[ChatMessage]) -> str:
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return f"You said: {messages[-1].content}"
