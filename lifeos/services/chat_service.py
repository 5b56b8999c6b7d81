"""Assistant chat relay: validates a conversation and forwards it to the chat agent."""

from fastapi.concurrency import run_in_threadpool

from lifeos.agents.chat_agent import ChatAgent
from lifeos.core.errors import InvalidSubmissionError, MissingOwnerError
from lifeos.core.models import ChatMessage


class ChatService:
    """Answers the next turn of a user's conversation; nothing is persisted."""

    def __init__(self, agent: ChatAgent) -> None:
        """Initialize the service with its chat agent."""
        self.agent = agent

    async def reply(self, owner_id: str, messages: list[ChatMessage]) -> str:
        """Return the assistant's reply for a non-empty conversation."""
        if not owner_id:
            msg = "Authentication required. User ID missing."
            raise MissingOwnerError(msg)
        if not messages:
            msg = "Invalid messages array provided."
            raise InvalidSubmissionError(msg)
        return await run_in_threadpool(self.agent.reply, messages)
