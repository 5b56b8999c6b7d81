"""ChatAgent: relays an assistant conversation to a Groq-hosted model."""

from groq import APIError, Groq

from lifeos.agents.prompts import CHAT_SYSTEM_PROMPT
from lifeos.core.errors import OracleUnavailableError
from lifeos.core.models import ChatMessage
from lifeos.core.settings import Settings
from lifeos.core.utils import get_logger

logger = get_logger("lifeos.chat")


class ChatAgent:
    """Agent that answers the next turn of a user/assistant conversation."""

    def __init__(self, llm_client: Groq, settings: Settings) -> None:
        """Initialize the ChatAgent with a Groq client and settings."""
        self.llm_client = llm_client
        self.settings = settings

    def reply(self, messages: list[ChatMessage]) -> str:
        """Return the assistant's reply to the conversation so far."""
        payload = [{"role": "system", "content": CHAT_SYSTEM_PROMPT}]
        payload.extend(m.model_dump() for m in messages if m.role != "system")
        try:
            logger.info(f"AGENT: Calling LLM with {len(messages)} message(s)...")
            completion = self.llm_client.chat.completions.create(
                model=self.settings.chat_model,
                messages=payload,
                temperature=self.settings.chat_temperature,
            )
        except APIError as exc:
            msg = f"Groq API call failed: {exc}"
            logger.exception(msg)
            raise OracleUnavailableError(msg) from exc
        return completion.choices[0].message.content or ""
