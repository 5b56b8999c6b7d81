"""GroqPlanOracle: language-generation backend for the day planner.

This module defines the Groq-backed implementation of the PlanOracle capability. It sends the planner
system prompt and the user's text to the chat completions API in JSON mode and returns the raw text
payload untouched; making sense of that payload is the normalizer's job. Groq does not stream in JSON
mode, so a streamed request goes out without ``response_format`` and relies on the prompt alone.
"""

from typing import Any

from colorlog.escape_codes import escape_codes
from groq import APIError, Groq

from lifeos.agents.base import PlanOracle
from lifeos.core.errors import OracleUnavailableError
from lifeos.core.settings import Settings
from lifeos.core.utils import get_logger, truncate

MAX_PROMPT_LOG_LEN = 300
JSON_MODE = {"type": "json_object"}

logger = get_logger("lifeos.agent")


class GroqPlanOracle(PlanOracle):
    """Oracle that asks a Groq-hosted model for a JSON schedule."""

    def __init__(self, llm_client: Groq, settings: Settings) -> None:
        """Initialize the oracle with a Groq client and settings."""
        self.llm_client = llm_client
        self.settings = settings

    def _request_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {
            "model": self.settings.planner_model,
            "temperature": self.settings.planner_temperature,
            "max_completion_tokens": self.settings.planner_max_completion_tokens,
            "top_p": self.settings.planner_top_p,
            "stream": self.settings.planner_stream,
        }
        if not self.settings.planner_stream:
            options["response_format"] = JSON_MODE
        return options

    def generate(self, instructions: str, user_text: str) -> str:
        """Send the instructions and user text to the model and return its raw output."""
        cyan = escape_codes["cyan"]
        green = escape_codes["green"]
        yellow = escape_codes["yellow"]
        reset = escape_codes["reset"]
        logger.info(f"{cyan}INPUT: {truncate(user_text, MAX_PROMPT_LOG_LEN)}{reset}")
        messages = [
            {"role": "system", "content": instructions},
            {"role": "user", "content": user_text},
        ]
        try:
            logger.info(f"{yellow}AGENT: Calling LLM ({self.settings.planner_model})...{reset}")
            completion = self.llm_client.chat.completions.create(messages=messages, **self._request_options())
            raw_output = self._collect_llm_output(completion)
        except APIError as exc:
            msg = f"Groq API call failed: {exc}"
            logger.exception(msg)
            raise OracleUnavailableError(msg) from exc
        logger.info(f"{green}OUTPUT: {truncate(raw_output, MAX_PROMPT_LOG_LEN)}{reset}")
        return raw_output

    def _collect_llm_output(self, completion: object) -> str:
        """Collect the full output from a streamed or a single completion."""
        if not self.settings.planner_stream:
            return completion.choices[0].message.content or ""
        raw_output = ""
        for chunk in completion:
            raw_output += chunk.choices[0].delta.content or ""
        return raw_output
