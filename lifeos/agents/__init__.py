"""Agents package: oracle capability, Groq-backed agents, plan prompt builder, and model response normalizer."""

from .base import PlanOracle  # noqa: F401
from .normalizer import normalize_response  # noqa: F401
from .prompts import build_plan_prompt  # noqa: F401
