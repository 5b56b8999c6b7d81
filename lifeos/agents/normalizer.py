"""Normalization of raw language-model output into a schedule or a tagged error.

The model is asked for a JSON array but may wrap it in a markdown fence, return a single object, wrap the
array in an object, or return something that is not JSON at all. normalize_response turns every one of
these into a value the planner can persist; it never raises on bad content.
"""

import json
from typing import Any

from pydantic import ValidationError

from lifeos.core.models import ErrorPayload, NormalizedResult, PlanEntry, ScheduleEntries, TaggedError
from lifeos.core.utils import get_logger, truncate

FENCE = "```"
FENCE_LANGUAGES = ("json", "JSON")
MAX_RAW_LOG_LEN = 300

logger = get_logger("lifeos.normalizer")


def strip_code_fence(text: str) -> str:
    """Remove a leading markdown fence and everything from the closing fence onward."""
    body = text.strip()
    if not body.startswith(FENCE):
        return body
    body = body[len(FENCE) :]
    for language in FENCE_LANGUAGES:
        if body.startswith(language):
            body = body[len(language) :]
            break
    closing = body.find(FENCE)
    if closing != -1:
        body = body[:closing]
    return body.strip()


def _unwrap_list_container(value: dict[str, Any]) -> list[Any] | None:
    """Return the list held by an object like {"schedule": [...]}, if that is all it holds."""
    if len(value) != 1:
        return None
    (inner,) = value.values()
    if isinstance(inner, list) and inner and all(isinstance(item, dict) for item in inner):
        return inner
    return None


def _tagged(raw: str, reason: str) -> TaggedError:
    logger.warning(f"Model output not usable as a schedule ({reason}): {truncate(raw, MAX_RAW_LOG_LEN)}")
    return TaggedError(payload=ErrorPayload(raw=raw, reason=reason))


def normalize_response(raw: str) -> NormalizedResult:
    """Turn raw model output into a non-empty list of plan entries or a tagged error."""
    try:
        parsed = json.loads(strip_code_fence(raw))
    except (json.JSONDecodeError, RecursionError) as exc:
        return _tagged(raw, f"invalid JSON: {exc}")

    if isinstance(parsed, dict):
        error = parsed.get("error")
        if error:
            reason = error if isinstance(error, str) else "model reported an error"
            return _tagged(raw, reason)
        items = _unwrap_list_container(parsed)
        if items is None:
            items = [parsed]
    elif isinstance(parsed, list):
        items = parsed
    else:
        return _tagged(raw, f"expected an array or object, got {type(parsed).__name__}")

    if not items:
        return _tagged(raw, "empty schedule")
    try:
        entries = [PlanEntry.model_validate(item) for item in items]
    except ValidationError as exc:
        return _tagged(raw, f"unrenderable entry: {exc.error_count()} errors")
    return ScheduleEntries(entries=entries)
