"""Extraction package: deterministic field extraction and category rules for transaction notifications."""

from .categories import CATEGORY_RULES, classify  # noqa: F401
from .fields import ExtractedFields, extract_fields  # noqa: F401
