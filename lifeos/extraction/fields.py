"""Pattern-based field extraction for bank and UPI transaction notifications.

Every field has a default, so any string yields a complete result: amount 0, direction Debit and
counterpart "Unknown" when nothing matches.
"""

import re
from decimal import Decimal
from typing import NamedTuple

from lifeos.core.models import UNKNOWN_COUNTERPART, Direction

AMOUNT_PATTERN = re.compile(r"(?:Rs\.?|INR|₹)\s*(\d[\d,]*(?:\.\d+)?)", re.IGNORECASE)
CREDIT_PATTERN = re.compile(r"credited", re.IGNORECASE)
COUNTERPART_PHRASE = re.compile(r"\b(?:for|to)\s+([A-Za-z0-9\s]+?)\s*(?:\.|$|UPI|Ref|A/c)", re.IGNORECASE)

# Checked in order; the first name found in the text wins.
KNOWN_VENDORS = (
    "Swiggy",
    "Zomato",
    "Paytm",
    "PhonePe",
    "GPay",
    "Netflix",
    "Amazon",
    "Flipkart",
    "BigBazaar",
    "DMart",
    "Petrol",
    "Groceries",
    "Uber",
    "Ola",
    "Spotify",
    "YouTube",
    "Rent",
)


class ExtractedFields(NamedTuple):
    """Raw fields pulled out of a notification; category_signal feeds the classifier."""

    amount: Decimal
    direction: Direction
    counterpart: str
    category_signal: str


def extract_amount(text: str) -> Decimal:
    """Return the first currency amount in the text, or 0 when none is present."""
    match = AMOUNT_PATTERN.search(text)
    if not match:
        return Decimal("0")
    return Decimal(match.group(1).replace(",", ""))


def extract_direction(text: str) -> Direction:
    """Classify the notification as Credit when it says "credited", otherwise Debit."""
    if CREDIT_PATTERN.search(text):
        return Direction.CREDIT
    return Direction.DEBIT


def extract_counterpart(text: str, vendors: tuple[str, ...] = KNOWN_VENDORS) -> str:
    """Resolve the vendor or entity on the other side of the transaction.

    Known vendors are matched case-insensitively and reported as spelled in the text. Otherwise the
    name following "for" or "to" is used, up to a period, the end of the text, or a UPI/Ref/A/c marker.
    """
    lowered = text.lower()
    for vendor in vendors:
        start = lowered.find(vendor.lower())
        if start != -1:
            return text[start : start + len(vendor)]
    match = COUNTERPART_PHRASE.search(text)
    if match and match.group(1).strip():
        return " ".join(match.group(1).split())
    return UNKNOWN_COUNTERPART


def extract_fields(text: str) -> ExtractedFields:
    """Extract amount, direction and counterpart from a transaction notification."""
    return ExtractedFields(
        amount=extract_amount(text),
        direction=extract_direction(text),
        counterpart=extract_counterpart(text),
        category_signal=text,
    )
