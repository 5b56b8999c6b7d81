"""Rule-based category assignment for transactions.

CATEGORY_RULES is evaluated top to bottom and the first matching rule wins. A counterpart can satisfy
several rules (or the raw text can carry a keyword of a later rule), so reordering the table changes
results.
"""

from collections.abc import Callable

from lifeos.core.models import UNCATEGORIZED

Predicate = Callable[[str, str], bool]


def counterpart_contains(*names: str) -> Predicate:
    """Match when the lower-cased counterpart contains any of the names."""
    needles = tuple(name.lower() for name in names)

    def predicate(counterpart: str, _raw_text: str) -> bool:
        lowered = counterpart.lower()
        return any(needle in lowered for needle in needles)

    return predicate


def text_contains(*keywords: str) -> Predicate:
    """Match when the lower-cased raw text contains any of the keywords."""
    needles = tuple(keyword.lower() for keyword in keywords)

    def predicate(_counterpart: str, raw_text: str) -> bool:
        lowered = raw_text.lower()
        return any(needle in lowered for needle in needles)

    return predicate


def any_of(*predicates: Predicate) -> Predicate:
    """Match when any of the predicates matches."""

    def predicate(counterpart: str, raw_text: str) -> bool:
        return any(p(counterpart, raw_text) for p in predicates)

    return predicate


CATEGORY_RULES: tuple[tuple[Predicate, str], ...] = (
    (counterpart_contains("Swiggy", "Zomato"), "Food & Dining"),
    (any_of(counterpart_contains("Paytm", "PhonePe", "GPay"), text_contains("upi")), "Payments"),
    (counterpart_contains("Netflix", "Spotify", "YouTube"), "Subscriptions"),
    (counterpart_contains("Amazon", "Flipkart"), "Shopping"),
    (any_of(text_contains("petrol"), counterpart_contains("Uber", "Ola")), "Transport"),
    (any_of(text_contains("groceries"), counterpart_contains("BigBazaar", "DMart")), "Groceries"),
    (text_contains("rent"), "Housing"),
)

CATEGORY_LABELS = (*(label for _, label in CATEGORY_RULES), UNCATEGORIZED)


def classify(
    counterpart: str,
    raw_text: str,
    rules: tuple[tuple[Predicate, str], ...] = CATEGORY_RULES,
) -> str:
    """Return the label of the first rule matching the counterpart or raw text."""
    for predicate, label in rules:
        if predicate(counterpart, raw_text):
            return label
    return UNCATEGORIZED
