"""Tests for the ordered category rules."""

from lifeos.extraction.categories import CATEGORY_LABELS, CATEGORY_RULES, classify, counterpart_contains, text_contains


def test_vendor_categories() -> None:
    """Each vendor family maps to its label."""
    cases = {
        "Zomato": "Food & Dining",
        "PhonePe": "Payments",
        "Spotify": "Subscriptions",
        "Flipkart": "Shopping",
        "Ola": "Transport",
        "DMart": "Groceries",
    }
    for counterpart, expected in cases.items():
        category = classify(counterpart, f"Rs 100 debited for {counterpart}")
        if category != expected:
            msg = f"Expected {expected!r} for {counterpart!r}, got {category!r}"
            raise AssertionError(msg)


def test_keyword_categories() -> None:
    """Keywords in the raw text categorize transactions with unknown counterparts."""
    cases = {
        "Rs 2000 debited at HP petrol pump": "Transport",
        "Rs 640 debited for weekly groceries": "Groceries",
        "Rs 18000 debited towards house rent": "Housing",
        "Rs 90 sent via UPI": "Payments",
    }
    for text, expected in cases.items():
        category = classify("Unknown", text)
        if category != expected:
            msg = f"Expected {expected!r} for {text!r}, got {category!r}"
            raise AssertionError(msg)


def test_matching_is_case_insensitive() -> None:
    """Upper-case vendor spellings still match."""
    if classify("ZOMATO", "") != "Food & Dining":
        msg = "Expected 'Food & Dining' for 'ZOMATO'"
        raise AssertionError(msg)


def test_earlier_rule_takes_precedence() -> None:
    """A dining vendor paid over UPI is Food & Dining, and a UPI ride is a payment."""
    if classify("Swiggy", "Rs 150 paid to Swiggy via UPI") != "Food & Dining":
        msg = "Expected the dining rule to win over the UPI keyword"
        raise AssertionError(msg)
    if classify("Uber", "Rs 230 paid to Uber via UPI") != "Payments":
        msg = "Expected the UPI keyword to win over the ride-hailing rule"
        raise AssertionError(msg)


def test_fallback_label() -> None:
    """Nothing matching yields Uncategorized."""
    if classify("Unknown", "Your OTP is 482913") != "Uncategorized":
        msg = "Expected 'Uncategorized'"
        raise AssertionError(msg)


def test_classification_is_repeatable() -> None:
    """The same input always gets the same label."""
    first = classify("Netflix", "Rs 649 debited for Netflix")
    second = classify("Netflix", "Rs 649 debited for Netflix")
    if first != second or first != "Subscriptions":
        msg = f"Expected 'Subscriptions' twice, got {first!r} and {second!r}"
        raise AssertionError(msg)


def test_rule_order_and_labels() -> None:
    """The rule table keeps its precedence and every label is in the closed vocabulary."""
    labels = [label for _, label in CATEGORY_RULES]
    expected = ["Food & Dining", "Payments", "Subscriptions", "Shopping", "Transport", "Groceries", "Housing"]
    if labels != expected:
        msg = f"Expected rule order {expected}, got {labels}"
        raise AssertionError(msg)
    if CATEGORY_LABELS[-1] != "Uncategorized":
        msg = "Expected the fallback label to close the vocabulary"
        raise AssertionError(msg)


def test_custom_rule_table() -> None:
    """Callers can supply their own ordered rules."""
    rules = ((counterpart_contains("Chai Point"), "Food & Dining"), (text_contains("emi"), "Loans"))
    if classify("Chai Point", "") != "Uncategorized":
        msg = "Expected the default rules not to know Chai Point"
        raise AssertionError(msg)
    if classify("Chai Point", "", rules) != "Food & Dining":
        msg = "Expected the custom rule to match Chai Point"
        raise AssertionError(msg)
    if classify("HDFC", "Loan EMI debited", rules) != "Loans":
        msg = "Expected the custom keyword rule to match"
        raise AssertionError(msg)
