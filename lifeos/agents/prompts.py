"""Prompts for the planner and chat agents: system prompt templates for schedule extraction."""

import json
from datetime import date

PLAN_CATEGORIES = (
    "Work",
    "Education",
    "Social",
    "Health",
    "Personal",
    "Chores",
    "Errand",
    "Meal",
    "Finance",
    "Appointments",
    "Uncategorized",
)
PLAN_PRIORITIES = ("Very High", "High", "Medium", "Low")

EXAMPLE_INPUT = "I have a wedding tomorrow at 2 PM, a test at 10 AM, and an online meeting from 4-5 PM"
EXAMPLE_OUTPUT = [
    {
        "time": "Tomorrow 10:00 AM",
        "description": "Prepare for and take test",
        "category": "Education",
        "priority": "High",
    },
    {
        "time": "Tomorrow 2:00 PM",
        "description": "Attend wedding ceremony",
        "category": "Social",
        "priority": "Medium",
    },
    {
        "time": "Tomorrow 4:00 PM - 5:00 PM",
        "description": "Online team meeting",
        "category": "Work",
        "priority": "High",
    },
]

PLAN_SYSTEM_PROMPT = """
You are an AI assistant for a personal day planner.
The user will describe their tasks, appointments, and general plans for a day or week.
Your job is to parse that description into a JSON array of schedule items.
Each item must have the following fields:
  - "time" (string): the specific time or time range (e.g. "9:00 AM", "10:00 AM - 12:00 PM").
    If no time is given, infer a part of the day ("Morning", "Afternoon", "Evening").
  - "description" (string): a concise description of the activity.
  - "category" (string): one of {categories}.
  - "priority" (string): one of {priorities}.

Rules:
- Split a sentence into separate items when it mentions activities with distinct times.
- If the date or time is implied (e.g. "tomorrow"), resolve it against the current date, which is
  {current_date} (locale {locale}) in {location}. State inferred dates explicitly (e.g. "Tomorrow 10:00 AM").
- If the input cannot be structured, return one item with "category": "Uncategorized" and
  "description": "Original input: <the input>".
- Output ONLY the JSON, with no explanations, commentary, markdown, or extra text.
{example}"""

EXAMPLE_TEMPLATE = """
Example of desired JSON output for "{example_input}":
{example_output}
"""

CHAT_SYSTEM_PROMPT = (
    "You are LIFE OS, a friendly personal assistant. Help the user with planning their day, "
    "tracking expenses, and everyday questions. Keep answers short and practical."
)


def format_anchor_date(current_date: date) -> str:
    """Spell out the anchor date, e.g. "Monday, 19 October 2026"."""
    return f"{current_date:%A}, {current_date.day} {current_date:%B %Y}"


def build_plan_prompt(
    current_date: date,
    locale: str = "en-IN",
    location: str = "Bengaluru, India",
    *,
    include_example: bool = True,
) -> str:
    """Build the system prompt sent to the model for schedule extraction.

    The current date is supplied by the caller so that relative references resolve against an explicit
    anchor rather than the model's own notion of today.
    """
    example = ""
    if include_example:
        example = EXAMPLE_TEMPLATE.format(
            example_input=EXAMPLE_INPUT,
            example_output=json.dumps(EXAMPLE_OUTPUT, indent=2),
        )
    return PLAN_SYSTEM_PROMPT.format(
        categories=", ".join(f'"{c}"' for c in PLAN_CATEGORIES),
        priorities=", ".join(f'"{p}"' for p in PLAN_PRIORITIES),
        current_date=format_anchor_date(current_date),
        locale=locale,
        location=location,
        example=example,
    )
