# Role: Deterministic "one question" builder. Converts missing_info keys (from MealReportValidator)
# into a single follow-up question and the card title shown with it, keeping the dialog step-by-step.

from __future__ import annotations

from typing import List, Tuple

WELCOME_QUESTION = "What did you eat ?"


def build_clarification_question(missing_info: List[str]) -> Tuple[str, str]:
    """Return (card_title, question) for the first missing field."""
    if not missing_info:
        return "Ok", WELCOME_QUESTION

    first = missing_info[0]

    # Key line: map internal slot keys -> a single question, card titled after the slot.
    if first == "person":
        return "person", "Who are you ?"

    if first == "meal":
        return "meal", "Is it breakfast, or lunch or dinner ?"

    if first == "place":
        return "place", "Where did you eat ? home or restaurant"

    return "Ok", WELCOME_QUESTION
