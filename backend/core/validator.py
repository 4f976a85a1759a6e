# Role: Gatekeeper for the meal report. Checks which required fields are still unknown and returns them in
# priority order; the first one drives the next follow-up question. food/time are collected but never required.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from backend.models.meal_report import MealReport

GATING_FIELDS: Tuple[str, ...] = ("person", "meal", "place")


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    missing_info: List[str]


class MealReportValidator:
    def validate(self, report: MealReport) -> ValidationResult:
        # Key line: order matters. missing_info[0] is the question asked next.
        missing = [field for field in GATING_FIELDS if report.missing(field)]
        return ValidationResult(ok=not missing, missing_info=missing)
