# Role: The skill's decision function. Given (intent name + slots + remembered MealReport + user id) it returns the
# next SkillResponse and the MealReport to remember. Pure: no I/O, no logging, no hidden counters.

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from backend.core.validator import MealReportValidator
from backend.models.intent import Intent
from backend.models.meal_report import MealReport
from backend.models.response import SkillResponse
from backend.utils.clarification import WELCOME_QUESTION, build_clarification_question

HELP_TEXT = "You can say what you have eaten!"
GOODBYE_TEXT = "Goodbye"
UNSUPPORTED_TEXT = "This is unsupported.  Please try something else."


@dataclass(frozen=True)
class TurnResult:
    response: SkillResponse
    report: MealReport


class DialogueEngine:
    def __init__(self, validator: Optional[MealReportValidator] = None) -> None:
        # Key line: dependencies are injectable for testing/mocking.
        self.validator = validator or MealReportValidator()

    def on_session_started(self) -> None:
        # Nothing to initialize: everything the dialog needs travels with the session attributes.
        return None

    def on_launch(self) -> SkillResponse:
        return SkillResponse.ask("Ok", WELCOME_QUESTION)

    def on_intent(
        self,
        intent_name: str,
        slots: Mapping[str, Optional[str]],
        report: MealReport,
        user_id: Optional[str],
    ) -> TurnResult:
        # 1) Meal report -> slot filling (the only branch that touches the report)
        # 2) Help / Stop / Cancel -> canned responses
        # 3) Anything else -> "unsupported" ask (a default, not an error)
        intent = Intent.from_name(intent_name)

        if intent == Intent.REPORT_MEAL:
            return self.fill_slots(MealReport.from_values(slots), report, user_id)

        if intent == Intent.HELP:
            return TurnResult(SkillResponse.ask("Ok", HELP_TEXT), report)

        if intent in {Intent.STOP, Intent.CANCEL}:
            return TurnResult(SkillResponse.tell(GOODBYE_TEXT), report)

        return TurnResult(SkillResponse.ask("Ok", UNSUPPORTED_TEXT), report)

    def on_session_ended(self) -> None:
        return None

    def fill_slots(self, supplied: MealReport, stored: MealReport, user_id: Optional[str]) -> TurnResult:
        # 1) Merge: supplied values overwrite, omitted ones fall back to what is stored
        # 2) person defaults to the platform user id instead of being asked
        # 3) Ask for the first missing gating field, or confirm and end
        report = stored.merge(supplied)
        if report.person is None and user_id:
            report = report.model_copy(update={"person": user_id})

        validation = self.validator.validate(report)
        if not validation.ok:
            card_title, question = build_clarification_question(validation.missing_info)
            return TurnResult(SkillResponse.ask(card_title, question), report)

        return TurnResult(SkillResponse.tell(f"Ok. I hope you enjoyed your {report.meal}"), report)
