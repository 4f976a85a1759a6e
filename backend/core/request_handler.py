# Role: Transport adapter between the voice platform and DialogueEngine. Verifies the calling application against
# the allow-list (fail closed), dispatches by request type, and serializes the result into the response envelope.
# Debug tracing lives here, around the engine's entry points, so the engine itself stays pure.

from __future__ import annotations

from typing import Any, Dict, Optional

import backend.config as config
from backend.config import SkillConfig
from backend.core.dialogue_engine import DialogueEngine
from backend.models.envelope import (
    OutputSpeech,
    Reprompt,
    RequestEnvelope,
    ResponseBody,
    ResponseEnvelope,
    SimpleCard,
)
from backend.models.meal_report import MealReport
from backend.models.response import SkillResponse

LAUNCH_REQUEST = "LaunchRequest"
INTENT_REQUEST = "IntentRequest"
SESSION_ENDED_REQUEST = "SessionEndedRequest"


class SkillRequestError(Exception):
    """Base class for requests rejected before they reach the dialogue engine."""


class ApplicationIdMismatchError(SkillRequestError):
    def __init__(self, application_id: Optional[str]) -> None:
        super().__init__(f"Unsupported application id: {application_id!r}")
        self.application_id = application_id


class UnsupportedRequestTypeError(SkillRequestError):
    def __init__(self, request_type: str) -> None:
        super().__init__(f"Unsupported request type: {request_type!r}")
        self.request_type = request_type


def _trace(event: str, envelope: RequestEnvelope, **fields: Any) -> None:
    if not config.DEBUG:
        return
    extra = " ".join(f"{k}={v}" for k, v in fields.items())
    print(
        f"{event} requestId={envelope.request.request_id}, sessionId={envelope.session.session_id}"
        + (f", {extra}" if extra else "")
    )


def build_response_envelope(response: Optional[SkillResponse], attributes: Dict[str, Any]) -> ResponseEnvelope:
    # Key line: SessionEndedRequest gets an empty body (the platform ignores speech at that point).
    if response is None:
        return ResponseEnvelope(session_attributes=attributes, response=ResponseBody())

    body = ResponseBody(
        output_speech=OutputSpeech(text=response.speech),
        should_end_session=response.should_end_session,
    )
    if response.card is not None:
        body.card = SimpleCard(title=response.card.title, content=response.card.content)
    if response.reprompt is not None:
        body.reprompt = Reprompt(output_speech=OutputSpeech(text=response.reprompt))

    return ResponseEnvelope(session_attributes=attributes, response=body)


class SkillRequestHandler:
    def __init__(self, skill_config: SkillConfig, engine: Optional[DialogueEngine] = None) -> None:
        self.skill_config = skill_config
        self.engine = engine or DialogueEngine()

    def verify(self, envelope: RequestEnvelope) -> None:
        application_id = envelope.application_id
        if not self.skill_config.is_supported(application_id):
            if config.DEBUG:
                print("REJECTED application id:", application_id)
            raise ApplicationIdMismatchError(application_id)

    def handle(self, envelope: RequestEnvelope) -> ResponseEnvelope:
        # 1) Reject unknown callers before touching the engine
        # 2) New session -> onSessionStarted hook
        # 3) Dispatch by request type
        # 4) Serialize response + session attributes
        self.verify(envelope)

        attributes = dict(envelope.session.attributes or {})

        if envelope.session.new:
            _trace("onSessionStarted", envelope)
            self.engine.on_session_started()

        request_type = envelope.request.type

        if request_type == LAUNCH_REQUEST:
            _trace("onLaunch", envelope)
            return build_response_envelope(self.engine.on_launch(), attributes)

        if request_type == INTENT_REQUEST and envelope.request.intent is not None:
            slots = envelope.slot_values()
            _trace("onIntent", envelope, intent=envelope.request.intent.name, slots=slots)

            result = self.engine.on_intent(
                envelope.request.intent.name,
                slots,
                MealReport.from_values(attributes),
                envelope.user_id,
            )
            # Key line: keep attributes we don't model, overlay the remembered meal fields.
            attributes.update(result.report.to_attributes())

            if config.DEBUG:
                print("onIntent resolved:", result.report.model_dump(), "->", result.response.mode.value)

            return build_response_envelope(result.response, attributes)

        if request_type == SESSION_ENDED_REQUEST:
            _trace("onSessionEnded", envelope, reason=envelope.request.reason)
            self.engine.on_session_ended()
            return build_response_envelope(None, attributes)

        raise UnsupportedRequestTypeError(request_type)
