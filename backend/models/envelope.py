# Role: Wire schema of the voice platform. Request envelopes come in as camelCase JSON, response envelopes go out
# the same way. Only the fields the skill reads are modelled; everything else in the payload is ignored.

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Wire(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Application(_Wire):
    application_id: Optional[str] = Field(default=None, alias="applicationId")


class User(_Wire):
    user_id: Optional[str] = Field(default=None, alias="userId")


class Session(_Wire):
    new: bool = False
    session_id: Optional[str] = Field(default=None, alias="sessionId")
    application: Optional[Application] = None
    attributes: Optional[Dict[str, Any]] = None
    user: Optional[User] = None


class SystemContext(_Wire):
    application: Optional[Application] = None
    user: Optional[User] = None


class Context(_Wire):
    system: Optional[SystemContext] = Field(default=None, alias="System")


class Slot(_Wire):
    name: Optional[str] = None
    value: Optional[str] = None


class IntentPayload(_Wire):
    name: str
    slots: Dict[str, Slot] = Field(default_factory=dict)


class Request(_Wire):
    type: str
    request_id: Optional[str] = Field(default=None, alias="requestId")
    timestamp: Optional[str] = None
    locale: Optional[str] = None
    intent: Optional[IntentPayload] = None
    reason: Optional[str] = None


class RequestEnvelope(_Wire):
    version: str = "1.0"
    session: Session = Field(default_factory=Session)
    context: Optional[Context] = None
    request: Request

    @property
    def application_id(self) -> Optional[str]:
        # Key line: session carries the id on most requests; context.System is the fallback.
        if self.session.application and self.session.application.application_id:
            return self.session.application.application_id
        if self.context and self.context.system and self.context.system.application:
            return self.context.system.application.application_id
        return None

    @property
    def user_id(self) -> Optional[str]:
        if self.session.user and self.session.user.user_id:
            return self.session.user.user_id
        if self.context and self.context.system and self.context.system.user:
            return self.context.system.user.user_id
        return None

    def slot_values(self) -> Dict[str, Optional[str]]:
        if self.request.intent is None:
            return {}
        return {name: slot.value for name, slot in self.request.intent.slots.items()}


class OutputSpeech(_Wire):
    type: str = "PlainText"
    text: str


class SimpleCard(_Wire):
    type: str = "Simple"
    title: str
    content: str


class Reprompt(_Wire):
    output_speech: OutputSpeech = Field(alias="outputSpeech")


class ResponseBody(_Wire):
    output_speech: Optional[OutputSpeech] = Field(default=None, alias="outputSpeech")
    card: Optional[SimpleCard] = None
    reprompt: Optional[Reprompt] = None
    should_end_session: Optional[bool] = Field(default=None, alias="shouldEndSession")


class ResponseEnvelope(_Wire):
    version: str = "1.0"
    session_attributes: Dict[str, Any] = Field(default_factory=dict, alias="sessionAttributes")
    response: ResponseBody = Field(default_factory=ResponseBody)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
