# Role: Small typed contract for what the skill says back. A SkillResponse is either ASK (speech + reprompt + card,
# session stays open) or TELL (speech only, session ends). The validator enforces that no other shape exists.

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, model_validator


class Mode(str, Enum):
    ASK = "ask"
    TELL = "tell"


class Card(BaseModel):
    title: str
    content: str


class SkillResponse(BaseModel):
    mode: Mode
    speech: str
    reprompt: Optional[str] = None
    card: Optional[Card] = None

    @model_validator(mode="after")
    def _check_shape(self):
        # ASK requires reprompt + card
        if self.mode == Mode.ASK and (self.reprompt is None or self.card is None):
            raise ValueError("reprompt and card are required when mode=ASK")

        # TELL carries speech only
        if self.mode == Mode.TELL and (self.reprompt is not None or self.card is not None):
            raise ValueError("reprompt and card must be None when mode=TELL")

        return self

    @property
    def should_end_session(self) -> bool:
        return self.mode == Mode.TELL

    @classmethod
    def ask(cls, card_title: str, speech: str) -> "SkillResponse":
        # Key line: the card body and the reprompt both repeat the spoken text.
        return cls(mode=Mode.ASK, speech=speech, reprompt=speech, card=Card(title=card_title, content=speech))

    @classmethod
    def tell(cls, speech: str) -> "SkillResponse":
        return cls(mode=Mode.TELL, speech=speech)
