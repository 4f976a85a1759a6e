# Role: Central enum of intents the skill handles by name. Any other intent name falls through
# to the "unsupported" response in DialogueEngine (it is a default branch, not an error).

from enum import Enum
from typing import Optional


class Intent(str, Enum):
    REPORT_MEAL = "ThinuIntent"
    HELP = "AMAZON.HelpIntent"
    STOP = "AMAZON.StopIntent"
    CANCEL = "AMAZON.CancelIntent"

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["Intent"]:
        try:
            return cls(name)
        except ValueError:
            return None
