# Role: Process-wide singletons for the API layer. The allow-list is read once at import (after load_env())
# and frozen into SkillConfig; routers import the handler from here.

from backend.config import load_skill_config
from backend.core.request_handler import SkillRequestHandler

skill_handler = SkillRequestHandler(load_skill_config())


def get_skill_handler() -> SkillRequestHandler:
    return skill_handler
