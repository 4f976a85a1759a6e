# Role: Central configuration module. Loads .env into environment variables and computes runtime flags (DEBUG)
# plus the immutable SkillConfig (application-id allow-list) handed to the request handler at startup.
# Importers read backend.config.DEBUG to control logging without threading flags through every call.

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

from dotenv import load_dotenv

DEBUG: bool = False

DEFAULT_APPLICATION_IDS: FrozenSet[str] = frozenset(
    {"amzn1.ask.skill.8b837fd9-b936-407a-a730-dea97915822d"}
)


@dataclass(frozen=True)
class SkillConfig:
    supported_application_ids: FrozenSet[str]

    @classmethod
    def from_ids(cls, ids: Iterable[str]) -> "SkillConfig":
        cleaned = frozenset(i.strip() for i in ids if i and i.strip())
        return cls(supported_application_ids=cleaned)

    def is_supported(self, application_id: Optional[str]) -> bool:
        # Key line: fail closed. Missing ids are never supported.
        return bool(application_id) and application_id in self.supported_application_ids


def load_env() -> None:
    """
    Load .env into os.environ, then recompute DEBUG.
    This makes DEBUG correct even if load_env() is called after import.
    """
    global DEBUG
    load_dotenv()
    # Key line: accept common truthy values.
    DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}


def load_skill_config() -> SkillConfig:
    # SUPPORTED_APPLICATION_IDS is comma-separated; unset falls back to the published skill id.
    raw = os.getenv("SUPPORTED_APPLICATION_IDS")
    if raw is None or not raw.strip():
        config = SkillConfig(supported_application_ids=DEFAULT_APPLICATION_IDS)
    else:
        config = SkillConfig.from_ids(raw.split(","))
    if DEBUG:
        print("Supported app ids :", sorted(config.supported_application_ids))
    return config
