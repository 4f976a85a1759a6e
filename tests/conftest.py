"""Pytest configuration and fixtures."""
import os
from typing import Any, Dict, Optional

import pytest

# Set test environment before importing app
os.environ["SUPPORTED_APPLICATION_IDS"] = "amzn1.ask.skill.test-app, amzn1.ask.skill.other-app"
os.environ["DEBUG"] = "0"

from backend.config import SkillConfig
from backend.core.dialogue_engine import DialogueEngine
from backend.core.request_handler import SkillRequestHandler
from backend.models.envelope import RequestEnvelope

APP_ID = "amzn1.ask.skill.test-app"
USER_ID = "amzn1.ask.account.TESTUSER"


def envelope_payload(
    request: Dict[str, Any],
    attributes: Optional[Dict[str, Any]] = None,
    application_id: Optional[str] = APP_ID,
    new: bool = False,
    session_id: str = "amzn1.echo-api.session.test",
) -> Dict[str, Any]:
    """Build a platform request envelope (camelCase JSON)."""
    session: Dict[str, Any] = {
        "new": new,
        "sessionId": session_id,
        "attributes": attributes or {},
        "user": {"userId": USER_ID},
    }
    if application_id is not None:
        session["application"] = {"applicationId": application_id}
    return {
        "version": "1.0",
        "session": session,
        "request": {"requestId": "amzn1.echo-api.request.test", **request},
    }


def intent_request(name: str, **slots: Optional[str]) -> Dict[str, Any]:
    return {
        "type": "IntentRequest",
        "intent": {
            "name": name,
            "slots": {slot: {"name": slot, "value": value} for slot, value in slots.items()},
        },
    }


@pytest.fixture
def skill_config():
    """Allow-list containing only the test application."""
    return SkillConfig.from_ids([APP_ID])


@pytest.fixture
def engine():
    return DialogueEngine()


@pytest.fixture
def handler(skill_config, engine):
    return SkillRequestHandler(skill_config, engine=engine)


@pytest.fixture
def make_envelope():
    """Factory producing parsed RequestEnvelope objects."""

    def _make(request: Dict[str, Any], **kwargs: Any) -> RequestEnvelope:
        return RequestEnvelope.model_validate(envelope_payload(request, **kwargs))

    return _make


@pytest.fixture
def client():
    """Create test client for the FastAPI app."""
    from fastapi.testclient import TestClient

    from backend.main import app

    with TestClient(app) as test_client:
        yield test_client
