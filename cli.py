# Role: Local developer CLI to talk to the skill without the voice platform.
# It plays the platform's part: keeps session attributes between turns and builds request envelopes.

from __future__ import annotations
import uuid
from typing import Any, Dict, Optional, Tuple

import backend.config
backend.config.load_env()

from backend.config import load_skill_config
from backend.core.request_handler import SkillRequestHandler, SkillRequestError
from backend.models.envelope import RequestEnvelope
from backend.models.intent import Intent

CLI_USER_ID = "cli-user"


def _new_session_id() -> str:
    return str(uuid.uuid4())


def parse_turn(line: str) -> Tuple[str, Dict[str, str]]:
    """
    Parse "<IntentName> slot=value ..." into (intent_name, slots).
    A line made only of slot=value pairs is a meal report.
    """
    tokens = line.split()
    intent_name = Intent.REPORT_MEAL.value
    if tokens and "=" not in tokens[0]:
        intent_name = tokens.pop(0)

    slots: Dict[str, str] = {}
    for token in tokens:
        name, sep, value = token.partition("=")
        if sep and name:
            slots[name] = value.replace("_", " ")
    return intent_name, slots


def build_envelope(
    application_id: str,
    session_id: str,
    new_session: bool,
    attributes: Dict[str, Any],
    request: Dict[str, Any],
) -> RequestEnvelope:
    return RequestEnvelope.model_validate(
        {
            "version": "1.0",
            "session": {
                "new": new_session,
                "sessionId": session_id,
                "application": {"applicationId": application_id},
                "attributes": attributes,
                "user": {"userId": CLI_USER_ID},
            },
            "request": {"requestId": str(uuid.uuid4()), **request},
        }
    )


def intent_request(intent_name: str, slots: Dict[str, str]) -> Dict[str, Any]:
    return {
        "type": "IntentRequest",
        "intent": {
            "name": intent_name,
            "slots": {name: {"name": name, "value": value} for name, value in slots.items()},
        },
    }


def main(application_id: Optional[str] = None) -> None:
    # 1) Create the handler with the configured allow-list
    # 2) Maintain a session (id + attributes) across turns, like the platform does
    # 3) Route user input -> handler -> print speech (and card title for ask responses)
    print("Meal Report Skill CLI")
    print("Commands: /launch, /new (new session), /session (show session), /exit")
    print("Turns: <IntentName> slot=value ...  (or just slot=value ... for a meal report)")
    print("-" * 50)

    skill_config = load_skill_config()
    handler = SkillRequestHandler(skill_config)
    application_id = application_id or sorted(skill_config.supported_application_ids)[0]

    session_id = _new_session_id()
    attributes: Dict[str, Any] = {}
    new_session = True
    print(f"session_id: {session_id}")

    while True:
        try:
            line = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not line:
            continue

        cmd = line.lower()

        if cmd in {"/exit", "exit", "quit", "/quit"}:
            print("Bye!")
            return

        if cmd in {"/new", "new"}:
            session_id, attributes, new_session = _new_session_id(), {}, True
            print(f"New session_id: {session_id}")
            continue

        if cmd in {"/session", "session"}:
            print(f"session_id: {session_id}")
            print(f"attributes: {attributes}")
            continue

        if cmd in {"/launch", "launch"}:
            request = {"type": "LaunchRequest"}
        else:
            request = intent_request(*parse_turn(line))

        envelope = build_envelope(application_id, session_id, new_session, attributes, request)
        try:
            result = handler.handle(envelope).to_wire()
        except SkillRequestError as e:
            print(f"\nRejected: {e}")
            continue

        new_session = False
        attributes = result.get("sessionAttributes", {})
        body = result.get("response", {})
        speech = body.get("outputSpeech", {}).get("text", "")
        card = body.get("card")
        suffix = f"  [card: {card['title']}]" if card else ""
        print(f"\nSkill: {speech}{suffix}")

        if body.get("shouldEndSession"):
            # Key line: a tell ends the conversation; the next turn starts a fresh session.
            session_id, attributes, new_session = _new_session_id(), {}, True
            print(f"(session ended) New session_id: {session_id}")


if __name__ == "__main__":
    main()
