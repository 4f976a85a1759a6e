# Role: Thin HTTP adapter for the skill endpoint. Validates the request envelope shape and delegates the entire
# turn to SkillRequestHandler; rejected callers map to 403, unknown request types to 400.

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from backend.api.deps import get_skill_handler
from backend.core.request_handler import (
    ApplicationIdMismatchError,
    SkillRequestHandler,
    UnsupportedRequestTypeError,
)
from backend.models.envelope import RequestEnvelope

router = APIRouter(tags=["skill"])


@router.post("/skill")
def skill(
    envelope: RequestEnvelope,
    handler: SkillRequestHandler = Depends(get_skill_handler),
) -> Dict[str, Any]:
    # 1) Forward the parsed envelope to the handler
    # 2) Return the platform's response envelope (camelCase, no nulls)
    try:
        result = handler.handle(envelope)
    except ApplicationIdMismatchError as e:
        raise HTTPException(status_code=403, detail=str(e)) from e
    except UnsupportedRequestTypeError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return result.to_wire()
