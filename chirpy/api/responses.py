"""
responses.py - helpers for writing JSON responses

If a payload can't be serialized the request ends with a bare 400 and the
error is logged
"""
import json
import logging
from typing import Any

from fastapi import Response
from pydantic import BaseModel

from chirpy.api.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def respond_with_json(status_code: int, payload: Any) -> Response:
    """Serialize ``payload`` (a pydantic model or plain data) as a JSON response."""
    try:
        if isinstance(payload, BaseModel):
            content = payload.model_dump_json()
        else:
            content = json.dumps(payload)
    except (TypeError, ValueError) as e:
        # PydanticSerializationError is a ValueError too
        logger.error(f"error: could not encode response: {e}")
        return Response(status_code=400)

    return Response(content=content, status_code=status_code, media_type="application/json")


def respond_with_error(status_code: int, message: str) -> Response:
    return respond_with_json(status_code, ErrorResponse(error=message))
