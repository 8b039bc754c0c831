"""Validation API endpoints.

POST /validate
    body: { "format": "xml|json|yaml|csv|emmet", "text": "..." }
    returns:
        { "ok": true }
        or
        { "ok": false, "errors": ["...", "..."] }

Invalid input is never an HTTP error: the endpoint always answers 200
with the result shape above.
"""

import logging
import os
import uuid
from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from apps.validator.constants import DEFAULT_MAX_INPUT_CHARS
from apps.validator.observability import clear_context, set_context
from apps.validator.validation import (
    ValidationDispatcher,
    ValidationFormat,
    ValidationRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["validation"])

# Singleton dispatcher (validators are stateless)
_dispatcher: ValidationDispatcher | None = None


def get_dispatcher() -> ValidationDispatcher:
    """Get or create the dispatcher singleton."""
    global _dispatcher
    if _dispatcher is None:
        max_input_chars = int(
            os.getenv("VALIDATOR_MAX_INPUT_CHARS", str(DEFAULT_MAX_INPUT_CHARS))
        )
        _dispatcher = ValidationDispatcher(max_input_chars=max_input_chars)
        logger.info(f"Validation dispatcher ready (max_input_chars={max_input_chars})")
    return _dispatcher


class FormatsResponse(BaseModel):
    """Supported format tags."""

    formats: list[str]


@router.post("/validate")
def validate(
    body: ValidationRequest,
    request: Request,
    dispatcher: ValidationDispatcher = Depends(get_dispatcher),
) -> dict[str, Any]:
    """Validate text in the requested format."""
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]
    set_context(
        request_id=request_id,
        validation_format=ValidationFormat.normalize(body.format),
    )
    try:
        result = dispatcher.validate_request(body)
    finally:
        clear_context()
    return result.to_response()


@router.get("/formats", response_model=FormatsResponse)
async def list_formats() -> FormatsResponse:
    """List the format tags accepted by /validate."""
    return FormatsResponse(formats=[fmt.value for fmt in ValidationFormat])
