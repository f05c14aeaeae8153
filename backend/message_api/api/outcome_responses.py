"""Outcome Responses — renders core Outcome variants as HTTP responses.

Invariants:
    - Created → 201 + Location; Updated/Deleted → 204; Success → 200 with no body
    - NotFound → 404, Conflict → 409, ValidationError → 400, all in the shared error envelope
    - Unknown values → 500 INTERNAL_ERROR (unreachable while Outcome stays closed)
"""

import logging

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from message_api.core.errors import ErrorCategory, ErrorSeverity
from message_api.core.outcomes import (
    Conflict, Created, Deleted, NotFound, Outcome, Success, Updated,
    ValidationError,
)
from message_api.schemas.message import MessageResponse

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "One or more validation errors occurred."


def error_envelope(
    code: str, message: str, category: ErrorCategory, **extra: object,
) -> dict:
    """Build the {"error": {...}} body shared with the global error handlers."""
    severity = (
        ErrorSeverity.WARNING if category == ErrorCategory.CONFLICT
        else ErrorSeverity.ERROR
    )
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }


def message_location(request: Request, body: MessageResponse) -> str:
    return str(request.url_for(
        "get_message",
        organization_id=str(body.organization_id),
        message_id=str(body.id),
    ))


def outcome_to_response(outcome: Outcome, request: Request) -> Response:
    """Map one Outcome to its HTTP response."""
    match outcome:
        case Created(payload=payload):
            body = MessageResponse.from_domain(payload)
            return JSONResponse(
                status_code=status.HTTP_201_CREATED,
                content=body.model_dump(mode="json", by_alias=True),
                headers={"Location": message_location(request, body)},
            )
        case Updated() | Deleted():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case NotFound(message=message):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=error_envelope(
                    "RESOURCE_NOT_FOUND", message, ErrorCategory.RESOURCE_NOT_FOUND,
                ),
            )
        case Conflict(message=message):
            return JSONResponse(
                status_code=status.HTTP_409_CONFLICT,
                content=error_envelope(
                    "TITLE_CONFLICT", message, ErrorCategory.CONFLICT,
                ),
            )
        case ValidationError(errors=errors):
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=error_envelope(
                    "VALIDATION_ERROR", VALIDATION_MESSAGE, ErrorCategory.VALIDATION,
                    errors=dict(errors),
                ),
            )
        case Success():
            return Response(status_code=status.HTTP_200_OK)
        case _:
            logger.error(
                f"Unmapped outcome {type(outcome).__name__} on {request.url.path}",
                extra={"path": request.url.path},
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": {
                        "code": "INTERNAL_ERROR",
                        "message": "An unexpected error occurred",
                        "category": ErrorCategory.INTERNAL.value,
                        "severity": ErrorSeverity.CRITICAL.value,
                    },
                },
            )
