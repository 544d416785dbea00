"""Error kinds returned by the API and their JSON rendering."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from feedback_api.models.feedback import ErrorResponse, ValidationErrorDetail

logger = logging.getLogger(__name__)

VALIDATION_FAILURE_MESSAGE = "validation failure"
UPSTREAM_FAILURE_MESSAGE = "Failed to register feedback"
INTERNAL_ERROR_MESSAGE = "Internal Server Error. Please try again later."


class FeedbackAPIError(Exception):
    """Base error carrying the HTTP status and client-facing message."""

    status_code = 500
    error_message = INTERNAL_ERROR_MESSAGE

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(errorMessage=self.error_message)


class FeedbackValidationError(FeedbackAPIError):
    """The submission did not match the schema."""

    status_code = 400
    error_message = VALIDATION_FAILURE_MESSAGE

    def __init__(self, errors: list[ValidationErrorDetail]) -> None:
        super().__init__(f"{len(errors)} invalid field(s)")
        self.errors = errors

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            errorMessage=self.error_message, validationErrors=self.errors
        )


class UpstreamError(FeedbackAPIError):
    """The email provider did not accept the send request."""

    status_code = 502
    error_message = UPSTREAM_FAILURE_MESSAGE

    def __init__(self, status_code: int) -> None:
        super().__init__(f"email provider returned {status_code}")
        self.upstream_status = status_code


class UnexpectedError(FeedbackAPIError):
    """Anything else. Details stay in the logs."""


def validation_error_from(exc: ValidationError) -> FeedbackValidationError:
    """Map a pydantic ValidationError onto per-field details, in pydantic's order."""
    return FeedbackValidationError(
        [
            ValidationErrorDetail(
                path=str(e["loc"][0]) if e["loc"] else "body", message=e["msg"]
            )
            for e in exc.errors()
        ]
    )


def error_response(exc: FeedbackAPIError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(exclude_none=True),
        headers={"Cache-Control": "no-store"},
    )


async def feedback_api_error_handler(
    request: Request, exc: FeedbackAPIError
) -> JSONResponse:
    if isinstance(exc, FeedbackValidationError):
        logger.info(
            "Rejected submission to %s: %s",
            request.url.path,
            ", ".join(e.path for e in exc.errors),
        )
    return error_response(exc)


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Last resort for errors raised outside the routes' own handling."""
    logger.error("Unhandled error on %s: %s", request.url.path, exc)
    return error_response(UnexpectedError(str(exc)))
