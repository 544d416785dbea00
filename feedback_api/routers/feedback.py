"""Feedback submission endpoint — relays submissions to EmailJS."""

import logging

from fastapi import APIRouter, Depends, Request, Response
from pydantic import ValidationError

from feedback_api.config import Settings
from feedback_api.errors import (
    FeedbackAPIError,
    UnexpectedError,
    validation_error_from,
)
from feedback_api.models.feedback import (
    ErrorResponse,
    FeedbackResponse,
    FeedbackSubmission,
)
from feedback_api.services.emailjs import send_feedback_email

router = APIRouter(prefix="/feedback", tags=["feedback"])
logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Settings the application was built with."""
    return request.app.state.settings


@router.post(
    "",
    response_model=FeedbackResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def submit_feedback(
    request: Request,
    response: Response,
    settings: Settings = Depends(get_app_settings),
):
    """Submit feedback. Forwarded to the maintainers by email.

    The body is read as JSON whatever its Content-Type, so widgets can post
    ``text/plain`` and skip the CORS preflight.
    """
    response.headers["Cache-Control"] = "no-store"

    try:
        body = await request.json()
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError, including an empty body
        logger.warning("Unreadable feedback body: %s", e)
        raise UnexpectedError("malformed JSON body") from e

    try:
        submission = FeedbackSubmission.model_validate(body)
    except ValidationError as e:
        raise validation_error_from(e) from e

    try:
        await send_feedback_email(submission, body, settings)
    except FeedbackAPIError:
        raise
    except Exception as e:
        logger.exception("Feedback relay failed: %s", e)
        raise UnexpectedError(str(e)) from e

    logger.info(
        "Relayed %s feedback for %s (%s)",
        submission.feedback_type.value,
        submission.product,
        submission.page,
    )
    return FeedbackResponse()
