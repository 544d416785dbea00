"""Feedback submission models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FeedbackType(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


class FeedbackSubmission(BaseModel):
    """Feedback widget submission.

    Field names follow the widget's camelCase payload; Python code uses the
    snake_case attributes.
    """

    model_config = ConfigDict(populate_by_name=True)

    page: str
    product: str
    option: str
    feedback_type: FeedbackType = Field(..., alias="feedbackType")
    # Defaults are not validated: omitted is fine, an explicit null is not
    feedback_comment: str = Field(None, alias="feedbackComment")


class ValidationErrorDetail(BaseModel):
    """One rejected field."""

    path: str
    message: str


class ErrorResponse(BaseModel):
    errorMessage: str
    validationErrors: list[ValidationErrorDetail] | None = None


class FeedbackResponse(BaseModel):
    """Response after the notification email was accepted."""

    success: str = "true"


class OutboundEmailRequest(BaseModel):
    """Payload for the EmailJS ``send`` API."""

    service_id: str
    template_id: str
    user_id: str  # public key
    accessToken: str  # private key
    template_params: dict[str, Any]
