"""EmailJS notification service for feedback submissions."""

import logging
from typing import Any

from feedback_api.config import Settings
from feedback_api.errors import UpstreamError
from feedback_api.models.feedback import FeedbackSubmission, OutboundEmailRequest
from feedback_api.services.http_client import get_shared_client, json_headers

logger = logging.getLogger(__name__)


def build_email_request(
    template_params: dict[str, Any], settings: Settings
) -> OutboundEmailRequest:
    """Compose the EmailJS send payload from credentials and the submitted body."""
    return OutboundEmailRequest(
        service_id=settings.service_id,
        template_id=settings.template_id,
        user_id=settings.emailjs_public_key,
        accessToken=settings.emailjs_private_key,
        template_params=template_params,
    )


async def send_feedback_email(
    submission: FeedbackSubmission,
    body: dict[str, Any],
    settings: Settings,
) -> None:
    """POST the submitted body to EmailJS once.

    ``body`` is forwarded verbatim as the template parameters, keys the
    form adds beyond ``FeedbackSubmission`` included.

    Raises UpstreamError when EmailJS answers outside 2xx. Network errors
    and timeouts propagate as ``httpx.HTTPError``.
    """
    payload = build_email_request(body, settings)

    client = get_shared_client(settings.emailjs_timeout)
    resp = await client.post(
        settings.emailjs_url,
        headers=json_headers(),
        json=payload.model_dump(),
        timeout=settings.emailjs_timeout,
    )

    if not resp.is_success:
        logger.warning(
            "EmailJS returned %d for %s/%s feedback",
            resp.status_code,
            submission.product,
            submission.feedback_type.value,
        )
        raise UpstreamError(resp.status_code)
