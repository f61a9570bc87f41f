import logging

from fastapi import APIRouter, status

from .models import WebhookResponse
from .services import ParsedWebhookDep, WebhookServiceDep

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/webhook",
    tags=["Webhook"],
)


@router.post(
    "/gitea",
    response_model=WebhookResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def handle_gitea_webhook(
    parsed: ParsedWebhookDep,
    service: WebhookServiceDep,
):
    """
    Handles incoming Gitea webhooks after signature verification.

    The payload has already been decoded into the shape bound to the
    X-Gitea-Event header by the time this runs.
    """
    logger.info(
        "Received valid webhook. Event: %s, Payload: %s",
        parsed.event.value,
        type(parsed.payload).__name__,
    )

    processing_message = service.process_event(parsed)

    return WebhookResponse(
        message=f"Webhook received and accepted. {processing_message}",
        event=parsed.event.value,
    )
