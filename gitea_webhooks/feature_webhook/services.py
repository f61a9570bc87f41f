import io
import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from starlette.requests import ClientDisconnect

from gitea_webhooks.config import Settings, settings

from .errors import (
    EventNotAcceptedError,
    InvalidMethodError,
    MissingEventHeaderError,
    MissingSignatureHeaderError,
    NoEventsSpecifiedError,
    PayloadParseError,
    PayloadReadError,
    SignatureMismatchError,
    UnknownEventError,
    WebhookError,
)
from .models import (
    CreatePayload,
    DeletePayload,
    ForkPayload,
    IssueCommentPayload,
    IssuePayload,
    PackagePayload,
    PullRequestPayload,
    PushPayload,
    ReleasePayload,
    RepositoryPayload,
    WikiPayload,
)
from .verifier import ParsedWebhook, WebhookRequest, WebhookVerifier

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[type[WebhookError], int] = {
    NoEventsSpecifiedError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    InvalidMethodError: status.HTTP_405_METHOD_NOT_ALLOWED,
    MissingEventHeaderError: status.HTTP_400_BAD_REQUEST,
    EventNotAcceptedError: status.HTTP_400_BAD_REQUEST,
    PayloadReadError: status.HTTP_400_BAD_REQUEST,
    MissingSignatureHeaderError: status.HTTP_401_UNAUTHORIZED,
    SignatureMismatchError: status.HTTP_401_UNAUTHORIZED,
    UnknownEventError: status.HTTP_400_BAD_REQUEST,
    PayloadParseError: 422,
}


class _DisconnectedBody(io.RawIOBase):
    """Body stream for a client that went away before sending its payload."""

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        raise OSError("client disconnected before the payload was read")


class WebhookService:
    """Service for handling webhook logic."""

    def __init__(self, config: Settings):
        self.config = config
        self.verifier = WebhookVerifier.from_settings(config)
        self.accepted_events = tuple(config.GITEA_WEBHOOK_EVENTS)

    async def parse_request(self, request: Request) -> ParsedWebhook:
        """
        Verifies and decodes a Gitea webhook delivered to a FastAPI route.

        Raises:
            WebhookError: If the request fails any verification step.
        """
        try:
            body = io.BytesIO(await request.body())
        except ClientDisconnect:
            body = _DisconnectedBody()

        webhook_request = WebhookRequest(
            method=request.method, headers=request.headers, body=body
        )
        return self.verifier.parse(webhook_request, *self.accepted_events)

    def process_event(self, parsed: ParsedWebhook) -> str:
        """
        Summarizes a verified webhook payload based on its shape.
        """
        payload = parsed.payload
        logger.info("Processing webhook event: %s", parsed.event.value)

        if isinstance(payload, PushPayload):
            summary = f"ref={payload.ref}, commits={len(payload.commits)}"
        elif isinstance(payload, PullRequestPayload):
            summary = f"action={payload.action}, number={payload.number}"
        elif isinstance(payload, IssuePayload):
            summary = f"action={payload.action}, number={payload.number}"
        elif isinstance(payload, IssueCommentPayload):
            issue_number = payload.issue.number if payload.issue else "unknown"
            comment_id = payload.comment.id if payload.comment else "unknown"
            summary = (
                f"action={payload.action}, issue={issue_number}, comment={comment_id}"
            )
        elif isinstance(payload, (CreatePayload, DeletePayload)):
            summary = f"ref_type={payload.ref_type}, ref={payload.ref}"
        elif isinstance(payload, ForkPayload):
            forkee = payload.forkee.full_name if payload.forkee else "unknown"
            summary = f"forkee={forkee}"
        elif isinstance(payload, ReleasePayload):
            tag = payload.release.tag_name if payload.release else "unknown"
            summary = f"action={payload.action}, tag={tag}"
        elif isinstance(payload, WikiPayload):
            summary = f"action={payload.action}, page={payload.page}"
        elif isinstance(payload, PackagePayload):
            name = payload.package.name if payload.package else "unknown"
            summary = f"action={payload.action}, package={name}"
        elif isinstance(payload, RepositoryPayload):
            summary = f"action={payload.action}"
        else:
            logger.warning("Received unhandled payload shape: %s", type(payload))
            return f"Received unhandled event type: {parsed.event.value}"

        logger.info("Received %s event: %s", parsed.event.value, summary)
        return f"Processed {parsed.event.value} event: {summary}"


# Dependency provider for the service
def get_webhook_service() -> WebhookService:
    return WebhookService(config=settings)


WebhookServiceDep = Annotated[WebhookService, Depends(get_webhook_service)]


# Dependency for verification and decoding
async def parse_gitea_webhook(
    request: Request, service: WebhookServiceDep
) -> ParsedWebhook:
    """FastAPI dependency that verifies and decodes the Gitea webhook."""
    try:
        return await service.parse_request(request)
    except WebhookError as exc:
        status_code = ERROR_STATUS_CODES.get(
            type(exc), status.HTTP_400_BAD_REQUEST
        )
        logger.warning("Rejected Gitea webhook (%s): %s", type(exc).__name__, exc)
        raise HTTPException(status_code=status_code, detail=str(exc)) from exc


ParsedWebhookDep = Annotated[ParsedWebhook, Depends(parse_gitea_webhook)]
