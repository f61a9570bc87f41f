import contextlib
import dataclasses
import hashlib
import hmac
import io
from collections.abc import Callable, Iterable, Mapping
from typing import BinaryIO

from pydantic import ValidationError
from starlette.datastructures import Headers

from gitea_webhooks.config import Settings

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
    WebhookConfigError,
)
from .events import HookEventType, event_value, payload_shape
from .models import GiteaPayload

EVENT_HEADER = "X-Gitea-Event"
SIGNATURE_HEADER = "X-Gitea-Signature"

_DRAIN_CHUNK_SIZE = 64 * 1024


@dataclasses.dataclass
class VerifierConfig:
    """Mutable settings the options write into before the verifier is built."""

    secret: bytes | None = None


Option = Callable[[VerifierConfig], None]


def with_secret(secret: str | bytes) -> Option:
    """Bind the shared secret used to check X-Gitea-Signature.

    An empty secret leaves signature verification disabled.
    """

    def apply(config: VerifierConfig) -> None:
        if isinstance(secret, str):
            config.secret = secret.encode("utf-8")
        elif isinstance(secret, bytes):
            config.secret = secret
        else:
            raise WebhookConfigError(
                f"secret must be str or bytes, not {type(secret).__name__}"
            )

    return apply


@dataclasses.dataclass(frozen=True)
class WebhookRequest:
    """The parts of an inbound HTTP request the verifier reads."""

    method: str
    headers: Mapping[str, str]
    body: BinaryIO

    @classmethod
    def from_bytes(
        cls, method: str, headers: Mapping[str, str], body: bytes
    ) -> "WebhookRequest":
        return cls(method=method, headers=headers, body=io.BytesIO(body))


@dataclasses.dataclass(frozen=True)
class ParsedWebhook:
    """A verified notification: the event identifier and its decoded payload."""

    event: HookEventType
    payload: GiteaPayload


class WebhookVerifier:
    """Verifies and decodes Gitea webhook notifications.

    Holds only the optional shared secret, so one instance can serve
    concurrent requests.
    """

    __slots__ = ("_secret",)

    def __init__(self, *options: Option):
        config = VerifierConfig()
        for option in options:
            option(config)
        object.__setattr__(self, "_secret", config.secret or None)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_settings(cls, config: Settings) -> "WebhookVerifier":
        options = []
        if config.GITEA_WEBHOOK_SECRET:
            options.append(with_secret(config.GITEA_WEBHOOK_SECRET))
        return cls(*options)

    @property
    def verifies_signatures(self) -> bool:
        return self._secret is not None

    def parse(
        self, request: WebhookRequest, *events: HookEventType | str
    ) -> ParsedWebhook:
        """
        Verifies the request and decodes its body into the payload shape
        bound to the X-Gitea-Event header.

        The body stream is drained and closed before returning, whether or
        not the request was accepted.

        Raises:
            WebhookError: The subclass names the first check that failed.
        """
        try:
            return self._parse(request, events)
        finally:
            _release(request.body)

    def _parse(
        self, request: WebhookRequest, events: Iterable[HookEventType | str]
    ) -> ParsedWebhook:
        accepted = {event_value(event) for event in events}
        if not accepted:
            raise NoEventsSpecifiedError()
        if request.method != "POST":
            raise InvalidMethodError(f"invalid HTTP method: {request.method}")

        event = _header(request.headers, EVENT_HEADER)
        if not event:
            raise MissingEventHeaderError()
        if event not in accepted:
            raise EventNotAcceptedError(event)

        try:
            body = request.body.read()
        except (OSError, ValueError) as exc:
            raise PayloadReadError() from exc
        if not body:
            raise PayloadReadError("empty payload")

        if self._secret is not None:
            signature = _header(request.headers, SIGNATURE_HEADER)
            if not signature:
                raise MissingSignatureHeaderError()
            expected = hmac.new(self._secret, body, hashlib.sha256).hexdigest()
            if not hmac.compare_digest(
                signature.encode("utf-8"), expected.encode("ascii")
            ):
                raise SignatureMismatchError()

        shape = payload_shape(event)
        if shape is None:
            raise UnknownEventError(event)
        try:
            payload = shape.model_validate_json(body)
        except ValidationError as exc:
            raise PayloadParseError() from exc
        return ParsedWebhook(event=HookEventType(event), payload=payload)


def _header(headers: Mapping[str, str], name: str) -> str:
    """Case-insensitive header lookup that leaves values undecoded."""
    if isinstance(headers, Headers):
        return headers.get(name, "")
    name = name.lower()
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return ""


def _release(body: BinaryIO) -> None:
    # Cleanup is best effort; the parse outcome is already decided.
    with contextlib.suppress(OSError, ValueError):
        while body.read(_DRAIN_CHUNK_SIZE):
            pass
    with contextlib.suppress(OSError, ValueError):
        body.close()
