class WebhookError(Exception):
    """Base class for every reason a webhook notification is rejected."""

    default_message = "webhook rejected"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class WebhookConfigError(WebhookError):
    """Raised when a verifier option cannot be applied."""

    default_message = "error applying option"


class NoEventsSpecifiedError(WebhookError):
    default_message = "no event specified to parse"


class InvalidMethodError(WebhookError):
    default_message = "invalid HTTP method"


class MissingEventHeaderError(WebhookError):
    default_message = "missing X-Gitea-Event header"


class EventNotAcceptedError(WebhookError):
    default_message = "event not defined to be parsed"

    def __init__(self, event: str):
        self.event = event
        super().__init__(f"{self.default_message}: {event}")


class PayloadReadError(WebhookError):
    default_message = "error reading payload"


class MissingSignatureHeaderError(WebhookError):
    default_message = "missing X-Gitea-Signature header"


class SignatureMismatchError(WebhookError):
    default_message = "HMAC verification failed"


class UnknownEventError(WebhookError):
    default_message = "unknown event"

    def __init__(self, event: str):
        self.event = event
        super().__init__(f"{self.default_message} {event}")


class PayloadParseError(WebhookError):
    default_message = "error parsing payload"
