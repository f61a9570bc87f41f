from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from .models import (
    CreatePayload,
    DeletePayload,
    ForkPayload,
    GiteaPayload,
    IssueCommentPayload,
    IssuePayload,
    PackagePayload,
    PullRequestPayload,
    PushPayload,
    ReleasePayload,
    RepositoryPayload,
    WikiPayload,
)


class HookEventType(str, Enum):
    """Event identifiers sent by Gitea in the X-Gitea-Event header."""

    CREATE = "create"
    DELETE = "delete"
    FORK = "fork"
    PUSH = "push"
    ISSUES = "issues"
    ISSUE_ASSIGN = "issue_assign"
    ISSUE_LABEL = "issue_label"
    ISSUE_MILESTONE = "issue_milestone"
    ISSUE_COMMENT = "issue_comment"
    PULL_REQUEST = "pull_request"
    PULL_REQUEST_ASSIGN = "pull_request_assign"
    PULL_REQUEST_LABEL = "pull_request_label"
    PULL_REQUEST_MILESTONE = "pull_request_milestone"
    PULL_REQUEST_COMMENT = "pull_request_comment"
    PULL_REQUEST_REVIEW_APPROVED = "pull_request_review_approved"
    PULL_REQUEST_REVIEW_REJECTED = "pull_request_review_rejected"
    PULL_REQUEST_REVIEW_COMMENT = "pull_request_review_comment"
    PULL_REQUEST_SYNC = "pull_request_sync"
    WIKI = "wiki"
    REPOSITORY = "repository"
    RELEASE = "release"
    PACKAGE = "package"

    def __str__(self) -> str:
        return self.value


# Adding an event means one enum member and one entry here.
PAYLOAD_SHAPES: Mapping[HookEventType, type[GiteaPayload]] = MappingProxyType(
    {
        HookEventType.CREATE: CreatePayload,
        HookEventType.DELETE: DeletePayload,
        HookEventType.FORK: ForkPayload,
        HookEventType.PUSH: PushPayload,
        HookEventType.ISSUES: IssuePayload,
        HookEventType.ISSUE_ASSIGN: IssuePayload,
        HookEventType.ISSUE_LABEL: IssuePayload,
        HookEventType.ISSUE_MILESTONE: IssuePayload,
        HookEventType.ISSUE_COMMENT: IssueCommentPayload,
        HookEventType.PULL_REQUEST: PullRequestPayload,
        HookEventType.PULL_REQUEST_ASSIGN: PullRequestPayload,
        HookEventType.PULL_REQUEST_LABEL: PullRequestPayload,
        HookEventType.PULL_REQUEST_MILESTONE: PullRequestPayload,
        HookEventType.PULL_REQUEST_SYNC: PullRequestPayload,
        HookEventType.PULL_REQUEST_REVIEW_APPROVED: PullRequestPayload,
        HookEventType.PULL_REQUEST_REVIEW_REJECTED: PullRequestPayload,
        HookEventType.PULL_REQUEST_REVIEW_COMMENT: PullRequestPayload,
        HookEventType.PULL_REQUEST_COMMENT: PullRequestPayload,
        HookEventType.REPOSITORY: RepositoryPayload,
        HookEventType.RELEASE: ReleasePayload,
        HookEventType.WIKI: WikiPayload,
        HookEventType.PACKAGE: PackagePayload,
    }
)


def event_value(event: HookEventType | str) -> str:
    """Return the wire value of an event identifier."""
    if isinstance(event, Enum):
        return str(event.value)
    return event


def payload_shape(event: str) -> type[GiteaPayload] | None:
    """Look up the payload shape bound to a wire event identifier."""
    try:
        return PAYLOAD_SHAPES[HookEventType(event)]
    except ValueError:
        return None
