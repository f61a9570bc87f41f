from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class GiteaModel(BaseModel):
    """Base for Gitea webhook structures.

    Missing fields fall back to zero values and unknown fields are ignored,
    mirroring how Gitea's own JSON decoder treats its payloads.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class User(GiteaModel):
    id: int = 0
    login: str = ""
    login_name: str = ""
    full_name: str = ""
    email: str = ""
    avatar_url: str = ""
    html_url: str = ""
    language: str = ""
    is_admin: bool = False
    username: str = ""


class PayloadUser(GiteaModel):
    name: str = ""
    email: str = ""
    username: str = ""


class PayloadCommitVerification(GiteaModel):
    verified: bool = False
    reason: str = ""
    signature: str = ""
    signer: PayloadUser | None = None
    payload: str = ""


class PayloadCommit(GiteaModel):
    id: str = ""
    message: str = ""
    url: str = ""
    author: PayloadUser | None = None
    committer: PayloadUser | None = None
    verification: PayloadCommitVerification | None = None
    timestamp: datetime | None = None
    added: list[str] = Field(default_factory=list)
    removed: list[str] = Field(default_factory=list)
    modified: list[str] = Field(default_factory=list)


class Organization(GiteaModel):
    id: int = 0
    name: str = ""
    full_name: str = ""
    email: str = ""
    avatar_url: str = ""
    description: str = ""
    website: str = ""
    location: str = ""
    visibility: str = ""
    username: str = ""


class Repository(GiteaModel):
    id: int = 0
    owner: User | None = None
    name: str = ""
    full_name: str = ""
    description: str = ""
    empty: bool = False
    private: bool = False
    fork: bool = False
    template: bool = False
    mirror: bool = False
    archived: bool = False
    size: int = 0
    html_url: str = ""
    ssh_url: str = ""
    clone_url: str = ""
    website: str = ""
    default_branch: str = ""
    stars_count: int = 0
    forks_count: int = 0
    watchers_count: int = 0
    open_issues_count: int = 0
    open_pr_counter: int = 0
    release_counter: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Label(GiteaModel):
    id: int = 0
    name: str = ""
    exclusive: bool = False
    color: str = ""
    description: str = ""
    url: str = ""


class Milestone(GiteaModel):
    id: int = 0
    title: str = ""
    description: str = ""
    state: str = ""
    open_issues: int = 0
    closed_issues: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None
    due_on: datetime | None = None


class PullRequestMeta(GiteaModel):
    merged: bool = False
    merged_at: datetime | None = None


class Issue(GiteaModel):
    id: int = 0
    url: str = ""
    html_url: str = ""
    number: int = 0
    user: User | None = None
    original_author: str = ""
    title: str = ""
    body: str = ""
    ref: str = ""
    labels: list[Label] = Field(default_factory=list)
    milestone: Milestone | None = None
    assignee: User | None = None
    assignees: list[User] = Field(default_factory=list)
    state: str = ""
    is_locked: bool = False
    comments: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None
    due_date: datetime | None = None
    pull_request: PullRequestMeta | None = None
    repository: Repository | None = None


class PRBranchInfo(GiteaModel):
    label: str = ""
    ref: str = ""
    sha: str = ""
    repo_id: int = 0
    repo: Repository | None = None


class PullRequest(GiteaModel):
    id: int = 0
    url: str = ""
    number: int = 0
    user: User | None = None
    title: str = ""
    body: str = ""
    labels: list[Label] = Field(default_factory=list)
    milestone: Milestone | None = None
    assignee: User | None = None
    assignees: list[User] = Field(default_factory=list)
    requested_reviewers: list[User] = Field(default_factory=list)
    state: str = ""
    draft: bool = False
    is_locked: bool = False
    comments: int = 0
    html_url: str = ""
    diff_url: str = ""
    patch_url: str = ""
    mergeable: bool = False
    merged: bool = False
    merged_at: datetime | None = None
    merge_commit_sha: str | None = None
    merged_by: User | None = None
    base: PRBranchInfo | None = None
    head: PRBranchInfo | None = None
    merge_base: str = ""
    due_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None


class Comment(GiteaModel):
    id: int = 0
    html_url: str = ""
    pull_request_url: str = ""
    issue_url: str = ""
    user: User | None = None
    original_author: str = ""
    body: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ChangesFromPayload(GiteaModel):
    from_: str = Field(default="", alias="from")


class ChangesPayload(GiteaModel):
    title: ChangesFromPayload | None = None
    body: ChangesFromPayload | None = None
    ref: ChangesFromPayload | None = None


class ReviewPayload(GiteaModel):
    type: str = ""
    content: str = ""


class Attachment(GiteaModel):
    id: int = 0
    name: str = ""
    size: int = 0
    download_count: int = 0
    created_at: datetime | None = None
    uuid: str = ""
    browser_download_url: str = ""


class Release(GiteaModel):
    id: int = 0
    tag_name: str = ""
    target_commitish: str = ""
    name: str = ""
    body: str = ""
    url: str = ""
    html_url: str = ""
    tarball_url: str = ""
    zipball_url: str = ""
    draft: bool = False
    prerelease: bool = False
    created_at: datetime | None = None
    published_at: datetime | None = None
    author: User | None = None
    assets: list[Attachment] = Field(default_factory=list)


class Package(GiteaModel):
    id: int = 0
    owner: User | None = None
    repository: Repository | None = None
    creator: User | None = None
    type: str = ""
    name: str = ""
    version: str = ""
    html_url: str = ""
    created_at: datetime | None = None


# --- Payload shapes, one per group of event identifiers ---


class CreatePayload(GiteaModel):
    sha: str = ""
    ref: str = ""
    ref_type: str = ""
    repository: Repository | None = None
    sender: User | None = None


class DeletePayload(GiteaModel):
    ref: str = ""
    ref_type: str = ""
    pusher_type: str = ""
    repository: Repository | None = None
    sender: User | None = None


class ForkPayload(GiteaModel):
    forkee: Repository | None = None
    repository: Repository | None = None
    sender: User | None = None


class PushPayload(GiteaModel):
    ref: str = ""
    before: str = ""
    after: str = ""
    compare_url: str = ""
    commits: list[PayloadCommit] = Field(default_factory=list)
    total_commits: int = 0
    head_commit: PayloadCommit | None = None
    repository: Repository | None = None
    pusher: User | None = None
    sender: User | None = None


class IssuePayload(GiteaModel):
    action: str = ""
    number: int = 0
    changes: ChangesPayload | None = None
    issue: Issue | None = None
    repository: Repository | None = None
    sender: User | None = None
    commit_id: str = ""


class IssueCommentPayload(GiteaModel):
    action: str = ""
    issue: Issue | None = None
    pull_request: PullRequest | None = None
    comment: Comment | None = None
    changes: ChangesPayload | None = None
    repository: Repository | None = None
    sender: User | None = None
    is_pull: bool = False


class PullRequestPayload(GiteaModel):
    action: str = ""
    number: int = 0
    changes: ChangesPayload | None = None
    pull_request: PullRequest | None = None
    requested_reviewer: User | None = None
    repository: Repository | None = None
    sender: User | None = None
    commit_id: str = ""
    review: ReviewPayload | None = None


class RepositoryPayload(GiteaModel):
    action: str = ""
    repository: Repository | None = None
    organization: User | None = None
    sender: User | None = None


class ReleasePayload(GiteaModel):
    action: str = ""
    release: Release | None = None
    repository: Repository | None = None
    sender: User | None = None


class WikiPayload(GiteaModel):
    action: str = ""
    repository: Repository | None = None
    sender: User | None = None
    page: str = ""
    comment: str = ""


class PackagePayload(GiteaModel):
    action: str = ""
    repository: Repository | None = None
    package: Package | None = None
    organization: Organization | None = None
    sender: User | None = None


GiteaPayload = (
    CreatePayload
    | DeletePayload
    | ForkPayload
    | PushPayload
    | IssuePayload
    | IssueCommentPayload
    | PullRequestPayload
    | RepositoryPayload
    | ReleasePayload
    | WikiPayload
    | PackagePayload
)


class WebhookResponse(BaseModel):
    """Response model for the webhook endpoint."""

    message: str
    event: str | None = None
