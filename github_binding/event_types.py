"""Webhook and activity event payloads.

Each class mirrors the JSON body GitHub delivers for one event type. The
event type names they are registered under live in messages.py.
"""

from __future__ import annotations

from typing import Any

from .git_commits import CommitAuthor
from .models import Hook, Issue, IssueComment, Label, Organization, PullRequest, Repository, User
from .resource import Resource, json_field
from .timestamp import Timestamp


class HeadCommit(Resource):
    """A commit as it appears inside a push payload."""

    message: str | None = None
    author: CommitAuthor | None = None
    url: str | None = None
    distinct: bool | None = None
    sha: str | None = None
    id: str | None = None
    tree_id: str | None = None
    timestamp: Timestamp | None = None
    committer: CommitAuthor | None = None
    added: list[str] | None = None
    removed: list[str] | None = None
    modified: list[str] | None = None


class PushEventRepoOwner(Resource):
    name: str | None = None
    email: str | None = None


class PushEventRepository(Resource):
    """The repository block of a push payload; timestamps there may be unix seconds."""

    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    full_name: str | None = None
    owner: User | None = None
    private: bool | None = None
    description: str | None = None
    fork: bool | None = None
    created_at: Timestamp | None = None
    pushed_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    homepage: str | None = None
    size: int | None = None
    stargazers_count: int | None = None
    watchers_count: int | None = None
    language: str | None = None
    has_issues: bool | None = None
    has_downloads: bool | None = None
    has_wiki: bool | None = None
    has_pages: bool | None = None
    forks_count: int | None = None
    archived: bool | None = None
    disabled: bool | None = None
    open_issues_count: int | None = None
    default_branch: str | None = None
    master_branch: str | None = None
    organization: str | None = None
    url: str | None = None
    html_url: str | None = None


class PushEvent(Resource):
    """Delivered when commits are pushed to a branch or tag."""

    push_id: int | None = None
    head: str | None = None
    ref: str | None = None
    size: int | None = None
    commits: list[HeadCommit] | None = None
    before: str | None = None
    distinct_size: int | None = None
    action: str | None = None
    after: str | None = None
    created: bool | None = None
    deleted: bool | None = None
    forced: bool | None = None
    base_ref: str | None = None
    compare: str | None = None
    repo: PushEventRepository | None = json_field("repository")
    head_commit: HeadCommit | None = None
    pusher: CommitAuthor | None = None
    sender: User | None = None
    organization: Organization | None = None


class PullRequestEvent(Resource):
    """Delivered for pull request activity; action says what happened."""

    action: str | None = None
    number: int | None = None
    pull_request: PullRequest | None = None
    # Previous values of edited fields, for action "edited".
    changes: dict[str, Any] | None = None
    requested_reviewer: User | None = None
    label: Label | None = None
    assignee: User | None = None
    before: str | None = None
    after: str | None = None
    repo: Repository | None = json_field("repository")
    sender: User | None = None
    organization: Organization | None = None


class IssuesEvent(Resource):
    action: str | None = None
    issue: Issue | None = None
    assignee: User | None = None
    label: Label | None = None
    changes: dict[str, Any] | None = None
    repo: Repository | None = json_field("repository")
    sender: User | None = None
    organization: Organization | None = None


class IssueCommentEvent(Resource):
    action: str | None = None
    issue: Issue | None = None
    comment: IssueComment | None = None
    changes: dict[str, Any] | None = None
    repo: Repository | None = json_field("repository")
    sender: User | None = None
    organization: Organization | None = None


class PingEvent(Resource):
    """Sent once when a webhook is created."""

    zen: str | None = None
    hook_id: int | None = None
    hook: Hook | None = None
    repo: Repository | None = json_field("repository")
    sender: User | None = None
    organization: Organization | None = None


# Names kept for callers of the older webhook types; they are the same classes.
WebHookPayload = PushEvent
WebHookCommit = HeadCommit
WebHookAuthor = CommitAuthor
IssueActivityEvent = IssuesEvent
