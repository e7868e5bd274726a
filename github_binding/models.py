"""Records shared across services and webhook payloads."""

from typing import Any

from .resource import Resource, json_field
from .timestamp import Timestamp


class User(Resource):
    """A GitHub user or bot account."""

    login: str | None = None
    id: int | None = None
    node_id: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    gravatar_id: str | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    hireable: bool | None = None
    bio: str | None = None
    public_repos: int | None = None
    followers: int | None = None
    following: int | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    type: str | None = None
    site_admin: bool | None = None
    url: str | None = None


class Organization(Resource):
    login: str | None = None
    id: int | None = None
    node_id: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    description: str | None = None
    public_repos: int | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    type: str | None = None
    url: str | None = None


class Repository(Resource):
    id: int | None = None
    node_id: str | None = None
    owner: User | None = None
    name: str | None = None
    full_name: str | None = None
    description: str | None = None
    homepage: str | None = None
    default_branch: str | None = None
    created_at: Timestamp | None = None
    pushed_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    html_url: str | None = None
    clone_url: str | None = None
    language: str | None = None
    fork: bool | None = None
    forks_count: int | None = None
    open_issues_count: int | None = None
    stargazers_count: int | None = None
    watchers_count: int | None = None
    size: int | None = None
    private: bool | None = None
    archived: bool | None = None
    visibility: str | None = None
    topics: list[str] | None = None
    organization: Organization | None = None
    url: str | None = None


class Label(Resource):
    id: int | None = None
    url: str | None = None
    name: str | None = None
    color: str | None = None
    description: str | None = None
    default: bool | None = None
    node_id: str | None = None


class Issue(Resource):
    """An issue; pull requests appear here too, with pull_request_links set."""

    id: int | None = None
    number: int | None = None
    state: str | None = None
    locked: bool | None = None
    title: str | None = None
    body: str | None = None
    author_association: str | None = None
    user: User | None = None
    labels: list[Label] | None = None
    assignee: User | None = None
    assignees: list[User] | None = None
    comments: int | None = None
    closed_at: Timestamp | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    closed_by: User | None = None
    url: str | None = None
    html_url: str | None = None
    repository_url: str | None = None
    pull_request_links: dict[str, Any] | None = json_field("pull_request")
    repository: Repository | None = None
    node_id: str | None = None


class IssueComment(Resource):
    id: int | None = None
    node_id: str | None = None
    body: str | None = None
    user: User | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    author_association: str | None = None
    url: str | None = None
    html_url: str | None = None
    issue_url: str | None = None


class PullRequestBranch(Resource):
    label: str | None = None
    ref: str | None = None
    sha: str | None = None
    repo: Repository | None = None
    user: User | None = None


class PullRequest(Resource):
    id: int | None = None
    number: int | None = None
    state: str | None = None
    locked: bool | None = None
    title: str | None = None
    body: str | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    closed_at: Timestamp | None = None
    merged_at: Timestamp | None = None
    labels: list[Label] | None = None
    user: User | None = None
    draft: bool | None = None
    merged: bool | None = None
    mergeable: bool | None = None
    merged_by: User | None = None
    merge_commit_sha: str | None = None
    comments: int | None = None
    commits: int | None = None
    additions: int | None = None
    deletions: int | None = None
    changed_files: int | None = None
    url: str | None = None
    html_url: str | None = None
    assignee: User | None = None
    assignees: list[User] | None = None
    requested_reviewers: list[User] | None = None
    author_association: str | None = None
    node_id: str | None = None
    head: PullRequestBranch | None = None
    base: PullRequestBranch | None = None


class Tree(Resource):
    sha: str | None = None
    truncated: bool | None = None


class Hook(Resource):
    """A repository or organization webhook as reported in ping deliveries."""

    id: int | None = None
    type: str | None = None
    name: str | None = None
    active: bool | None = None
    events: list[str] | None = None
    config: dict[str, Any] | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    url: str | None = None
