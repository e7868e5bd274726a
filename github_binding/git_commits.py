"""Git commit objects from the Git database API.

Commit and CommitAuthor are the single commit shapes of this package: the
REST commit listing, the comparison endpoint and push webhooks all nest them.
"""

from __future__ import annotations

from .models import Tree
from .resource import Resource, json_field
from .service import MEDIA_TYPE_GIT_SIGNING_PREVIEW, Response, Service, escape
from .timestamp import Timestamp


class CommitAuthor(Resource):
    """Who authored or committed a commit, and when.

    Webhook payloads also carry the GitHub username as "username".
    """

    date: Timestamp | None = None
    name: str | None = None
    email: str | None = None
    login: str | None = json_field("username")


class SignatureVerification(Resource):
    verified: bool | None = None
    reason: str | None = None
    signature: str | None = None
    payload: str | None = None


class Commit(Resource):
    sha: str | None = None
    author: CommitAuthor | None = None
    committer: CommitAuthor | None = None
    message: str | None = None
    tree: Tree | None = None
    parents: list[Commit] | None = None
    html_url: str | None = None
    url: str | None = None
    verification: SignatureVerification | None = None
    node_id: str | None = None
    comment_count: int | None = None


class _CreateCommitRequest(Resource):
    message: str | None = None
    tree: str | None = None
    parents: list[str] | None = None
    author: CommitAuthor | None = None
    committer: CommitAuthor | None = None


class GitService(Service):
    def get_commit(self, owner: str, repo: str, sha: str) -> tuple[Commit, Response]:
        """Fetch a commit object, including its signature verification.

        GitHub API docs: https://docs.github.com/rest/git/commits#get-a-commit-object
        """
        u = f"repos/{escape(owner)}/{escape(repo)}/git/commits/{escape(sha)}"
        req = self.client.new_request("GET", u, accept=MEDIA_TYPE_GIT_SIGNING_PREVIEW)
        return self.client.do(req, Commit)

    def create_commit(self, owner: str, repo: str, commit: Commit) -> tuple[Commit, Response]:
        """Create a commit from commit.message, commit.tree.sha and the parents' SHAs.

        Author and committer default to the authenticated user when absent.

        GitHub API docs: https://docs.github.com/rest/git/commits#create-a-commit
        """
        body = _CreateCommitRequest(
            message=commit.message,
            tree=commit.tree.sha if commit.tree else None,
            parents=[p.sha for p in commit.parents or [] if p.sha],
            author=commit.author,
            committer=commit.committer,
        )
        req = self.client.new_request("POST", f"repos/{escape(owner)}/{escape(repo)}/git/commits", body)
        return self.client.do(req, Commit)
