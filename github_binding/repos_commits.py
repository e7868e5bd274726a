"""Commit listing and comparison for repositories."""

from __future__ import annotations

from .git_commits import Commit
from .models import User
from .resource import Resource
from .service import Response, Service, add_options, escape
from .timestamp import Timestamp


class CommitStats(Resource):
    additions: int | None = None
    deletions: int | None = None
    total: int | None = None


class CommitFile(Resource):
    sha: str | None = None
    filename: str | None = None
    additions: int | None = None
    deletions: int | None = None
    changes: int | None = None
    status: str | None = None
    patch: str | None = None
    blob_url: str | None = None
    raw_url: str | None = None
    contents_url: str | None = None
    previous_filename: str | None = None


class RepositoryCommit(Resource):
    """A commit as the repository API reports it: git data plus GitHub users."""

    node_id: str | None = None
    sha: str | None = None
    commit: Commit | None = None
    author: User | None = None
    committer: User | None = None
    parents: list[Commit] | None = None
    html_url: str | None = None
    url: str | None = None
    comments_url: str | None = None
    stats: CommitStats | None = None
    files: list[CommitFile] | None = None


class CommitsComparison(Resource):
    base_commit: RepositoryCommit | None = None
    merge_base_commit: RepositoryCommit | None = None
    # identical, ahead, behind or diverged
    status: str | None = None
    ahead_by: int | None = None
    behind_by: int | None = None
    total_commits: int | None = None
    commits: list[RepositoryCommit] | None = None
    files: list[CommitFile] | None = None
    html_url: str | None = None
    permalink_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None
    url: str | None = None


class CommitsListOptions(Resource):
    # SHA or branch to start listing commits from.
    sha: str | None = None
    # Only commits touching this file path.
    path: str | None = None
    # GitHub login or email address of the author.
    author: str | None = None
    committer: str | None = None
    since: Timestamp | None = None
    until: Timestamp | None = None
    page: int | None = None
    per_page: int | None = None


class RepositoriesService(Service):
    def list_commits(
        self, owner: str, repo: str, opts: CommitsListOptions | None = None
    ) -> tuple[list[RepositoryCommit], Response]:
        """GitHub API docs: https://docs.github.com/rest/commits/commits#list-commits"""
        u = add_options(f"repos/{escape(owner)}/{escape(repo)}/commits", opts)
        req = self.client.new_request("GET", u)
        return self.client.do(req, list[RepositoryCommit])

    def get_commit(self, owner: str, repo: str, sha: str) -> tuple[RepositoryCommit, Response]:
        """Fetch one commit with its stats and changed files.

        GitHub API docs: https://docs.github.com/rest/commits/commits#get-a-commit
        """
        req = self.client.new_request("GET", f"repos/{escape(owner)}/{escape(repo)}/commits/{escape(sha)}")
        return self.client.do(req, RepositoryCommit)

    def compare_commits(self, owner: str, repo: str, base: str, head: str) -> tuple[CommitsComparison, Response]:
        """GitHub API docs: https://docs.github.com/rest/commits/commits#compare-two-commits"""
        u = f"repos/{escape(owner)}/{escape(repo)}/compare/{escape(base)}...{escape(head)}"
        req = self.client.new_request("GET", u)
        return self.client.do(req, CommitsComparison)
