"""Workflow run artifacts."""

from .resource import Resource
from .service import ListOptions, Response, Service, add_options, escape
from .timestamp import Timestamp


class ArtifactWorkflowRun(Resource):
    id: int | None = None
    repository_id: int | None = None
    head_repository_id: int | None = None
    head_branch: str | None = None
    head_sha: str | None = None


class Artifact(Resource):
    """Metadata for a file bundle uploaded by a workflow run."""

    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    size_in_bytes: int | None = None
    url: str | None = None
    archive_download_url: str | None = None
    expired: bool | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    expires_at: Timestamp | None = None
    digest: str | None = None
    workflow_run: ArtifactWorkflowRun | None = None


class ArtifactList(Resource):
    total_count: int | None = None
    artifacts: list[Artifact] | None = None


class ListArtifactsOptions(Resource):
    page: int | None = None
    per_page: int | None = None
    # Only artifacts with exactly this name.
    name: str | None = None


class ActionsArtifactsMixin(Service):
    """Artifact endpoints of ActionsService."""

    def list_artifacts(
        self, owner: str, repo: str, opts: ListArtifactsOptions | None = None
    ) -> tuple[ArtifactList, Response]:
        """GitHub API docs: https://docs.github.com/rest/actions/artifacts#list-artifacts-for-a-repository"""
        u = add_options(f"repos/{escape(owner)}/{escape(repo)}/actions/artifacts", opts)
        req = self.client.new_request("GET", u)
        return self.client.do(req, ArtifactList)

    def list_workflow_run_artifacts(
        self, owner: str, repo: str, run_id: int, opts: ListOptions | None = None
    ) -> tuple[ArtifactList, Response]:
        """GitHub API docs: https://docs.github.com/rest/actions/artifacts#list-workflow-run-artifacts"""
        u = add_options(f"repos/{escape(owner)}/{escape(repo)}/actions/runs/{escape(run_id)}/artifacts", opts)
        req = self.client.new_request("GET", u)
        return self.client.do(req, ArtifactList)

    def get_artifact(self, owner: str, repo: str, artifact_id: int) -> tuple[Artifact, Response]:
        u = f"repos/{escape(owner)}/{escape(repo)}/actions/artifacts/{escape(artifact_id)}"
        req = self.client.new_request("GET", u)
        return self.client.do(req, Artifact)

    def download_artifact(
        self, owner: str, repo: str, artifact_id: int, archive_format: str = "zip"
    ) -> tuple[str, Response]:
        """Return the short-lived URL the archive can be downloaded from.

        The API answers with a redirect; the archive itself is not fetched.

        GitHub API docs: https://docs.github.com/rest/actions/artifacts#download-an-artifact
        """
        if archive_format != "zip":
            raise ValueError(f"unsupported archive format {archive_format!r}, can only use zip")
        u = f"repos/{escape(owner)}/{escape(repo)}/actions/artifacts/{escape(artifact_id)}/{escape(archive_format)}"
        req = self.client.new_request("GET", u)
        return self.client.redirect_url(req)

    def delete_artifact(self, owner: str, repo: str, artifact_id: int) -> Response:
        u = f"repos/{escape(owner)}/{escape(repo)}/actions/artifacts/{escape(artifact_id)}"
        req = self.client.new_request("DELETE", u)
        _, resp = self.client.do(req)
        return resp
