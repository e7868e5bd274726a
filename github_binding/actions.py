"""GitHub Actions endpoints."""

from .actions_artifacts import ActionsArtifactsMixin
from .actions_secrets import ActionsSecretsMixin


class ActionsService(ActionsSecretsMixin, ActionsArtifactsMixin):
    """Secrets and artifacts for repositories and organizations."""
