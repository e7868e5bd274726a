"""Actions secrets for repositories and organizations.

Secret values are never readable through the API. To create or update one,
fetch the target's public key, seal the value with encrypt_secret(), and send
the resulting EncryptedSecret.
"""

from base64 import b64encode

from nacl import encoding, public

from .resource import Resource, json_field
from .service import ListOptions, Response, Service, add_options, escape
from .timestamp import Timestamp


class PublicKey(Resource):
    """Key used to seal secret values before upload."""

    key_id: str | None = None
    key: str | None = None


class Secret(Resource):
    name: str | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    # Organization secrets only: all, private or selected.
    visibility: str | None = None
    selected_repositories_url: str | None = None


class Secrets(Resource):
    total_count: int = json_field(omitempty=False, default=0)
    secrets: list[Secret] | None = json_field(omitempty=False)


class EncryptedSecret(Resource):
    """A sealed secret ready to be stored; name goes in the URL, not the body."""

    name: str | None = json_field("-")
    key_id: str | None = None
    encrypted_value: str | None = None
    visibility: str | None = None
    selected_repository_ids: list[int] | None = None


def encrypt_secret(public_key: PublicKey, name: str, value: str) -> EncryptedSecret:
    """Seal value with the libsodium sealed box for public_key."""
    if not public_key.key:
        raise ValueError("public key has no key material")
    key = public.PublicKey(public_key.key.encode("utf-8"), encoding.Base64Encoder)
    sealed = public.SealedBox(key).encrypt(value.encode("utf-8"))
    return EncryptedSecret(
        name=name,
        key_id=public_key.key_id,
        encrypted_value=b64encode(sealed).decode("utf-8"),
    )


class ActionsSecretsMixin(Service):
    """Secret endpoints of ActionsService."""

    def _get_public_key(self, url: str) -> tuple[PublicKey, Response]:
        req = self.client.new_request("GET", url)
        return self.client.do(req, PublicKey)

    def _list_secrets(self, url: str, opts: ListOptions | None) -> tuple[Secrets, Response]:
        req = self.client.new_request("GET", add_options(url, opts))
        return self.client.do(req, Secrets)

    def _get_secret(self, url: str) -> tuple[Secret, Response]:
        req = self.client.new_request("GET", url)
        return self.client.do(req, Secret)

    def _put_secret(self, url: str, secret: EncryptedSecret) -> Response:
        if not secret.name:
            raise ValueError("encrypted secret must have a name")
        req = self.client.new_request("PUT", f"{url}/{escape(secret.name)}", secret)
        _, resp = self.client.do(req)
        return resp

    def _delete_secret(self, url: str) -> Response:
        req = self.client.new_request("DELETE", url)
        _, resp = self.client.do(req)
        return resp

    def get_repo_public_key(self, owner: str, repo: str) -> tuple[PublicKey, Response]:
        """GitHub API docs: https://docs.github.com/rest/actions/secrets#get-a-repository-public-key"""
        return self._get_public_key(f"repos/{escape(owner)}/{escape(repo)}/actions/secrets/public-key")

    def list_repo_secrets(
        self, owner: str, repo: str, opts: ListOptions | None = None
    ) -> tuple[Secrets, Response]:
        """GitHub API docs: https://docs.github.com/rest/actions/secrets#list-repository-secrets"""
        return self._list_secrets(f"repos/{escape(owner)}/{escape(repo)}/actions/secrets", opts)

    def get_repo_secret(self, owner: str, repo: str, name: str) -> tuple[Secret, Response]:
        return self._get_secret(f"repos/{escape(owner)}/{escape(repo)}/actions/secrets/{escape(name)}")

    def create_or_update_repo_secret(self, owner: str, repo: str, secret: EncryptedSecret) -> Response:
        """Store a sealed secret; the API answers 201 on create and 204 on update.

        GitHub API docs: https://docs.github.com/rest/actions/secrets#create-or-update-a-repository-secret
        """
        return self._put_secret(f"repos/{escape(owner)}/{escape(repo)}/actions/secrets", secret)

    def delete_repo_secret(self, owner: str, repo: str, name: str) -> Response:
        return self._delete_secret(f"repos/{escape(owner)}/{escape(repo)}/actions/secrets/{escape(name)}")

    def get_org_public_key(self, org: str) -> tuple[PublicKey, Response]:
        return self._get_public_key(f"orgs/{escape(org)}/actions/secrets/public-key")

    def list_org_secrets(self, org: str, opts: ListOptions | None = None) -> tuple[Secrets, Response]:
        """GitHub API docs: https://docs.github.com/rest/actions/secrets#list-organization-secrets"""
        return self._list_secrets(f"orgs/{escape(org)}/actions/secrets", opts)

    def get_org_secret(self, org: str, name: str) -> tuple[Secret, Response]:
        return self._get_secret(f"orgs/{escape(org)}/actions/secrets/{escape(name)}")

    def create_or_update_org_secret(self, org: str, secret: EncryptedSecret) -> Response:
        """Store a sealed organization secret; set visibility (and selected_repository_ids for "selected").

        GitHub API docs: https://docs.github.com/rest/actions/secrets#create-or-update-an-organization-secret
        """
        return self._put_secret(f"orgs/{escape(org)}/actions/secrets", secret)

    def delete_org_secret(self, org: str, name: str) -> Response:
        return self._delete_secret(f"orgs/{escape(org)}/actions/secrets/{escape(name)}")
