"""REST client for the GitHub API using httpx.

Services hang off a Client and borrow it for every call:

    with Client(token="...") as gh:
        budget, resp = gh.billing.get_organization_budget("octo-org", "1")
"""

import json
import logging
import re

import httpx
from pydantic import ValidationError

from .actions import ActionsService
from .billing_budgets import BillingService
from .codespaces_machines import CodespacesService
from .enterprise_billing_budgets import EnterpriseService
from .errors import Error, ErrorResponse, RequestError, ResponseDecodeError
from .events import ActivityService
from .git_commits import GitService
from .orgs_network_configurations import OrganizationsService
from .repos_commits import RepositoriesService
from .resource import decode, encode
from .scim import SCIMService
from .service import MEDIA_TYPE_V3, Response
from .settings import get_settings

logger = logging.getLogger(__name__)

API_VERSION = "2022-11-28"
_REDIRECT_STATUSES = (301, 302, 307)
# a percent sign not followed by two hex digits
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class Client:
    """GitHub REST client; unset arguments fall back to Settings."""

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ):
        settings = get_settings()
        self.token = token if token is not None else settings.github_token
        self.base_url = base_url or settings.github_base_url
        self.user_agent = user_agent or settings.github_user_agent
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(
            timeout=timeout if timeout is not None else settings.github_timeout,
        )

        self.actions = ActionsService(self)
        self.activity = ActivityService(self)
        self.billing = BillingService(self)
        self.codespaces = CodespacesService(self)
        self.enterprise = EnterpriseService(self)
        self.git = GitService(self)
        self.organizations = OrganizationsService(self)
        self.repositories = RepositoriesService(self)
        self.scim = SCIMService(self)

    def new_request(self, method: str, url: str, body=None, accept: str | None = None) -> httpx.Request:
        """Build a request for url, which is resolved against base_url.

        body is encoded as JSON when given; records use their wire names.
        """
        if not self.base_url.endswith("/"):
            raise RequestError(f"base URL must have a trailing slash, but {self.base_url!r} does not")
        _check_url(url)
        try:
            full_url = httpx.URL(self.base_url).join(url)
        except httpx.InvalidURL as e:
            raise RequestError(f"invalid request URL {url!r}: {e}") from e

        headers = {
            "Accept": accept or MEDIA_TYPE_V3,
            "User-Agent": self.user_agent,
            "X-GitHub-Api-Version": API_VERSION,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        content = None
        if body is not None:
            headers["Content-Type"] = "application/json"
            content = json.dumps(encode(body)).encode("utf-8")
        return self._http.build_request(method, full_url, headers=headers, content=content)

    def _send(self, req: httpx.Request) -> httpx.Response:
        logger.debug("%s %s", req.method, req.url)
        resp = self._http.send(req)
        logger.debug("%s %s -> %d", req.method, req.url, resp.status_code)
        return resp

    def do(self, req: httpx.Request, result_type=None):
        """Send req and decode the body as result_type.

        Returns (result, Response). result is None when no type is asked for,
        or the response has no body (204).
        """
        resp = self._send(req)
        check_response(resp)
        response = Response.from_httpx(resp)
        if result_type is None or resp.status_code == 204 or not resp.content:
            return None, response
        try:
            result = decode(result_type, resp.json())
        except (ValidationError, ValueError) as e:
            raise ResponseDecodeError(resp, str(e)) from e
        return result, response

    def redirect_url(self, req: httpx.Request) -> tuple[str, Response]:
        """Send req expecting a redirect, returning its Location without following it."""
        resp = self._send(req)
        response = Response.from_httpx(resp)
        if resp.status_code in _REDIRECT_STATUSES:
            location = resp.headers.get("location")
            if not location:
                raise ErrorResponse(resp, "redirect response has no Location header")
            return location, response
        check_response(resp)
        raise ErrorResponse(resp, f"unexpected status code: {resp.status_code}")

    def close(self):
        if self._owns_http:
            self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


def _check_url(url: str) -> None:
    path = url.split("?", 1)[0]
    if "#" in url:
        raise RequestError(f"request URL {url!r} must not carry a fragment")
    if _BAD_ESCAPE.search(url):
        raise RequestError(f"request URL {url!r} has an invalid percent-escape")
    if any(c.isspace() or ord(c) < 0x20 or c == "\x7f" for c in path):
        raise RequestError(f"request URL {url!r} has whitespace or control characters in its path")


def check_response(resp: httpx.Response) -> None:
    """Raise ErrorResponse unless resp has a 2xx status."""
    if 200 <= resp.status_code < 300:
        return

    message = ""
    errors: list[Error] = []
    documentation_url = None
    try:
        data = resp.json() if resp.content else {}
    except ValueError:
        data = {}
        message = resp.text
    if isinstance(data, dict):
        message = data.get("message") or message
        documentation_url = data.get("documentation_url")
        for item in data.get("errors") or []:
            try:
                errors.append(decode(Error, item))
            except ValidationError:
                errors.append(Error(message=str(item)))

    logger.warning(
        "GitHub API error %d for %s %s: %s", resp.status_code, resp.request.method, resp.request.url, message
    )
    raise ErrorResponse(resp, message, errors, documentation_url)


# Shared clients keyed by configuration
_clients: dict[tuple, Client] = {}


def get_client(token: str | None = None, base_url: str | None = None) -> Client:
    """Get or create a Client with the given configuration."""
    key = (token, base_url)
    if key not in _clients:
        _clients[key] = Client(token=token, base_url=base_url)
    return _clients[key]
