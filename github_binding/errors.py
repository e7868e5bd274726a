"""Exceptions raised by the client and webhook helpers."""

from dataclasses import dataclass

import httpx


class GitHubError(Exception):
    """Base class for every error raised by this package."""


class RequestError(GitHubError):
    """Raised when a request cannot be built (bad base URL, bad path)."""


class WebhookError(GitHubError):
    """Raised when a webhook delivery fails validation or parsing."""


@dataclass
class Error:
    """Detail on one field-level failure inside an ErrorResponse.

    Codes the API documents: missing, missing_field, invalid, already_exists.
    """

    resource: str = ""
    field: str = ""
    code: str = ""
    message: str = ""

    def __str__(self) -> str:
        return f"{self.code} error caused by {self.field} field on {self.resource} resource"


class ErrorResponse(GitHubError):
    """Raised for any response whose status is outside the 2xx range."""

    def __init__(
        self,
        response: httpx.Response,
        message: str = "",
        errors: list[Error] | None = None,
        documentation_url: str | None = None,
    ):
        self.response = response
        self.message = message
        self.errors = errors or []
        self.documentation_url = documentation_url
        super().__init__(str(self))

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def __str__(self) -> str:
        request = self.response.request
        text = f"{request.method} {request.url}: {self.response.status_code} {self.message}"
        if self.errors:
            text += " " + ", ".join(str(e) for e in self.errors)
        return text


class ResponseDecodeError(GitHubError):
    """Raised when a 2xx body cannot be decoded into the expected type."""

    def __init__(self, response: httpx.Response, reason: str):
        self.response = response
        super().__init__(f"{response.request.method} {response.request.url}: {reason}")
