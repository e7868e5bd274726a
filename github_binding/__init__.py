"""Typed Python binding for a slice of the GitHub REST API.

Records are pydantic models that render with stringify(); services hang off
Client and return (result, Response) pairs.
"""

from .cli import main
from .client import Client, get_client
from .errors import Error, ErrorResponse, GitHubError, RequestError, ResponseDecodeError, WebhookError
from .service import ListOptions, Response
from .settings import get_settings
from .strings import stringify
from .timestamp import Timestamp

__all__ = [
    "main",
    "Client",
    "get_client",
    "Error",
    "ErrorResponse",
    "GitHubError",
    "RequestError",
    "ResponseDecodeError",
    "WebhookError",
    "ListOptions",
    "Response",
    "get_settings",
    "stringify",
    "Timestamp",
]

if __name__ == "__main__":
    main()
