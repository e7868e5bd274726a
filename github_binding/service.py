"""Pieces shared by every service: transport metadata, list options, query encoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx

from .resource import Resource
from .timestamp import Timestamp

if TYPE_CHECKING:
    from .client import Client

MEDIA_TYPE_V3 = "application/vnd.github+json"
# Adds signature verification details to git commit objects.
MEDIA_TYPE_GIT_SIGNING_PREVIEW = "application/vnd.github.cryptographer-preview+json"


@dataclass
class Response:
    """Transport metadata returned next to every decoded result."""

    status: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    etag: str | None = None
    link: str | None = None
    http_response: httpx.Response | None = field(default=None, repr=False, compare=False)

    @classmethod
    def from_httpx(cls, resp: httpx.Response) -> Response:
        return cls(
            status=resp.status_code,
            headers=resp.headers,
            etag=resp.headers.get("etag"),
            link=resp.headers.get("link"),
            http_response=resp,
        )


class ListOptions(Resource):
    """Page selection accepted by list endpoints."""

    page: int | None = None
    per_page: int | None = None


def _query_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Timestamp):
        return value.to_json()
    if isinstance(value, datetime):
        return Timestamp(value).to_json()
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def query_pairs(opts) -> list[tuple[str, str]]:
    """Flatten an options record into (name, value) pairs, skipping absent fields."""
    pairs = []
    for attr, f in type(opts).model_fields.items():
        value = getattr(opts, attr)
        if value is None or f.exclude:
            continue
        name = f.alias or attr
        if isinstance(value, (list, tuple)):
            pairs.extend((name, _query_value(v)) for v in value)
        else:
            pairs.append((name, _query_value(value)))
    return pairs


def escape(segment) -> str:
    """Percent-encode one URL path segment, slashes included."""
    return quote(str(segment), safe="")


def add_options(url: str, opts) -> str:
    """Append opts to url as a query string; None opts leave url unchanged."""
    if opts is None:
        return url
    pairs = query_pairs(opts)
    if not pairs:
        return url
    sep = "&" if "?" in url else "?"
    return f"{url}{sep}{httpx.QueryParams(pairs)}"


class Service:
    """A group of endpoints sharing a client; the client is borrowed, not owned."""

    def __init__(self, client: Client):
        self.client = client

