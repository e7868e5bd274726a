"""Activity events (the public timeline API)."""

from __future__ import annotations

import json
from typing import Any

from .messages import EVENT_TYPE_MAPPING
from .models import Organization, Repository, User
from .resource import Resource, decode, json_field
from .service import ListOptions, Response, Service, add_options, escape
from .timestamp import Timestamp

# Timeline events name their payload class directly ("PushEvent").
_PAYLOAD_TYPES = {cls.__name__: cls for cls in EVENT_TYPE_MAPPING.values()}


class Event(Resource):
    """One timeline entry; the payload stays raw until parse_payload()."""

    type: str | None = None
    public: bool | None = None
    raw_payload: Any = json_field("payload")
    repo: Repository | None = None
    actor: User | None = None
    org: Organization | None = None
    created_at: Timestamp | None = None
    id: str | None = None

    def parse_payload(self):
        """Decode raw_payload into the event class named by type.

        Types without a payload class come back as plain decoded JSON.
        """
        raw = self.raw_payload
        if isinstance(raw, (bytes, str)):
            raw = json.loads(raw)
        cls = _PAYLOAD_TYPES.get(self.type or "")
        if cls is None:
            return raw
        return decode(cls, raw)


class ActivityService(Service):
    def list_events_performed_by_user(
        self, user: str, public_only: bool = False, opts: ListOptions | None = None
    ) -> tuple[list[Event], Response]:
        """GitHub API docs: https://docs.github.com/rest/activity/events#list-events-for-the-authenticated-user"""
        u = f"users/{escape(user)}/events"
        if public_only:
            u += "/public"
        req = self.client.new_request("GET", add_options(u, opts))
        return self.client.do(req, list[Event])

    def list_repository_events(
        self, owner: str, repo: str, opts: ListOptions | None = None
    ) -> tuple[list[Event], Response]:
        """GitHub API docs: https://docs.github.com/rest/activity/events#list-repository-events"""
        req = self.client.new_request("GET", add_options(f"repos/{escape(owner)}/{escape(repo)}/events", opts))
        return self.client.do(req, list[Event])
