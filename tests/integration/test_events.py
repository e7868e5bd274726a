"""Integration tests for timeline events and their payloads."""

from github_binding.event_types import IssuesEvent, PushEvent
from github_binding.events import Event
from github_binding.models import Repository, User
from github_binding.service import ListOptions


class TestListEventsPerformedByUser:
    def test_public_only_path(self, client, api):
        api.add("GET", "/users/u/events/public", [{"id": "1"}, {"id": "2"}])

        events, _ = client.activity.list_events_performed_by_user("u", public_only=True, opts=ListOptions(page=2))

        assert dict(api.last.url.params) == {"page": "2"}
        assert events == [Event(id="1"), Event(id="2")]

    def test_all_events_path(self, client, api):
        api.add("GET", "/users/u/events", [{"id": "1"}])

        events, _ = client.activity.list_events_performed_by_user("u")

        assert [e.id for e in events] == ["1"]


class TestListRepositoryEvents:
    def test_decodes_envelope(self, client, api):
        api.add(
            "GET",
            "/repos/o/r/events",
            [
                {
                    "id": "22249084964",
                    "type": "PushEvent",
                    "public": True,
                    "actor": {"id": 583231, "login": "octocat"},
                    "repo": {"id": 1296269, "name": "octocat/Hello-World"},
                    "payload": {"push_id": 10115855396, "size": 1, "ref": "refs/heads/master"},
                    "created_at": "2022-06-09T12:47:28Z",
                }
            ],
        )

        events, _ = client.activity.list_repository_events("o", "r")

        event = events[0]
        assert event.type == "PushEvent"
        assert event.actor == User(id=583231, login="octocat")
        assert event.repo == Repository(id=1296269, name="octocat/Hello-World")
        assert event.created_at.to_json() == "2022-06-09T12:47:28Z"

        payload = event.parse_payload()
        assert isinstance(payload, PushEvent)
        assert payload == PushEvent(push_id=10115855396, size=1, ref="refs/heads/master")


class TestParsePayload:
    def test_accepts_raw_json_text(self):
        event = Event(type="IssuesEvent", raw_payload='{"action":"opened","issue":{"number":1}}')

        payload = event.parse_payload()

        assert isinstance(payload, IssuesEvent)
        assert payload.issue.number == 1

    def test_returns_plain_json_for_unmodelled_types(self):
        event = Event(type="WatchEvent", raw_payload={"action": "started"})

        assert event.parse_payload() == {"action": "started"}
