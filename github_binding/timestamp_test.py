"""Unit tests for Timestamp encoding."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from .resource import Resource, decode, encode, json_field
from .timestamp import Timestamp, format_go_time

REFERENCE = datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc)
UNIX_ORIGIN = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Wrapped(Resource):
    a: int = json_field("A", omitempty=False, default=0)
    time: Timestamp = json_field("Time", omitempty=False, default_factory=Timestamp)


def describe_Timestamp():
    def describe_to_json():
        def it_writes_rfc3339():
            assert Timestamp(REFERENCE).to_json() == "2006-01-02T15:04:05Z"

        def it_writes_the_zero_time():
            assert Timestamp().to_json() == "0001-01-01T00:00:00Z"

        def it_keeps_non_utc_offsets():
            tz = timezone(timedelta(hours=-7))
            assert Timestamp(datetime(2006, 1, 2, 8, 4, 5, tzinfo=tz)).to_json() == "2006-01-02T08:04:05-07:00"

        def it_treats_naive_datetimes_as_utc():
            assert Timestamp(datetime(2006, 1, 2, 15, 4, 5)).to_json() == "2006-01-02T15:04:05Z"

    def describe_from_json():
        @pytest.mark.parametrize(
            "raw, expected",
            [
                ('"2006-01-02T15:04:05Z"', REFERENCE),
                ("1136214245", REFERENCE),
                ("1136214245000", REFERENCE),
                ('"2006-01-02T15:04:05.000Z"', REFERENCE),
                ('"0001-01-01T00:00:00Z"', datetime(1, 1, 1, tzinfo=timezone.utc)),
                ("0", UNIX_ORIGIN),
            ],
        )
        def it_reads_strings_and_unix_times(raw, expected):
            assert Timestamp.from_json(json.loads(raw)).equal(Timestamp(expected))

        def it_does_not_round_milliseconds():
            assert not Timestamp.from_json(1136214245001).equal(Timestamp(REFERENCE))

        def it_does_not_equal_the_zero_time():
            assert not Timestamp.from_json(0).equal(Timestamp())
            assert not Timestamp.from_json("2006-01-02T15:04:05Z").equal(Timestamp())

        @pytest.mark.parametrize("raw", ["asdf", "2006-01-02", "1136214245", "-5", True, 1.5])
        def it_rejects_invalid_values(raw):
            with pytest.raises(ValueError):
                Timestamp.from_json(raw)

        def it_round_trips():
            for ts in (Timestamp(REFERENCE), Timestamp()):
                assert Timestamp.from_json(ts.to_json()) == ts

    def describe_str():
        def it_uses_go_time_layout():
            assert str(Timestamp(REFERENCE)) == "2006-01-02 15:04:05 +0000 UTC"

        def it_names_fixed_offsets_by_offset():
            tz = timezone(timedelta(hours=5, minutes=30))
            assert format_go_time(datetime(2006, 1, 2, 20, 34, 5, tzinfo=tz)) == "2006-01-02 20:34:05 +0530 +0530"

    def describe_is_zero():
        def it_is_true_for_the_default():
            assert Timestamp().is_zero()
            assert not Timestamp(REFERENCE).is_zero()


def describe_wrapped_timestamp():
    def it_encodes_inside_records():
        assert json.dumps(encode(Wrapped(time=Timestamp(REFERENCE))), separators=(",", ":")) == (
            '{"A":0,"Time":"2006-01-02T15:04:05Z"}'
        )

    def it_encodes_the_zero_time_inside_records():
        assert encode(Wrapped()) == {"A": 0, "Time": "0001-01-01T00:00:00Z"}

    @pytest.mark.parametrize("raw", ['"2006-01-02T15:04:05Z"', "1136214245", "1136214245000"])
    def it_decodes_inside_records(raw):
        got = decode(Wrapped, json.loads(f'{{"A":0,"Time":{raw}}}'))
        assert got.time.equal(Timestamp(REFERENCE))

    def it_raises_for_invalid_times_inside_records():
        with pytest.raises(ValueError):
            decode(Wrapped, {"A": 0, "Time": "asdf"})
        with pytest.raises(ValueError):
            decode(Wrapped, {"A": 0, "Time": "1136214245"})
