"""Timestamp wrapper used for every time-valued API field.

The API is inconsistent about time encodings: most endpoints send RFC 3339
strings, a few send unix seconds, and the audit log sends unix milliseconds.
Timestamp accepts all three and always writes RFC 3339.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic_core import core_schema

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ZERO = datetime(1, 1, 1, tzinfo=timezone.utc)

# Integers past this many seconds (year 3000) are read as milliseconds.
_MAX_UNIX_SECONDS = int((datetime(3001, 1, 1, tzinfo=timezone.utc) - _EPOCH).total_seconds())


def _fraction(dt: datetime) -> str:
    if not dt.microsecond:
        return ""
    return "." + f"{dt.microsecond:06d}".rstrip("0")


def _offset(dt: datetime, sep: str = "") -> str:
    delta = dt.utcoffset() or timedelta(0)
    minutes = int(delta.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}{sep}{minutes:02d}"


def format_go_time(dt: datetime) -> str:
    """Render dt the way Go's time.Time.String does: 2006-01-02 15:04:05 +0000 UTC."""
    name = dt.tzname()
    if not name or (name.startswith("UTC") and name != "UTC"):
        name = _offset(dt)
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}{_fraction(dt)} "
        f"{_offset(dt)} {name}"
    )


class Timestamp:
    """An aware datetime with GitHub's JSON encoding rules."""

    __slots__ = ("time",)

    def __init__(self, time: datetime | None = None):
        if time is None:
            time = _ZERO
        elif time.tzinfo is None:
            time = time.replace(tzinfo=timezone.utc)
        self.time = time

    @classmethod
    def from_unix(cls, value: int) -> Timestamp:
        if value > _MAX_UNIX_SECONDS:
            return cls(_EPOCH + timedelta(milliseconds=value))
        return cls(_EPOCH + timedelta(seconds=value))

    @classmethod
    def from_json(cls, value: str | int) -> Timestamp:
        """Decode a JSON scalar: an RFC 3339 string or unix seconds/milliseconds."""
        if isinstance(value, bool):
            raise ValueError(f"cannot decode {value!r} as a timestamp")
        if isinstance(value, int):
            return cls.from_unix(value)
        if isinstance(value, str):
            text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
            try:
                parsed = datetime.fromisoformat(text)
            except ValueError as e:
                raise ValueError(f"cannot parse {value!r} as RFC 3339") from e
            if parsed.tzinfo is None or "T" not in text.upper():
                raise ValueError(f"cannot parse {value!r} as RFC 3339")
            return cls(parsed)
        raise ValueError(f"cannot decode {value!r} as a timestamp")

    @classmethod
    def _validate(cls, value) -> Timestamp:
        if isinstance(value, Timestamp):
            return value
        if isinstance(value, datetime):
            return cls(value)
        return cls.from_json(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(cls.to_json, when_used="json"),
        )

    def to_json(self) -> str:
        dt = self.time
        base = (
            f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
            f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}{_fraction(dt)}"
        )
        if not dt.utcoffset():
            return base + "Z"
        return base + _offset(dt, sep=":")

    def is_zero(self) -> bool:
        return self.time == _ZERO

    def equal(self, other: Timestamp) -> bool:
        """Report whether both timestamps are the same instant."""
        return self.time == other.time

    def __eq__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.time == other.time

    def __hash__(self):
        return hash(self.time)

    def __str__(self) -> str:
        return format_go_time(self.time)

    def __repr__(self) -> str:
        return f"Timestamp({self.time!r})"
