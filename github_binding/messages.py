"""Validating and parsing webhook deliveries.

A typical handler:

    payload = validate_payload_from_body(
        request.headers["Content-Type"], body, request.headers.get(SHA256_SIGNATURE_HEADER, ""), secret
    )
    event = parse_webhook(webhook_type(request.headers), payload)
"""

import hashlib
import hmac
import json
import logging
from collections.abc import Mapping
from urllib.parse import parse_qs

from .errors import WebhookError
from .event_types import IssueCommentEvent, IssuesEvent, PingEvent, PullRequestEvent, PushEvent
from .resource import decode

logger = logging.getLogger(__name__)

SHA1_SIGNATURE_HEADER = "X-Hub-Signature"
SHA256_SIGNATURE_HEADER = "X-Hub-Signature-256"
EVENT_TYPE_HEADER = "X-GitHub-Event"
DELIVERY_ID_HEADER = "X-GitHub-Delivery"

_HASHES = {
    "sha1": hashlib.sha1,
    "sha256": hashlib.sha256,
    "sha512": hashlib.sha512,
}

# X-GitHub-Event value -> payload class
EVENT_TYPE_MAPPING = {
    "issue_comment": IssueCommentEvent,
    "issues": IssuesEvent,
    "ping": PingEvent,
    "pull_request": PullRequestEvent,
    "push": PushEvent,
}


def _message_mac(signature: str):
    if not signature:
        raise WebhookError("missing signature")
    prefix, sep, digest = signature.partition("=")
    if not sep:
        raise WebhookError(f"error parsing signature {signature!r}")
    hash_func = _HASHES.get(prefix)
    if hash_func is None:
        raise WebhookError(f"unknown hash type prefix: {prefix!r}")
    try:
        mac = bytes.fromhex(digest)
    except ValueError as e:
        raise WebhookError(f"error decoding signature {signature!r}: {e}") from e
    return mac, hash_func


def validate_signature(signature: str, payload: bytes, secret: bytes) -> None:
    """Raise WebhookError unless signature ("sha256=<hex>") is the HMAC of payload."""
    mac, hash_func = _message_mac(signature)
    expected = hmac.new(secret, payload, hash_func).digest()
    if not hmac.compare_digest(mac, expected):
        raise WebhookError("payload signature check failed")


def validate_payload_from_body(
    content_type: str, body: bytes, signature: str, secret: bytes | str | None
) -> bytes:
    """Return the JSON payload of a delivery after checking its signature.

    The signature is computed over the raw body, so form-encoded deliveries
    are verified before the payload field is extracted. With no secret and no
    signature the check is skipped.
    """
    if isinstance(secret, str):
        secret = secret.encode("utf-8")
    media_type = content_type.split(";", 1)[0].strip().lower()

    if media_type == "application/json":
        payload = body
    elif media_type == "application/x-www-form-urlencoded":
        try:
            form = parse_qs(body.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise WebhookError(f"form-encoded webhook body is not valid UTF-8: {e}") from e
        payload = form.get("payload", [""])[0].encode("utf-8")
    else:
        raise WebhookError(f"webhook request has unsupported Content-Type {content_type!r}")

    if secret or signature:
        validate_signature(signature, body, secret or b"")
    return payload


def _header(headers: Mapping[str, str], name: str) -> str:
    # httpx.Headers and most framework header maps are already case-insensitive
    for key, value in headers.items():
        if key.lower() == name.lower():
            return value
    return ""


def webhook_type(headers: Mapping[str, str]) -> str:
    return _header(headers, EVENT_TYPE_HEADER)


def delivery_id(headers: Mapping[str, str]) -> str:
    return _header(headers, DELIVERY_ID_HEADER)


def signature_from_headers(headers: Mapping[str, str]) -> str:
    """Prefer the SHA-256 signature, falling back to the legacy SHA-1 one."""
    return _header(headers, SHA256_SIGNATURE_HEADER) or _header(headers, SHA1_SIGNATURE_HEADER)


def validate_payload(headers: Mapping[str, str], body: bytes, secret: bytes | str | None) -> bytes:
    """validate_payload_from_body() with Content-Type and signature taken from headers."""
    return validate_payload_from_body(_header(headers, "Content-Type"), body, signature_from_headers(headers), secret)


def message_types() -> list[str]:
    return sorted(EVENT_TYPE_MAPPING)


def parse_webhook(message_type: str, payload: bytes | str):
    """Decode payload into the event class registered for message_type."""
    cls = EVENT_TYPE_MAPPING.get(message_type)
    if cls is None:
        raise WebhookError(f"unknown X-GitHub-Event in message: {message_type}")
    try:
        return decode(cls, json.loads(payload))
    except (TypeError, ValueError) as e:
        logger.warning("Could not decode %s payload: %s", message_type, e)
        raise WebhookError(f"error decoding {message_type} payload: {e}") from e
