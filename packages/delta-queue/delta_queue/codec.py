"""JSON codec for event descriptors."""
from __future__ import annotations

import json
from typing import Any

from delta_queue.types import Event, EventDecodeError

# Field name used on the wire for the opaque payload.
_PAYLOAD_FIELD = "what"


def _int_field(data: dict[str, Any], key: str) -> int:
    value = data.get(key, 0)
    # bool is an int subclass; reject it like any other non-integer.
    if isinstance(value, bool) or not isinstance(value, int):
        raise EventDecodeError(
            f"Field {key!r} must be an integer, got {type(value).__name__}"
        )
    return value


def parse_event(message: bytes | str) -> Event:
    """Decode a JSON event descriptor into an Event.

    The descriptor is an object with optional ``delay``, ``repeat``, ``name``
    and ``what`` fields. ``what`` may hold any JSON value and becomes the
    event payload, re-encoded as compact UTF-8 JSON. Unknown fields are
    ignored.

    Raises:
        EventDecodeError: If the message is not valid JSON, is not an object,
            or a field has the wrong type.
    """
    try:
        data: Any = json.loads(message)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise EventDecodeError(f"Invalid event JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise EventDecodeError(
            f"Expected JSON object, got {type(data).__name__}"
        )

    name = data.get("name", "")
    if not isinstance(name, str):
        raise EventDecodeError(
            f"Field 'name' must be a string, got {type(name).__name__}"
        )

    payload = b""
    if _PAYLOAD_FIELD in data:
        payload = json.dumps(data[_PAYLOAD_FIELD], separators=(",", ":")).encode()

    return Event(
        name=name,
        delay=_int_field(data, "delay"),
        repeat=_int_field(data, "repeat"),
        payload=payload,
    )


def dump_event(event: Event) -> bytes:
    """Encode an Event as a JSON descriptor accepted by ``parse_event``.

    Raises:
        EventDecodeError: If a non-empty payload is not valid JSON.
    """
    data: dict[str, Any] = {
        "delay": event.delay,
        "repeat": event.repeat,
        "name": event.name,
    }
    if event.payload:
        try:
            data[_PAYLOAD_FIELD] = json.loads(event.payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise EventDecodeError(f"Payload is not valid JSON: {exc}") from exc
    return json.dumps(data, separators=(",", ":")).encode()
