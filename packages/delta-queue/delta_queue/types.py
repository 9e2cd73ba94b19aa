"""Core data types for the delta-list event queue."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Event:
    """A named, optionally repeating event.

    Attributes:
        name: Identifier used by ``EventQueue.remove`` and ``EventQueue.add``.
        delay: Ticks until firing. Absolute on input to the queue; once
            queued, relative to the preceding event (or to now at the head).
        repeat: Interval between firings. 0 fires once; negative acts as 0.
        payload: Opaque bytes carried through unchanged.
    """

    name: str
    delay: int
    repeat: int = 0
    payload: bytes = b""


class EventDecodeError(ValueError):
    """Raised when an event descriptor cannot be decoded."""
