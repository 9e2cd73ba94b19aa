"""EventQueue - delta-list scheduler for named, optionally repeating events."""
from __future__ import annotations

import logging
from collections import deque
from typing import Iterator

from delta_queue.types import Event

logger = logging.getLogger(__name__)


def _next_delay(overdue: int, repeat: int) -> int:
    """Ticks from now until a repeating event's next firing.

    ``overdue`` is the delay the event had when it was detached (<= 0). The
    event keeps its original phase, and intervals that elapsed while it was
    overdue collapse into the firing that just happened.
    """
    return repeat - (-overdue) % repeat


class EventQueue:
    """Pending events ordered by firing time.

    Each stored ``delay`` is relative to the event before it, so the running
    sum from the head gives an event's absolute time until firing. ``tick``
    only touches the head; insertion walks the list and adjusts at most one
    successor.

    The queue never raises: empty-queue operations and unknown names are
    no-ops. It is not thread-safe.
    """

    def __init__(self) -> None:
        self._events: deque[Event] = deque()

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        """Iterate pending events in firing order. Delays are relative."""
        return iter(self._events)

    def __contains__(self, name: object) -> bool:
        return any(queued.name == name for queued in self._events)

    # --- Mutation ---

    def queue(self, event: Event) -> None:
        """Insert ``event``, reading its delay as an absolute offset from now.

        The event lands after any pending events due at the same time.
        """
        index = len(self._events)
        for i, queued in enumerate(self._events):
            if queued.delay > event.delay:
                queued.delay -= event.delay
                index = i
                break
            event.delay -= queued.delay
        self._events.insert(index, event)

    def add(self, event: Event) -> bool:
        """Queue ``event`` unless an event with its name is already pending.

        Returns True if the event was queued.
        """
        if event.name in self:
            logger.debug("event %r already pending, add ignored", event.name)
            return False
        self.queue(event)
        return True

    def remove(self, name: str) -> Event | None:
        """Remove the first pending event named ``name``.

        Its delay is folded into the successor so later events keep their
        firing times. Returns the removed event, or None if nothing matched.
        """
        for i, queued in enumerate(self._events):
            if queued.name == name:
                break
        else:
            return None

        del self._events[i]
        if i < len(self._events):
            self._events[i].delay += queued.delay
        logger.debug("event %r removed", name)
        return queued

    def clear(self) -> None:
        self._events.clear()

    def tick(self, n: int = 1) -> None:
        """Advance time by ``n`` ticks. Non-positive ``n`` is a no-op."""
        if n > 0 and self._events:
            self._events[0].delay -= n

    # --- Draining ---

    def get_triggered_event(self) -> Event | None:
        """Detach and return the head if it is due, else None.

        A repeating event is re-queued before it is returned, at most once
        per drain however far the last tick overran it.
        """
        if not self._events or self._events[0].delay > 0:
            return None

        event = self._events.popleft()
        if self._events:
            self._events[0].delay += event.delay

        if event.repeat > 0:
            overdue = -event.delay
            event.delay = _next_delay(event.delay, event.repeat)
            logger.debug(
                "event %r fired %d late, next in %d", event.name, overdue, event.delay
            )
            self.queue(event)
        else:
            logger.debug("event %r fired", event.name)
        return event

    def triggered_events(self) -> Iterator[Event]:
        """Yield every currently triggered event, then stop.

        Stopping early leaves the remaining due events for the next drain.
        """
        while True:
            event = self.get_triggered_event()
            if event is None:
                return
            yield event

    def drain(self) -> list[Event]:
        """Return every currently triggered event, in firing order."""
        return list(self.triggered_events())

    # --- Queries ---

    def time_until(self, name: str) -> int | None:
        """Absolute ticks until the first event named ``name`` fires.

        Zero or negative means due. None if no such event is pending.
        """
        total = 0
        for queued in self._events:
            total += queued.delay
            if queued.name == name:
                return total
        return None

    def names(self) -> list[str]:
        """Names of pending events in firing order."""
        return [queued.name for queued in self._events]
