"""System factory that drives an EventQueue from the engine loop."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from delta_queue.queue import EventQueue
from delta_queue.types import Event

if TYPE_CHECKING:
    from delta_driver import TickContext


def make_queue_system(
    queue: EventQueue,
    on_fire: Callable[[TickContext, Event], None],
) -> Callable[[TickContext], None]:
    """Return a system that ticks ``queue`` and drains it each step.

    The queue advances by ``ctx.ticks``, so a catch-up step fires each
    overdue repeating event once. ``on_fire`` runs in drain order and may
    add or remove events; additions that are already due fire in the
    same drain.
    """

    def queue_system(ctx: TickContext) -> None:
        queue.tick(ctx.ticks)
        for event in queue.triggered_events():
            on_fire(ctx, event)

    return queue_system
