"""Tests for make_queue_system driven by the delta_driver Engine."""
from __future__ import annotations

import pytest
from delta_driver import Engine, TickContext

from delta_queue import Event, EventQueue, make_queue_system, parse_event


@pytest.fixture
def engine() -> Engine:
    return Engine(tps=20)


@pytest.fixture
def queue() -> EventQueue:
    return EventQueue()


def _record(fired: list[tuple[int, str]]):  # type: ignore[no-untyped-def]
    def on_fire(ctx: TickContext, event: Event) -> None:
        fired.append((ctx.tick_number, event.name))

    return on_fire


class TestQueueSystem:
    def test_fires_on_due_tick(self, engine: Engine, queue: EventQueue) -> None:
        fired: list[tuple[int, str]] = []
        engine.add_system(make_queue_system(queue, _record(fired)))
        queue.queue(Event(name="build", delay=3))

        engine.run(5)
        assert fired == [(3, "build")]

    def test_repeating_event(self, engine: Engine, queue: EventQueue) -> None:
        fired: list[tuple[int, str]] = []
        engine.add_system(make_queue_system(queue, _record(fired)))
        queue.queue(Event(name="pulse", delay=1, repeat=3))

        engine.run(10)
        assert fired == [(1, "pulse"), (4, "pulse"), (7, "pulse"), (10, "pulse")]

    def test_immediate_event_fires_on_first_tick(
        self, engine: Engine, queue: EventQueue
    ) -> None:
        fired: list[tuple[int, str]] = []
        engine.add_system(make_queue_system(queue, _record(fired)))
        queue.queue(Event(name="now", delay=0))

        engine.run(2)
        assert fired == [(1, "now")]

    def test_same_tick_delivered_in_insertion_order(
        self, engine: Engine, queue: EventQueue
    ) -> None:
        fired: list[tuple[int, str]] = []
        engine.add_system(make_queue_system(queue, _record(fired)))
        for name in ["a", "b", "c"]:
            queue.queue(Event(name=name, delay=2))

        engine.run(2)
        assert fired == [(2, "a"), (2, "b"), (2, "c")]

    def test_catch_up_step_collapses_repeats(
        self, engine: Engine, queue: EventQueue
    ) -> None:
        fired: list[tuple[int, str]] = []
        ticks_seen: list[int] = []

        def on_fire(ctx: TickContext, event: Event) -> None:
            fired.append((ctx.tick_number, event.name))
            ticks_seen.append(ctx.ticks)

        engine.add_system(make_queue_system(queue, on_fire))
        queue.queue(Event(name="tick", delay=1, repeat=2))
        queue.queue(Event(name="tock", delay=2, repeat=2))

        engine.step(7)
        assert sorted(fired) == [(7, "tick"), (7, "tock")]
        assert ticks_seen == [7, 7]

        engine.step()
        engine.step()
        # tick is due at 9, tock at 8 on their original phase
        assert fired[2:] == [(8, "tock"), (9, "tick")]

    def test_on_fire_can_remove_events(
        self, engine: Engine, queue: EventQueue
    ) -> None:
        fired: list[tuple[int, str]] = []

        def on_fire(ctx: TickContext, event: Event) -> None:
            fired.append((ctx.tick_number, event.name))
            if event.name == "alarm":
                queue.remove("snooze")

        engine.add_system(make_queue_system(queue, on_fire))
        queue.queue(Event(name="alarm", delay=2))
        queue.queue(Event(name="snooze", delay=4, repeat=1))

        engine.run(8)
        assert fired == [(2, "alarm")]

    def test_on_fire_can_add_events(self, engine: Engine, queue: EventQueue) -> None:
        fired: list[tuple[int, str]] = []

        def on_fire(ctx: TickContext, event: Event) -> None:
            fired.append((ctx.tick_number, event.name))
            if event.name == "spawn":
                queue.add(Event(name="child", delay=2))

        engine.add_system(make_queue_system(queue, on_fire))
        queue.queue(Event(name="spawn", delay=1))

        engine.run(5)
        assert fired == [(1, "spawn"), (3, "child")]

    def test_empty_queue(self, engine: Engine, queue: EventQueue) -> None:
        fired: list[tuple[int, str]] = []
        engine.add_system(make_queue_system(queue, _record(fired)))
        engine.run(3)
        assert fired == []


class TestParsedEvents:
    def test_decoded_messages_drive_the_queue(
        self, engine: Engine, queue: EventQueue
    ) -> None:
        messages = [
            b'{"delay": 1, "repeat": 2, "name": "tick", "what": {"event": "tick"}}',
            b'{"delay": 2, "repeat": 2, "name": "tock", "what": {"event": "tock"}}',
        ]
        for message in messages:
            queue.queue(parse_event(message))

        payloads: list[tuple[int, bytes]] = []
        engine.add_system(
            make_queue_system(
                queue, lambda ctx, event: payloads.append((ctx.tick_number, event.payload))
            )
        )
        engine.run(4)
        assert payloads == [
            (1, b'{"event":"tick"}'),
            (2, b'{"event":"tock"}'),
            (3, b'{"event":"tick"}'),
            (4, b'{"event":"tock"}'),
        ]
