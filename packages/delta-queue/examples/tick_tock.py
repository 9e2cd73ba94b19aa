"""Tick-tock -- a delta-list event queue driven by the engine loop.

Demonstrates:
- Decoding JSON event descriptors into queued events
- Wiring an EventQueue into the engine with make_queue_system
- Removing a repeating event from inside a fire callback
- A catch-up step that collapses missed repeats into one firing

Run: python -m examples.tick_tock
"""

import logging

from delta_driver import Engine, TickContext

from delta_queue import Event, EventQueue, make_queue_system, parse_event

MESSAGES = [
    b'{"delay": 1, "repeat": 2, "name": "tick", "what": {"sound": "tick"}}',
    b'{"delay": 2, "repeat": 2, "name": "tock", "what": {"sound": "tock"}}',
    b'{"delay": 7, "name": "alarm", "what": {"sound": "ring"}}',
]


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print("=== Tick-tock ===\n")

    queue = EventQueue()
    for message in MESSAGES:
        queue.queue(parse_event(message))

    def on_fire(ctx: TickContext, event: Event) -> None:
        print(f"  tick {ctx.tick_number:>2} (+{ctx.ticks})  {event.name:<6} {event.payload.decode()}")
        # The alarm silences the clock.
        if event.name == "alarm":
            queue.remove("tick")
            queue.remove("tock")

    engine = Engine(tps=10)
    engine.add_system(make_queue_system(queue, on_fire))

    engine.run(4)

    # Pretend the loop stalled: one step covers two ticks.
    engine.step(2)

    engine.run(4)

    print(f"\nDone. Clock stopped at tick {engine.clock.tick_number}; {len(queue)} events pending.")


if __name__ == "__main__":
    main()
