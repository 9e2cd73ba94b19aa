"""delta-queue - Delta-list event scheduling for tick-driven loops."""
from delta_queue.codec import dump_event, parse_event
from delta_queue.queue import EventQueue
from delta_queue.systems import make_queue_system
from delta_queue.types import Event, EventDecodeError

__all__ = [
    "Event",
    "EventDecodeError",
    "EventQueue",
    "parse_event",
    "dump_event",
    "make_queue_system",
]
