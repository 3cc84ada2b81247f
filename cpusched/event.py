"""Simulation events and their ordering."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from cpusched.process import Process


class EventType(enum.Enum):
    CPU_BURST_ENDED = 0
    ARRIVED = 1
    IO_ENDED = 2
    IO_REQUESTED = 3


@dataclass
class Event:
    """Something that happens to a process at a given time."""

    event_type: EventType
    time: int
    process: Process


def compare_events(a: Event, b: Event) -> int:
    """Order events by time."""
    return a.time - b.time