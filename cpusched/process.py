"""Processes with CPU and I/O bursts, and ordered-list helpers."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

MAX_IO_BURSTS_COUNT = 5

Comparator = Callable[[Any, Any], int]


@dataclass
class IOBurst:
    """An I/O request issued after ``io_request_time`` units of CPU work."""

    io_request_time: int
    io_burst_time: int

    def describe(self) -> str:
        return (
            f"IO Request Time: {self.io_request_time}, "
            f"IO Burst Time: {self.io_burst_time}"
        )


@dataclass
class Process:
    """A simulated process and its scheduling statistics."""

    pid: int
    arrival_time: int
    cpu_burst: int
    priority: int
    remaining_time: int
    waiting_time: int = 0
    turnaround_time: int = 0
    io_bursts: List[IOBurst] = field(default_factory=list)

    def describe(self) -> str:
        """Return the process description followed by its I/O bursts."""
        lines = [
            f"Process {self.pid}: Arrival Time: {self.arrival_time}, "
            f"CPU Burst: {self.cpu_burst}, Priority: {self.priority}",
            "IO Bursts:",
        ]
        lines.extend(burst.describe() for burst in self.io_bursts)
        return "\n".join(lines) + "\n"

    def status(self) -> str:
        return (
            f"Process {self.pid}: Remaining Time: {self.remaining_time}, "
            f"Waiting Time: {self.waiting_time}, "
            f"Turnaround Time: {self.turnaround_time}"
        )


def compare_io_burst(a: IOBurst, b: IOBurst) -> int:
    """Order I/O bursts by request time."""
    return a.io_request_time - b.io_request_time


def insert_in_order(items: List[Any], item: Any, cmp: Comparator) -> None:
    """Insert ``item`` after every element that does not sort after it."""
    for position, existing in enumerate(items):
        if cmp(item, existing) < 0:
            items.insert(position, item)
            return
    items.append(item)


def remove_duplicates(items: List[Any], cmp: Comparator) -> None:
    """Drop elements that compare equal to their predecessor, in place."""
    kept: List[Any] = []
    for item in items:
        if kept and cmp(kept[-1], item) == 0:
            continue
        kept.append(item)
    items[:] = kept


def new_process(pid: int, rng: Optional[random.Random] = None) -> Process:
    """Create a process with random timings and sorted, distinct I/O bursts."""
    rng = rng if rng is not None else random.Random()
    arrival_time = rng.randrange(10)
    cpu_burst = rng.randrange(11) + 2
    priority = rng.randrange(5)
    process = Process(
        pid=pid,
        arrival_time=arrival_time,
        cpu_burst=cpu_burst,
        priority=priority,
        remaining_time=cpu_burst,
    )
    # The burst count is either the cap or the CPU burst length,
    # decided by one draw against the available request slots.
    draw = rng.randrange(MAX_IO_BURSTS_COUNT)
    count = MAX_IO_BURSTS_COUNT if draw < cpu_burst - 1 else cpu_burst
    for _ in range(count):
        request_time = rng.randrange(cpu_burst - 1) + 1
        burst_time = rng.randrange(5) + 1
        insert_in_order(
            process.io_bursts, IOBurst(request_time, burst_time), compare_io_burst
        )
    remove_duplicates(process.io_bursts, compare_io_burst)
    return process