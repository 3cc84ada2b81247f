"""Ready queues: first-come first-served and comparison-ordered (SJF)."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Optional, TextIO

from cpusched.priority_queue import PriorityQueue
from cpusched.process import Process

Comparator = Callable[[Any, Any], int]


@dataclass
class ReadyQueueEntry:
    """A process waiting for the CPU since ``start_time``."""

    process: Process
    start_time: int


class FCFSReadyQueue:
    """Ready queue served strictly in arrival order."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._entries: Deque[ReadyQueueEntry] = deque()

    def __len__(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def push(self, entry: ReadyQueueEntry) -> None:
        self._out.write(f"Pushing process {entry.process.pid} to the ready queue\n")
        self._entries.append(entry)

    def pop(self) -> ReadyQueueEntry:
        """Remove and return the entry that has waited longest."""
        if not self._entries:
            raise IndexError("pop from an empty ready queue")
        return self._entries.popleft()


class PriorityReadyQueue:
    """Ready queue that always yields the entry ordered first by ``cmp``."""

    def __init__(self, cmp: Comparator) -> None:
        self._heap = PriorityQueue(cmp)

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return self._heap.is_empty()

    def push(self, entry: ReadyQueueEntry) -> None:
        self._heap.push(entry)

    def pop(self) -> ReadyQueueEntry:
        return self._heap.pop()

    def top(self) -> ReadyQueueEntry:
        return self._heap.top()


def sjf_compare_process(a: ReadyQueueEntry, b: ReadyQueueEntry) -> int:
    """Order by remaining time, then by pid."""
    pa, pb = a.process, b.process
    if pa.remaining_time != pb.remaining_time:
        return -1 if pa.remaining_time < pb.remaining_time else 1
    if pa.pid != pb.pid:
        return -1 if pa.pid < pb.pid else 1
    return 0


def new_sjf_ready_queue(out: Optional[TextIO] = None) -> PriorityReadyQueue:
    """Create a shortest-job-first ready queue."""
    out = out if out is not None else sys.stdout
    out.write(
        "Creating a new SJF (Shortest Job First) ready queue using "
        "pointer-based binary heap (custom implementation)\n"
    )
    return PriorityReadyQueue(sjf_compare_process)


def new_fcfs_ready_queue(out: Optional[TextIO] = None) -> FCFSReadyQueue:
    """Create a first-come first-served ready queue."""
    out = out if out is not None else sys.stdout
    out.write("Creating a new FCFS ready queue\n")
    return FCFSReadyQueue(out)