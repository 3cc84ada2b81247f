"""Event-driven CPU scheduling simulation."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Iterable, List, Optional, TextIO

from cpusched.event import Event, EventType, compare_events
from cpusched.priority_queue import PriorityQueue
from cpusched.process import Process, new_process
from cpusched.ready_queue import ReadyQueueEntry, new_sjf_ready_queue

PROCESS_COUNT = 5


def build_event_queue(processes: Iterable[Process]) -> PriorityQueue:
    """Return an event queue holding one arrival event per process."""
    queue = PriorityQueue(compare_events)
    for process in processes:
        queue.push(Event(EventType.ARRIVED, process.arrival_time, process))
    return queue


def _dispatch(process: Process, time: int, event_queue: PriorityQueue,
              out: TextIO) -> None:
    if process.io_bursts:
        burst = process.io_bursts[0]
        elapsed = process.cpu_burst - process.remaining_time
        event_time = time + burst.io_request_time - elapsed
        out.write(f"Process {process.pid} IO burst requested at time {event_time}\n")
        process.remaining_time -= event_time - time
        event_type = EventType.IO_REQUESTED
    else:
        event_time = time + process.remaining_time
        process.remaining_time = 0
        event_type = EventType.CPU_BURST_ENDED
    out.write(f"Process {process.pid} is running until time {event_time}\n")
    process.turnaround_time = event_time - process.arrival_time
    event_queue.push(Event(event_type, event_time, process))


def simulate(event_queue: PriorityQueue, ready_queue,
             out: Optional[TextIO] = None) -> List[Process]:
    """Run the simulation until no events or ready processes remain.

    Returns the processes in the order they completed.
    """
    out = out if out is not None else sys.stdout
    finished: List[Process] = []
    time = 0
    cpu_idle = True
    while not ready_queue.is_empty() or not event_queue.is_empty():
        while not event_queue.is_empty():
            event = event_queue.pop()
            process = event.process
            time = event.time
            out.write(f"\n\nEvent at time {time}: ")
            if event.event_type is EventType.ARRIVED:
                out.write(f"Process {process.pid} arrived.\n")
                ready_queue.push(ReadyQueueEntry(process, time))
            elif event.event_type is EventType.CPU_BURST_ENDED:
                out.write(f"\n\nProcess {process.pid} CPU burst ended.\n")
                out.write(process.status() + "\n")
                finished.append(process)
                cpu_idle = True
            elif event.event_type is EventType.IO_REQUESTED:
                burst = process.io_bursts[0]
                io_event = Event(EventType.IO_ENDED, time + burst.io_burst_time, process)
                out.write(
                    f"\n\nProcess {process.pid} IO burst requested at time {time}\n"
                )
                out.write(process.status() + "\n")
                del process.io_bursts[0]
                event_queue.push(io_event)
                cpu_idle = True
            elif event.event_type is EventType.IO_ENDED:
                out.write(f"Process {process.pid} IO burst ended at time {time}\n")
                out.write(process.status() + "\n")
                if process.remaining_time <= 0:
                    out.write(f"Process {process.pid} finished at time {time}\n")
                    finished.append(process)
                else:
                    ready_queue.push(ReadyQueueEntry(process, time))
            if event_queue.is_empty() or event_queue.top().time != time:
                break
        if cpu_idle and not ready_queue.is_empty():
            entry = ready_queue.pop()
            process = entry.process
            out.write(f"Process {process.pid} is selected for CPU at time {time}\n")
            cpu_idle = False
            process.waiting_time += time - entry.start_time
            _dispatch(process, time, event_queue, out)
    out.write("All processes have been processed.\n")
    return finished


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate SJF CPU scheduling.")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random process generator")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    out = sys.stdout

    out.write("Creating processes:\n")
    processes = [new_process(pid, rng) for pid in range(1, PROCESS_COUNT + 1)]
    for process in processes:
        out.write(process.describe() + "\n")
    processes[3].arrival_time = 3
    event_queue = build_event_queue(processes)

    out.write("\nProcesses ordered by arrival time (using priority queue):\n")
    ordered = []
    while not event_queue.is_empty():
        event = event_queue.pop()
        out.write(event.process.describe() + "\n")
        ordered.append(event)
    for event in ordered:
        event_queue.push(event)

    ready_queue = new_sjf_ready_queue(out)
    out.write("\n--------------\n\n")
    simulate(event_queue, ready_queue, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())