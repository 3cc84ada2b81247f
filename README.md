# cpusched

A small, event-driven simulator of CPU scheduling for teaching purposes.

The simulator creates five processes with random arrival times, CPU bursts,
priorities and I/O bursts. It then replays them through an event queue that
holds arrivals, CPU burst completions, I/O requests and I/O completions, and
prints each step as it happens. Processes that are ready to run wait in a
shortest-job-first ready queue, ordered by remaining CPU time with ties broken
by process id. A first-come, first-served ready queue is also available to
library users.

## Installation

```
pip install .
```

## Running the simulation

```
cpusched
```

To make a run repeatable, give a seed for the random process generator:

```
cpusched --seed 42
```

The output has three parts:

1. "Creating processes:" followed by each process with its arrival time, CPU
   burst, priority and I/O bursts.
2. The same processes in arrival order, read back out of the event queue.
   Before this step the fourth process has its arrival time set to 3.
3. A timeline of events, one entry per event, that ends with
   `All processes have been processed.`

## Using it as a library

```python
import random
import sys

from cpusched.process import new_process
from cpusched.ready_queue import new_sjf_ready_queue
from cpusched.scheduler import build_event_queue, simulate

rng = random.Random(42)
processes = [new_process(pid, rng) for pid in range(1, 6)]
events = build_event_queue(processes)
finished = simulate(events, new_sjf_ready_queue(sys.stdout), sys.stdout)
for process in finished:
    print(process.status())
```

`simulate` writes the timeline to the stream it is given (standard output by
default) and returns the processes in the order they completed. Each process
keeps its `waiting_time` and `turnaround_time` as the run updates them.

The building blocks live in separate modules:

- `cpusched.priority_queue`: `PriorityQueue`, a binary min-heap ordered by a
  three-way comparison function (negative when the first argument comes
  first). `push` returns a `HeapNode` handle, and `node_value_changed` moves
  that node's data back into place after the item it holds changes. `pop` and
  `top` raise `IndexError` on an empty queue.
- `cpusched.process`: `Process` and `IOBurst` with `describe()` and
  `status()` text; `new_process(pid, rng)` makes a random process whose I/O
  bursts are sorted by request time with duplicate request times removed;
  `compare_io_burst`, `insert_in_order` and `remove_duplicates` are the
  list helpers it uses.
- `cpusched.event`: `EventType`, `Event` and `compare_events`, which orders
  events by time.
- `cpusched.ready_queue`: `ReadyQueueEntry`, `FCFSReadyQueue`,
  `PriorityReadyQueue`, `sjf_compare_process`, `new_sjf_ready_queue` and
  `new_fcfs_ready_queue`.
- `cpusched.scheduler`: `build_event_queue`, `simulate` and `main`, the
  function behind the `cpusched` command.

## What it does not do

- The `cpusched` command always uses the shortest-job-first ready queue and
  always creates five processes; it has no option to pick the
  first-come, first-served queue or to change the number of processes. Pass
  `new_fcfs_ready_queue()` to `simulate` to use that queue from code.
- Process priorities are generated and printed but play no part in
  scheduling.
- Scheduling is non-preemptive: a process keeps the CPU until its next I/O
  request or the end of its CPU burst.
- No summary statistics (such as average waiting time) are computed or
  printed.

## Running the tests

```
pip install .[test]
pytest
```