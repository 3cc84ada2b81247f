import io

import pytest

from cpusched.process import Process
from cpusched.ready_queue import (
    FCFSReadyQueue,
    PriorityReadyQueue,
    ReadyQueueEntry,
    new_fcfs_ready_queue,
    new_sjf_ready_queue,
    sjf_compare_process,
)


def _entry(pid, remaining, start=0):
    proc = Process(
        pid=pid, arrival_time=0, cpu_burst=remaining, priority=0,
        remaining_time=remaining,
    )
    return ReadyQueueEntry(proc, start)


def test_fcfs_preserves_insertion_order():
    out = io.StringIO()
    queue = FCFSReadyQueue(out)
    entries = [_entry(pid, 10 - pid) for pid in (3, 1, 2)]
    for entry in entries:
        queue.push(entry)
    assert len(queue) == 3
    assert [queue.pop() for _ in range(3)] == entries
    assert queue.is_empty()


def test_fcfs_push_reports_process():
    out = io.StringIO()
    queue = FCFSReadyQueue(out)
    queue.push(_entry(7, 4))
    assert out.getvalue() == "Pushing process 7 to the ready queue\n"


def test_fcfs_pop_empty_raises():
    with pytest.raises(IndexError):
        FCFSReadyQueue(io.StringIO()).pop()


def test_new_fcfs_ready_queue_announces():
    out = io.StringIO()
    queue = new_fcfs_ready_queue(out)
    assert out.getvalue() == "Creating a new FCFS ready queue\n"
    assert queue.is_empty()


def test_sjf_compare_orders_by_remaining_then_pid():
    assert sjf_compare_process(_entry(1, 2), _entry(2, 5)) == -1
    assert sjf_compare_process(_entry(1, 5), _entry(2, 2)) == 1
    assert sjf_compare_process(_entry(1, 4), _entry(2, 4)) == -1
    assert sjf_compare_process(_entry(3, 4), _entry(2, 4)) == 1
    assert sjf_compare_process(_entry(2, 4), _entry(2, 4)) == 0


def test_sjf_queue_pops_shortest_first():
    out = io.StringIO()
    queue = new_sjf_ready_queue(out)
    assert "SJF" in out.getvalue()
    data = [(1, 7), (2, 3), (3, 9), (4, 3), (5, 1), (6, 4)]
    for pid, remaining in data:
        queue.push(_entry(pid, remaining))
    assert len(queue) == len(data)
    popped = [queue.pop().process for _ in data]
    keys = [(p.remaining_time, p.pid) for p in popped]
    assert keys == sorted(keys)
    assert queue.is_empty()


def test_priority_queue_top_does_not_remove():
    queue = PriorityReadyQueue(sjf_compare_process)
    queue.push(_entry(1, 8))
    queue.push(_entry(2, 2))
    assert queue.top().process.pid == 2
    assert len(queue) == 2


def test_priority_queue_pop_empty_raises():
    with pytest.raises(IndexError):
        PriorityReadyQueue(sjf_compare_process).pop()