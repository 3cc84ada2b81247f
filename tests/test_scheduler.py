import io
import random

from cpusched.event import EventType
from cpusched.process import IOBurst, Process, new_process
from cpusched.ready_queue import new_fcfs_ready_queue, new_sjf_ready_queue
from cpusched.scheduler import build_event_queue, main, simulate


def _proc(pid, arrival, cpu, bursts=()):
    return Process(
        pid=pid, arrival_time=arrival, cpu_burst=cpu, priority=0,
        remaining_time=cpu, io_bursts=[IOBurst(r, t) for r, t in bursts],
    )


def test_build_event_queue_orders_by_arrival():
    procs = [_proc(1, 6, 3), _proc(2, 1, 3), _proc(3, 4, 3)]
    queue = build_event_queue(procs)
    events = [queue.pop() for _ in range(len(procs))]
    assert [e.time for e in events] == sorted(p.arrival_time for p in procs)
    assert all(e.event_type is EventType.ARRIVED for e in events)
    assert queue.is_empty()


def test_single_process_worked_example():
    proc = _proc(1, 0, 5, [(2, 3)])
    out = io.StringIO()
    finished = simulate(build_event_queue([proc]), new_sjf_ready_queue(out), out)
    assert finished == [proc]
    assert proc.turnaround_time == 8
    assert proc.waiting_time == 0
    assert proc.remaining_time == 0
    assert proc.io_bursts == []
    assert out.getvalue().endswith("All processes have been processed.\n")


def test_random_processes_all_complete_sjf():
    rng = random.Random(42)
    procs = [new_process(pid, rng) for pid in range(1, 8)]
    out = io.StringIO()
    finished = simulate(build_event_queue(procs), new_sjf_ready_queue(out), out)
    assert sorted(p.pid for p in finished) == [p.pid for p in procs]
    for p in procs:
        assert p.remaining_time == 0
        assert p.io_bursts == []
        assert p.waiting_time >= 0
        assert p.turnaround_time >= p.cpu_burst


def test_random_processes_all_complete_fcfs():
    rng = random.Random(7)
    procs = [new_process(pid, rng) for pid in range(1, 6)]
    out = io.StringIO()
    finished = simulate(build_event_queue(procs), new_fcfs_ready_queue(out), out)
    assert len(finished) == len(procs)
    assert {p.pid for p in finished} == {p.pid for p in procs}


def test_contention_produces_waiting():
    first = _proc(1, 0, 6)
    second = _proc(2, 0, 6)
    out = io.StringIO()
    simulate(build_event_queue([first, second]), new_sjf_ready_queue(out), out)
    waits = sorted([first.waiting_time, second.waiting_time])
    assert waits[0] == 0
    assert waits[1] == first.cpu_burst


def test_main_is_deterministic_with_seed(capsys):
    assert main(["--seed", "3"]) == 0
    first = capsys.readouterr().out
    assert main(["--seed", "3"]) == 0
    second = capsys.readouterr().out
    assert first == second
    assert first.startswith("Creating processes:\n")
    assert first.endswith("All processes have been processed.\n")
    assert "Process 4 arrived." in first