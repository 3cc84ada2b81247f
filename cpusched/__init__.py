"""Event-driven CPU scheduling simulator with FCFS and SJF ready queues."""

__version__ = "0.1.0"
__all__ = ["event", "priority_queue", "process", "ready_queue", "scheduler"]