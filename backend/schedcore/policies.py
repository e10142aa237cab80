from typing import Iterable, Optional, Tuple

from .models import Process


class OrderingPolicy:
    """Total order over processes; the smallest key runs first.

    Every key ends with `original_order`, so two distinct processes never
    compare equal and selection is deterministic.
    """

    name = ""

    def key(self, p: Process) -> Tuple[int, ...]:
        raise NotImplementedError

    def select(self, ready: Iterable[Process]) -> Optional[Process]:
        return min(ready, key=self.key, default=None)

    def order(self, ready: Iterable[Process]):
        return sorted(ready, key=self.key)


class FCFSPolicy(OrderingPolicy):
    name = "FCFS"

    def key(self, p: Process) -> Tuple[int, ...]:
        return (p.arrival_time, p.original_order)


class SJFPolicy(OrderingPolicy):
    name = "SJF"

    def key(self, p: Process) -> Tuple[int, ...]:
        return (p.burst_time, p.arrival_time, p.original_order)


class PriorityPolicy(OrderingPolicy):
    name = "PRIORITY"

    def key(self, p: Process) -> Tuple[int, ...]:
        return (p.priority, p.arrival_time, p.original_order)


class ArrivalOrderPolicy(OrderingPolicy):
    """Round Robin admission order: only applied when a process enters the queue."""

    name = "RR"

    def key(self, p: Process) -> Tuple[int, ...]:
        return (p.arrival_time, p.original_order)


NON_PREEMPTIVE_POLICIES = {
    "FCFS": FCFSPolicy,
    "SJF": SJFPolicy,
    "PRIORITY": PriorityPolicy,
}
