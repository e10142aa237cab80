import logging
from typing import Callable, List, Optional

from .clock import Listener, Timeline
from .config import DEFAULT_QUANTUM, EVENT_LOG_LIMIT
from .errors import ConfigurationError
from .events import RunFinished, RunStarted
from .metrics import RunResult, build_result
from .models import Process, ProcessTable
from .policies import ArrivalOrderPolicy, OrderingPolicy
from .ready import next_arrival, ready_set

logger = logging.getLogger(__name__)


class _BaseScheduler:
    algorithm = ""

    def __init__(self):
        self.event_log: List[str] = []
        self.event_log_limit: int = EVENT_LOG_LIMIT
        self.timeline = Timeline()

    def _log_event(self, msg: str):
        self.event_log.append(msg)
        if len(self.event_log) > self.event_log_limit:
            self.event_log = self.event_log[-self.event_log_limit:]

    def _set_state(self, p: Process, new_state: str, detail: str = ""):
        old = p.state
        if old != new_state:
            p.state = new_state
            extra = f" {detail}" if detail else ""
            self._log_event(f"t={self.timeline.time}: {p.name} {old} → {new_state}{extra}")

    def _begin(self, table: ProcessTable, listener: Optional[Listener]):
        if any(p.state != "NEW" for p in table):
            logger.warning("%s: process table was not reset before this run", self.algorithm)
        self.event_log = []
        self.timeline = Timeline(listener)
        self.timeline.emit(RunStarted(self.algorithm))
        logger.info("%s: starting run over %d processes", self.algorithm, len(table))

    def _dispatch(self, p: Process):
        self._set_state(p, "RUNNING")
        if p.start_time is None:
            p.start_time = self.timeline.time

    def _idle(self, table: ProcessTable) -> bool:
        """Fast-forward to the next arrival. Returns False when nothing is left."""
        nxt = next_arrival(table, self.timeline.time)
        if nxt is None:
            return False
        logger.debug("%s: idle %d -> %d", self.algorithm, self.timeline.time, nxt)
        self.timeline.idle_until(nxt)
        return True

    def _finish(self, table: ProcessTable, statistic: float) -> RunResult:
        final_time = self.timeline.time
        self.timeline.emit(RunFinished(self.algorithm, statistic, final_time))
        logger.info("%s: finished at t=%d (statistic=%s)", self.algorithm, final_time, statistic)
        return build_result(
            self.algorithm,
            list(table),
            self.timeline.intervals,
            final_time,
            statistic,
            self.event_log,
        )

    def run(self, table: ProcessTable, listener: Optional[Listener] = None) -> RunResult:
        raise NotImplementedError


class NonPreemptiveScheduler(_BaseScheduler):
    """Runs the process chosen by `policy` to completion, one decision per step.

    Statistic: average waiting time over all processes.
    """

    def __init__(self, policy: OrderingPolicy):
        super().__init__()
        self.policy = policy
        self.algorithm = policy.name

    def run(self, table: ProcessTable, listener: Optional[Listener] = None) -> RunResult:
        self._begin(table, listener)
        total_waiting = 0

        while not table.all_done():
            ready = ready_set(table, self.timeline.time)
            if not ready:
                if not self._idle(table):
                    break
                continue

            for p in ready:
                self._set_state(p, "READY")

            p = self.policy.select(ready)
            now = self.timeline.time
            p.waiting_time = max(0, now - p.arrival_time)
            total_waiting += p.waiting_time

            self._dispatch(p)
            logger.debug("%s: t=%d run %s for %d", self.algorithm, now, p.name, p.burst_time)
            self.timeline.run(p, p.burst_time)
            p.finish(self.timeline.time)
            self._set_state(p, "DONE")

        avg_wait = (total_waiting / len(table)) if len(table) else 0.0
        return self._finish(table, avg_wait)


class ReadyQueue:
    """FIFO of processes for Round Robin; a process is queued at most once."""

    def __init__(self, order: Optional[OrderingPolicy] = None):
        self.order = order or ArrivalOrderPolicy()
        self._items: List[Process] = []
        self._members = set()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, p: Process) -> bool:
        return p.original_order in self._members

    def __iter__(self):
        return iter(self._items)

    def admit(self, p: Process) -> bool:
        """Insert a newly eligible process before the first entry it sorts ahead of."""
        if p in self:
            return False
        key = self.order.key(p)
        pos = 0
        while pos < len(self._items) and self.order.key(self._items[pos]) <= key:
            pos += 1
        self._items.insert(pos, p)
        self._members.add(p.original_order)
        return True

    def requeue(self, p: Process):
        """Put a preempted process at the tail; it loses its former position."""
        if p in self:
            raise ValueError(f"{p.name} is already queued")
        self._items.append(p)
        self._members.add(p.original_order)

    def push_front(self, p: Process):
        if p in self:
            raise ValueError(f"{p.name} is already queued")
        self._items.insert(0, p)
        self._members.add(p.original_order)

    def pop(self) -> Process:
        p = self._items.pop(0)
        self._members.discard(p.original_order)
        return p

    def names(self) -> List[str]:
        return [p.name for p in self._items]


class RoundRobinScheduler(_BaseScheduler):
    """Time-sliced scheduler with a fixed quantum.

    After each slice, admission happens in three phases: processes that
    arrived during the slice, then the preempted process at the tail, then
    processes arriving exactly when the slice ended.

    Statistic: total turnaround time, i.e. the final clock value.
    """

    algorithm = "RR"

    def __init__(self, quantum: int = DEFAULT_QUANTUM):
        super().__init__()
        if isinstance(quantum, bool) or not isinstance(quantum, int) or quantum <= 0:
            raise ConfigurationError(f"Time quantum must be greater than 0 (got {quantum!r}).")
        self.quantum = quantum
        self.ready_queue = ReadyQueue()

    def _admit_where(self, table: ProcessTable, arrived: Callable[[int], bool]):
        for p in table:
            if not p.done and p not in self.ready_queue and arrived(p.arrival_time):
                if self.ready_queue.admit(p):
                    self._set_state(p, "READY")

    def admit_arrived(self, table: ProcessTable, now: int):
        self._admit_where(table, lambda at: at <= now)

    def admit_during_slice(self, table: ProcessTable, start: int, end: int):
        self._admit_where(table, lambda at: start < at < end)

    def admit_at_slice_end(self, table: ProcessTable, end: int):
        self._admit_where(table, lambda at: at == end)

    def run(self, table: ProcessTable, listener: Optional[Listener] = None) -> RunResult:
        self._begin(table, listener)
        self.ready_queue = ReadyQueue()

        while not table.all_done():
            self.admit_arrived(table, self.timeline.time)

            if not self.ready_queue:
                if not self._idle(table):
                    break
                continue

            p = self.ready_queue.pop()
            start = self.timeline.time
            time_slice = min(p.remaining_time, self.quantum)

            self._dispatch(p)
            logger.debug("RR: t=%d run %s for %d (remaining %d)", start, p.name, time_slice, p.remaining_time)
            self.timeline.run(p, time_slice)
            p.remaining_time -= time_slice
            end = self.timeline.time

            self.admit_during_slice(table, start, end)
            if p.remaining_time > 0:
                self._set_state(p, "READY", "(time slice)")
                self.ready_queue.requeue(p)
            else:
                p.finish(end)
                self._set_state(p, "DONE")
            self.admit_at_slice_end(table, end)

        return self._finish(table, self.timeline.time)
