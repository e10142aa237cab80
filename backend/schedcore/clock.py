from typing import Callable, List, Optional

from .events import Event, Execution, Idle, Interval
from .models import Process

Listener = Callable[[Event], None]


class Timeline:
    """Simulated clock plus the intervals emitted while advancing it.

    The clock only moves through `run()` and `idle_until()`, so the recorded
    intervals always tile `[0, time)` without gaps or overlaps.
    """

    def __init__(self, listener: Optional[Listener] = None):
        self.time = 0
        self.intervals: List[Interval] = []
        self._listener = listener

    def emit(self, event: Event):
        if self._listener is not None:
            self._listener(event)

    def run(self, process: Process, duration: int) -> Execution:
        if duration <= 0:
            raise ValueError(f"execution slice must be positive, got {duration}")
        interval = Execution(
            process.name,
            self.time,
            self.time + duration,
            order=process.original_order,
            description=process.description,
        )
        self._record(interval)
        return interval

    def idle_until(self, time: int) -> Idle:
        if time <= self.time:
            raise ValueError(f"idle must move the clock forward ({self.time} -> {time})")
        interval = Idle(self.time, time)
        self._record(interval)
        return interval

    def _record(self, interval: Interval):
        self.intervals.append(interval)
        self.emit(interval)
        self.time = interval.end
