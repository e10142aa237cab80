import sys
import time
from typing import List, Optional, TextIO

from .config import ALGORITHM_TITLES, BANNER_HEAVY, BANNER_LIGHT
from .events import Event, Execution, Idle, Interval, RunFinished, RunStarted


class Reporter:
    """Receives the event stream of a run; pass `reporter.emit` as a listener."""

    def emit(self, event: Event):
        if isinstance(event, RunStarted):
            self.run_started(event)
        elif isinstance(event, (Execution, Idle)):
            self.interval(event)
        elif isinstance(event, RunFinished):
            self.run_finished(event)
        else:
            raise TypeError(f"unknown event {event!r}")

    def run_started(self, event: RunStarted):
        pass

    def interval(self, event: Interval):
        pass

    def run_finished(self, event: RunFinished):
        pass


class RecordingReporter(Reporter):
    def __init__(self):
        self.events: List[Event] = []

    def emit(self, event: Event):
        self.events.append(event)
        super().emit(event)

    def intervals(self, algorithm: Optional[str] = None) -> List[Interval]:
        out: List[Interval] = []
        current = None
        for e in self.events:
            if isinstance(e, RunStarted):
                current = e.algorithm
            elif isinstance(e, (Execution, Idle)) and (algorithm is None or current == algorithm):
                out.append(e)
        return out


class BannerReporter(Reporter):
    """Plain-text report: banner per run, one line per interval, summary banner.

    `delay` paces the output at that many seconds per simulated time unit.
    It only slows the writer down; scheduling has already been decided.
    """

    def __init__(self, stream: Optional[TextIO] = None, delay: float = 0.0):
        self.stream = stream if stream is not None else sys.stdout
        self.delay = max(0.0, float(delay))

    def _write(self, text: str):
        self.stream.write(text)
        self.stream.flush()

    def run_started(self, event: RunStarted):
        title = ALGORITHM_TITLES.get(event.algorithm, event.algorithm)
        self._write(
            f"{BANNER_HEAVY}\n"
            f">> Scheduler Mode : {title}\n"
            f">> Engine Status  : Initialized\n"
            f"{BANNER_LIGHT}\n\n"
        )

    def interval(self, event: Interval):
        if isinstance(event, Execution):
            self._write(f"{event.start} → {event.end}: {event.process} Running {event.description}.\n")
        else:
            self._write(f"{event.start} → {event.end}: Idle.\n")
        if self.delay:
            time.sleep(self.delay * event.duration)

    def run_finished(self, event: RunFinished):
        if event.preemptive:
            summary = f"   └─ Total Turnaround Time : {int(event.statistic)} time units\n\n"
        else:
            summary = f"   └─ Average Waiting Time : {event.statistic:.2f} time units\n"
        self._write(
            f"\n{BANNER_LIGHT}\n"
            f">> Engine Status  : Completed\n"
            f">> Summary        :\n"
            f"{summary}"
            f">> End of Report\n"
            f"{BANNER_HEAVY}\n\n"
        )
