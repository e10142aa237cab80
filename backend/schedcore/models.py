from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional


@dataclass
class Process:
    name: str
    description: str
    arrival_time: int
    burst_time: int
    priority: int = 0          # lower number = higher priority

    # Position in the input sequence; last-resort tie-break for every policy
    original_order: int = 0

    # Runtime state (reset before every algorithm run)
    remaining_time: int = 0
    start_time: Optional[int] = None
    completion_time: Optional[int] = None
    waiting_time: Optional[int] = None
    turnaround_time: Optional[int] = None

    # UI state (NEW/READY/RUNNING/DONE)
    state: str = "NEW"

    def __post_init__(self):
        self.arrival_time = int(self.arrival_time)
        self.burst_time = int(self.burst_time)
        self.priority = int(self.priority)
        if self.arrival_time < 0:
            raise ValueError(f"{self.name}: arrival_time must be >= 0")
        if self.burst_time <= 0:
            raise ValueError(f"{self.name}: burst_time must be > 0")
        self.reset()

    @property
    def done(self) -> bool:
        return self.remaining_time == 0

    def reset(self):
        self.remaining_time = self.burst_time
        self.start_time = None
        self.completion_time = None
        self.waiting_time = None
        self.turnaround_time = None
        self.state = "NEW"

    def finish(self, time: int):
        """Record completion at `time` and derive turnaround/waiting from it."""
        self.remaining_time = 0
        self.completion_time = time
        self.turnaround_time = time - self.arrival_time
        self.waiting_time = self.turnaround_time - self.burst_time


class ProcessTable:
    """Owned collection of processes shared by consecutive algorithm runs.

    Schedulers mutate the runtime fields in place; callers must `reset()`
    the table before handing it to the next scheduler.
    """

    def __init__(self, processes: Optional[List[Process]] = None):
        self._processes: List[Process] = []
        for p in processes or []:
            self.append(p)

    def __iter__(self) -> Iterator[Process]:
        return iter(self._processes)

    def __len__(self) -> int:
        return len(self._processes)

    def __getitem__(self, index: int) -> Process:
        return self._processes[index]

    def __repr__(self) -> str:
        return f"ProcessTable({[p.name for p in self._processes]!r})"

    def append(self, process: Process):
        process.original_order = len(self._processes)
        self._processes.append(process)

    def reset(self):
        for p in self._processes:
            p.reset()

    def all_done(self) -> bool:
        return all(p.done for p in self._processes)

    def by_order(self) -> Dict[int, Process]:
        return {p.original_order: p for p in self._processes}

    # Helper: clone table (no runtime fields)
    def clone(self) -> "ProcessTable":
        return ProcessTable(
            [
                Process(
                    p.name,
                    p.description,
                    p.arrival_time,
                    p.burst_time,
                    priority=p.priority,
                    original_order=p.original_order,
                )
                for p in self._processes
            ]
        )
