from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Execution:
    process: str
    start: int
    end: int
    # input position of the process; names are not guaranteed unique
    order: int = field(default=-1, compare=False)
    description: str = field(default="", compare=False)

    @property
    def duration(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Idle:
    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start


Interval = Union[Execution, Idle]


@dataclass(frozen=True)
class RunStarted:
    algorithm: str


@dataclass(frozen=True)
class RunFinished:
    algorithm: str
    # average waiting time (FCFS/SJF/PRIORITY) or total turnaround time (RR)
    statistic: float
    final_time: int

    @property
    def preemptive(self) -> bool:
        return self.algorithm == "RR"


Event = Union[RunStarted, Execution, Idle, RunFinished]
