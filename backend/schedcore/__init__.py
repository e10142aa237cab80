from .compare import (
    compare_all_algorithms,
    make_scheduler,
    run_algorithm_once,
    run_all_algorithms,
)
from .datasets import (
    build_processes,
    load_preset,
    load_processes,
    load_processes_csv,
    load_processes_json,
)
from .errors import ConfigurationError, SchedulerError, SchedulingInvariantError
from .events import Execution, Idle, RunFinished, RunStarted
from .metrics import RunResult, compute_metrics
from .models import Process, ProcessTable
from .policies import ArrivalOrderPolicy, FCFSPolicy, OrderingPolicy, PriorityPolicy, SJFPolicy
from .reporter import BannerReporter, RecordingReporter, Reporter
from .scheduler import NonPreemptiveScheduler, ReadyQueue, RoundRobinScheduler

__all__ = [
    "Process",
    "ProcessTable",
    "OrderingPolicy",
    "FCFSPolicy",
    "SJFPolicy",
    "PriorityPolicy",
    "ArrivalOrderPolicy",
    "NonPreemptiveScheduler",
    "RoundRobinScheduler",
    "ReadyQueue",
    "Execution",
    "Idle",
    "RunStarted",
    "RunFinished",
    "RunResult",
    "compute_metrics",
    "Reporter",
    "BannerReporter",
    "RecordingReporter",
    "SchedulerError",
    "ConfigurationError",
    "SchedulingInvariantError",
    "build_processes",
    "load_preset",
    "load_processes",
    "load_processes_csv",
    "load_processes_json",
    "make_scheduler",
    "run_algorithm_once",
    "run_all_algorithms",
    "compare_all_algorithms",
]
