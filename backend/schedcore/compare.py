import logging
from typing import List, Optional

from .clock import Listener
from .config import ALGORITHMS, DEFAULT_QUANTUM
from .errors import ConfigurationError
from .metrics import RunResult
from .models import ProcessTable
from .policies import NON_PREEMPTIVE_POLICIES
from .scheduler import NonPreemptiveScheduler, RoundRobinScheduler

logger = logging.getLogger(__name__)


def make_scheduler(algorithm: str, quantum: int = DEFAULT_QUANTUM):
    algo = str(algorithm or "").strip().upper()
    if algo == "RR":
        return RoundRobinScheduler(quantum)
    policy_cls = NON_PREEMPTIVE_POLICIES.get(algo)
    if policy_cls is None:
        raise ConfigurationError(
            f"Unknown algorithm {algorithm!r}; expected one of {', '.join(ALGORITHMS)}"
        )
    return NonPreemptiveScheduler(policy_cls())


def run_algorithm_once(
    table: ProcessTable,
    algorithm: str,
    quantum: int = DEFAULT_QUANTUM,
    listener: Optional[Listener] = None,
) -> RunResult:
    """Reset `table` and run a single algorithm over it."""
    sched = make_scheduler(algorithm, quantum)
    table.reset()
    return sched.run(table, listener)


def run_all_algorithms(
    table: ProcessTable,
    quantum: int = DEFAULT_QUANTUM,
    listener: Optional[Listener] = None,
) -> List[RunResult]:
    """Run FCFS, SJF, Priority and Round Robin back to back over the same table.

    The quantum is validated before the first run so a bad configuration
    never produces partial output.
    """
    schedulers = [make_scheduler(a, quantum) for a in ALGORITHMS]

    out = []
    for sched in schedulers:
        table.reset()
        out.append(sched.run(table, listener))
    logger.info("completed %d runs over %d processes", len(out), len(table))
    return out


def compare_all_algorithms(table: ProcessTable, rr_quantum: int = DEFAULT_QUANTUM):
    """Return summary dicts for all algorithms; runs on a clone so `table` is untouched."""
    results = run_all_algorithms(table.clone(), quantum=rr_quantum)
    out = []
    for r in results:
        row = r.summary()
        row["_rows"] = r.rows
        out.append(row)
    return out
