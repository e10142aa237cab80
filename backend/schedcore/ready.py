"""Ready-set selection shared by both scheduler loops.

A process is ready at time ``t`` when it has arrived (``arrival_time <= t``)
and still has ``remaining_time`` left. Both loops record completion through
``Process.finish``, so ``Process.done`` is the only finished check.
"""
from typing import Iterable, List, Optional

from .errors import SchedulingInvariantError
from .models import Process


def ready_set(processes: Iterable[Process], time: int) -> List[Process]:
    return [p for p in processes if not p.done and p.arrival_time <= time]


def next_arrival(processes: Iterable[Process], time: int) -> Optional[int]:
    """Earliest arrival strictly after `time` among unfinished processes.

    Returns None when every process is finished (normal termination).
    Raises SchedulingInvariantError if unfinished processes remain but none
    of them arrives in the future, since that means one of them was ready
    and got lost by the caller.
    """
    pending = [p for p in processes if not p.done]
    if not pending:
        return None

    future = [p.arrival_time for p in pending if p.arrival_time > time]
    if not future:
        names = ", ".join(p.name for p in pending)
        raise SchedulingInvariantError(
            f"t={time}: no runnable or future process, but unfinished: {names}"
        )
    return min(future)
