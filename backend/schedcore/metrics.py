from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from .events import Execution, Interval
from .models import Process


def compute_metrics(processes: Iterable[Process]):
    """Return per-process metric rows.

    - Always returns a row for every process (so the table can list all tasks).
    - Averages are computed only across completed processes.
    """
    rows = []
    completed_rows = []

    # Stable ordering for display
    for p in sorted(processes, key=lambda x: (x.arrival_time, x.original_order)):
        st = p.start_time
        ct = p.completion_time

        if st is not None and ct is not None:
            row = {
                "PID": p.name,
                "ORDER": p.original_order,
                "AT": p.arrival_time,
                "BT": p.burst_time,
                "PR": p.priority,
                "ST": st,
                "CT": ct,
                "TAT": p.turnaround_time,
                "WT": p.waiting_time,
                "RT": st - p.arrival_time,
                "_done": True,
            }
            completed_rows.append(row)
        else:
            # Not finished yet (or not started). Keep placeholders.
            row = {
                "PID": p.name,
                "ORDER": p.original_order,
                "AT": p.arrival_time,
                "BT": p.burst_time,
                "PR": p.priority,
                "ST": "-" if st is None else st,
                "CT": "-",
                "TAT": "-",
                "WT": "-",
                "RT": "-" if st is None else (st - p.arrival_time),
                "_done": False,
            }

        rows.append(row)

    if completed_rows:
        avg_wt = sum(r["WT"] for r in completed_rows) / len(completed_rows)
        avg_tat = sum(r["TAT"] for r in completed_rows) / len(completed_rows)
        avg_rt = sum(r["RT"] for r in completed_rows) / len(completed_rows)
    else:
        avg_wt = avg_tat = avg_rt = 0.0

    return rows, avg_wt, avg_tat, avg_rt


@dataclass
class RunResult:
    algorithm: str
    intervals: List[Interval]
    final_time: int
    # average waiting time (non-preemptive) or total turnaround time (RR)
    statistic: float
    rows: List[Dict[str, Any]] = field(default_factory=list)
    avg_wt: float = 0.0
    avg_tat: float = 0.0
    avg_rt: float = 0.0
    cpu_util: float = 0.0
    throughput: float = 0.0
    event_log: List[str] = field(default_factory=list)

    @property
    def executions(self) -> List[Execution]:
        return [i for i in self.intervals if isinstance(i, Execution)]

    def summary(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "statistic": self.statistic,
            "avg_wt": float(self.avg_wt),
            "avg_tat": float(self.avg_tat),
            "avg_rt": float(self.avg_rt),
            "cpu_util": float(self.cpu_util),
            "makespan": int(self.final_time),
            "throughput": float(self.throughput),
        }

    def to_dict(self) -> Dict[str, Any]:
        out = self.summary()
        out["intervals"] = [
            {"pid": i.process, "order": i.order, "start": i.start, "end": i.end}
            if isinstance(i, Execution)
            else {"pid": "IDLE", "start": i.start, "end": i.end}
            for i in self.intervals
        ]
        out["per_process"] = [{k: v for k, v in r.items() if not k.startswith("_")} for r in self.rows]
        return out


def build_result(algorithm: str, processes: List[Process], intervals: List[Interval],
                 final_time: int, statistic: float, event_log: List[str]) -> RunResult:
    rows, avg_wt, avg_tat, avg_rt = compute_metrics(processes)

    busy = sum(i.duration for i in intervals if isinstance(i, Execution))
    util = (busy / final_time * 100.0) if final_time else 0.0
    completed = sum(1 for p in processes if p.completion_time is not None)
    throughput = (completed / final_time) if final_time > 0 else 0.0

    return RunResult(
        algorithm=algorithm,
        intervals=list(intervals),
        final_time=final_time,
        statistic=statistic,
        rows=rows,
        avg_wt=avg_wt,
        avg_tat=avg_tat,
        avg_rt=avg_rt,
        cpu_util=util,
        throughput=throughput,
        event_log=list(event_log),
    )
