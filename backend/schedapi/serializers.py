from math import sqrt
from typing import Any, Dict, Iterable, List, Optional

from schedcore import Process, RunResult
from schedcore.events import Event, Execution, Idle, RunFinished, RunStarted


def _safe_float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return float(default)


def _maybe_int(value: Any) -> Optional[int]:
    if value in {"-", None}:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def serialize_process(p: Process) -> Dict[str, Any]:
    return {
        "pid": p.name,
        "description": p.description,
        "arrival_time": p.arrival_time,
        "burst_time": p.burst_time,
        "priority": p.priority,
        "order": p.original_order,
        "remaining_time": p.remaining_time,
        "state": p.state,
    }


def serialize_result(result: RunResult) -> Dict[str, Any]:
    per_process: List[Dict[str, Any]] = []
    for row in result.rows:
        per_process.append(
            {
                "pid": str(row.get("PID", "")),
                "order": int(row.get("ORDER", -1)),
                "at": int(row.get("AT", 0)),
                "bt": int(row.get("BT", 0)),
                "pr": int(row.get("PR", 0)),
                "st": _maybe_int(row.get("ST")),
                "ct": _maybe_int(row.get("CT")),
                "tat": _maybe_int(row.get("TAT")),
                "wt": _maybe_int(row.get("WT")),
                "rt": _maybe_int(row.get("RT")),
            }
        )

    out = result.summary()
    out["statistic"] = _safe_float(result.statistic)
    out["gantt"] = [serialize_event(i) for i in result.intervals]
    out["per_process"] = per_process
    out["event_log"] = list(result.event_log)
    return out


def serialize_event(event: Event) -> Dict[str, Any]:
    if isinstance(event, Execution):
        return {
            "type": "execution",
            "pid": event.process,
            "order": event.order,
            "start": event.start,
            "end": event.end,
        }
    if isinstance(event, Idle):
        return {"type": "idle", "pid": "IDLE", "start": event.start, "end": event.end}
    if isinstance(event, RunStarted):
        return {"type": "run_started", "algorithm": event.algorithm}
    if isinstance(event, RunFinished):
        return {
            "type": "run_finished",
            "algorithm": event.algorithm,
            "statistic": _safe_float(event.statistic),
            "final_time": int(event.final_time),
        }
    raise TypeError(f"cannot serialize {event!r}")


def compute_workload(processes: Iterable[Process]) -> Dict[str, float]:
    bursts: List[int] = []
    arrivals: List[int] = []
    for p in processes:
        bursts.append(int(p.burst_time))
        arrivals.append(int(p.arrival_time))

    n_procs = len(bursts)
    total_cpu = sum(bursts)
    avg_cpu = (total_cpu / n_procs) if n_procs else 0.0
    var_cpu = 0.0
    if n_procs > 0:
        var_cpu = sum((b - avg_cpu) ** 2 for b in bursts) / n_procs
    std_cpu = sqrt(var_cpu) if var_cpu > 0 else 0.0
    arrival_spread = (max(arrivals) - min(arrivals)) if arrivals else 0

    return {
        "total_cpu": float(total_cpu),
        "avg_cpu_burst": float(avg_cpu),
        "std_cpu_burst": float(std_cpu),
        "burst_variance": float(std_cpu / max(avg_cpu, 1.0)),
        "n_procs": float(n_procs),
        "arrival_spread": float(arrival_spread),
    }


def default_state(settings: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    cfg = settings or {}
    return {
        "quantum": int(cfg.get("quantum", 2)),
        "max_processes": int(cfg.get("max_processes", 1000)),
        "processes": [],
        "results": [],
        "event_log": [],
    }


def serialize_state(
    settings: Dict[str, Any],
    processes: Iterable[Process],
    results: Iterable[RunResult],
    event_log: Optional[List[str]] = None,
) -> Dict[str, Any]:
    state = default_state(settings)
    state["processes"] = [serialize_process(p) for p in processes]
    state["results"] = [serialize_result(r) for r in results]
    if event_log:
        state["event_log"] = [str(x) for x in event_log]
    return state
