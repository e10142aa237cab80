import logging
from threading import Lock
from typing import Any, Dict, List, Optional

from schedcore import (
    ConfigurationError,
    ProcessTable,
    RunResult,
    build_processes,
    load_preset,
    make_scheduler,
    run_all_algorithms,
)
from schedcore.clock import Listener
from schedcore.config import ALGORITHMS, DEFAULT_QUANTUM, MAX_PROCESSES

from .serializers import serialize_result, serialize_state

logger = logging.getLogger(__name__)

_session_lock = Lock()

table: ProcessTable = ProcessTable()
results: List[RunResult] = []
settings: Dict[str, Any] = {
    "quantum": DEFAULT_QUANTUM,
    "max_processes": MAX_PROCESSES,
}
event_log: List[str] = []
EVENT_LOG_LIMIT = 200


def _safe_int(value: Any, default: int) -> int:
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return int(default)
        try:
            return int(text, 10)
        except ValueError:
            return int(default)
    try:
        return int(value)
    except (TypeError, ValueError):
        return int(default)


def _strict_int(value: Any, what: str) -> int:
    """Like `_safe_int` but refuses to guess: bools, fractions and junk are errors."""
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ConfigurationError(f"{what} must be a whole number (got {value!r}).")
    try:
        return int(value.strip(), 10) if isinstance(value, str) else int(value)
    except (TypeError, ValueError, OverflowError):
        raise ConfigurationError(f"{what} must be a whole number (got {value!r}).") from None


def parse_quantum(value: Any) -> int:
    quantum = _strict_int(value, "Time quantum")
    if quantum <= 0:
        raise ConfigurationError(f"Time quantum must be greater than 0 (got {value!r}).")
    return quantum


def _normalize_algo(algorithm: Any) -> str:
    algo = str(algorithm or "").strip().upper()
    if algo in {"ROUND_ROBIN", "ROUNDROBIN"}:
        algo = "RR"
    if algo not in ALGORITHMS:
        raise ConfigurationError(f"Unknown algorithm {algorithm!r}; expected one of {', '.join(ALGORITHMS)}")
    return algo


def _trim_event_log() -> None:
    global event_log
    if len(event_log) > EVENT_LOG_LIMIT:
        event_log = event_log[-EVENT_LOG_LIMIT:]


def _state() -> Dict[str, Any]:
    return serialize_state(settings, table, results, event_log)


def build_table(payload: Dict[str, Any]) -> ProcessTable:
    """Processes from `processes` (list of objects) or `preset` (id).

    An explicit `processes` list wins, even when empty. Without one the
    preset id defaults to 1; unknown ids are rejected.
    """
    max_processes = max(1, _safe_int(payload.get("max_processes", settings["max_processes"]), MAX_PROCESSES))
    if "processes" in payload:
        items = payload["processes"]
        if not isinstance(items, list):
            raise ConfigurationError("`processes` must be a list of process objects.")
        return build_processes(items, max_processes=max_processes)
    return load_preset(_strict_int(payload.get("preset", 1), "Preset id"))


def init_session(payload: Dict[str, Any]) -> Dict[str, Any]:
    global table, results, event_log

    data = payload or {}
    with _session_lock:
        quantum = parse_quantum(data["quantum"]) if "quantum" in data else settings["quantum"]
        new_table = build_table(data)

        settings["quantum"] = quantum
        if "max_processes" in data:
            settings["max_processes"] = max(1, _safe_int(data["max_processes"], MAX_PROCESSES))
        table = new_table
        results = []
        event_log = [f"Initialized processes={len(table)} quantum={settings['quantum']}"]
        logger.info("session initialized with %d processes", len(table))
        return _state()


def set_config(payload: Dict[str, Any]) -> Dict[str, Any]:
    data = payload or {}
    with _session_lock:
        if "quantum" in data:
            settings["quantum"] = parse_quantum(data["quantum"])
        if "max_processes" in data:
            settings["max_processes"] = max(1, _safe_int(data["max_processes"], MAX_PROCESSES))
        event_log.append(f"Config quantum={settings['quantum']} max_processes={settings['max_processes']}")
        _trim_event_log()
        return {"ok": True, "config": dict(settings)}


def get_settings() -> Dict[str, Any]:
    with _session_lock:
        return dict(settings)


def get_table() -> ProcessTable:
    with _session_lock:
        return table.clone()


def get_state() -> Dict[str, Any]:
    with _session_lock:
        return _state()


def run_session(algorithm: Any, listener: Optional[Listener] = None) -> Dict[str, Any]:
    """Run one algorithm on the session table and keep its result."""
    algo = _normalize_algo(algorithm)
    with _session_lock:
        sched = make_scheduler(algo, settings["quantum"])
        table.reset()
        result = sched.run(table, listener)
        results[:] = sorted(
            [r for r in results if r.algorithm != algo] + [result],
            key=lambda r: ALGORITHMS.index(r.algorithm),
        )
        event_log.append(f"Ran {algo} final_time={result.final_time} statistic={result.statistic}")
        event_log.extend(result.event_log)
        _trim_event_log()
        return serialize_result(result)


def run_all_session(listener: Optional[Listener] = None) -> List[Dict[str, Any]]:
    global results
    with _session_lock:
        results = run_all_algorithms(table, quantum=settings["quantum"], listener=listener)
        event_log.append(f"Ran all algorithms quantum={settings['quantum']}")
        _trim_event_log()
        return [serialize_result(r) for r in results]


def reset_session() -> Dict[str, Any]:
    global results, event_log
    with _session_lock:
        table.reset()
        results = []
        event_log = ["Reset"]
        return _state()
