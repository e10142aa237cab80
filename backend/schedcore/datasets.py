import csv
import json
import logging
import os
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .config import MAX_PROCESSES
from .errors import ConfigurationError
from .models import Process, ProcessTable

logger = logging.getLogger(__name__)

MAX_NAME_LEN = 50
MAX_DESCRIPTION_LEN = 255

FIELDS = ("name", "description", "arrival_time", "burst_time", "priority")


def _build_process(item: Dict[str, Any]) -> Process:
    """Build one record; raises ValueError/KeyError/TypeError on bad input."""
    name = str(item["name"]).strip()[:MAX_NAME_LEN]
    if not name:
        raise ValueError("empty process name")
    return Process(
        name=name,
        description=str(item.get("description", "")).strip()[:MAX_DESCRIPTION_LEN],
        arrival_time=int(str(item["arrival_time"]).strip()),
        burst_time=int(str(item["burst_time"]).strip()),
        priority=int(str(item.get("priority", 0)).strip()),
    )


def build_processes(items: Iterable[Any], max_processes: int = MAX_PROCESSES) -> ProcessTable:
    """Build a table from dict records, skipping malformed ones.

    Records past `max_processes` are dropped.
    """
    table = ProcessTable()
    for idx, item in enumerate(items):
        if len(table) >= max_processes:
            logger.info("capacity of %d processes reached; dropping remaining records", max_processes)
            break
        if not isinstance(item, dict):
            logger.warning("record %d: expected an object, skipping", idx)
            continue
        try:
            table.append(_build_process(item))
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("record %d: skipping malformed process (%s)", idx, exc)
    return table


def _row_to_item(row: Sequence[str]) -> Optional[Dict[str, str]]:
    if len(row) < len(FIELDS):
        return None
    return dict(zip(FIELDS, row))


def load_processes_csv(path: str, max_processes: int = MAX_PROCESSES) -> ProcessTable:
    """Read `name,description,arrival_time,burst_time,priority` rows.

    Blank lines and lines starting with '#' are ignored. Rows that are short
    or have non-integer fields (including a header row) are skipped. Bytes
    that are not UTF-8 are replaced with U+FFFD rather than rejecting the file.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
            lines = [ln for ln in f if ln.strip() and not ln.lstrip().startswith("#")]
    except OSError as exc:
        raise ConfigurationError(f"Error opening CSV file {path!r}: {exc.strerror or exc}") from exc

    items: List[Dict[str, str]] = []
    for lineno, row in enumerate(csv.reader(lines), start=1):
        item = _row_to_item(row)
        if item is None:
            logger.warning("%s: row %d has %d fields, expected %d; skipping",
                           path, lineno, len(row), len(FIELDS))
            continue
        if any("\ufffd" in field for field in row):
            logger.warning("%s: row %d is not valid UTF-8; undecodable bytes replaced", path, lineno)
        items.append(item)

    table = build_processes(items, max_processes=max_processes)
    logger.info("loaded %d processes from %s", len(table), path)
    return table


def load_processes_json(path: str, max_processes: int = MAX_PROCESSES) -> ProcessTable:
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            data = json.load(f)
    except OSError as exc:
        raise ConfigurationError(f"Error opening JSON file {path!r}: {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{path}: invalid JSON ({exc})") from exc

    if not isinstance(data, list):
        raise ConfigurationError(f"{path}: expected a list of process objects")
    return build_processes(data, max_processes=max_processes)


def load_processes(path: str, max_processes: int = MAX_PROCESSES) -> ProcessTable:
    """Pick the loader from the file extension (.json, anything else is CSV)."""
    if os.path.splitext(path)[1].lower() == ".json":
        return load_processes_json(path, max_processes=max_processes)
    return load_processes_csv(path, max_processes=max_processes)


# ------------------------------
# Built-in workloads
# ------------------------------
PRESET_IDS = frozenset(range(1, 6))


def _preset(*specs) -> ProcessTable:
    return ProcessTable(
        [
            Process(name, desc, arrival_time=at, burst_time=bt, priority=pr)
            for name, desc, at, bt, pr in specs
        ]
    )


def load_preset(preset_id: int) -> ProcessTable:
    if preset_id == 1:
        # FCFS walk-through
        return _preset(
            ("P1", "Compile kernel", 0, 5, 0),
            ("P2", "Index mailbox", 1, 3, 0),
        )

    if preset_id == 2:
        # SJF without preemption: the long job already holds the CPU
        return _preset(
            ("P1", "Render video", 0, 8, 0),
            ("P2", "Resize image", 1, 4, 0),
        )

    if preset_id == 3:
        return _preset(
            ("P1", "Backup", 0, 5, 2),
            ("P2", "Interrupt handler", 0, 3, 1),
        )

    if preset_id == 4:
        # Round Robin, quantum 2
        return _preset(
            ("P1", "Web server", 0, 4, 0),
            ("P2", "Shell", 1, 2, 0),
        )

    if preset_id == 5:
        # Mixed workload with an idle gap and simultaneous arrivals
        return _preset(
            ("P1", "Editor", 0, 3, 2),
            ("P2", "Compiler", 2, 6, 1),
            ("P3", "Logger", 4, 1, 3),
            ("P4", "Cron job", 14, 2, 0),
            ("P5", "Updater", 14, 4, 1),
        )

    raise ConfigurationError(f"unknown preset {preset_id!r}; choose one of {sorted(PRESET_IDS)}")
