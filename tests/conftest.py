import pytest

from schedcore import Process, ProcessTable


def make_table(*entries):
    """entries: (name, arrival, burst) or (name, arrival, burst, priority)."""
    procs = []
    for entry in entries:
        name, at, bt = entry[:3]
        pr = entry[3] if len(entry) > 3 else 0
        procs.append(Process(name, f"{name} job", arrival_time=at, burst_time=bt, priority=pr))
    return ProcessTable(procs)


def spans(result):
    """Intervals as (label, start, end) tuples; idle is labelled IDLE."""
    return [(getattr(i, "process", "IDLE"), i.start, i.end) for i in result.intervals]


@pytest.fixture
def mixed_table():
    return make_table(
        ("P1", 0, 3, 2),
        ("P2", 2, 6, 1),
        ("P3", 4, 1, 3),
        ("P4", 14, 2, 0),
        ("P5", 14, 4, 1),
    )
