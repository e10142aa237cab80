"""Text report written for each run."""

import io

import pytest

from schedcore import BannerReporter, Process, ProcessTable, Reporter, run_all_algorithms
from schedcore.events import Execution, Idle, RunFinished, RunStarted

from conftest import make_table


def _report(table, quantum=2):
    out = io.StringIO()
    reporter = BannerReporter(out)
    run_all_algorithms(table, quantum=quantum, listener=reporter.emit)
    return out.getvalue()


def test_report_sections_in_run_order():
    text = _report(make_table(("P1", 0, 5), ("P2", 1, 3)))
    modes = [ln for ln in text.splitlines() if ln.startswith(">> Scheduler Mode")]
    assert modes == [
        ">> Scheduler Mode : FCFS",
        ">> Scheduler Mode : SJF",
        ">> Scheduler Mode : Priority",
        ">> Scheduler Mode : Round Robin",
    ]
    assert text.count(">> Engine Status  : Completed") == 4


def test_interval_lines_and_statistics():
    text = _report(make_table(("P1", 2, 5), ("P2", 3, 3)))
    assert "0 → 2: Idle.\n" in text
    assert "2 → 7: P1 Running P1 job.\n" in text
    assert "   └─ Average Waiting Time : 2.00 time units\n" in text
    assert "   └─ Total Turnaround Time : 10 time units\n" in text


def test_duplicate_names_report_their_own_descriptions():
    table = ProcessTable([
        Process("P1", "first job", arrival_time=0, burst_time=2),
        Process("P1", "second job", arrival_time=1, burst_time=2),
    ])
    text = _report(table)
    assert "0 → 2: P1 Running first job.\n" in text
    assert "2 → 4: P1 Running second job.\n" in text
    assert "P1 Running second job.\n" in text.split(">> Scheduler Mode : Round Robin")[1]


def test_delay_does_not_change_output(monkeypatch):
    slept = []
    monkeypatch.setattr("schedcore.reporter.time.sleep", slept.append)

    table = make_table(("P1", 1, 2))
    fast = io.StringIO()
    slow = io.StringIO()
    run_all_algorithms(table, quantum=2, listener=BannerReporter(fast).emit)
    run_all_algorithms(table, quantum=2, listener=BannerReporter(slow, delay=0.5).emit)
    assert fast.getvalue() == slow.getvalue()
    # idle 1 unit + run 2 units, four times
    assert sum(slept) == pytest.approx(4 * (0.5 + 1.0))


def test_base_reporter_dispatch():
    seen = []

    class Spy(Reporter):
        def run_started(self, event):
            seen.append("start")

        def interval(self, event):
            seen.append(type(event).__name__)

        def run_finished(self, event):
            seen.append("finish")

    spy = Spy()
    for event in (RunStarted("FCFS"), Idle(0, 1), Execution("P1", 1, 2), RunFinished("FCFS", 0.0, 2)):
        spy.emit(event)
    assert seen == ["start", "Idle", "Execution", "finish"]
    with pytest.raises(TypeError):
        spy.emit("bogus")
