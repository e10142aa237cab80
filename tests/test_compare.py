"""Running all four algorithms back to back over one shared table."""

import pytest

from schedcore import (
    ConfigurationError,
    NonPreemptiveScheduler,
    RecordingReporter,
    RoundRobinScheduler,
    RunFinished,
    RunStarted,
    compare_all_algorithms,
    make_scheduler,
    run_algorithm_once,
    run_all_algorithms,
)

from conftest import make_table, spans


class TestMakeScheduler:
    def test_known_names(self) -> None:
        assert isinstance(make_scheduler("fcfs"), NonPreemptiveScheduler)
        assert make_scheduler("Priority").algorithm == "PRIORITY"
        rr = make_scheduler("RR", quantum=3)
        assert isinstance(rr, RoundRobinScheduler)
        assert rr.quantum == 3

    def test_unknown_name(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown algorithm"):
            make_scheduler("SRTF")


class TestRunAll:
    def test_runs_in_fixed_order_with_statistics(self, mixed_table) -> None:
        results = run_all_algorithms(mixed_table, quantum=2)
        assert [r.algorithm for r in results] == ["FCFS", "SJF", "PRIORITY", "RR"]
        assert [r.statistic for r in results] == [pytest.approx(1.6)] * 3 + [20]

    def test_each_run_starts_from_a_clean_table(self) -> None:
        table = make_table(("P1", 0, 4), ("P2", 1, 2))
        results = run_all_algorithms(table, quantum=2)
        fcfs, rr = results[0], results[3]
        assert spans(fcfs) == [("P1", 0, 4), ("P2", 4, 6)]
        assert spans(rr) == [("P1", 0, 2), ("P2", 2, 4), ("P1", 4, 6)]
        # the table is left holding the last run's state
        assert table[1].completion_time == 4

    def test_events_per_run(self) -> None:
        reporter = RecordingReporter()
        table = make_table(("P1", 0, 5), ("P2", 1, 3))
        run_all_algorithms(table, quantum=2, listener=reporter.emit)
        starts = [e.algorithm for e in reporter.events if isinstance(e, RunStarted)]
        finishes = [e for e in reporter.events if isinstance(e, RunFinished)]
        assert starts == ["FCFS", "SJF", "PRIORITY", "RR"]
        assert finishes[0].statistic == pytest.approx(2.0)
        assert finishes[-1].statistic == 8
        assert len(reporter.intervals("FCFS")) == 2

    def test_bad_quantum_fails_before_any_run(self) -> None:
        reporter = RecordingReporter()
        table = make_table(("P1", 0, 5))
        with pytest.raises(ConfigurationError):
            run_all_algorithms(table, quantum=0, listener=reporter.emit)
        assert reporter.events == []

    def test_run_once_resets_first(self) -> None:
        table = make_table(("P1", 0, 5), ("P2", 1, 3))
        run_algorithm_once(table, "SJF")
        again = run_algorithm_once(table, "SJF")
        assert spans(again) == [("P1", 0, 5), ("P2", 5, 8)]


def test_compare_all_leaves_input_untouched(mixed_table) -> None:
    rows = compare_all_algorithms(mixed_table, rr_quantum=2)
    assert [r["algorithm"] for r in rows] == ["FCFS", "SJF", "PRIORITY", "RR"]
    assert rows[3]["makespan"] == 20
    assert rows[0]["cpu_util"] == pytest.approx(80.0)
    assert all(p.state == "NEW" for p in mixed_table)
    assert len(rows[0]["_rows"]) == 5
