"""Tests for the process record and the process table."""

import pytest

from schedcore import Process, ProcessTable

from conftest import make_table


def _runtime(table):
    return [
        (p.remaining_time, p.start_time, p.completion_time, p.waiting_time, p.turnaround_time, p.state)
        for p in table
    ]


class TestProcess:
    def test_new_process_starts_reset(self) -> None:
        p = Process("P1", "job", arrival_time=2, burst_time=5, priority=3)
        assert p.remaining_time == 5
        assert p.start_time is None
        assert p.completion_time is None
        assert p.waiting_time is None
        assert p.turnaround_time is None
        assert p.state == "NEW"
        assert not p.done

    def test_rejects_negative_arrival(self) -> None:
        with pytest.raises(ValueError, match="arrival_time"):
            Process("P1", "job", arrival_time=-1, burst_time=5)

    def test_rejects_non_positive_burst(self) -> None:
        with pytest.raises(ValueError, match="burst_time"):
            Process("P1", "job", arrival_time=0, burst_time=0)

    def test_finish_derives_turnaround_and_waiting(self) -> None:
        p = Process("P1", "job", arrival_time=2, burst_time=3)
        p.finish(9)
        assert p.done
        assert p.completion_time == 9
        assert p.turnaround_time == 7
        assert p.waiting_time == 4


class TestProcessTable:
    def test_original_order_follows_input_position(self) -> None:
        table = make_table(("B", 0, 1), ("A", 0, 1), ("C", 0, 1))
        assert [(p.name, p.original_order) for p in table] == [("B", 0), ("A", 1), ("C", 2)]

    def test_reset_restores_runtime_fields_only(self) -> None:
        table = make_table(("P1", 1, 4, 2))
        p = table[0]
        p.remaining_time = 0
        p.finish(10)
        p.state = "DONE"
        table.reset()
        assert (p.arrival_time, p.burst_time, p.priority, p.original_order) == (1, 4, 2, 0)
        assert p.remaining_time == 4
        assert p.completion_time is None
        assert p.state == "NEW"

    def test_reset_is_idempotent(self) -> None:
        table = make_table(("P1", 0, 4), ("P2", 3, 2))
        table[0].finish(4)
        table.reset()
        once = _runtime(table)
        table.reset()
        assert _runtime(table) == once

    def test_clone_is_independent(self) -> None:
        table = make_table(("P1", 0, 4), ("P2", 3, 2))
        copy = table.clone()
        copy[0].finish(4)
        assert table[0].completion_time is None
        assert [p.name for p in copy] == ["P1", "P2"]
        assert [p.original_order for p in copy] == [0, 1]

    def test_all_done(self) -> None:
        table = make_table(("P1", 0, 1), ("P2", 0, 1))
        assert not table.all_done()
        for p in table:
            p.finish(1)
        assert table.all_done()
        assert ProcessTable().all_done()
