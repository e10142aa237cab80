"""Ready-set selection and next-arrival lookup."""

import pytest

from schedcore import SchedulingInvariantError
from schedcore.ready import next_arrival, ready_set

from conftest import make_table


def test_ready_set_includes_arrived_unfinished_processes():
    table = make_table(("P1", 0, 2), ("P2", 3, 2), ("P3", 3, 1), ("P4", 7, 1))
    table[0].finish(2)
    assert [p.name for p in ready_set(table, 3)] == ["P2", "P3"]


def test_partially_run_process_stays_ready():
    table = make_table(("P1", 0, 4), ("P2", 0, 2))
    table[0].remaining_time = 1
    table[1].finish(2)
    assert [p.name for p in ready_set(table, 2)] == ["P1"]
    assert next_arrival(table[1:], 2) is None


def test_next_arrival_is_earliest_future_arrival():
    table = make_table(("P1", 9, 1), ("P2", 4, 1), ("P3", 6, 1))
    assert next_arrival(table, 0) == 4
    assert next_arrival(table, 4) == 6


def test_next_arrival_none_when_everything_finished():
    table = make_table(("P1", 0, 1))
    table[0].finish(1)
    assert next_arrival(table, 1) is None


def test_lost_ready_process_is_reported():
    table = make_table(("P1", 0, 3), ("P2", 2, 1))
    with pytest.raises(SchedulingInvariantError, match="P1, P2"):
        next_arrival(table, 5)
