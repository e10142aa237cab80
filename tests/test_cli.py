"""Command-line entry point: exit codes and output modes."""

import json

import pytest

from schedcore.cli import main


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "procs.csv"
    path.write_text("P1,Editor,0,4,2\nP2,Shell,1,2,1\n", encoding="utf-8")
    return str(path)


def test_runs_all_four_algorithms(csv_path, capsys):
    assert main([csv_path, "2"]) == 0
    out = capsys.readouterr().out
    assert out.count(">> Scheduler Mode") == 4
    assert "0 → 4: P1 Running Editor.\n" in out
    assert "Total Turnaround Time : 6 time units" in out


def test_json_output(csv_path, capsys):
    assert main([csv_path, "2", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [r["algorithm"] for r in data] == ["FCFS", "SJF", "PRIORITY", "RR"]
    assert data[3]["statistic"] == 6
    assert data[3]["intervals"][0] == {"pid": "P1", "order": 0, "start": 0, "end": 2}


def test_non_utf8_input_still_runs(tmp_path, capsys):
    path = tmp_path / "latin1.csv"
    path.write_bytes(b"P1,ok,0,2,0\nP2,caf\xe9,1,2,0\nP3,ok,2,1,0\n")
    assert main([str(path), "2"]) == 0
    out = capsys.readouterr().out
    assert out.count(">> Engine Status  : Completed") == 4
    assert "P3 Running ok." in out


def test_duplicate_names_keep_their_descriptions(tmp_path, capsys):
    path = tmp_path / "dupes.csv"
    path.write_text("P1,first job,0,2,0\nP1,second job,1,2,0\n", encoding="utf-8")
    assert main([str(path), "2"]) == 0
    out = capsys.readouterr().out
    assert "0 → 2: P1 Running first job.\n" in out
    assert "2 → 4: P1 Running second job.\n" in out


@pytest.mark.parametrize("quantum", ["0", "-2"])
def test_non_positive_quantum(csv_path, capsys, quantum):
    assert main([csv_path, quantum]) == 1
    assert "Time quantum must be greater than 0." in capsys.readouterr().err


def test_missing_input_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.csv"), "2"]) == 1
    assert "Error opening CSV file" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [[], ["only.csv"], ["procs.csv", "two"]])
def test_usage_errors_exit_with_one(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 1
