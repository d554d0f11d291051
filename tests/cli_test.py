import pytest

from chainlist import cli
from chainlist.datastructures import LinkedList


def test_parse_operation():
    assert cli.parse_operation("pop_back") == ("pop_back", [])
    assert cli.parse_operation("push_front=3") == ("push_front", [3])
    assert cli.parse_operation("insert=1,-2") == ("insert", [1, -2])


@pytest.mark.parametrize("text", ["bogus", "insert=1", "remove=x", "pop_front=1"])
def test_parse_operation_rejects_malformed(text):
    with pytest.raises(ValueError):
        cli.parse_operation(text)


def test_parse_values():
    assert cli.parse_values("0,1,2") == [0, 1, 2]
    assert cli.parse_values("") == []


def test_apply_operation_returns_results():
    lst = LinkedList([1, 2, 3])
    assert cli.apply_operation(lst, "pop_front", []) == 1
    assert cli.apply_operation(lst, "get", [1]) == 3
    assert cli.apply_operation(lst, "set", [0, 20]) is None
    assert lst.to_py() == [20, 3]


def test_run_scenario(capsys):
    cli.main(["run", "push_front=1", "push_back=3", "insert=1,2", "remove=0"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["remove=0: 1", "[2, 3]"]


def test_run_with_initial_values(capsys):
    cli.main(["run", "--values", "0,1,2,3,4,5", "remove=3", "remove=3", "remove=3"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["remove=3: 3", "remove=3: 4", "remove=3: 5", "[0, 1, 2]"]


def test_run_out_of_range_get_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["run", "--values", "1", "get=4"])
    assert exc.value.code == 2
    assert "out of range" in capsys.readouterr().err


def test_run_unknown_operation_exits():
    with pytest.raises(SystemExit) as exc:
        cli.main(["run", "explode"])
    assert exc.value.code == 2


def test_bench_writes_report(tmp_path, capsys):
    out = tmp_path / "report.csv"
    cli.main(["bench", "--path", str(out), "--base-input", "2", "--rounds", "2",
              "--iterations", "2", "--seed", "3"])
    assert out.exists()
    rows = len(cli.benchmark.OPERATIONS) * 2
    assert f"Wrote {rows} rows to {out}" in capsys.readouterr().out


def test_bench_rejects_bad_rounds(tmp_path):
    with pytest.raises(SystemExit):
        cli.main(["bench", "--path", str(tmp_path / "r.csv"), "--rounds", "0"])
