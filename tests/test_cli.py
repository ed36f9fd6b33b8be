import csv

import pytest

from rivercross.cli import main, format_path, format_stats
from rivercross.planners import run_algorithm, run_all_algs
from rivercross.search import search_bfs
from rivercross.state import initial_state


def test_run_algorithm_stats():
    st = run_algorithm("bfs", initial_state())
    assert st.reached
    assert st.crossings == 11
    assert st.expansions > 0
    assert st.elapsed_sec >= 0
    assert "crossings= 11" in format_stats("bfs", st)


def test_run_algorithm_reports_exhaustion_without_raising():
    st = run_algorithm("greedy", initial_state(4, 4))
    assert not st.reached
    assert st.path is None
    assert "reached=False" in format_stats("greedy", st)


def test_run_algorithm_rejects_unknown_name():
    with pytest.raises(KeyError):
        run_algorithm("dijkstra", initial_state())


def test_run_all_algs_order():
    assert [name for name, _ in run_all_algs(initial_state())] == ["bfs", "dfs", "greedy", "astar"]


def test_format_path():
    lines = format_path(search_bfs(initial_state()))
    assert len(lines) == 12
    assert "(start)" in lines[0]
    assert lines[-1].endswith("to the right bank")


def test_solve_prints_path(capsys):
    main(["solve", "--alg", "bfs"])
    out = capsys.readouterr().out
    assert "crossings= 11" in out
    assert out.count("send ") == 11


def test_solve_unsolvable(capsys):
    main(["solve", "--alg", "astar", "--missionaries", "4", "--cannibals", "4"])
    assert "no solution was found!" in capsys.readouterr().out


def test_solve_from_explicit_start(capsys):
    main(["solve", "--alg", "dfs", "--start", "0 0 3 3 right"])
    out = capsys.readouterr().out
    assert "crossings=  0" in out
    assert "send " not in out


def test_solve_rejects_bad_start():
    with pytest.raises(SystemExit):
        main(["solve", "--start", "3 3 0 0 nowhere"])
    with pytest.raises(SystemExit):
        main(["solve", "--missionaries", "-1"])


def test_bench_writes_csv(tmp_path, capsys):
    out_csv = tmp_path / "bench" / "results.csv"
    main(["bench", "--max-size", "2", "--csv", str(out_csv)])
    assert "wrote CSV" in capsys.readouterr().out
    with open(out_csv, newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 8
    assert {r["alg"] for r in rows} == {"bfs", "dfs", "greedy", "astar"}
    assert all(r["reached"] == "True" for r in rows)
