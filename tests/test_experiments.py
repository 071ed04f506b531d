"""Command line tooling: runner CSV, pandas summary, plots and path frames."""

import pandas as pd

from npuzzle.experiments import plot, runner, summarize, visualize_path


def _run(tmp_path, *extra):
    out = tmp_path / "run.csv"
    rc = runner.main(["--n", "3", "--out", str(out), *extra])
    return rc, out


def test_runner_writes_csv(tmp_path, capsys):
    rc, out = _run(tmp_path, "--depths", "4", "8", "--per_depth", "2", "--algo", "all")
    assert rc == 0
    df = pd.read_csv(out)
    assert list(df.columns) == runner.HEADER
    assert len(df) == 2 * 2 * 3
    assert set(df["algorithm"]) == {"bfs", "dfs", "astar"}
    assert (df["termination"] == "ok").all()
    assert "Wrote" in capsys.readouterr().out


def test_runner_bfs_path_lengths_are_bounded_by_depth(tmp_path):
    rc, out = _run(tmp_path, "--depths", "6", "--per_depth", "3", "--algo", "bfs")
    df = pd.read_csv(out)
    assert (df["path_len"] <= df["depth"]).all()


def test_runner_custom_tiles(tmp_path):
    rc, out = _run(tmp_path, "--tiles", "1,2,3,4,0,6,7,5,8", "--heuristic", "all")
    assert rc == 0
    df = pd.read_csv(out)
    assert len(df) == 4
    assert (df["path_len"] == 2).all()


def test_runner_rejects_unsolvable_tiles(tmp_path, capsys):
    rc, out = _run(tmp_path, "--tiles", "2,1,3,4,5,6,7,8,0")
    assert rc == 1
    assert not out.exists()
    assert "not solvable" in capsys.readouterr().out


def test_runner_shuffle(tmp_path):
    rc, out = _run(tmp_path, "--shuffle", "2", "--seed", "5")
    assert rc == 0
    df = pd.read_csv(out)
    assert len(df) == 2
    assert (df["depth"] == -1).all()


def test_summarize_groups_runs(tmp_path, capsys):
    _, out = _run(tmp_path, "--depths", "4", "--per_depth", "3", "--heuristic", "all")
    table = summarize.summarize(summarize.load_many([str(out)]))
    assert set(table["heuristic"]) == {"hamming", "manhattan", "euclidean", "linearConflicts"}
    assert (table["runs"] == 3).all()
    assert summarize.main([str(out)]) == 0
    assert "astar" in capsys.readouterr().out


def test_plot_saves_png(tmp_path):
    _, out = _run(tmp_path, "--depths", "4", "6", "--per_depth", "2")
    save = tmp_path / "plots"
    assert plot.main([str(out), "--save", str(save)]) == 0
    assert (save / "run_combined.png").exists()


def test_visualize_path_frames(tmp_path):
    outdir = tmp_path / "frames"
    rc = visualize_path.main(["--tiles", "1,2,3,4,0,6,7,5,8", "--outdir", str(outdir)])
    assert rc == 0
    assert sorted(p.name for p in outdir.iterdir()) == ["step_000.png", "step_001.png", "step_002.png"]
