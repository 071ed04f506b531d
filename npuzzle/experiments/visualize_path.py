#!/usr/bin/env python3
import argparse, os
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from typing import Tuple, List

from npuzzle.domains.puzzlen import parse_tiles
from npuzzle.heuristics.kinds import Heuristic
from npuzzle.search.solver import Algorithm, PuzzleSolver

State = Tuple[int, ...]

def draw_board(state: State, n: int, out_path: Path, title: str = ""):
    plt.figure(figsize=(3, 3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n + 1):
        ax.plot([0, n], [i, i], linewidth=1)
        ax.plot([i, i], [0, n], linewidth=1)
    # tiles
    for idx, t in enumerate(state):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c + 0.5, r + 0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title, fontsize=10)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def save_frames(frames: List[State], labels: List[str], n: int, outdir: Path) -> int:
    for i, s in enumerate(frames):
        title = "start" if i == 0 else f"{i}: {labels[i - 1]}"
        draw_board(s, n, outdir / f"step_{i:03d}.png", title)
    return len(frames)

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--algo", choices=[a.value for a in Algorithm], default="astar")
    p.add_argument("--heuristic", choices=[h.value for h in Heuristic], default="manhattan")
    p.add_argument("--n", type=int, default=3)
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--tiles", default=None, help="Custom board instead of a scramble")
    p.add_argument("--outdir", default="results/figs/example_path")
    args = p.parse_args(argv)

    solver = PuzzleSolver(args.n)
    dom = solver.puzzle
    start = parse_tiles(args.tiles, args.n) if args.tiles else dom.scramble(args.depth, args.seed)
    if not solver.is_solvable(start):
        print("This configuration is not solvable.")
        return 1

    sol = solver.solve(start, args.algo, args.heuristic)
    frames = dom.replay(start, sol.path)
    count = save_frames(frames, sol.path, dom.N, Path(args.outdir))
    print(f"{len(sol.path)} moves, {sol.nodes_explored} nodes explored, {sol.time_taken:.1f} ms")
    print(f"Saved {count} frames to {args.outdir}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
