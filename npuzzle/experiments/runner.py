from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from npuzzle.domains.puzzlen import NPuzzle, parse_tiles
from npuzzle.errors import NoSolutionFound
from npuzzle.heuristics.kinds import Heuristic
from npuzzle.search.solver import Algorithm, PuzzleSolver

State = Tuple[int, ...]

HEADER = [
    "algorithm", "heuristic", "n", "depth", "seed",
    "path_len", "explored", "expanded", "max_depth", "time_sec",
    "termination",
]

@dataclass
class Instance:
    seed: int
    depth: int          # scramble depth; -1 for shuffled or custom boards
    state: State

def scrambled(dom: NPuzzle, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        for _ in range(per_depth):
            out.append(Instance(seed=seed, depth=d, state=dom.scramble(d, seed)))
            seed += 1
    return out

def shuffled(dom: NPuzzle, count: int, start_seed: int = 0) -> List[Instance]:
    """Uniformly random boards; unsolvable draws are reported and skipped."""
    out: List[Instance] = []
    seed = start_seed
    attempts = 0
    while len(out) < count:
        s = dom.shuffle(seed)
        if dom.is_solvable(s):
            out.append(Instance(seed=seed, depth=-1, state=s))
        else:
            print(f"seed {seed}: not solvable, skipped")
        seed += 1
        attempts += 1
        if attempts > count * 100:
            raise RuntimeError("Instance generation took too long. Check solvability logic.")
    return out

def run_one(solver: PuzzleSolver, inst: Instance, algo: Algorithm, heur: Heuristic) -> List:
    try:
        sol = solver.solve(inst.state, algo, heur)
    except NoSolutionFound:
        return [algo.value, heur.value, solver.size, inst.depth, inst.seed,
                "", "", "", "", "", "exhausted"]
    return [algo.value, heur.value, solver.size, inst.depth, inst.seed,
            len(sol.path), sol.nodes_explored, sol.nodes_expanded, sol.max_depth,
            f"{sol.time_taken / 1000.0:.6f}", "ok"]

def main(argv=None):
    ap = argparse.ArgumentParser(description="BFS/DFS/A* N-puzzle experiment runner")
    ap.add_argument("--n", type=int, default=3, help="Square board size (N×N)")
    ap.add_argument("--algo", choices=[a.value for a in Algorithm] + ["all"], default="astar")
    ap.add_argument("--heuristic", choices=[h.value for h in Heuristic] + ["all"], default="manhattan")
    ap.add_argument("--depths", type=int, nargs="+", default=[6, 10, 14, 18])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--shuffle", type=int, default=None, metavar="COUNT",
                    help="Use COUNT uniformly random solvable boards instead of scrambles")
    ap.add_argument("--tiles", default=None, help="Single custom board, e.g. 1,2,3,4,0,6,7,5,8")
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    args = ap.parse_args(argv)

    solver = PuzzleSolver(args.n)
    dom = solver.puzzle

    if args.tiles is not None:
        s = parse_tiles(args.tiles, args.n)
        if not dom.is_solvable(s):
            print("This configuration is not solvable.")
            return 1
        insts = [Instance(seed=args.seed, depth=-1, state=s)]
    elif args.shuffle is not None:
        insts = shuffled(dom, args.shuffle, args.seed)
    else:
        insts = scrambled(dom, args.depths, args.per_depth, args.seed)

    algos = list(Algorithm) if args.algo == "all" else [Algorithm(args.algo)]
    heurs = list(Heuristic) if args.heuristic == "all" else [Heuristic(args.heuristic)]

    args.out.parent.mkdir(parents=True, exist_ok=True)
    rows = 0
    with args.out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            for algo in algos:
                for heur in heurs:
                    w.writerow(run_one(solver, inst, algo, heur))
                    rows += 1

    print(f"Wrote {args.out} ({len(insts)} instances, {rows} rows)")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
