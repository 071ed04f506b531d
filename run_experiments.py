#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("A* all heuristics", "python -m npuzzle.experiments.runner --depths 6 10 14 18 --per_depth 10 --algo astar --heuristic all --out results/astar.csv")
    run("BFS vs DFS", "python -m npuzzle.experiments.runner --depths 6 10 14 --per_depth 10 --algo all --heuristic manhattan --out results/uninformed.csv")
    run("Summary", "python -m npuzzle.experiments.summarize results/astar.csv results/uninformed.csv")
    run("Plots", "python -m npuzzle.experiments.plot results/astar.csv results/uninformed.csv --save results/plots")

if __name__ == "__main__":
    main()
