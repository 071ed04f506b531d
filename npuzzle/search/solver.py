from __future__ import annotations
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union

from npuzzle.domains.puzzlen import NPuzzle, Grid
from npuzzle.errors import UnknownAlgorithm
from npuzzle.heuristics.kinds import Heuristic, parse_heuristic, heuristic_fn
from npuzzle.search.a_star import a_star
from npuzzle.search.bfs import bfs
from npuzzle.search.dfs import dfs
from npuzzle.search.nodes import Solution

State = Tuple[int, ...]
Trace = Callable[[str, Dict[str, Any]], None]


class Algorithm(str, Enum):
    BFS = "bfs"
    DFS = "dfs"
    ASTAR = "astar"


def parse_algorithm(algo: Union[Algorithm, str]) -> Algorithm:
    if isinstance(algo, Algorithm):
        return algo
    try:
        return Algorithm(algo)
    except ValueError:
        raise UnknownAlgorithm(f"Unknown algorithm: {algo}") from None


_SEARCH = {
    Algorithm.BFS: bfs,
    Algorithm.DFS: dfs,
    Algorithm.ASTAR: a_star,
}


class PuzzleSolver:
    """Solver bound to one board size.

    ``trace``, if given, receives ``("heuristic", {...})`` for every
    estimate computed and ``("solved", {...})`` once a search finishes.
    Without it the solver prints nothing.

    Run ``is_solvable`` first: on an unsolvable board every algorithm
    walks the whole reachable half of the state space before giving up.
    """
    def __init__(self, n: int, trace: Optional[Trace] = None):
        self.puzzle = NPuzzle(n)
        self.trace = trace

    @property
    def size(self) -> int:
        return self.puzzle.N

    @property
    def goal(self) -> State:
        return self.puzzle.GOAL

    def is_solvable(self, state: Union[Grid, Sequence[int]]) -> bool:
        return self.puzzle.is_solvable(self.puzzle.coerce(state))

    def heuristic(self, kind: Union[Heuristic, str], state: Union[Grid, Sequence[int]]) -> float:
        return heuristic_fn(self.puzzle, kind)(self.puzzle.coerce(state))

    def _hfun(self, kind: Heuristic) -> Callable[[State], float]:
        f = heuristic_fn(self.puzzle, kind)
        if self.trace is None:
            return f
        trace = self.trace

        def traced(s: State) -> float:
            v = f(s)
            trace("heuristic", {"heuristic": kind.value, "value": v})
            return v
        return traced

    def solve(self, state: Union[Grid, Sequence[int]],
              algorithm: Union[Algorithm, str] = Algorithm.ASTAR,
              heuristic: Union[Heuristic, str] = Heuristic.MANHATTAN) -> Solution:
        algo = parse_algorithm(algorithm)
        kind = parse_heuristic(heuristic)
        start = self.puzzle.coerce(state)
        sol = _SEARCH[algo](self.puzzle, start, self._hfun(kind))
        sol.heuristic = kind.value
        if self.trace is not None:
            self.trace("solved", {
                "algorithm": algo.value, "heuristic": kind.value,
                "path_len": len(sol.path), "explored": sol.nodes_explored,
                "expanded": sol.nodes_expanded, "max_depth": sol.max_depth,
                "time_ms": sol.time_taken,
            })
        return sol
