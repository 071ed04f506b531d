from collections import deque
from time import perf_counter
from typing import Tuple, Callable, Set

from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.errors import NoSolutionFound
from npuzzle.search.nodes import NodeArena, ROOT, Solution, make_solution

State = Tuple[int, ...]

def bfs(dom: NPuzzle, start: State, hfun: Callable[[State], float]) -> Solution:
    """FIFO frontier; the first goal popped has the fewest moves."""
    t0 = perf_counter()
    arena = NodeArena()
    q = deque([arena.add(start, "", ROOT, hfun(start))])
    visited: Set[int] = set()
    explored = expanded = max_depth = 0
    while q:
        h = q.popleft()
        explored += 1
        s = arena.states[h]
        max_depth = max(max_depth, arena.depths[h])
        if dom.is_goal(s):
            return make_solution(arena, h, explored, expanded, max_depth,
                                 t0, perf_counter(), "bfs")
        key = dom.fingerprint(s)
        if key in visited:
            continue
        visited.add(key)
        expanded += 1
        for s2, label in dom.expand(s):
            if dom.fingerprint(s2) in visited:
                continue
            q.append(arena.add(s2, label, h, hfun(s2)))
    raise NoSolutionFound(f"BFS exhausted the frontier after {explored} nodes")
