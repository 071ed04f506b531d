from __future__ import annotations
from typing import Callable, List, Tuple, Set
from time import perf_counter

from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.errors import NoSolutionFound
from npuzzle.search.nodes import NodeArena, ROOT, Solution, make_solution

State = Tuple[int, ...]

def dfs(dom: NPuzzle, start: State, hfun: Callable[[State], float]) -> Solution:
    """
    Iterative graph DFS over a LIFO stack.
    Children are pushed Up, Down, Left, Right, so Right is popped first.
    Termination rests on the visited set; the path is not minimal.
    """
    t0 = perf_counter()
    arena = NodeArena()
    stack: List[int] = [arena.add(start, "", ROOT, hfun(start))]
    visited: Set[int] = set()
    explored = 0   # pops, duplicates included
    expanded = 0   # nodes whose children were generated
    max_depth = 0

    while stack:
        h = stack.pop()
        explored += 1
        s = arena.states[h]
        max_depth = max(max_depth, arena.depths[h])

        if dom.is_goal(s):
            return make_solution(arena, h, explored, expanded, max_depth,
                                 t0, perf_counter(), "dfs")

        key = dom.fingerprint(s)
        if key in visited:
            continue
        visited.add(key)
        expanded += 1

        for s2, label in dom.expand(s):
            if dom.fingerprint(s2) in visited:
                continue
            stack.append(arena.add(s2, label, h, hfun(s2)))

    raise NoSolutionFound(f"DFS exhausted the frontier after {explored} nodes")
