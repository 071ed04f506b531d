from __future__ import annotations
from typing import Callable, Dict, Tuple, List, Set
import heapq
from time import perf_counter
import itertools

from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.errors import NoSolutionFound
from npuzzle.search.nodes import NodeArena, ROOT, Solution, make_solution

State = Tuple[int, ...]
Priority = Tuple[float, int, int]

def priority_tuple(f: float, g: int, ctr: int) -> Priority:
    # lowest f first; on equal f prefer the deeper node, then insertion order
    return (f, -g, ctr)

def a_star(dom: NPuzzle, start: State, hfun: Callable[[State], float]) -> Solution:
    """
    Non-reopening A*: a closed state is never expanded again, even if a
    cheaper path to it shows up later. Optimal when ``hfun`` is consistent
    (Manhattan); other heuristics are used as they are.

    An open state has at most one live heap entry. A strictly better f
    supersedes it (the old handle goes to ``stale`` and is skipped when
    popped, without counting as explored).
    """
    t0 = perf_counter()
    arena = NodeArena()
    counter = itertools.count()

    h0 = hfun(start)
    root = arena.add(start, "", ROOT, h0)
    open_heap: List[Tuple[Priority, int]] = [(priority_tuple(h0, 0, next(counter)), root)]
    open_best: Dict[int, Tuple[float, int]] = {dom.fingerprint(start): (h0, root)}
    stale: Set[int] = set()
    closed: Set[int] = set()

    explored = expanded = max_depth = 0

    while open_heap:
        _, h = heapq.heappop(open_heap)
        if h in stale:
            stale.discard(h)
            continue
        s = arena.states[h]
        key = dom.fingerprint(s)
        open_best.pop(key, None)

        explored += 1
        g = arena.depths[h]
        max_depth = max(max_depth, g)

        if dom.is_goal(s):
            return make_solution(arena, h, explored, expanded, max_depth,
                                 t0, perf_counter(), "astar")

        if key in closed:
            continue
        closed.add(key)
        expanded += 1

        for s2, label in dom.expand(s):
            key2 = dom.fingerprint(s2)
            if key2 in closed:
                continue
            g2 = g + 1
            h2 = hfun(s2)
            f2 = g2 + h2
            existing = open_best.get(key2)
            if existing is not None:
                if f2 >= existing[0]:
                    continue
                stale.add(existing[1])
            child = arena.add(s2, label, h, h2)
            open_best[key2] = (f2, child)
            heapq.heappush(open_heap, (priority_tuple(f2, g2, next(counter)), child))

    # Open exhausted without finding goal
    raise NoSolutionFound(f"A* exhausted the frontier after {explored} nodes")
