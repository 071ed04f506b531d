from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, NamedTuple, Tuple

State = Tuple[int, ...]

ROOT = -1  # parent handle of the root node


class SearchNode(NamedTuple):
    state: State
    action: str
    parent: int
    depth: int
    cost: float


@dataclass
class Solution:
    path: List[str]
    nodes_explored: int
    nodes_expanded: int
    time_taken: float          # milliseconds
    max_depth: int
    algorithm: str = ""
    heuristic: str = ""


@dataclass
class NodeArena:
    """Search tree stored column-wise; nodes are addressed by integer handle.

    Every node keeps its parent's handle (``ROOT`` for the root), so the tree
    only points backwards and is dropped with the arena after a solve.
    """
    states: List[State] = field(default_factory=list)
    actions: List[str] = field(default_factory=list)
    parents: List[int] = field(default_factory=list)
    depths: List[int] = field(default_factory=list)
    costs: List[float] = field(default_factory=list)

    def add(self, state: State, action: str, parent: int, cost: float) -> int:
        self.states.append(state)
        self.actions.append(action)
        self.parents.append(parent)
        self.depths.append(0 if parent == ROOT else self.depths[parent] + 1)
        self.costs.append(cost)
        return len(self.states) - 1

    def node(self, h: int) -> SearchNode:
        return SearchNode(self.states[h], self.actions[h], self.parents[h],
                          self.depths[h], self.costs[h])

    def __len__(self) -> int:
        return len(self.states)

    def reconstruct(self, h: int) -> List[str]:
        """Move labels from the root to node ``h`` (root's empty action dropped)."""
        path: List[str] = []
        while self.parents[h] != ROOT:
            path.append(self.actions[h])
            h = self.parents[h]
        path.reverse()
        return path


def make_solution(arena: NodeArena, h: int, explored: int, expanded: int,
                  max_depth: int, t0: float, t1: float, algorithm: str) -> Solution:
    return Solution(
        path=arena.reconstruct(h),
        nodes_explored=explored,
        nodes_expanded=expanded,
        time_taken=(t1 - t0) * 1000.0,
        max_depth=max_depth,
        algorithm=algorithm,
    )
