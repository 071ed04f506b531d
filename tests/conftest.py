"""Shared fixtures: solvers per board size and a reference distance table."""

from collections import deque

import pytest

from npuzzle.search.solver import PuzzleSolver


def ref_neighbors(s, n):
    """Plain blank swaps, independent of the package's move generator."""
    z = s.index(0)
    r, c = divmod(z, n)
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        rr, cc = r + dr, c + dc
        if 0 <= rr < n and 0 <= cc < n:
            lst = list(s)
            j = rr * n + cc
            lst[z], lst[j] = lst[j], lst[z]
            yield tuple(lst)


def ref_distances(n):
    """Exact move distance to the goal for every reachable state."""
    goal = tuple(list(range(1, n * n)) + [0])
    dist = {goal: 0}
    q = deque([goal])
    while q:
        s = q.popleft()
        for s2 in ref_neighbors(s, n):
            if s2 not in dist:
                dist[s2] = dist[s] + 1
                q.append(s2)
    return dist


@pytest.fixture
def solver2():
    return PuzzleSolver(2)


@pytest.fixture
def solver3():
    return PuzzleSolver(3)


@pytest.fixture
def solver4():
    return PuzzleSolver(4)


@pytest.fixture(scope="session")
def distances_2x2():
    return ref_distances(2)


@pytest.fixture(scope="session")
def distances_3x3():
    return ref_distances(3)
