from itertools import permutations

import pytest

from npuzzle.domains.puzzlen import NPuzzle


def _parity_by_swaps(s):
    """Permutation parity of the tiles (blank dropped) by selection sort."""
    arr = [x for x in s if x != 0]
    swaps = 0
    for i in range(len(arr)):
        j = arr.index(min(arr[i:]), i)
        if j != i:
            arr[i], arr[j] = arr[j], arr[i]
            swaps += 1
    return swaps % 2


def test_2x2_matches_reachability(distances_2x2):
    dom = NPuzzle(2)
    for p in permutations(range(4)):
        assert dom.is_solvable(p) == (p in distances_2x2), p


@pytest.mark.slow
def test_3x3_matches_reachability(distances_3x3):
    dom = NPuzzle(3)
    assert len(distances_3x3) == 181440
    for p in permutations(range(9)):
        assert dom.is_solvable(p) == (p in distances_3x3)


def test_scenario_parity():
    dom = NPuzzle(3)
    s = (1, 2, 3, 4, 0, 6, 7, 5, 8)
    assert dom.inversions(s) == 2
    assert _parity_by_swaps(s) == 0
    assert dom.is_solvable(s)


def test_inversions_skip_blank():
    dom = NPuzzle(3)
    assert dom.inversions((0, 1, 2, 3, 4, 5, 6, 7, 8)) == 0
    assert dom.inversions((8, 7, 6, 5, 4, 3, 2, 1, 0)) == 28


def test_4x4_goal_and_classic_swap():
    dom = NPuzzle(4)
    assert dom.is_solvable(dom.GOAL)
    # Loyd's 14-15 puzzle
    s = tuple(list(range(1, 14)) + [15, 14, 0])
    assert not dom.is_solvable(s)


def test_4x4_blank_row_parity():
    dom = NPuzzle(4)
    # blank one row up: 12 drops behind 13, 14, 15 and the row parity flips
    up = dom.apply_move(dom.GOAL, "Up")
    assert dom.inversions(up) == 3
    assert dom.is_solvable(up)
    for seed in range(20):
        assert dom.is_solvable(dom.scramble(25, seed))


@pytest.mark.parametrize("n", [3, 4, 5])
def test_swapping_two_tiles_flips_solvability(n):
    dom = NPuzzle(n)
    s = list(dom.scramble(30, n))
    i, j = [k for k, v in enumerate(s) if v != 0][:2]
    s[i], s[j] = s[j], s[i]
    assert not dom.is_solvable(tuple(s))


def test_solver_accepts_grid(solver3):
    assert solver3.is_solvable([[1, 2, 3], [4, 0, 6], [7, 5, 8]])
    assert not solver3.is_solvable([[2, 1, 3], [4, 5, 6], [7, 8, 0]])
