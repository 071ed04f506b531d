from typing import Tuple

from npuzzle.domains.puzzlen import NPuzzle

State = Tuple[int, ...]

def manhattan(dom: NPuzzle, s: State) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    N = dom.N
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, N)
        gr, gc = dom.goal_pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist
