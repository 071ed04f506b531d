from typing import Tuple
import math

from npuzzle.domains.puzzlen import NPuzzle

State = Tuple[int, ...]

def euclidean(dom: NPuzzle, s: State) -> float:
    """Sum of straight-line distances to goal positions (blank ignored)."""
    N = dom.N
    dist = 0.0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, N)
        gr, gc = dom.goal_pos[tile]
        dist += math.hypot(r - gr, c - gc)
    return dist
