from typing import Tuple

from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.heuristics.manhattan import manhattan

State = Tuple[int, ...]

def linear_conflict(dom: NPuzzle, s: State) -> int:
    """Manhattan + 2 per pair of linearly-conflicting tiles (rows & cols).

    Row and column conflicts are counted independently, so one tile can
    take part in both.
    """
    m = manhattan(dom, s)
    N = dom.N
    goal_pos = dom.goal_pos
    # Row conflicts
    for r in range(N):
        row = s[r * N:(r + 1) * N]
        tiles = [t for t in row if t != 0 and goal_pos[t][0] == r]
        for i in range(len(tiles)):
            gi = goal_pos[tiles[i]][1]
            for j in range(i + 1, len(tiles)):
                if gi > goal_pos[tiles[j]][1]:
                    m += 2
    # Column conflicts
    for c in range(N):
        col = [s[c + r * N] for r in range(N)]
        tiles = [t for t in col if t != 0 and goal_pos[t][1] == c]
        for i in range(len(tiles)):
            gi = goal_pos[tiles[i]][0]
            for j in range(i + 1, len(tiles)):
                if gi > goal_pos[tiles[j]][0]:
                    m += 2
    return m
