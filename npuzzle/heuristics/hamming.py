from typing import Tuple

from npuzzle.domains.puzzlen import NPuzzle

State = Tuple[int, ...]

def hamming(dom: NPuzzle, s: State) -> int:
    """Number of non-blank tiles off their goal cell."""
    return sum(1 for t, g in zip(s, dom.GOAL) if t != 0 and t != g)
