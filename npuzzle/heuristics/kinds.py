from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Tuple, Union

from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.errors import UnknownHeuristic
from npuzzle.heuristics.euclidean import euclidean
from npuzzle.heuristics.hamming import hamming
from npuzzle.heuristics.linear_conflict import linear_conflict
from npuzzle.heuristics.manhattan import manhattan

State = Tuple[int, ...]
HFun = Callable[[NPuzzle, State], float]


class Heuristic(str, Enum):
    HAMMING = "hamming"
    MANHATTAN = "manhattan"
    EUCLIDEAN = "euclidean"
    LINEAR_CONFLICTS = "linearConflicts"


_ALIASES: Dict[str, Heuristic] = {
    "linear_conflict": Heuristic.LINEAR_CONFLICTS,
    "linear_conflicts": Heuristic.LINEAR_CONFLICTS,
}

_FUNCS: Dict[Heuristic, HFun] = {
    Heuristic.HAMMING: hamming,
    Heuristic.MANHATTAN: manhattan,
    Heuristic.EUCLIDEAN: euclidean,
    Heuristic.LINEAR_CONFLICTS: linear_conflict,
}


def parse_heuristic(kind: Union[Heuristic, str]) -> Heuristic:
    if isinstance(kind, Heuristic):
        return kind
    try:
        return Heuristic(kind)
    except ValueError:
        pass
    if kind in _ALIASES:
        return _ALIASES[kind]
    raise UnknownHeuristic(f"Unknown heuristic: {kind}")


def heuristic_fn(dom: NPuzzle, kind: Union[Heuristic, str]) -> Callable[[State], float]:
    """Bind a heuristic to a board: returns state -> estimate."""
    f = _FUNCS[parse_heuristic(kind)]
    return lambda s: f(dom, s)


def get_heuristic(dom: NPuzzle, kind: Union[Heuristic, str], s: State) -> float:
    return _FUNCS[parse_heuristic(kind)](dom, s)
