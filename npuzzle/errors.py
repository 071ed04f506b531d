class PuzzleError(Exception):
    """Base class for solver failures."""


class InvariantViolation(PuzzleError, ValueError):
    """Malformed grid (no blank, wrong shape)."""


class UnknownHeuristic(PuzzleError, ValueError):
    pass


class UnknownAlgorithm(PuzzleError, ValueError):
    pass


class NoSolutionFound(PuzzleError, RuntimeError):
    """Frontier exhausted without reaching the goal."""
