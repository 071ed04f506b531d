from __future__ import annotations
from typing import Tuple, List, Dict, Sequence, Union, Iterable
import random

from npuzzle.errors import InvariantViolation

State = Tuple[int, ...]
Grid = Sequence[Sequence[int]]

# (label, d_row, d_col) for the blank. Order is Up, Down, Left, Right;
# DFS pops the last pushed child first, so Right is explored first.
MOVES: Tuple[Tuple[str, int, int], ...] = (
    ("Up",    -1,  0),
    ("Down",   1,  0),
    ("Left",   0, -1),
    ("Right",  0,  1),
)
_DELTA: Dict[str, Tuple[int, int]] = {label: (dr, dc) for label, dr, dc in MOVES}


def generate_goal(n: int) -> State:
    """Row-major 1..n*n-1 with the blank in the last cell."""
    return tuple(list(range(1, n * n)) + [0])


def parse_tiles(text: str, n: int) -> State:
    """Parse a comma separated custom board, e.g. ``"1,2,3,4,0,6,7,5,8"``."""
    size = n * n
    parts = [p.strip() for p in text.split(",") if p.strip() != ""]
    if len(parts) != size:
        raise ValueError(f"Please enter exactly {size} numbers (got {len(parts)})")
    try:
        nums = [int(p) for p in parts]
    except ValueError:
        raise ValueError(f"Please enter numbers between 0 and {size - 1}") from None
    if any(x < 0 or x >= size for x in nums):
        raise ValueError(f"Please enter numbers between 0 and {size - 1}")
    if len(set(nums)) != len(nums):
        raise ValueError("Please enter unique numbers")
    return tuple(nums)


class NPuzzle:
    """Generic N×N sliding-tile puzzle (0 is the blank).

    States are flat row-major tuples; every move builds a new tuple.
    """
    def __init__(self, n: int):
        if n < 2:
            raise ValueError(f"board size must be >= 2, got {n}")
        self.N = n
        self.size = n * n
        self.GOAL: State = generate_goal(n)
        # bits per cell for fingerprint packing
        self._bits = max(1, (self.size - 1).bit_length())
        # Precompute (target index, label) for blank moves
        self._nei: Dict[int, Tuple[Tuple[int, str], ...]] = {}
        for i in range(self.size):
            r, c = divmod(i, n)
            moves = []
            for label, dr, dc in MOVES:
                rr, cc = r + dr, c + dc
                if 0 <= rr < n and 0 <= cc < n:
                    moves.append((rr * n + cc, label))
            self._nei[i] = tuple(moves)
        # Goal positions for each tile
        self.goal_pos: Dict[int, Tuple[int, int]] = {}
        for t in range(1, self.size):
            self.goal_pos[t] = divmod(t - 1, n)

    # ---------- State model ----------
    def coerce(self, grid: Union[Grid, Sequence[int]]) -> State:
        """Accept an N×N grid or a flat row-major sequence; return a State."""
        rows = list(grid)
        if rows and hasattr(rows[0], "__iter__"):
            if len(rows) != self.N or any(len(row) != self.N for row in rows):
                raise InvariantViolation(f"expected a {self.N}x{self.N} grid")
            raw = [x for row in rows for x in row]
        else:
            raw = rows
        try:
            flat = tuple(int(x) for x in raw)
        except (TypeError, ValueError):
            raise InvariantViolation("tiles must be integers") from None
        if any(t != x for t, x in zip(flat, raw)):
            raise InvariantViolation("tiles must be integers")
        if len(flat) != self.size:
            raise InvariantViolation(f"expected {self.size} tiles, got {len(flat)}")
        if sorted(flat) != list(range(self.size)):
            raise InvariantViolation(f"tiles must be a permutation of 0..{self.size - 1}")
        return flat

    def to_grid(self, s: State) -> Tuple[Tuple[int, ...], ...]:
        N = self.N
        return tuple(tuple(s[r * N:(r + 1) * N]) for r in range(N))

    def is_goal(self, s: State) -> bool:
        return s == self.GOAL

    def locate_blank(self, s: State) -> Tuple[int, int]:
        try:
            z = s.index(0)
        except ValueError:
            raise InvariantViolation("No blank tile found") from None
        return divmod(z, self.N)

    def fingerprint(self, s: State) -> int:
        """Pack the tiles into one integer, ``bits`` per cell, cell 0 lowest."""
        key = 0
        for t in reversed(s):
            key = (key << self._bits) | t
        return key

    # ---------- Core dynamics ----------
    def expand(self, s: State) -> List[Tuple[State, str]]:
        """Return [(next_state, label)] in Up, Down, Left, Right order."""
        r, c = self.locate_blank(s)
        z = r * self.N + c
        out: List[Tuple[State, str]] = []
        for j, label in self._nei[z]:
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            out.append((tuple(lst), label))
        return out

    def apply_move(self, s: State, label: str) -> State:
        if label not in _DELTA:
            raise ValueError(f"Unknown move: {label!r}")
        r, c = self.locate_blank(s)
        dr, dc = _DELTA[label]
        rr, cc = r + dr, c + dc
        if not (0 <= rr < self.N and 0 <= cc < self.N):
            raise ValueError(f"Move {label} takes the blank off the board at {(r, c)}")
        z, j = r * self.N + c, rr * self.N + cc
        lst = list(s)
        lst[z], lst[j] = lst[j], lst[z]
        return tuple(lst)

    def replay(self, s: State, labels: Iterable[str]) -> List[State]:
        """All states visited while applying ``labels``, start included."""
        frames = [s]
        for label in labels:
            s = self.apply_move(s, label)
            frames.append(s)
        return frames

    # ---------- Instance generation ----------
    def scramble(self, depth: int, seed: int) -> State:
        """Depth-limited random walk from GOAL with no immediate backtrack."""
        rng = random.Random(seed)
        s = self.GOAL
        last_blank = None
        for _ in range(depth):
            z = s.index(0)
            cand = [j for j, _ in self._nei[z]]
            if last_blank in cand and len(cand) > 1:
                cand.remove(last_blank)
            j = rng.choice(cand)
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            last_blank = z
            s = tuple(lst)
        return s

    def shuffle(self, seed: int) -> State:
        """Uniform random permutation (Fisher-Yates). May be unsolvable."""
        rng = random.Random(seed)
        nums = list(range(self.size))
        for i in range(len(nums) - 1, 0, -1):
            j = rng.randint(0, i)
            nums[i], nums[j] = nums[j], nums[i]
        return tuple(nums)

    # ---------- Solvability ----------
    def inversions(self, s: State) -> int:
        arr = [x for x in s if x != 0]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        return inv

    def is_solvable(self, s: State) -> bool:
        """Solvability rules:
           - N odd: inversions must be even
           - N even: blank on an even row (1-based from the bottom) needs
             odd inversions, blank on an odd row needs even inversions
        """
        inv = self.inversions(s)
        blank_row, _ = self.locate_blank(s)
        if self.N % 2 == 1:
            return (inv % 2) == 0
        blank_row_from_bottom = self.N - blank_row
        return (blank_row_from_bottom % 2 == 0) == (inv % 2 == 1)
