"""2048 board state, moves and enumeration of move outcomes."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Tuple

DIM = 4
WIN = 2048

Board = List[List[int]]

_default_rng = random.Random()


class Move(IntEnum):
    """Direction in which the tiles are pushed."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


def num_digits(x: int) -> int:
    """Number of decimal digits of ``x``; anything below 10 counts as one."""
    return len(str(x)) if x >= 10 else 1


def count_empty(state: Board) -> int:
    """Number of empty (zero) cells on a board."""
    return sum(cell == 0 for row in state for cell in row)


def _transpose(state: Board) -> Board:
    return [list(row) for row in zip(*state)]


def _flip(state: Board) -> Board:
    return [list(row) for row in reversed(state)]


def _slide_column(column: List[int]) -> List[int]:
    tiles = [value for value in column if value != 0]
    return tiles + [0] * (DIM - len(tiles))


def _compress_column(column: List[int]) -> Tuple[List[int], int]:
    """Merge equal neighbours of an already slid column; return it and the points gained."""
    a, b, c, d = column
    if a == b:
        merged = [a * 2]
        gained = a * 2
        if c == d:
            merged.append(c * 2)
            gained += c * 2
        else:
            merged += [c, d]
    elif b == c:
        merged = [a, b * 2, d]
        gained = b * 2
    elif c == d:
        merged = [a, b, c * 2]
        gained = c * 2
    else:
        merged = [a, b, c, d]
        gained = 0
    merged += [0] * (DIM - len(merged))
    return merged, gained


class Game:
    """A 4x4 game of 2048 with its running score."""

    def __init__(
        self,
        state: Optional[Board] = None,
        score: int = 0,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.rng = rng if rng is not None else _default_rng
        self.score = score
        if state is None:
            self.state: Board = [[0] * DIM for _ in range(DIM)]
            self._add_new()
            self._add_new()
        else:
            rows = [list(row) for row in state]
            if len(rows) != DIM or any(len(row) != DIM for row in rows):
                raise ValueError(f"board must be {DIM}x{DIM}")
            self.state = rows

    def _add_new(self) -> None:
        empty = [
            (i, j)
            for i, row in enumerate(self.state)
            for j, value in enumerate(row)
            if value == 0
        ]
        if not empty:
            return
        i, j = empty[self.rng.randrange(len(empty))]
        self.state[i][j] = 2 if self.rng.randrange(10) > 0 else 4

    def can_continue(self) -> bool:
        """True while an empty cell or two equal neighbours remain."""
        for i, row in enumerate(self.state):
            for j, value in enumerate(row):
                if value == 0:
                    return True
                if i < DIM - 1 and value == self.state[i + 1][j]:
                    return True
                if j < DIM - 1 and value == row[j + 1]:
                    return True
        return False

    def copy(self) -> "Game":
        """Independent copy of the board sharing the same random source."""
        return Game(state=self.state, score=self.score, rng=self.rng)

    def possible_moves(self) -> List[Tuple[Move, "Game"]]:
        """Moves that change the board, each with the resulting game (no new tile)."""
        moves = []
        for direction in Move:
            moved = self.copy()
            moved.move(direction, peek=True)
            if moved.state != self.state:
                moves.append((direction, moved))
        return moves

    def possibilities(self) -> dict:
        """Map each valid move to every (probability, game) outcome after a new tile."""
        result: dict = {}
        for direction, moved in self.possible_moves():
            outcomes = []
            for i, row in enumerate(moved.state):
                for j, value in enumerate(row):
                    if value != 0:
                        continue
                    for tile, weight in ((2, 0.9), (4, 0.1)):
                        outcome = moved.copy()
                        outcome.state[i][j] = tile
                        outcomes.append((weight, outcome))
            if outcomes:
                total = len(outcomes)
                result[direction] = [(weight / total, game) for weight, game in outcomes]
        return result

    def up(self, peek: bool = False) -> None:
        """Push tiles up; add a random tile if the board changed and not peeking."""
        previous = [row[:] for row in self.state]
        columns = []
        for column in _transpose(self.state):
            merged, gained = _compress_column(_slide_column(column))
            self.score += gained
            columns.append(merged)
        self.state = _transpose(columns)
        if self.state != previous and not peek:
            self._add_new()

    def down(self, peek: bool = False) -> None:
        """Push tiles down."""
        self.state = _flip(self.state)
        self.up(peek)
        self.state = _flip(self.state)

    def left(self, peek: bool = False) -> None:
        """Push tiles left."""
        self.state = _transpose(self.state)
        self.up(peek)
        self.state = _transpose(self.state)

    def right(self, peek: bool = False) -> None:
        """Push tiles right."""
        self.state = _transpose(self.state)
        self.down(peek)
        self.state = _transpose(self.state)

    def move(self, direction, peek: bool = False) -> None:
        """Apply the move named by ``direction`` (a Move or its integer value)."""
        handlers = {
            Move.UP: self.up,
            Move.DOWN: self.down,
            Move.LEFT: self.left,
            Move.RIGHT: self.right,
        }
        handlers[Move(direction)](peek)

    def highest_tile(self) -> int:
        """Largest tile on the board, never less than 2."""
        return max(2, max(max(row) for row in self.state))

    def __str__(self) -> str:
        width = num_digits(self.highest_tile())
        lines = []
        for row in self.state:
            line = "".join(
                str(value) + " " * (width - num_digits(value) + 1) for value in row
            )
            lines.append(line + "\n")
        return f"Score: {self.score}\n" + "".join(lines)

    def __repr__(self) -> str:
        return f"Game(state={self.state!r}, score={self.score})"


@dataclass
class SolveStats:
    """Outcome tally over several solved games."""

    successes: int = 0
    scores: List[int] = field(default_factory=list)
    highest_tiles: List[int] = field(default_factory=list)

    def record(self, highest_tile: int, score: int) -> bool:
        """Add one finished game; return whether it reached the winning tile."""
        won = highest_tile >= WIN
        if won:
            self.successes += 1
        self.highest_tiles.append(highest_tile)
        self.scores.append(score)
        return won