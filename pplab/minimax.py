"""Minimax search player for 2048."""

from __future__ import annotations

import math
import sys
from typing import Dict, Optional, TextIO, Tuple

from .game import DIM, WIN, Game, Move, SolveStats
from .heuristics import h_score


def minimax_score(depth: int, game: Game) -> float:
    """Heuristic value of the worst new-tile placement after the best move.

    Every stage looks at the same board, so any positive depth gives the same
    value and a depth of zero gives 0.0.
    """
    if depth <= 0:
        return 0.0
    moves = game.possible_moves()
    if not moves:
        return 0.0
    best_game = None
    best_score = -math.inf
    for _, moved in moves:
        value = h_score(moved.state)
        if value > best_score:
            best_game = moved
            best_score = value

    worst_score = math.inf
    for i in range(DIM):
        for j in range(DIM):
            if best_game.state[i][j] != 0:
                continue
            for tile in (2, 4):
                candidate = [row[:] for row in best_game.state]
                candidate[i][j] = tile
                worst_score = min(worst_score, h_score(candidate))
    return worst_score


def _best_move(scores: Dict[Move, float]) -> Move:
    best_score = -math.inf
    best = Move.UP
    for move, score in scores.items():
        if score > best_score:
            best_score = score
            best = move
    return best


def minimax_search(
    depth: int,
    display_level: int,
    game: Game,
    out: Optional[TextIO] = None,
) -> Tuple[int, int]:
    """Play a copy of ``game`` until it ends or wins; return (highest tile, score)."""
    out = out if out is not None else sys.stdout
    game = game.copy()
    out.write("Attempting to solve a new game with Minimax... ")
    out.flush()
    while game.can_continue():
        scores = {
            move: sum(minimax_score(depth, outcome) * prob for prob, outcome in outcomes)
            for move, outcomes in game.possibilities().items()
            if outcomes
        }
        if display_level >= 3:
            out.write(f"Heuristic score: {h_score(game.state):g}\nMove scores: ")
            for move, score in scores.items():
                out.write(f"{int(move)}: {score:g}, ")
            out.write("\n")
        out.write(f"{len(scores)}\n")
        game.move(_best_move(scores))
        if game.highest_tile() >= WIN:
            break
    if display_level <= 1:
        out.write("Done!" + ("\n" if display_level == 0 else ""))
    if display_level >= 1:
        out.write("\n" + str(game) + "\n")
    return game.highest_tile(), game.score


def minimax_solve(
    n: int,
    depth: int,
    display_level: int,
    out: Optional[TextIO] = None,
) -> SolveStats:
    """Play ``n`` fresh games with minimax and tally the results."""
    stats = SolveStats()
    for _ in range(n):
        highest, score = minimax_search(depth, display_level, Game(), out)
        stats.record(highest, score)
    return stats