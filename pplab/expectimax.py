"""Expectimax search player for 2048."""

from __future__ import annotations

import math
import sys
from typing import Callable, Dict, Optional, TextIO, Tuple

from .game import Game, Move, SolveStats
from .heuristics import h_score


def _move_scores(possibilities: dict, evaluate: Callable[[Game], float]) -> Dict[Move, float]:
    """Probability-weighted value of every move that has outcomes."""
    return {
        move: sum(evaluate(outcome) * prob for prob, outcome in outcomes)
        for move, outcomes in possibilities.items()
        if outcomes
    }


def _best_move(scores: Dict[Move, float]) -> Move:
    """Move with the strictly highest score, the earliest one on ties, UP if none."""
    best_score = -math.inf
    best = Move.UP
    for move, score in scores.items():
        if score > best_score:
            best_score = score
            best = move
    return best


def expectimax_score(depth: int, game: Game, is_max: bool) -> float:
    """Expectimax value of ``game``; the game passed in is left untouched."""
    possibilities = game.possibilities()
    if not possibilities:
        return 0.0
    if is_max:
        if depth == 0:
            return h_score(game.state)
        scores = _move_scores(possibilities, lambda outcome: h_score(outcome.state))
        chosen = game.copy()
        chosen.move(_best_move(scores))
        return expectimax_score(depth - 1, chosen, False)
    scores = _move_scores(
        possibilities, lambda outcome: expectimax_score(depth, outcome, True)
    )
    return sum(scores.values()) / len(scores)


def expectimax_search(
    depth: int,
    display_level: int,
    game: Game,
    out: Optional[TextIO] = None,
) -> Tuple[int, int]:
    """Play a copy of ``game`` to the end; return (highest tile, final score)."""
    out = out if out is not None else sys.stdout
    game = game.copy()
    out.write("Attempting to solve a new game with Expectimax... ")
    out.flush()
    while game.can_continue():
        if display_level >= 2:
            out.write("\n" + str(game))
        scores = _move_scores(
            game.possibilities(),
            lambda outcome: expectimax_score(depth, outcome, True),
        )
        if display_level >= 3:
            out.write(f"Heuristic score: {h_score(game.state):g}\nMove scores: ")
            for move, score in scores.items():
                out.write(f"{int(move)}: {score:g}, ")
            out.write("\n")
        game.move(_best_move(scores))
    if display_level <= 1:
        out.write("Done!" + ("\n" if display_level == 0 else ""))
    if display_level >= 1:
        out.write("\n" + str(game) + "\n")
    return game.highest_tile(), game.score


def expectimax_solve(
    n: int,
    depth: int,
    display_level: int,
    out: Optional[TextIO] = None,
) -> SolveStats:
    """Play ``n`` fresh games with expectimax and tally the results."""
    stats = SolveStats()
    for _ in range(n):
        highest, score = expectimax_search(depth, display_level, Game(), out)
        stats.record(highest, score)
    return stats