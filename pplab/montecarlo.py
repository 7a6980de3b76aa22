"""Monte Carlo player for 2048: choose each move by random playouts."""

from __future__ import annotations

import random
import sys
from typing import Dict, Optional, TextIO, Tuple

from .game import WIN, Game, Move, SolveStats


def simulate_one_run(
    game: Game, rng: Optional[random.Random] = None
) -> Tuple[Optional[Move], int]:
    """Play a copy of ``game`` with random moves until it ends.

    Returns the first move attempted (``None`` if the game was already over)
    and the final score. The first attempted move is recorded even when it
    left the board unchanged.
    """
    rng = rng if rng is not None else game.rng
    play = game.copy()
    first_move: Optional[Move] = None
    while play.can_continue():
        before = [row[:] for row in play.state]
        bank = list(Move)
        while play.state == before:
            choice = bank.pop(rng.randrange(len(bank)))
            play.move(choice)
            if first_move is None:
                first_move = choice
    return first_move, play.score


def _best_move(counts: Dict[Move, int], totals: Dict[Move, int]) -> Move:
    """Move whose playouts averaged best; the running best is kept truncated."""
    best_average = 0
    best = Move.UP
    for move in Move:
        if counts[move] and totals[move] / counts[move] > best_average:
            best_average = int(totals[move] / counts[move])
            best = move
    return best


def monte_carlo_simulate_game(
    runs: int,
    display_level: int,
    game: Game,
    out: Optional[TextIO] = None,
) -> Tuple[int, int]:
    """Play a copy of ``game`` using ``runs`` playouts per move.

    Stops when no move is left or the winning tile appears; returns
    (highest tile, final score).
    """
    if runs < 1:
        raise ValueError("at least one playout per move is needed")
    out = out if out is not None else sys.stdout
    game = game.copy()
    out.write("Attempting to solve a new game with Monte Carlo... ")
    out.flush()
    while game.can_continue():
        if display_level >= 2:
            out.write("\n" + str(game))
        counts = dict.fromkeys(Move, 0)
        totals = dict.fromkeys(Move, 0)
        for _ in range(runs):
            first_move, score = simulate_one_run(game, game.rng)
            if first_move is None:
                continue
            counts[first_move] += 1
            totals[first_move] += score
        game.move(_best_move(counts, totals))
        if game.highest_tile() >= WIN:
            break
    if display_level <= 1:
        out.write("Done!" + ("\n" if display_level == 0 else ""))
    if display_level >= 1:
        out.write("\n" + str(game) + "\n")
    return game.highest_tile(), game.score


def monte_carlo_solve(
    n: int,
    runs: int,
    display_level: int,
    out: Optional[TextIO] = None,
) -> SolveStats:
    """Play ``n`` fresh games with the Monte Carlo player and tally the results."""
    stats = SolveStats()
    for _ in range(n):
        highest, score = monte_carlo_simulate_game(runs, display_level, Game(), out)
        stats.record(highest, score)
    return stats