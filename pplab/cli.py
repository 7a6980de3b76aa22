"""Command line front end running the 2048 solvers and reporting statistics."""

from __future__ import annotations

import string
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .expectimax import expectimax_solve
from .game import SolveStats
from .minimax import minimax_solve
from .montecarlo import monte_carlo_solve

MONTECARLO = 0
MINIMAX = 1
EXPECTIMAX = 2

ALGORITHMS = {"montecarlo": MONTECARLO, "minimax": MINIMAX, "expectimax": EXPECTIMAX}

_HELP_FLAGS = ("-h", "--help", "help", "usage")

USAGE = """Usage:
  AISolver <flag> <flag_val> ...
  Flag list:
    -a: Integer/String value; Algorithm to run. 0=montecarlo, 1=minimax, 2=expectimax
    -n: Integer value; # times to run the algorithm. Stats displayed at program completion
    -r: Integer value; # runs MonteCarlo completes for each move. Higher=better but slower. Recommend 10-100
    -d: Integer value; # depth level for Minimax / Expectimax
    -p: Integer value; Print level. Higher=more display. 0=minimal, 1=medium, 2=high, 3=full
  Ex: AISolver -a minimax -n 1 -d 1 -p 3"""


@dataclass
class Options:
    """Settings chosen on the command line."""

    algorithm: int = MONTECARLO
    num_games: int = 50
    num_runs: int = 1024
    depth: int = 3
    print_level: int = 0
    show_help: bool = False


def is_number(text: str) -> bool:
    """True when every character is an ASCII digit (an empty string counts)."""
    return all(c in string.digits for c in text)


def _value_after(args: List[str], flag: str) -> str:
    index = args.index(flag)
    return args[index + 1] if index + 1 < len(args) else ""


def _to_int(value: str, flag: str) -> int:
    if not value:
        raise ValueError(f"option {flag} needs a value")
    return int(value)


def parse_args(argv: Sequence[str]) -> Options:
    """Read the flags; non-numeric values of numeric flags are ignored."""
    args = list(argv)
    if any(flag in args for flag in _HELP_FLAGS):
        return Options(show_help=True)

    values = {}
    if "-a" in args:
        value = _value_after(args, "-a")
        if is_number(value):
            values["algorithm"] = _to_int(value, "-a")
        else:
            values["algorithm"] = ALGORITHMS.get(value.lower(), MONTECARLO)
    for flag, name in (
        ("-n", "num_games"),
        ("-r", "num_runs"),
        ("-d", "depth"),
        ("-p", "print_level"),
    ):
        if flag in args:
            value = _value_after(args, flag)
            if is_number(value):
                values[name] = _to_int(value, flag)

    options = Options(**values)
    if options.algorithm not in ALGORITHMS.values():
        raise ValueError(f"unknown algorithm {options.algorithm}")
    if options.num_games < 1:
        raise ValueError("at least one game must be played")
    return options


def format_report(stats: SolveStats, num_games: int, elapsed: float) -> str:
    """Text summary of the played games and the time they took."""
    lines = []
    if num_games > 1:
        lines.append(f"Success rate: {stats.successes / num_games * 100:g}%")
        lines.append(f"Average score: {sum(stats.scores) / num_games:g}")
        lines.append("Highest tiles: " + "".join(f"{tile}, " for tile in stats.highest_tiles))
    else:
        if not stats.scores:
            raise ValueError("no games recorded")
        lines.append("Game won!" if stats.successes > 0 else "Game lost.")
        lines.append(f"Final score: {stats.scores[0]}")
        lines.append(f"Highest tile: {stats.highest_tiles[0]}")
    lines.append(f"Time elapsed: {elapsed:g} seconds")
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen solver and print statistics."""
    argv = sys.argv[1:] if argv is None else argv
    try:
        options = parse_args(argv)
    except ValueError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2
    if options.show_help:
        print(USAGE)
        return 0

    out = sys.stdout
    start = time.perf_counter()
    if options.algorithm == MONTECARLO:
        stats = monte_carlo_solve(options.num_games, options.num_runs, options.print_level, out)
    elif options.algorithm == MINIMAX:
        stats = minimax_solve(options.num_games, options.depth, options.print_level, out)
    else:
        stats = expectimax_solve(options.num_games, options.depth, options.print_level, out)
    elapsed = time.perf_counter() - start

    out.write(format_report(stats, options.num_games, elapsed))
    return 0


if __name__ == "__main__":
    sys.exit(main())