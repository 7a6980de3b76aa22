"""Monte Carlo estimate of pi split across simulated ranks."""

from __future__ import annotations

import argparse
import random
import sys
import time
from enum import Enum
from typing import Optional, Sequence


class Reduction(Enum):
    """How the per-rank hit counts are combined on rank 0."""

    REDUCE = "reduce"
    BLOCK_TREE = "block_tree"
    BLOCK_LINEAR = "block_linear"
    GATHER = "gather"


def count_pi(tosses: int, rank: int, seed: Optional[int] = None) -> int:
    """Number of ``tosses`` random points of [-1, 1)^2 inside the unit circle.

    The generator is seeded with ``rank * seed``; ``seed`` defaults to the
    current time in seconds.
    """
    if seed is None:
        seed = int(time.time())
    rng = random.Random((rank * seed) & 0xFFFFFFFF)
    hits = 0
    for _ in range(max(tosses, 0)):
        x = rng.random() * 2.0 - 1.0
        y = rng.random() * 2.0 - 1.0
        if x * x + y * y < 1:
            hits += 1
    return hits


def tree_reduce(counts: Sequence[int]) -> int:
    """Sum the counts pairwise level by level, as a binary-tree reduction does."""
    level = list(counts)
    size = len(level)
    if size == 0 or size & (size - 1):
        raise ValueError("tree reduction needs a power-of-two number of ranks")
    while len(level) > 1:
        level = [a + b for a, b in zip(level[::2], level[1::2])]
    return level[0]


def estimate_pi(
    tosses: int,
    world_size: int,
    strategy: Reduction = Reduction.REDUCE,
    seed: Optional[int] = None,
) -> float:
    """Estimate pi with ``tosses`` split evenly across ``world_size`` ranks."""
    if tosses < 1:
        raise ValueError("the number of tosses must be positive")
    if world_size < 1:
        raise ValueError("at least one rank is needed")
    strategy = Reduction(strategy)
    if seed is None:
        seed = int(time.time())
    share = tosses // world_size
    counts = [count_pi(share, rank, seed) for rank in range(world_size)]
    if strategy is Reduction.BLOCK_TREE:
        total = tree_reduce(counts)
    else:
        total = sum(counts)
    return 4 * total / tosses


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a pi estimate and the time it took."""
    parser = argparse.ArgumentParser(prog="pplab-pi", description=main.__doc__)
    parser.add_argument("tosses", type=int)
    parser.add_argument("--procs", type=int, default=1)
    parser.add_argument(
        "--strategy",
        choices=[r.value for r in Reduction],
        default=Reduction.REDUCE.value,
    )
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    start = time.perf_counter()
    try:
        result = estimate_pi(args.tosses, args.procs, Reduction(args.strategy), args.seed)
    except ValueError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2
    elapsed = time.perf_counter() - start
    print(f"{result:.6f}")
    print(f"MPI running time: {elapsed:.6f} Seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())