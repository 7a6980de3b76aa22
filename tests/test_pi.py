import math

import pytest

from pplab.pi import Reduction, count_pi, estimate_pi, main, tree_reduce


def test_count_pi_deterministic_with_seed():
    first = count_pi(500, 3, seed=11)
    second = count_pi(500, 3, seed=11)
    assert first == second
    assert 0 < first <= 500
    assert abs(4 * first / 500 - math.pi) < 0.5


def test_count_pi_bounds():
    hits = count_pi(1000, 2, seed=5)
    assert 0 <= hits <= 1000


def test_count_pi_zero_tosses():
    assert count_pi(0, 1, seed=5) == 0


def test_tree_reduce_sums():
    assert tree_reduce([1, 2, 3, 4]) == 10
    assert tree_reduce([7]) == 7


@pytest.mark.parametrize("counts", [[1, 2, 3], [], [1, 2, 3, 4, 5, 6]])
def test_tree_reduce_needs_power_of_two(counts):
    with pytest.raises(ValueError):
        tree_reduce(counts)


def test_strategies_agree():
    results = {estimate_pi(4000, 4, strategy, seed=9) for strategy in Reduction}
    assert len(results) == 1


def test_estimate_close_to_pi():
    assert abs(estimate_pi(40000, 4, Reduction.GATHER, seed=3) - math.pi) < 0.1


def test_estimate_rejects_bad_input():
    with pytest.raises(ValueError):
        estimate_pi(0, 2)
    with pytest.raises(ValueError):
        estimate_pi(100, 0)


def test_tree_strategy_rejects_odd_world():
    with pytest.raises(ValueError):
        estimate_pi(300, 3, Reduction.BLOCK_TREE, seed=1)


def test_main_output(capsys):
    assert main(["2000", "--procs", "4", "--strategy", "block_tree", "--seed", "7"]) == 0
    first, second = capsys.readouterr().out.splitlines()
    assert float(first) == pytest.approx(
        estimate_pi(2000, 4, Reduction.BLOCK_TREE, seed=7), abs=1e-6
    )
    assert second.startswith("MPI running time: ")
    assert second.endswith(" Seconds")