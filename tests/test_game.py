import random

import pytest

from pplab.game import Game, Move, SolveStats, count_empty, num_digits

CHECKERBOARD = [
    [2, 4, 2, 4],
    [4, 2, 4, 2],
    [2, 4, 2, 4],
    [4, 2, 4, 2],
]

MIXED = [
    [2, 0, 2, 4],
    [0, 4, 4, 0],
    [8, 0, 0, 8],
    [2, 2, 0, 16],
]


def _zeros():
    return [[0] * 4 for _ in range(4)]


def _tiles(state):
    return [v for row in state for v in row if v]


def test_new_game_has_two_small_tiles():
    game = Game(rng=random.Random(1))
    tiles = _tiles(game.state)
    assert len(tiles) == 2
    assert set(tiles) <= {2, 4}
    assert game.score == 0


def test_same_seed_same_board():
    first = Game(rng=random.Random(7)).state
    second = Game(rng=random.Random(7)).state
    assert first == second
    assert len(_tiles(first)) == 2
    assert set(_tiles(first)) <= {2, 4}
    assert count_empty(first) == 14


def test_bad_shape_rejected():
    with pytest.raises(ValueError):
        Game(state=[[0, 0], [0, 0]])


def test_left_merges_pairs():
    game = Game(state=[[2, 2, 2, 2] for _ in range(4)])
    game.left(peek=True)
    assert game.state == [[4, 4, 0, 0] for _ in range(4)]
    assert game.score == sum(map(sum, game.state))


@pytest.mark.parametrize("direction", list(Move))
def test_peek_conserves_tile_sum(direction):
    game = Game(state=MIXED)
    before = sum(map(sum, game.state))
    gained_from = game.score
    game.move(direction, peek=True)
    assert sum(map(sum, game.state)) == before
    assert game.score >= gained_from


def test_left_is_transposed_up():
    left = Game(state=MIXED)
    left.left(peek=True)
    transposed = [list(r) for r in zip(*MIXED)]
    up = Game(state=transposed)
    up.up(peek=True)
    assert left.state == [list(r) for r in zip(*up.state)]
    assert left.score == up.score


def test_down_is_flipped_up():
    down = Game(state=MIXED)
    down.down(peek=True)
    up = Game(state=MIXED[::-1])
    up.up(peek=True)
    assert down.state == up.state[::-1]
    assert down.score == up.score


def test_real_move_adds_one_tile():
    state = _zeros()
    state[0][0] = 2
    game = Game(state=state, rng=random.Random(3))
    game.right()
    tiles = _tiles(game.state)
    assert len(tiles) == 2
    assert game.state[0][3] == 2
    assert sum(tiles) - 2 in (2, 4)


def test_unchanged_move_adds_nothing():
    state = _zeros()
    state[0][0] = 2
    game = Game(state=state, rng=random.Random(3))
    game.up()
    assert game.state == state


def test_blocked_board():
    game = Game(state=CHECKERBOARD)
    assert not game.can_continue()
    assert game.possible_moves() == []
    assert game.possibilities() == {}


def test_can_continue_with_equal_neighbours():
    state = [row[:] for row in CHECKERBOARD]
    state[3][3] = 4
    assert Game(state=state).can_continue()


def _diff(before, after):
    return [b for ra, rb in zip(before, after) for a, b in zip(ra, rb) if a != b]


def test_highest_tile():
    assert Game(state=_zeros()).highest_tile() == 2
    assert Game(state=MIXED).highest_tile() == max(map(max, MIXED))


def test_copy_is_independent():
    game = Game(state=MIXED, score=5)
    clone = game.copy()
    clone.state[0][0] = 1024
    clone.score += 1
    assert game.state == MIXED
    assert game.score == 5


def test_invalid_move():
    with pytest.raises(ValueError):
        Game(state=MIXED).move(7)


def test_str_layout():
    state = [[2048, 0, 0, 0], [0, 2, 0, 0], [0, 0, 16, 0], [0, 0, 0, 4]]
    lines = str(Game(state=state, score=12)).splitlines()
    assert lines[0] == "Score: 12"
    rows = lines[1:]
    assert len({len(line) for line in rows}) == 1
    assert [[int(t) for t in line.split()] for line in rows] == state


def test_num_digits():
    assert num_digits(2048) == 4
    assert num_digits(0) == num_digits(9)
    assert num_digits(10) == num_digits(9) + 1
    assert num_digits(99) == num_digits(10)
    assert num_digits(100) == num_digits(99) + 1


def test_count_empty():
    assert count_empty(CHECKERBOARD) == 0
    assert count_empty(_zeros()) == len(_zeros()) * len(_zeros()[0])


def test_solve_stats_record():
    stats = SolveStats()
    assert stats.record(2048, 100) is True
    assert stats.record(1024, 50) is False
    assert stats.successes == 1
    assert stats.scores == [100, 50]
    assert stats.highest_tiles == [2048, 1024]