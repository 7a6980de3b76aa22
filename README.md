# pplab

A small collection of compute-heavy programs, all in plain Python:

- **2048 solvers** (`pplab.game`, `pplab.heuristics`, `pplab.montecarlo`,
  `pplab.minimax`, `pplab.expectimax`, `pplab.cli`): a 4x4 2048 engine,
  three automatic players and a command that plays games and prints
  statistics.
- **Monte Carlo pi** (`pplab.pi`): estimates pi by throwing random points
  at the square [-1, 1)², splitting the tosses across simulated ranks and
  combining their hit counts.
- **Mandelbrot** (`pplab.mandelbrot`, `pplab.ppm`): computes
  iteration counts in single-precision arithmetic and writes them as a
  binary grey-scale PPM image.
- **Convolution** (`pplab.bmp`, `pplab.convolution`): reads 8-bit BMP
  images and filter files and applies a square 2-D filter.

## Installation

```
pip install .
```

Python 3.10 or later is required. The package has no third-party
dependencies.

## Playing 2048

```
pplab-2048 -a expectimax -n 5 -d 2 -p 1
```

Flags (each takes one value):

| Flag | Meaning | Default |
|------|---------|---------|
| `-a` | Algorithm: `montecarlo`/`0`, `minimax`/`1`, `expectimax`/`2` | `montecarlo` |
| `-n` | Number of games to play | 50 |
| `-r` | Random playouts per move for Monte Carlo | 1024 |
| `-d` | Search depth for Minimax and Expectimax | 3 |
| `-p` | Print level, 0 to 3 | 0 |

`-h`, `--help`, `help` or `usage` prints the flag list. An algorithm name
that is not known falls back to Monte Carlo; non-numeric values for the
numeric flags are ignored. An algorithm number outside 0–2 or fewer than
one game is reported as an error (exit status 2).

Print levels: at 1 and above the final board is shown; at 2 and above the
Monte Carlo and Expectimax players show the board before every move; at 3
Minimax and Expectimax show the heuristic score and the score of each
move. The Minimax player also prints how many moves it scored at each
step.

Monte Carlo and Minimax stop a game as soon as a 2048 tile appears;
Expectimax plays on until no move is left. When all games are finished the
command reports the success rate (games reaching 2048), the average score
and the highest tile of each game; for a single game it reports whether it
was won, the final score and the highest tile, followed by the elapsed
time.

The solvers can be called directly; each `*_solve` function returns a
`SolveStats` with `successes`, `scores` and `highest_tiles`:

```python
import io
from pplab.expectimax import expectimax_solve

stats = expectimax_solve(n=2, depth=1, display_level=0, out=io.StringIO())
print(stats.successes, stats.scores, stats.highest_tiles)
```

The engine itself:

```python
import random
from pplab.game import Game, Move
from pplab.heuristics import h_score

game = Game(rng=random.Random(1))
while game.can_continue():
    direction, _ = game.possible_moves()[0]
    game.move(direction)
print(game)
print(game.highest_tile(), game.score, h_score(game.state))
```

`Game.possible_moves()` lists the moves that change the board together
with the resulting game (without a new tile), and `Game.possibilities()`
maps each such move to every `(probability, game)` outcome of the new tile
(a 2 with weight 0.9, a 4 with weight 0.1, spread over the empty cells).
Passing `peek=True` to a move applies it without adding a new tile.

## Estimating pi

```
pplab-pi 100000000 --procs 4 --strategy block_tree --seed 42
```

The argument is the total number of tosses. `--procs` sets the number of
ranks (default 1), `--strategy` one of `reduce`, `block_tree`,
`block_linear` or `gather` (default `reduce`), and `--seed` the base seed
(default: the current time in seconds). The estimate is printed with six
decimals, followed by the running time.

From Python, `estimate_pi(tosses, world_size, strategy, seed)` runs the
same computation, `count_pi(tosses, rank, seed)` counts the hits of one
rank and `tree_reduce(counts)` sums a power-of-two number of counts
pairwise. Each rank receives `tosses // world_size` tosses, while the
estimate divides by the full number of tosses.

## Mandelbrot images

```python
from pplab.mandelbrot import mandelbrot_serial, scale_and_shift
from pplab.ppm import write_ppm_image

width, height = 1600, 1200
x0, x1, y0, y1 = -2.0, 1.0, -1.0, 1.0
data = mandelbrot_serial(x0, y0, x1, y1, width, height, 0, height, 256)
write_ppm_image(data, width, height, "mandelbrot.ppm", 256)

zoomed = scale_and_shift(x0, x1, y0, y1, 0.015, -0.986, 0.30)
```

`mandelbrot_serial` can compute a band of rows only; the other entries
stay zero. `verify_result(gold, result, width, height)` compares two
renders and prints the first mismatching pixel. `encode_ppm` returns the
image bytes without writing a file.

## Image convolution

```python
from pplab.bmp import read_image, store_image
from pplab.convolution import diff_ratio, read_filter, serial_conv

filter_width, filt = read_filter("filter1.csv")
image = read_image("input.bmp")
result = serial_conv(filter_width, filt, image.height, image.width, image.pixels)
store_image(result, "output.bmp", image.height, image.width, "input.bmp")
```

A filter file holds the filter width followed by width × width
coefficients, separated by whitespace (`parse_filter` reads the same
format from a string). `read_image` returns a `BmpImage` with its rows
top first. `serial_conv` leaves pixels outside the image out of the sum.
`store_image` writes the result using the header of a reference BMP,
truncating each value to a byte. `diff_ratio(output, reference,
threshold)` gives the fraction of pixels whose difference exceeds the
threshold (10 by default).

## What is not included

- The pi ranks are simulated one after another in a single process; no
  message passing or parallel execution takes place, and the reduction
  strategies differ only in how the counts are summed.
- Mandelbrot rendering and convolution are serial only and have no
  command of their own; there is no GPU or multi-threaded version and no
  timing harness for them.

## Tests

```
pip install .[test]
pytest
```