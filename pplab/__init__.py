"""2048 solvers, Monte Carlo pi, Mandelbrot rendering and BMP image convolution."""

__version__ = "0.1.0"

__all__ = [
    "bmp",
    "cli",
    "convolution",
    "expectimax",
    "game",
    "heuristics",
    "mandelbrot",
    "minimax",
    "montecarlo",
    "pi",
    "ppm",
]