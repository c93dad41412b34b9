"""Seeded two-dimensional gradient (Perlin) noise."""

from __future__ import annotations

import math
import random

_TABLE_SIZE = 256
_MASK = _TABLE_SIZE - 1
# Unit gradients reach at most sqrt(1/2); scale so the output spans [-1, 1].
_SCALE = math.sqrt(2.0)
_GRADIENTS: tuple[tuple[float, float], ...] = tuple(
    (math.cos(2.0 * math.pi * k / _TABLE_SIZE), math.sin(2.0 * math.pi * k / _TABLE_SIZE))
    for k in range(_TABLE_SIZE)
)


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


class Perlin:
    """Smooth pseudo-random noise whose lattice is fixed by ``seed``.

    Values lie in [-1, 1] and are exactly zero at integer lattice points.
    """

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed
        permutation = list(range(_TABLE_SIZE))
        random.Random(seed).shuffle(permutation)
        self._perm = tuple(permutation)

    def _gradient(self, ix: int, iy: int) -> tuple[float, float]:
        index = self._perm[(self._perm[ix & _MASK] + iy) & _MASK]
        return _GRADIENTS[index]

    def _corner(self, ix: int, iy: int, dx: float, dy: float) -> float:
        gx, gy = self._gradient(ix, iy)
        return gx * dx + gy * dy

    def get(self, x: float, y: float) -> float:
        """Noise value at the point ``(x, y)``."""
        x0 = math.floor(x)
        y0 = math.floor(y)
        fx = x - x0
        fy = y - y0

        n00 = self._corner(x0, y0, fx, fy)
        n10 = self._corner(x0 + 1, y0, fx - 1.0, fy)
        n01 = self._corner(x0, y0 + 1, fx, fy - 1.0)
        n11 = self._corner(x0 + 1, y0 + 1, fx - 1.0, fy - 1.0)

        u = _fade(fx)
        v = _fade(fy)
        value = _lerp(_lerp(n00, n10, u), _lerp(n01, n11, u), v) * _SCALE
        return max(-1.0, min(1.0, value))