"""Seeded 2D simplex noise and layered elevation sampling."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from typing import Protocol

from phos.config import GeneratorLayer, NoiseConfig
from phos.hexgrid import CHUNK_SIZE

_F2 = 0.5 * (math.sqrt(3.0) - 1.0)
_G2 = (3.0 - math.sqrt(3.0)) / 6.0
_GRADIENTS = (
    (1.0, 1.0),
    (-1.0, 1.0),
    (1.0, -1.0),
    (-1.0, -1.0),
    (1.0, 0.0),
    (-1.0, 0.0),
    (0.0, 1.0),
    (0.0, -1.0),
)


class NoiseSource(Protocol):
    def get(self, point: Sequence[float]) -> float: ...


class Simplex:
    """Deterministic 2D simplex noise with values in [-1, 1]."""

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed
        perm = list(range(256))
        random.Random(seed).shuffle(perm)
        self._perm = perm * 2

    def _corner(self, dx: float, dy: float, gradient_index: int) -> float:
        t = 0.5 - dx * dx - dy * dy
        if t <= 0.0:
            return 0.0
        gx, gy = _GRADIENTS[gradient_index % len(_GRADIENTS)]
        t *= t
        return t * t * (gx * dx + gy * dy)

    def get(self, point: Sequence[float]) -> float:
        """Noise value at a 2D point."""
        x, y = point[0], point[1]
        skew = (x + y) * _F2
        i = math.floor(x + skew)
        j = math.floor(y + skew)
        unskew = (i + j) * _G2
        x0 = x - (i - unskew)
        y0 = y - (j - unskew)
        i1, j1 = (1, 0) if x0 > y0 else (0, 1)
        x1, y1 = x0 - i1 + _G2, y0 - j1 + _G2
        x2, y2 = x0 - 1.0 + 2.0 * _G2, y0 - 1.0 + 2.0 * _G2

        perm = self._perm
        ii, jj = i & 255, j & 255
        total = (
            self._corner(x0, y0, perm[ii + perm[jj]])
            + self._corner(x1, y1, perm[ii + i1 + perm[jj + j1]])
            + self._corner(x2, y2, perm[ii + 1 + perm[jj + 1]])
        )
        return max(-1.0, min(1.0, 70.0 * total))


def sample_simple(x: float, z: float, layer: GeneratorLayer, noise: NoiseSource) -> float:
    """Sum octaves of smooth noise mapped to [0, 1]."""
    freq = layer.base_roughness
    amp = 1.0
    value = 0.0
    for _ in range(layer.layers):
        v = noise.get((x * freq, z * freq))
        value += (v + 1.0) * 0.5 * amp
        freq *= layer.roughness
        amp *= layer.persistence
    value -= layer.min_value
    return value * layer.strength


def sample_rigid(x: float, z: float, layer: GeneratorLayer, noise: NoiseSource) -> float:
    """Sum octaves of ridged noise, each weighted by the previous one."""
    freq = layer.base_roughness
    amp = 1.0
    value = 0.0
    weight = 1.0
    for _ in range(layer.layers):
        v = 1.0 - abs(noise.get((x * freq, z * freq)))
        v *= v
        v *= weight
        weight = min(1.0, max(0.0, v * layer.weight_multi))
        value += v * amp
        freq *= layer.roughness
        amp *= layer.persistence
    value -= layer.min_value
    return value * layer.strength


def sample_point(
    x: float,
    z: float,
    cfg: NoiseConfig,
    noise: NoiseSource,
    size: tuple[float, float],
    border_size: float,
    border_value: float,
) -> float:
    """Elevation at a tile, faded toward border_value near the map edge.

    size is the map size in chunks.
    """
    x_s = x / cfg.scale
    z_s = z / cfg.scale
    elevation = sum(
        (sample_rigid if layer.is_rigid else sample_simple)(x_s, z_s, layer, noise)
        for layer in cfg.layers
    )

    if border_size == 0.0:
        return elevation

    outer_x = size[0] * CHUNK_SIZE
    outer_z = size[1] * CHUNK_SIZE
    d1 = min(x, z)
    d2 = min(outer_x - x, outer_z - z)
    d = min(d1, d2, border_size) / border_size
    return border_value + (elevation - border_value) * d