"""Square chunk of terrain tiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from phos.hexgrid import CHUNK_SIZE, SHORT_DIAGONAL

_AREA = CHUNK_SIZE * CHUNK_SIZE


@dataclass
class Chunk:
    """Heights, textures and biome ids of one chunk, stored row by row."""

    heights: list[float] = field(default_factory=lambda: [0.0] * _AREA)
    textures: list[tuple[int, int]] = field(default_factory=lambda: [(0, 0)] * _AREA)
    biome_id: list[int] = field(default_factory=lambda: [0] * _AREA)
    chunk_offset: tuple[int, int] = (0, 0)
    min_level: float = 0.0
    max_level: float = 0.0

    SIZE: ClassVar[int] = CHUNK_SIZE
    AREA: ClassVar[int] = _AREA
    WORLD_WIDTH: ClassVar[float] = CHUNK_SIZE * SHORT_DIAGONAL
    WORLD_HEIGHT: ClassVar[float] = CHUNK_SIZE * 1.5
    WORLD_SIZE: ClassVar[tuple[float, float]] = (CHUNK_SIZE * SHORT_DIAGONAL, CHUNK_SIZE * 1.5)

    def __post_init__(self) -> None:
        for name in ("heights", "textures", "biome_id"):
            if len(getattr(self, name)) != self.AREA:
                raise ValueError(f"{name} must hold exactly {self.AREA} entries")

    def get_pos_z_edge(self) -> list[float]:
        start = (self.SIZE - 1) * self.SIZE
        return self.heights[start : start + self.SIZE]

    def get_neg_z_edge(self) -> list[float]:
        return self.heights[: self.SIZE]

    def get_pos_x_edge(self) -> list[float]:
        return self.heights[self.SIZE - 1 :: self.SIZE]

    def get_neg_x_edge(self) -> list[float]:
        return self.heights[:: self.SIZE]