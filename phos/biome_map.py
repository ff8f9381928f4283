"""Per-tile biome weights and climate data, with neighbourhood blending."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from phos.hexgrid import CHUNK_SIZE

_AREA = CHUNK_SIZE * CHUNK_SIZE


class NoiseSource(Protocol):
    def get(self, point: Sequence[float]) -> float: ...


@dataclass(frozen=True)
class BiomeData:
    """Climate sample of one tile."""

    moisture: float = 0.0
    temperature: float = 0.0
    continentality: float = 0.0

    def as_vector(self) -> tuple[float, float, float]:
        return (self.moisture, self.temperature, self.continentality)


@dataclass
class BiomeChunk:
    """Biome weights and climate data of one chunk, stored row by row."""

    tiles: list[list[float]]
    offset: tuple[int, int] = (0, 0)
    data: list[BiomeData] = field(default_factory=lambda: [BiomeData()] * _AREA)

    def get_biome(self, x: int, y: int) -> list[float]:
        return self.tiles[x + y * CHUNK_SIZE]

    def get_biome_data(self, x: int, y: int) -> BiomeData:
        return self.data[x + y * CHUNK_SIZE]

    def get_biome_id(self, x: int, y: int) -> int:
        """Index of the strongest biome; 0 when no weight is positive."""
        best_value = 0.0
        best = 0
        for biome_index, blend in enumerate(self.get_biome(x, y)):
            if blend > best_value:
                best_value, best = blend, biome_index
        return best

    def get_biome_id_dithered(self, x: int, y: int, noise: NoiseSource, scale: float) -> int:
        """Strongest biome after nudging the choice with noise."""
        cur_id = self.get_biome_id(x, y)
        weights = self.get_biome(x, y)
        n = (noise.get((x / scale, y / scale)) - 0.5) / 2.0
        best = weights[cur_id] + n
        for biome_index, blend in enumerate(weights):
            if blend == 0.0:
                continue
            if blend > best:
                best = blend + n
                cur_id = biome_index
        return cur_id


def _box3(values: Sequence[float]) -> list[float]:
    padded = [0.0, *values, 0.0]
    return [a + b + c for a, b, c in zip(padded, padded[1:], padded[2:])]


@dataclass
class BiomeMap:
    """Biome data for a map of size chunks (x, y)."""

    size: tuple[int, int]
    biome_count: int
    chunks: list[BiomeChunk] = field(default_factory=list)

    @property
    def width(self) -> int:
        return self.size[0] * CHUNK_SIZE

    @property
    def height(self) -> int:
        return self.size[1] * CHUNK_SIZE

    def _chunk_at(self, x: int, y: int) -> tuple[BiomeChunk, int, int]:
        cx, cy = x // CHUNK_SIZE, y // CHUNK_SIZE
        chunk = self.chunks[cx + cy * self.size[0]]
        return chunk, x - cx * CHUNK_SIZE, y - cy * CHUNK_SIZE

    def blend(self, count: int) -> None:
        """Average each tile's weights with its 3x3 neighbourhood, count times."""
        if count == 0:
            raise ValueError("Count cannot be 0")
        for _ in range(count):
            self._blend_once()

    def _blend_once(self) -> None:
        if not self.chunks:
            return
        if self.biome_count == 0:
            for chunk in self.chunks:
                chunk.tiles = [[] for _ in chunk.tiles]
            return

        size_x = self.size[0]
        rows = []
        for ty in range(self.height):
            cy, ly = divmod(ty, CHUNK_SIZE)
            start = ly * CHUNK_SIZE
            row: list[list[float]] = []
            for cx in range(size_x):
                row.extend(self.chunks[cx + cy * size_x].tiles[start : start + CHUNK_SIZE])
            rows.append(row)

        horizontal = [[_box3(channel) for channel in zip(*row)] for row in rows]

        zeros = [0.0] * self.biome_count
        blended_rows = []
        for y in range(len(rows)):
            neighbours = horizontal[max(0, y - 1) : y + 2]
            channels = [[sum(vals) for vals in zip(*cols)] for cols in zip(*neighbours)]
            new_row = []
            for values in zip(*channels):
                total = sum(values)
                new_row.append([v / total for v in values] if total != 0.0 else list(zeros))
            blended_rows.append(new_row)

        new_chunks = []
        for chunk in self.chunks:
            ox, oy = chunk.offset
            x0 = ox * CHUNK_SIZE
            tiles = [
                tile
                for ly in range(CHUNK_SIZE)
                for tile in blended_rows[oy * CHUNK_SIZE + ly][x0 : x0 + CHUNK_SIZE]
            ]
            new_chunks.append(BiomeChunk(tiles=tiles, offset=chunk.offset, data=list(chunk.data)))
        self.chunks = new_chunks

    def get_biome(self, x: int, y: int) -> list[float] | None:
        """Biome weights of a tile, or None outside the map."""
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        chunk, lx, ly = self._chunk_at(x, y)
        return chunk.get_biome(lx, ly)

    def get_biome_id(self, x: int, y: int) -> int:
        chunk, lx, ly = self._chunk_at(x, y)
        return chunk.get_biome_id(lx, ly)

    def get_biome_id_dithered(self, x: int, y: int, noise: NoiseSource, scale: float) -> int:
        chunk, lx, ly = self._chunk_at(x, y)
        return chunk.get_biome_id_dithered(lx, ly, noise, scale)

    def get_biome_data(self, x: int, y: int) -> BiomeData:
        chunk, lx, ly = self._chunk_at(x, y)
        return chunk.get_biome_data(lx, ly)