"""Per-chunk data handed to the mesh, water and collider generators."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Optional

from phos.hexgrid import CHUNK_SIZE, HexCoord

_AREA = CHUNK_SIZE * CHUNK_SIZE

# Distance given to water tiles before any land search has run.
_UNSET_WATER_DISTANCE = 4.0


@dataclass
class MeshChunkData:
    """Heights, textures and distance-to-land values of one chunk, row by row."""

    heights: list[float]
    textures: list[tuple[int, int]] = field(default_factory=lambda: [(0, 0)] * _AREA)
    min_height: float = 0.0
    sealevel: float = 0.0
    distance_to_land: list[float] = field(default_factory=lambda: [0.0] * _AREA)

    def get_neighbors(self, coord: HexCoord) -> list[float]:
        """Heights of the six neighbours; those outside the chunk read as min_height."""
        result = []
        for n in coord.get_neighbors():
            if n.is_in_bounds(CHUNK_SIZE, CHUNK_SIZE):
                result.append(self.heights[n.to_index(CHUNK_SIZE)])
            else:
                result.append(self.min_height)
        return result

    def get_neighbors_with_water_info(
        self, coord: HexCoord
    ) -> tuple[list[tuple[float, Optional[float]]], bool]:
        """Neighbour heights with their distance to land, and whether any is land."""
        has_land = False
        result: list[tuple[float, Optional[float]]] = []
        for n in coord.get_neighbors():
            if not n.is_in_bounds(CHUNK_SIZE, CHUNK_SIZE):
                result.append((self.min_height, None))
                continue
            idx = n.to_index(CHUNK_SIZE)
            height = self.heights[idx]
            result.append((height, self.distance_to_land[idx]))
            if height > self.sealevel:
                has_land = True
        return result, has_land

    @staticmethod
    def calculate_water_distances(
        chunks: list[MeshChunkData], height: int, width: int, search_range: int
    ) -> None:
        """Reset every chunk's distances: land tiles to 0, water tiles to the maximum."""
        open_tiles: deque[tuple[HexCoord, float, int]] = deque()
        for z in range(height):
            for x in range(width):
                chunk = chunks[z * height + x]
                chunk._prepare_chunk_open(x * CHUNK_SIZE, z * CHUNK_SIZE, open_tiles)

    def _prepare_chunk_open(
        self, offset_x: int, offset_z: int, open_tiles: deque[tuple[HexCoord, float, int]]
    ) -> None:
        for z in range(CHUNK_SIZE):
            for x in range(CHUNK_SIZE):
                coord = HexCoord.from_offset_pos(x + offset_x, z + offset_z)
                idx = coord.to_chunk_local_index()
                h = self.heights[idx]
                is_land = h > self.sealevel
                self.distance_to_land[idx] = 0.0 if is_land else _UNSET_WATER_DISTANCE
                if is_land:
                    open_tiles.append((coord, h, 0))