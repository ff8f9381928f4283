"""The generated world: chunked heights plus selection and terraforming helpers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Optional, TypeVar

from phos.chunk import Chunk
from phos.hexgrid import CHUNK_SIZE, SHORT_DIAGONAL, HexCoord
from phos.mesh_chunk import MeshChunkData

_log = logging.getLogger(__name__)

T = TypeVar("T")

# How far, in tiles, water tiles look for land when building mesh data.
_LAND_SEARCH_RANGE = 4


def _rings(center: HexCoord, start: int, end: int) -> Iterator[tuple[HexCoord, int]]:
    """Walk rings start..end around center, yielding each tile with its ring number."""
    for k in range(start, end + 1):
        p = center.scale(4, k)
        for direction in range(6):
            for _ in range(k):
                p = p.get_neighbor(direction)
                yield p, k


@dataclass
class Map:
    """A world map; width and height are counted in chunks."""

    chunks: list[Chunk]
    height: int
    width: int
    sealevel: float = 0.0
    min_level: float = 0.0
    max_level: float = 0.0
    biome_count: int = 0

    def get_tile_count(self) -> int:
        return self.get_tile_width() * self.get_tile_height()

    def get_tile_width(self) -> int:
        return self.width * CHUNK_SIZE

    def get_tile_height(self) -> int:
        return self.height * CHUNK_SIZE

    def get_chunk_mesh_data(self, chunk_index: int) -> MeshChunkData:
        """Copy a chunk's data and compute each tile's distance to land."""
        chunk = self.chunks[chunk_index]
        return MeshChunkData(
            heights=list(chunk.heights),
            textures=list(chunk.textures),
            min_height=self.min_level,
            sealevel=self.sealevel,
            distance_to_land=self._get_distance_from_land(chunk.chunk_offset, _LAND_SEARCH_RANGE),
        )

    def _get_distance_from_land(self, chunk_offset: tuple[int, int], search_range: int) -> list[float]:
        dists = [0.0] * (CHUNK_SIZE * CHUNK_SIZE)
        cx = chunk_offset[0] * CHUNK_SIZE
        cz = chunk_offset[1] * CHUNK_SIZE

        def find_land(_coord: HexCoord, h: float, r: int) -> Optional[float]:
            return float(r) if h > self.sealevel else None

        for z in range(CHUNK_SIZE):
            for x in range(CHUNK_SIZE):
                coord = HexCoord.from_offset_pos(x + cx, z + cz)
                index = coord.to_chunk_local_index()
                if not self.is_in_bounds(coord):
                    _log.warning("Coord %s is not in bounds", coord)
                if self.sample_height(coord) > self.sealevel:
                    dists[index] = 0.0
                    continue
                found = self.hex_select_first(coord, search_range, False, find_land)
                dists[index] = float(search_range) if found is None else found
        return dists

    def _require_in_bounds(self, pos: HexCoord) -> None:
        if not self.is_in_bounds(pos):
            raise ValueError("The provided coordinate is not within the map bounds")

    def _chunk_of(self, pos: HexCoord) -> Chunk:
        return self.chunks[pos.to_chunk_index(self.width)]

    def get_neighbors(self, pos: HexCoord) -> list[Optional[float]]:
        """Heights of the six neighbours, None where a neighbour is off the map."""
        h = self.get_tile_height()
        w = self.get_tile_width()
        result: list[Optional[float]] = []
        for n in pos.get_neighbors():
            if n.is_in_bounds(h, w):
                result.append(self._chunk_of(n).heights[n.to_chunk_local_index()])
            else:
                result.append(None)
        return result

    def sample_height(self, pos: HexCoord) -> float:
        self._require_in_bounds(pos)
        return self._chunk_of(pos).heights[pos.to_chunk_local_index()]

    def is_in_bounds(self, pos: HexCoord) -> bool:
        return pos.is_in_bounds(self.get_tile_height(), self.get_tile_width())

    def get_biome_id(self, pos: HexCoord) -> int:
        self._require_in_bounds(pos)
        return self._chunk_of(pos).biome_id[pos.to_chunk_local_index()]

    def get_center(self) -> tuple[float, float, float]:
        return (self.get_world_width() / 2.0, self.sealevel, self.get_world_height() / 2.0)

    def get_center_with_height(self) -> tuple[float, float, float]:
        x, _, z = self.get_center()
        y = self.sample_height(HexCoord.from_world_pos((x, self.sealevel, z)))
        return (x, y, z)

    def get_world_width(self) -> float:
        return self.get_tile_width() * SHORT_DIAGONAL

    def get_world_height(self) -> float:
        return self.get_tile_height() * 1.5

    def get_world_size(self) -> tuple[float, float]:
        return (self.get_world_width(), self.get_world_height())

    def set_height(self, pos: HexCoord, height: float) -> None:
        self._chunk_of(pos).heights[pos.to_chunk_local_index()] = height

    def create_crater(self, pos: HexCoord, radius: int, depth: float) -> list[tuple[HexCoord, float]]:
        """Lower tiles around pos by depth, fading to nothing at radius; never below 0."""
        if radius == 0:
            raise ValueError("Radius cannot be zero")

        def dig(p: HexCoord, h: float, r: int) -> tuple[float, tuple[HexCoord, float]]:
            t = (r / radius) ** 2
            lowered = h - depth
            new_height = max(lowered + (h - lowered) * t, 0.0)
            return new_height, (p, new_height)

        return self.hex_select_mut(pos, radius, True, dig)

    def hex_select(
        self,
        center: HexCoord,
        radius: int,
        include_center: bool,
        op: Callable[[HexCoord, float, int], T],
    ) -> list[T]:
        """Apply op(coord, height, ring) to every in-bounds tile within radius."""
        if radius == 0:
            raise ValueError("Radius cannot be zero")
        result = []
        if include_center:
            result.append(op(center, self.sample_height(center), 0))
        for p, k in _rings(center, 0, radius):
            if self.is_in_bounds(p):
                result.append(op(p, self.sample_height(p), k))
        return result

    def hex_select_first(
        self,
        center: HexCoord,
        radius: int,
        include_center: bool,
        op: Callable[[HexCoord, float, int], Optional[T]],
    ) -> Optional[T]:
        """The first non-None result of op over the tiles within radius."""
        if radius == 0:
            raise ValueError("Radius cannot be zero")
        if include_center:
            r = op(center, self.sample_height(center), 0)
            if r is not None:
                return r
        for p, k in _rings(center, 0, radius):
            if self.is_in_bounds(p):
                r = op(p, self.sample_height(p), k)
                if r is not None:
                    return r
        return None

    def ring_select_first(
        self,
        center: HexCoord,
        start_radius: int,
        end_radius: int,
        op: Callable[[HexCoord, float, int], Optional[T]],
    ) -> Optional[T]:
        """The first non-None result of op over rings start_radius..end_radius."""
        if start_radius == 0:
            raise ValueError("Start radius cannot be zero")
        if not start_radius > end_radius:
            raise ValueError("Start radius cannot be lower than end radius")
        for p, k in _rings(center, start_radius, end_radius):
            if self.is_in_bounds(p):
                r = op(p, self.sample_height(p), k)
                if r is not None:
                    return r
        return None

    def hex_select_mut(
        self,
        center: HexCoord,
        radius: int,
        include_center: bool,
        op: Callable[[HexCoord, float, int], tuple[float, T]],
    ) -> list[T]:
        """Like hex_select, but op returns (new_height, result) and the height is stored."""
        if radius == 0:
            raise ValueError("Radius cannot be zero")
        result = []

        def apply(p: HexCoord, k: int) -> None:
            new_height, value = op(p, self.sample_height(p), k)
            self.set_height(p, new_height)
            result.append(value)

        if include_center:
            apply(center, 0)
        for p, k in _rings(center, 0, radius):
            if self.is_in_bounds(p):
                apply(p, k)
        return result