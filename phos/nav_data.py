"""Per-tile navigation data used for path finding."""

from __future__ import annotations

from dataclasses import dataclass

from phos.hexgrid import HexCoord
from phos.world_map import Map


@dataclass
class NavTile:
    height: float
    move_cost: float
    coord: HexCoord

    def calculate_heuristic(self, to: HexCoord) -> float:
        """Estimated cost from this tile to another: their hex distance."""
        return float(self.coord.distance(to))


@dataclass
class NavData:
    """Navigation tiles of a whole map, row by row; sizes are counted in tiles."""

    tiles: list[NavTile]
    map_height: int
    map_width: int

    def get_neighbors(self, coord: HexCoord) -> list[tuple[HexCoord, float]]:
        """In-bounds neighbours with the squared height difference as step cost."""
        cur_height = self.get_height(coord)
        result = []
        for n in coord.get_neighbors():
            if not self.is_in_bounds(n):
                continue
            result.append((n, abs(cur_height - self.get_height(n)) ** 2))
        return result

    def get(self, coord: HexCoord) -> NavTile:
        return self.tiles[coord.to_index(self.map_width)]

    def get_height(self, coord: HexCoord) -> float:
        return self.get(coord).height

    def is_in_bounds(self, pos: HexCoord) -> bool:
        return pos.is_in_bounds(self.map_height, self.map_width)

    @classmethod
    def build(cls, world_map: Map) -> NavData:
        """Navigation data for every tile of a map, each with a move cost of 1."""
        h = world_map.get_tile_height()
        w = world_map.get_tile_width()
        tiles = []
        for y in range(h):
            for x in range(w):
                coord = HexCoord.from_offset_pos(x, y)
                tiles.append(NavTile(world_map.sample_height(coord), 1.0, coord))
        return cls(tiles=tiles, map_height=h, map_width=w)

    def update(self, world_map: Map) -> None:
        """Refresh every tile from the map, resetting move costs to 1."""
        h = world_map.get_tile_height()
        w = world_map.get_tile_width()
        for y in range(h):
            for x in range(w):
                coord = HexCoord.from_offset_pos(x, y)
                self.tiles[y * w + x] = NavTile(world_map.sample_height(coord), 1.0, coord)

    def update_tile(self, coord: HexCoord, height: float, move_cost: float) -> None:
        tile = self.get(coord)
        tile.height = height
        tile.move_cost = move_cost