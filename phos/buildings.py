"""Placed buildings indexed by chunk, and the queue of buildings to place."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Optional

from phos.hexgrid import CHUNK_SIZE, HexCoord


@dataclass(frozen=True)
class BuildingIdentifier:
    """Index of a building definition in the building database."""

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("A building identifier must be an integer")
        if self.value < 0:
            raise ValueError("A building identifier cannot be negative")

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


@dataclass(frozen=True)
class QueueEntry:
    building: BuildingIdentifier
    pos: HexCoord


@dataclass
class BuildQueue:
    queue: list[QueueEntry] = field(default_factory=list)


@dataclass
class BuildingEntry:
    """A building entity on a tile, possibly part of a larger building."""

    coord: HexCoord
    entity: Hashable
    is_main: bool = True
    main_entity: Optional[Hashable] = None
    has_children: bool = False
    child_entities: Optional[list[Hashable]] = None

    @classmethod
    def new_with_children(
        cls, coord: HexCoord, entity: Hashable, children: Iterable[Hashable]
    ) -> BuildingEntry:
        return cls(coord, entity, has_children=True, child_entities=list(children))

    @classmethod
    def new_with_parent(cls, coord: HexCoord, entity: Hashable, main: Hashable) -> BuildingEntry:
        return cls(coord, entity, is_main=False, main_entity=main)


@dataclass
class BuildingChunk:
    offset: tuple[int, int]
    index: int
    entries: list[BuildingEntry] = field(default_factory=list)

    def get_building(self, coord: HexCoord) -> Optional[BuildingEntry]:
        return next((b for b in self.entries if b.coord == coord), None)

    def add_building(self, entry: BuildingEntry) -> None:
        self.entries.append(entry)


@dataclass
class BuildingMap:
    """Buildings per chunk for a map of size chunks (x, y)."""

    size: tuple[int, int]
    chunks: list[BuildingChunk] = field(init=False)

    def __post_init__(self) -> None:
        sx, sy = self.size
        self.chunks = [BuildingChunk((x, y), x + y * sx) for y in range(sy) for x in range(sx)]

    def _chunk_for(self, coord: HexCoord) -> BuildingChunk:
        index = coord.to_chunk_index(self.size[0])
        if not 0 <= index < len(self.chunks):
            raise IndexError(f"{coord} lies outside the building map")
        return self.chunks[index]

    def get_buildings_in_range(self, coord: HexCoord, radius: int) -> list[BuildingEntry]:
        if radius == 0:
            raise ValueError("Radius cannot be zero")
        w = self.size[0] * CHUNK_SIZE
        h = self.size[1] * CHUNK_SIZE
        return self.get_buildings_in_coords(coord.hex_select_bounded(radius, True, h, w))

    def get_buildings_in_coords(self, coords: Iterable[HexCoord]) -> list[BuildingEntry]:
        found = (self.get_building(c) for c in coords)
        return [b for b in found if b is not None]

    def get_building(self, coord: HexCoord) -> Optional[BuildingEntry]:
        return self._chunk_for(coord).get_building(coord)

    def add_building(self, entry: BuildingEntry) -> None:
        self._chunk_for(entry.coord).add_building(entry)