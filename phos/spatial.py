"""Unit kinds and a spatial index for finding units by area."""

from __future__ import annotations

import math
from collections.abc import Hashable, Sequence
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional

Vec3 = tuple[float, float, float]
Point = tuple[int, int]


class UnitDomain(Enum):
    LAND = auto()
    AIR = auto()
    NAVAL = auto()


class UnitType(Enum):
    BASIC = auto()


class Faction(Enum):
    PLAYER = auto()
    PHOS = auto()


@dataclass(frozen=True)
class UnitEntity:
    entity: Hashable
    domain: UnitDomain
    unit_type: UnitType
    faction: Faction
    position: Vec3


def _to_coordinate(value: float) -> int:
    if math.isnan(value) or value <= 0.0:
        return 0
    return int(value)


def _to_point(x: float, z: float) -> Point:
    return (_to_coordinate(x), _to_coordinate(z))


class UnitSpatialSet:
    """Units on a square grid of whole-number cells covering [0, 2**depth)."""

    def __init__(self, map_size: float) -> None:
        if not map_size > 0:
            raise ValueError("Map size must be positive")
        self.depth = max(0, math.ceil(math.log2(map_size)))
        self.extent = 2**self.depth
        self._entries: dict[int, tuple[Point, UnitEntity]] = {}
        self._next_handle = 0

    def _insert(self, point: Point, unit: UnitEntity) -> Optional[int]:
        if not (point[0] < self.extent and point[1] < self.extent):
            return None
        handle = self._next_handle
        self._next_handle += 1
        self._entries[handle] = (point, unit)
        return handle

    def add_unit(self, unit: UnitEntity, pos: Sequence[float]) -> Optional[int]:
        """Store a unit at pos; returns its handle, or None outside the grid."""
        return self._insert(_to_point(pos[0], pos[2]), unit)

    def move_unit(self, handle: int, pos: Sequence[float]) -> Optional[int]:
        """Move a unit to another cell; returns its new handle, or None if nothing moved."""
        existing = self._entries.get(handle)
        point = _to_point(pos[0], pos[2])
        if existing is None or existing[0] == point:
            return None
        _, unit = self._entries.pop(handle)
        moved = replace(unit, position=(float(pos[0]), float(pos[1]), float(pos[2])))
        return self._insert(point, moved)

    def _query(self, anchor: Point, width: int, height: int) -> list[UnitEntity]:
        if width <= 0 or height <= 0:
            raise ValueError("Query area must have a positive size")
        ax, ay = anchor
        return [
            unit
            for (px, py), unit in self._entries.values()
            if ax <= px < ax + width and ay <= py < ay + height
        ]

    def get_units_in_circle(self, center: Sequence[float], radius: float) -> list[Hashable]:
        """Entities whose position lies within radius of center."""
        anchor = _to_point(center[0] - radius, center[2] - radius)
        d = int(radius * 2.0)
        return [
            unit.entity
            for unit in self._query(anchor, d, d)
            if math.dist(unit.position, tuple(center)) <= radius
        ]

    def get_units_in_rect(self, anchor: Sequence[float], size: Sequence[float]) -> list[Hashable]:
        """Entities in the cells of an axis-aligned rectangle on the x/z plane."""
        return [
            unit.entity
            for unit in self._query(_to_point(anchor[0], anchor[1]), int(size[0]), int(size[1]))
        ]