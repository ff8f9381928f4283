"""Hexagonal grid coordinates and conversions between offset, cube and world space."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

SQRT_3 = 1.7320508076
OUTER_RADIUS = 1.0
INNER_RADIUS = OUTER_RADIUS * (SQRT_3 / 2.0)
SHORT_DIAGONAL = 1.0 * SQRT_3
LONG_DIAGONAL = 2.0 * OUTER_RADIUS

# Number of tiles along one side of a square chunk.
CHUNK_SIZE = 64

IVec2 = tuple[int, int]
IVec3 = tuple[int, int, int]
Vec3 = tuple[float, float, float]


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _trunc_rem(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def _require_radius(radius: int) -> None:
    if radius == 0:
        raise ValueError("Radius cannot be zero")


def offset3d_to_world(offset: Vec3) -> Vec3:
    """Convert a fractional offset position (x, height, z) to world space."""
    ox, oy, oz = offset
    x = (ox + (oz * 0.5) - math.floor(oz / 2.0)) * (INNER_RADIUS * 2.0)
    return (x, oy, oz * OUTER_RADIUS * 1.5)


def offset_to_world(offset: IVec2, height: float) -> Vec3:
    """Convert an integer offset position to world space at the given height."""
    ox, oz = float(offset[0]), float(offset[1])
    x = (ox + (oz * 0.5) - math.floor(oz / 2.0)) * (INNER_RADIUS * 2.0)
    return (x, height, oz * OUTER_RADIUS * 1.5)


def offset_to_hex(offset: IVec2) -> IVec3:
    """Convert an offset position to cube coordinates."""
    x = offset[0] - _trunc_div(offset[1], 2)
    y = offset[1]
    return (x, y, -x - y)


def offset_to_index(offset: IVec2, width: int) -> int:
    """Row-major index of an offset position in a grid of the given width."""
    return offset[0] + offset[1] * width


def snap_to_hex_grid(world_pos: Vec3) -> Vec3:
    """Snap a world position onto the centre of its hex, keeping its height."""
    return offset_to_world(world_to_offset_pos(world_pos), world_pos[1])


def world_to_offset_pos(world_pos: Vec3) -> IVec2:
    """Convert a world position to an offset position."""
    wx, _, wz = world_pos
    offset = wz / (OUTER_RADIUS * 3.0)
    x = (wx / (INNER_RADIUS * 2.0)) - offset
    z = -wx - offset
    ix = _round_half_away(x)
    iz = _round_half_away(z)
    return (ix + _trunc_div(iz, 2), iz)


def tile_to_world_distance(dist: int) -> float:
    """World distance spanned by the given number of tiles."""
    return dist * (2.0 * INNER_RADIUS)


def get_tile_count_in_range(radius: int) -> int:
    """Number of tiles within the given radius, centre included."""
    return 1 + 3 * (radius + 1) * radius


@dataclass(frozen=True)
class HexCoord:
    """A cube coordinate on the hex grid; z is derived as -x - y."""

    x: int = 0
    y: int = 0

    DIRECTIONS: ClassVar[tuple[IVec3, ...]] = (
        (0, 1, -1),
        (1, 0, -1),
        (1, -1, 0),
        (0, -1, 1),
        (-1, 0, 1),
        (-1, 1, 0),
    )
    ZERO: ClassVar[HexCoord]

    @property
    def z(self) -> int:
        return -self.x - self.y

    @property
    def cube(self) -> IVec3:
        return (self.x, self.y, self.z)

    def __str__(self) -> str:
        return f"HexCoord[{self.x}, {self.y}, {self.z}]"

    @classmethod
    def from_axial(cls, axial: IVec2) -> HexCoord:
        return cls(axial[0], axial[1])

    @classmethod
    def from_offset_pos(cls, x: int, z: int) -> HexCoord:
        return cls(x - _trunc_div(z, 2), z)

    @classmethod
    def from_offset(cls, offset: IVec2) -> HexCoord:
        x, y, _ = offset_to_hex(offset)
        return cls(x, y)

    @classmethod
    def from_world_pos(cls, world_pos: Vec3) -> HexCoord:
        wx, _, wz = world_pos
        offset = wz / (OUTER_RADIUS * 3.0)
        x = wx / (INNER_RADIUS * 2.0)
        z = -x
        z -= offset
        x -= offset
        i_x = _round_half_away(x)
        i_z = _round_half_away(-x - z)
        return cls.from_offset((i_x + _trunc_div(i_z, 2), i_z))

    def axial(self) -> IVec2:
        """The (x, y) pair of the cube coordinate."""
        return (self.x, self.y)

    def is_in_bounds(self, map_height: int, map_width: int) -> bool:
        ox, oy = self.to_offset()
        if ox < 0 or oy < 0:
            return False
        return ox < map_width and oy < map_height

    def is_on_chunk_edge(self) -> bool:
        ox, oy = self.to_offset()
        lx, ly = ox % CHUNK_SIZE, oy % CHUNK_SIZE
        edge = CHUNK_SIZE - 1
        return lx == 0 or ly == 0 or lx == edge or ly == edge

    def to_chunk_pos(self) -> IVec2:
        ox, oy = self.to_offset()
        return (ox // CHUNK_SIZE, oy // CHUNK_SIZE)

    def to_chunk(self) -> HexCoord:
        """This coordinate expressed relative to its own chunk."""
        cx, cy = self.to_chunk_pos()
        ox, oy = self.to_offset()
        return HexCoord.from_offset((ox - cx * CHUNK_SIZE, oy - cy * CHUNK_SIZE))

    def to_world(self, height: float) -> Vec3:
        return offset_to_world(self.to_offset(), height)

    def to_offset(self) -> IVec2:
        return (self.x + _trunc_div(self.y, 2), self.y)

    def to_index(self, width: int) -> int:
        """Row-major index of this tile in a grid of the given width."""
        return (self.x + self.y * width) + _trunc_div(self.y, 2)

    def to_chunk_index(self, width: int) -> int:
        """Index of this tile's chunk; width is counted in chunks."""
        cx, cy = self.to_chunk_pos()
        return cx + cy * width

    def to_chunk_local_index(self) -> int:
        """Index of this tile inside its chunk."""
        return self.to_chunk().to_index(CHUNK_SIZE)

    def distance(self, other: HexCoord) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)

    def rotate_around(self, center: HexCoord, angle: int) -> HexCoord:
        """Rotate in steps of 60 degrees around center."""
        if self == center or angle == 0:
            return self
        a = _trunc_rem(angle, 6)
        px, py, pz = self.x - center.x, self.y - center.y, self.z - center.z
        if a > 0:
            for _ in range(a):
                px, py, pz = -pz, -px, -py
        else:
            for _ in range(-a):
                px, py, pz = -py, -pz, -px
        return HexCoord(px + center.x, py + center.y)

    def scale(self, direction: int, radius: int) -> HexCoord:
        dx, dy, _ = self.DIRECTIONS[direction % 6]
        return HexCoord(self.x + dx * radius, self.y + dy * radius)

    def get_neighbor(self, direction: int) -> HexCoord:
        dx, dy, _ = self.DIRECTIONS[direction % 6]
        return HexCoord(self.x + dx, self.y + dy)

    def get_neighbors(self) -> list[HexCoord]:
        return [self.get_neighbor(i) for i in range(6)]

    def _spiral(self, radius: int) -> Iterator[HexCoord]:
        for k in range(radius + 1):
            p = self.scale(4, k)
            for i in range(6):
                for _ in range(k):
                    p = p.get_neighbor(i)
                    yield p

    def hex_select(self, radius: int, include_center: bool) -> list[HexCoord]:
        _require_radius(radius)
        result = [self] if include_center else []
        result.extend(self._spiral(radius))
        return result

    def hex_select_bounded(
        self, radius: int, include_center: bool, height: int, width: int
    ) -> list[HexCoord]:
        _require_radius(radius)
        result = []
        if include_center and self.is_in_bounds(height, width):
            result.append(self)
        result.extend(p for p in self._spiral(radius) if p.is_in_bounds(height, width))
        return result

    def select_ring(self, radius: int) -> list[HexCoord]:
        _require_radius(radius)
        result = []
        p = self.scale(4, radius)
        for i in range(6):
            for _ in range(radius):
                result.append(p)
                p = p.get_neighbor(i)
        return result


HexCoord.ZERO = HexCoord(0, 0)