"""Groups of hex points that can be placed at an origin and rotated."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from phos.hexgrid import HexCoord

IVec2 = tuple[int, int]


@dataclass(frozen=True)
class CoordsCollection:
    """Axial points with an origin, a translation and a rotation in 60-degree steps."""

    points: tuple[IVec2, ...] = ()
    origin: IVec2 = (0, 0)
    translation: IVec2 = (0, 0)
    rotation: int = 0

    @classmethod
    def from_hex(cls, coords: Iterable[HexCoord]) -> CoordsCollection:
        return cls(points=tuple(c.axial() for c in coords))

    @classmethod
    def from_points(cls, points: Iterable[IVec2]) -> CoordsCollection:
        return cls(points=tuple((int(x), int(y)) for x, y in points))

    def with_translation(self, translation: HexCoord) -> CoordsCollection:
        return replace(self, translation=translation.axial())

    def with_translation_vec(self, translation: IVec2) -> CoordsCollection:
        return replace(self, translation=(int(translation[0]), int(translation[1])))

    def with_origin(self, origin: HexCoord) -> CoordsCollection:
        return replace(self, origin=origin.axial())

    def with_rotation(self, rotation: int) -> CoordsCollection:
        return replace(self, rotation=rotation)

    def get_coords(self) -> list[HexCoord]:
        """Points moved to the origin and rotated around it."""
        center = HexCoord.from_axial(self.origin)
        ox, oy = self.origin
        return [
            HexCoord.from_axial((px + ox, py + oy)).rotate_around(center, self.rotation)
            for px, py in self.points
        ]

    def __iter__(self) -> Iterator[HexCoord]:
        return iter(self.get_coords())