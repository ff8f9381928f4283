"""The tiles a building covers and the tiles bordering it."""

from __future__ import annotations

from dataclasses import dataclass, field

from phos.coords import CoordsCollection
from phos.hexgrid import HexCoord

IVec2 = tuple[int, int]


@dataclass
class BuildingFootprint:
    """Axial offsets of the tiles a building occupies."""

    footprint: list[IVec2] = field(default_factory=list)

    def get_footprint(self, position: HexCoord) -> CoordsCollection:
        return CoordsCollection.from_points(self.footprint).with_translation(position)

    def get_neighbors(self, position: HexCoord) -> CoordsCollection:
        """Distinct tiles adjacent to the footprint but not part of it."""
        occupied = set(self.footprint)
        border = dict.fromkeys(
            n.axial()
            for p in self.footprint
            for n in HexCoord.from_axial(p).get_neighbors()
            if n.axial() not in occupied
        )
        return CoordsCollection.from_points(border).with_translation(position)