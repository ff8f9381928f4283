"""Biome, tile and tile-mapper definitions and nearest-biome selection."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from phos.biome_map import BiomeData
from phos.config import NoiseConfig

BiomeVector = Union[BiomeData, Sequence[float]]


def _as_vector(data: BiomeVector) -> tuple[float, float, float]:
    if isinstance(data, BiomeData):
        return data.as_vector()
    x, y, z = data
    return (x, y, z)


@dataclass
class TileAsset:
    """A terrain tile type with its top and side texture indices."""

    name: str = ""
    texture_id: int = 0
    side_texture_id: int = 0
    id: int = 0
    texture: str = ""
    side_texture: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TileAsset:
        """Read a tile definition; id and texture paths are not read from data."""
        missing = [key for key in ("name", "texture_id", "side_texture_id") if key not in data]
        if missing:
            raise ValueError(f"TileAsset is missing field(s): {', '.join(missing)}")
        return cls(
            name=str(data["name"]),
            texture_id=int(data["texture_id"]),
            side_texture_id=int(data["side_texture_id"]),
        )


@dataclass
class TileManager:
    """Registry handing out sequential tile ids."""

    tiles: list[TileAsset] = field(default_factory=list)

    def register_tile(self, tile: TileAsset) -> int:
        tile_id = len(self.tiles)
        self.tiles.append(tile)
        return tile_id


@dataclass
class TileMapperAsset:
    """Maps a height to a tile through ascending thresholds."""

    tiles_path: list[str] = field(default_factory=list)
    thresholds: list[float] = field(default_factory=list)
    tiles: list[TileAsset] = field(default_factory=list)

    def sample_tile(self, height: float) -> TileAsset:
        """The tile of the first threshold at or above height, else the last tile."""
        for tile_index, threshold in enumerate(self.thresholds):
            if threshold >= height:
                return self.tiles[tile_index]
        if not self.tiles:
            raise ValueError("The tile mapper has no tiles")
        return self.tiles[-1]


@dataclass
class BiomeAsset:
    """A biome placed in moisture/temperature/continentality space."""

    moisture: float
    temperature: float
    continentality: float
    name: str
    tile_mapper_path: str
    noise: NoiseConfig
    tile_mapper: TileMapperAsset | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BiomeAsset:
        """Read a biome definition; the tile mapper itself is attached later."""
        keys = ("moisture", "temperature", "continentality", "name", "tile_mapper_path", "noise")
        missing = [key for key in keys if key not in data]
        if missing:
            raise ValueError(f"BiomeAsset is missing field(s): {', '.join(missing)}")
        return cls(
            moisture=float(data["moisture"]),
            temperature=float(data["temperature"]),
            continentality=float(data["continentality"]),
            name=str(data["name"]),
            tile_mapper_path=str(data["tile_mapper_path"]),
            noise=NoiseConfig.from_dict(data["noise"]),
        )

    def distance(self, data: BiomeVector) -> float:
        """Euclidean distance to a climate sample."""
        return math.dist((self.moisture, self.temperature, self.continentality), _as_vector(data))


@dataclass
class BiomePainter:
    """Picks the biome nearest to a climate sample."""

    biomes: list[BiomeAsset] = field(default_factory=list)

    def _require_biomes(self) -> None:
        if not self.biomes:
            raise ValueError("There are no biomes")

    def sample_biome(self, data: BiomeVector) -> BiomeAsset:
        return self.biomes[self.sample_biome_index(data)]

    def sample_biome_index(self, data: BiomeVector) -> int:
        self._require_biomes()
        best = 0
        best_distance = math.inf
        for biome_index, biome in enumerate(self.biomes):
            d = biome.distance(data)
            if d < best_distance:
                best, best_distance = biome_index, d
        return best