"""Settings that drive terrain and biome generation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from phos.hexgrid import CHUNK_SIZE


def _require(data: Mapping[str, Any], keys: tuple[str, ...], kind: str) -> None:
    missing = [key for key in keys if key not in data]
    if missing:
        raise ValueError(f"{kind} is missing field(s): {', '.join(missing)}")


def _as_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a boolean, got {value!r}")
    return value


@dataclass
class GeneratorLayer:
    """One octave stack of noise that contributes to an elevation sample."""

    strength: float = 0.0
    min_value: float = 0.0
    base_roughness: float = 0.0
    roughness: float = 0.0
    persistence: float = 0.0
    is_rigid: bool = False
    weight: float = 0.0
    weight_multi: float = 0.0
    layers: int = 0

    _FIELDS = (
        "strength",
        "min_value",
        "base_roughness",
        "roughness",
        "persistence",
        "is_rigid",
        "weight",
        "weight_multi",
        "layers",
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GeneratorLayer:
        """Build a layer from a mapping; every field is required."""
        _require(data, cls._FIELDS, "GeneratorLayer")
        return cls(
            strength=float(data["strength"]),
            min_value=float(data["min_value"]),
            base_roughness=float(data["base_roughness"]),
            roughness=float(data["roughness"]),
            persistence=float(data["persistence"]),
            is_rigid=_as_bool(data["is_rigid"], "is_rigid"),
            weight=float(data["weight"]),
            weight_multi=float(data["weight_multi"]),
            layers=int(data["layers"]),
        )


@dataclass
class NoiseConfig:
    """A noise scale together with the layers summed at each sample."""

    scale: float = 0.0
    layers: list[GeneratorLayer] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NoiseConfig:
        """Build a noise configuration from a mapping; both fields are required."""
        _require(data, ("scale", "layers"), "NoiseConfig")
        return cls(
            scale=float(data["scale"]),
            layers=[GeneratorLayer.from_dict(layer) for layer in data["layers"]],
        )


@dataclass
class GenerationConfig:
    """Everything needed to generate a map; size is counted in chunks."""

    sea_level: float = 0.0
    border_size: float = 0.0
    biome_blend: int = 0
    biome_dither: float = 0.0
    moisture_noise: NoiseConfig = field(default_factory=NoiseConfig)
    temperature_noise: NoiseConfig = field(default_factory=NoiseConfig)
    continent_noise: NoiseConfig = field(default_factory=NoiseConfig)
    size: tuple[int, int] = (0, 0)

    def get_total_width(self) -> int:
        """Width of the map in tiles."""
        return self.size[0] * CHUNK_SIZE

    def get_total_height(self) -> int:
        """Height of the map in tiles."""
        return self.size[1] * CHUNK_SIZE