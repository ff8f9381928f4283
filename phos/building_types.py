"""Building definitions, resource identifiers, tiers and status effects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from phos.buildings import BuildingIdentifier
from phos.footprint import BuildingFootprint


def _require(data: Any, keys: tuple[str, ...], kind: str) -> None:
    if not isinstance(data, Mapping):
        raise ValueError(f"{kind} must be a mapping, got {data!r}")
    missing = [key for key in keys if key not in data]
    if missing:
        raise ValueError(f"{kind} is missing field(s): {', '.join(missing)}")


def _single_variant(data: Any, kind: str) -> tuple[str, Any]:
    if isinstance(data, Mapping) and len(data) == 1:
        name, payload = next(iter(data.items()))
        return str(name), payload
    raise ValueError(f"{kind} must be a mapping with exactly one variant, got {data!r}")


class Tier(Enum):
    ZERO = "Zero"
    ONE = "One"
    TWO = "Two"
    THREE = "Three"
    SUPERIOR = "Superior"


class StatusEffectKind(Enum):
    UNIT_RANGE = "UnitRange"
    UNIT_ATTACK = "UnitAttack"
    UNIT_HEALTH = "UnitHealth"
    STRUCTURE_RANGE = "StructureRange"
    STRUCTURE_ATTACK = "StructureAttack"
    STRUCTURE_HEALTH = "StructureHealth"
    BUILD_SPEED_MULTI = "BuildSpeedMulti"
    BUILD_COST_MULTI = "BuildCostMulti"
    CONSUMPTION_MULTI = "ConsumptionMulti"
    PRODUCTION_MULTI = "ProductionMulti"


@dataclass(frozen=True)
class StatusEffect:
    kind: StatusEffectKind
    value: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StatusEffect:
        """Read an effect written as {"UnitRange": 1.5}."""
        name, payload = _single_variant(data, "StatusEffect")
        try:
            kind = StatusEffectKind(name)
        except ValueError:
            raise ValueError(f"Unknown status effect {name!r}") from None
        return cls(kind, float(payload))


@dataclass(frozen=True)
class ResourceIdentifier:
    id: int
    qty: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ResourceIdentifier:
        _require(data, ("id", "qty"), "ResourceIdentifier")
        return cls(id=int(data["id"]), qty=int(data["qty"]))


@dataclass
class ResourceConduitInfo:
    range: int
    connection_range: int


@dataclass
class FactoryBuildingInfo:
    units_to_build: list[None] = field(default_factory=list)


@dataclass
class ResourceGatheringBuildingInfo:
    resources_to_gather: list[ResourceIdentifier]
    gather_range: int


@dataclass
class TechBuildingInfo:
    effect_range: int
    buildings_to_unlock: list[BuildingIdentifier] = field(default_factory=list)
    buffs: list[StatusEffect] = field(default_factory=list)


BuildingInfo = Union[ResourceGatheringBuildingInfo, FactoryBuildingInfo, ResourceConduitInfo]


def _gathering(data: Any) -> ResourceGatheringBuildingInfo:
    _require(data, ("resources_to_gather", "gather_range"), "ResourceGatheringBuildingInfo")
    return ResourceGatheringBuildingInfo(
        resources_to_gather=[ResourceIdentifier.from_dict(r) for r in data["resources_to_gather"]],
        gather_range=int(data["gather_range"]),
    )


def _factory(data: Any) -> FactoryBuildingInfo:
    _require(data, ("units_to_build",), "FactoryBuildingInfo")
    units = list(data["units_to_build"])
    if any(unit is not None for unit in units):
        raise ValueError("units_to_build entries must be empty")
    return FactoryBuildingInfo(units_to_build=units)


def _conduit(data: Any) -> ResourceConduitInfo:
    _require(data, ("range", "connection_range"), "ResourceConduitInfo")
    return ResourceConduitInfo(range=int(data["range"]), connection_range=int(data["connection_range"]))


_INFO_READERS = {
    "Gathering": _gathering,
    "FactoryBuildingInfo": _factory,
    "ResourceConduit": _conduit,
}


@dataclass
class BuildingType:
    """The kind of a building and the details that go with it."""

    kind: str = "Basic"
    info: Optional[BuildingInfo] = None

    @classmethod
    def from_dict(cls, data: Union[str, Mapping[str, Any]]) -> BuildingType:
        """Read "Basic" or a one-variant mapping such as {"ResourceConduit": {...}}."""
        if isinstance(data, str):
            if data != "Basic":
                raise ValueError(f"Building type {data!r} needs details")
            return cls()
        name, payload = _single_variant(data, "BuildingType")
        if name == "Basic":
            if payload is not None:
                raise ValueError("Basic buildings take no details")
            return cls()
        reader = _INFO_READERS.get(name)
        if reader is None:
            raise ValueError(f"Unknown building type {name!r}")
        return cls(kind=name, info=reader(payload))


@dataclass
class BuildingAsset:
    name: str
    description: str
    footprint: BuildingFootprint
    prefab_path: str
    base_mesh_path: str
    cost: list[ResourceIdentifier]
    consumption: list[ResourceIdentifier]
    production: list[ResourceIdentifier]
    health: int
    building_type: BuildingType

    _FIELDS = (
        "name",
        "description",
        "footprint",
        "prefab_path",
        "base_mesh_path",
        "cost",
        "consumption",
        "production",
        "health",
        "building_type",
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BuildingAsset:
        _require(data, cls._FIELDS, "BuildingAsset")
        _require(data["footprint"], ("footprint",), "BuildingFootprint")
        points = [(int(p[0]), int(p[1])) for p in data["footprint"]["footprint"]]

        def resources(key: str) -> list[ResourceIdentifier]:
            return [ResourceIdentifier.from_dict(r) for r in data[key]]

        return cls(
            name=str(data["name"]),
            description=str(data["description"]),
            footprint=BuildingFootprint(footprint=points),
            prefab_path=str(data["prefab_path"]),
            base_mesh_path=str(data["base_mesh_path"]),
            cost=resources("cost"),
            consumption=resources("consumption"),
            production=resources("production"),
            health=int(data["health"]),
            building_type=BuildingType.from_dict(data["building_type"]),
        )