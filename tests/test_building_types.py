import pytest

from phos.building_types import (
    BuildingAsset,
    BuildingType,
    FactoryBuildingInfo,
    ResourceConduitInfo,
    ResourceGatheringBuildingInfo,
    ResourceIdentifier,
    StatusEffect,
    StatusEffectKind,
    Tier,
)


def sample_building():
    return {
        "name": "Extractor",
        "description": "Pulls ore from the ground",
        "footprint": {"footprint": [[0, 0], [1, 0]]},
        "prefab_path": "models/extractor.glb",
        "base_mesh_path": "Base",
        "cost": [{"id": 1, "qty": 20}],
        "consumption": [],
        "production": [{"id": 2, "qty": 3}],
        "health": 150,
        "building_type": {
            "Gathering": {"resources_to_gather": [{"id": 2, "qty": 1}], "gather_range": 4}
        },
    }


def test_building_asset_from_dict():
    asset = BuildingAsset.from_dict(sample_building())
    assert asset.name == "Extractor"
    assert asset.footprint.footprint == [(0, 0), (1, 0)]
    assert asset.cost == [ResourceIdentifier(1, 20)]
    assert asset.consumption == []
    assert asset.health == 150
    assert asset.building_type.kind == "Gathering"
    assert asset.building_type.info == ResourceGatheringBuildingInfo([ResourceIdentifier(2, 1)], 4)


def test_building_asset_missing_field():
    data = sample_building()
    del data["health"]
    with pytest.raises(ValueError):
        BuildingAsset.from_dict(data)


def test_building_type_variants():
    assert BuildingType.from_dict("Basic") == BuildingType()
    conduit = BuildingType.from_dict({"ResourceConduit": {"range": 3, "connection_range": 6}})
    assert conduit.info == ResourceConduitInfo(3, 6)
    factory = BuildingType.from_dict({"FactoryBuildingInfo": {"units_to_build": [None, None]}})
    assert factory.info == FactoryBuildingInfo([None, None])


def test_building_type_errors():
    with pytest.raises(ValueError):
        BuildingType.from_dict({"Castle": {}})
    with pytest.raises(ValueError):
        BuildingType.from_dict("Gathering")
    with pytest.raises(ValueError):
        BuildingType.from_dict({"Basic": None, "ResourceConduit": {}})


def test_status_effect_from_dict():
    effect = StatusEffect.from_dict({"UnitRange": 1.5})
    assert effect.kind is StatusEffectKind.UNIT_RANGE
    assert effect.value == 1.5
    with pytest.raises(ValueError):
        StatusEffect.from_dict({"Flying": 1.0})


def test_resource_identifier_requires_fields():
    with pytest.raises(ValueError):
        ResourceIdentifier.from_dict({"id": 1})


def test_tier_names():
    assert Tier("Superior") is Tier.SUPERIOR
    assert [t.value for t in Tier][:2] == ["Zero", "One"]