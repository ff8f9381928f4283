import pytest

from phos.spatial import Faction, UnitDomain, UnitEntity, UnitSpatialSet, UnitType


def make_unit(name, pos):
    return UnitEntity(name, UnitDomain.LAND, UnitType.BASIC, Faction.PLAYER, pos)


def test_add_and_find_in_rect():
    s = UnitSpatialSet(64.0)
    pos = (10.5, 0.0, 20.5)
    assert s.add_unit(make_unit("a", pos), pos) is not None
    assert s.get_units_in_rect((5.0, 15.0), (10.0, 10.0)) == ["a"]
    assert s.get_units_in_rect((30.0, 30.0), (5.0, 5.0)) == []


def test_outside_grid_is_rejected():
    s = UnitSpatialSet(64.0)
    pos = (100.0, 0.0, 5.0)
    assert s.add_unit(make_unit("a", pos), pos) is None


def test_circle_filters_by_distance():
    s = UnitSpatialSet(64.0)
    near = (10.0, 0.0, 10.0)
    far = (13.5, 0.0, 13.5)
    s.add_unit(make_unit("near", near), near)
    s.add_unit(make_unit("far", far), far)
    assert s.get_units_in_circle((10.0, 0.0, 10.0), 4.0) == ["near"]


def test_move_unit():
    s = UnitSpatialSet(64.0)
    start = (2.0, 0.0, 2.0)
    handle = s.add_unit(make_unit("a", start), start)
    assert s.move_unit(handle, (2.4, 0.0, 2.4)) is None
    new_handle = s.move_unit(handle, (30.0, 0.0, 30.0))
    assert new_handle is not None and new_handle != handle
    assert s.get_units_in_rect((0.0, 0.0), (5.0, 5.0)) == []
    assert s.get_units_in_rect((29.0, 29.0), (3.0, 3.0)) == ["a"]
    assert s.move_unit(handle, (1.0, 0.0, 1.0)) is None


def test_zero_area_query_raises():
    s = UnitSpatialSet(64.0)
    with pytest.raises(ValueError):
        s.get_units_in_rect((0.0, 0.0), (0.0, 4.0))


def test_invalid_map_size():
    with pytest.raises(ValueError):
        UnitSpatialSet(0.0)