from phos.footprint import BuildingFootprint
from phos.hexgrid import HexCoord


def test_footprint_coords():
    fp = BuildingFootprint(footprint=[(0, 0), (1, 0)])
    assert fp.get_footprint(HexCoord.ZERO).get_coords() == [HexCoord(0, 0), HexCoord(1, 0)]
    assert fp.get_footprint(HexCoord(3, 4)).translation == (3, 4)


def test_single_tile_neighbors():
    fp = BuildingFootprint(footprint=[(0, 0)])
    assert fp.get_neighbors(HexCoord.ZERO).get_coords() == HexCoord(0, 0).get_neighbors()


def test_neighbors_are_distinct_adjacent_and_outside():
    fp = BuildingFootprint(footprint=[(0, 0), (1, 0), (0, 1)])
    border = fp.get_neighbors(HexCoord.ZERO).get_coords()
    assert len(border) == len(set(border))
    tiles = [HexCoord.from_axial(p) for p in fp.footprint]
    for coord in border:
        assert coord not in tiles
        assert any(coord in t.get_neighbors() for t in tiles)
    expected = {n for t in tiles for n in t.get_neighbors()} - set(tiles)
    assert set(border) == expected