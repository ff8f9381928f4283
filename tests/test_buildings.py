import pytest

from phos.buildings import (
    BuildingChunk,
    BuildingEntry,
    BuildingIdentifier,
    BuildingMap,
    BuildQueue,
    QueueEntry,
)
from phos.hexgrid import CHUNK_SIZE, HexCoord


def test_identifier_conversions():
    ident = BuildingIdentifier(3)
    assert int(ident) == 3
    assert [10, 20, 30, 40][ident] == 40
    assert BuildingIdentifier(3) == ident
    with pytest.raises(ValueError):
        BuildingIdentifier(-1)


def test_queue_entries_compare():
    queue = BuildQueue()
    queue.queue.append(QueueEntry(BuildingIdentifier(0), HexCoord(1, 1)))
    assert QueueEntry(BuildingIdentifier(0), HexCoord(1, 1)) in queue.queue
    assert QueueEntry(BuildingIdentifier(1), HexCoord(1, 1)) not in queue.queue


def test_entry_constructors():
    plain = BuildingEntry(HexCoord(0, 0), 1)
    assert plain.is_main and not plain.has_children and plain.main_entity is None
    parent = BuildingEntry.new_with_children(HexCoord(0, 0), 1, [2, 3])
    assert parent.has_children and parent.child_entities == [2, 3]
    child = BuildingEntry.new_with_parent(HexCoord(1, 0), 2, 1)
    assert not child.is_main and child.main_entity == 1


def test_map_layout():
    bmap = BuildingMap((3, 2))
    assert len(bmap.chunks) == 6
    assert [c.index for c in bmap.chunks] == list(range(6))
    assert bmap.chunks[4].offset == (1, 1)


def test_add_and_get_building():
    bmap = BuildingMap((2, 2))
    coord = HexCoord.from_offset_pos(CHUNK_SIZE + 5, 10)
    entry = BuildingEntry(coord, 7)
    bmap.add_building(entry)
    assert bmap.get_building(coord) is entry
    assert bmap.chunks[coord.to_chunk_index(2)].entries == [entry]
    assert bmap.get_building(HexCoord.from_offset_pos(5, 10)) is None


def test_buildings_in_range():
    bmap = BuildingMap((1, 1))
    near = BuildingEntry(HexCoord.from_offset_pos(10, 10), 1)
    far = BuildingEntry(HexCoord.from_offset_pos(30, 30), 2)
    bmap.add_building(near)
    bmap.add_building(far)
    center = HexCoord.from_offset_pos(11, 10)
    assert bmap.get_buildings_in_range(center, 2) == [near]
    with pytest.raises(ValueError):
        bmap.get_buildings_in_range(center, 0)


def test_out_of_map_raises():
    bmap = BuildingMap((1, 1))
    with pytest.raises(IndexError):
        bmap.get_building(HexCoord.from_offset_pos(5, CHUNK_SIZE + 1))


def test_chunk_get_building():
    chunk = BuildingChunk((0, 0), 0)
    entry = BuildingEntry(HexCoord(2, 2), 9)
    chunk.add_building(entry)
    assert chunk.get_building(HexCoord(2, 2)) is entry
    assert chunk.get_building(HexCoord(2, 3)) is None