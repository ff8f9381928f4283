import pytest

from phos.chunk import Chunk


def _chunk_with_coded_heights():
    heights = [float(x * 1000 + z) for z in range(Chunk.SIZE) for x in range(Chunk.SIZE)]
    return Chunk(heights=heights)


def test_default_chunk_is_flat():
    chunk = Chunk()
    assert len(chunk.heights) == Chunk.AREA
    assert set(chunk.heights) == {0.0}
    assert chunk.chunk_offset == (0, 0)


def test_pos_z_edge():
    edge = _chunk_with_coded_heights().get_pos_z_edge()
    assert len(edge) == Chunk.SIZE
    assert all(edge[x] == x * 1000 + (Chunk.SIZE - 1) for x in range(Chunk.SIZE))


def test_neg_z_edge():
    edge = _chunk_with_coded_heights().get_neg_z_edge()
    assert len(edge) == Chunk.SIZE
    assert all(edge[x] == x * 1000 for x in range(Chunk.SIZE))


def test_pos_x_edge():
    edge = _chunk_with_coded_heights().get_pos_x_edge()
    assert len(edge) == Chunk.SIZE
    assert all(edge[z] == (Chunk.SIZE - 1) * 1000 + z for z in range(Chunk.SIZE))


def test_neg_x_edge():
    edge = _chunk_with_coded_heights().get_neg_x_edge()
    assert len(edge) == Chunk.SIZE
    assert all(edge[z] == z for z in range(Chunk.SIZE))


def test_wrong_length_raises():
    with pytest.raises(ValueError):
        Chunk(heights=[0.0] * 10)
    with pytest.raises(ValueError):
        Chunk(biome_id=[0])


def test_chunks_do_not_share_storage():
    a = Chunk()
    b = Chunk()
    a.heights[0] = 3.0
    assert b.heights[0] == 0.0