import pytest

from phos.chunk import Chunk
from phos.mesh_chunk import MeshChunkData
from phos.packed_mesh import generate_packed_chunk_mesh, pack_vertex_data


def _decode(word):
    return (word & 63, (word >> 6) & 63), (word >> 12) & 15, word >> 16


def _flat_chunk():
    return MeshChunkData(heights=[0.0] * Chunk.AREA, min_height=0.0, sealevel=0.0)


def test_offset_z_starts_at_bit_six():
    assert pack_vertex_data((0, 1), 0, 0) == 1 << 6


@pytest.mark.parametrize(
    "offset,vert,tex",
    [((0, 0), 0, 0), ((63, 63), 6, 4095), ((12, 40), 3, 17), ((1, 0), 1, 1)],
)
def test_pack_round_trip(offset, vert, tex):
    assert _decode(pack_vertex_data(offset, vert, tex)) == (offset, vert, tex)


def test_flat_chunk_vertex_counts():
    mesh = generate_packed_chunk_mesh(_flat_chunk())
    assert len(mesh.packed_data) == len(mesh.heights)
    assert len(mesh.packed_data) == 7 * Chunk.AREA
    assert len(mesh.indices) % 3 == 0
    assert all(i < len(mesh.packed_data) for i in mesh.indices)


def test_vertices_decode_within_chunk():
    chunk = _flat_chunk()
    chunk.textures = [(9, 2)] * Chunk.AREA
    mesh = generate_packed_chunk_mesh(chunk)
    for word in mesh.packed_data:
        (x, z), vert, tex = _decode(word)
        assert 0 <= x < Chunk.SIZE and 0 <= z < Chunk.SIZE
        assert 0 <= vert <= 6
        assert tex == 9


def test_raised_tile_adds_walls_with_side_texture():
    flat = generate_packed_chunk_mesh(_flat_chunk())
    chunk = _flat_chunk()
    chunk.textures = [(1, 3)] * Chunk.AREA
    chunk.heights[10 + 10 * Chunk.SIZE] = 5.0
    mesh = generate_packed_chunk_mesh(chunk)
    extra = mesh.packed_data[len(flat.packed_data):]
    assert len(extra) == 24
    assert set(mesh.heights) == {0.0, 5.0}
    wall_words = [w for w in mesh.packed_data if _decode(w)[2] == 3]
    assert len(wall_words) == len(extra)
    assert all(_decode(w)[0] == (10, 10) for w in wall_words)