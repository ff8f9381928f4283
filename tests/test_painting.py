import pytest

from phos.biomes import BiomeAsset, BiomePainter, TileAsset, TileMapperAsset
from phos.chunk import Chunk
from phos.colliders import generate_chunk_collider
from phos.config import NoiseConfig
from phos.hexgrid import offset_to_world
from phos.mesh_chunk import MeshChunkData
from phos.mesh_generator import generate_chunk_mesh
from phos.painting import paint_chunk, paint_map, prepare_chunk_mesh
from phos.world_map import Map

LOW = TileAsset(name="sand", texture_id=2, side_texture_id=12)
HIGH = TileAsset(name="rock", texture_id=5, side_texture_id=15)


def _painter(with_mapper=True):
    mapper = TileMapperAsset(thresholds=[5.0], tiles=[LOW, HIGH]) if with_mapper else None
    biome = BiomeAsset(
        moisture=0.0,
        temperature=0.0,
        continentality=0.0,
        name="plains",
        tile_mapper_path="plains.mapper",
        noise=NoiseConfig(),
        tile_mapper=mapper,
    )
    return BiomePainter(biomes=[biome])


def _chunk():
    chunk = Chunk()
    chunk.heights[0] = 10.0
    chunk.heights[1] = 1.0
    return chunk


def test_paint_chunk_uses_thresholds():
    chunk = _chunk()
    paint_chunk(chunk, _painter())
    assert chunk.textures[0] == (HIGH.texture_id, HIGH.side_texture_id)
    assert chunk.textures[1] == (LOW.texture_id, LOW.side_texture_id)


def test_paint_map_paints_every_chunk():
    chunks = [_chunk(), _chunk()]
    world = Map(chunks=chunks, height=1, width=2)
    paint_map(world, _painter())
    for chunk in world.chunks:
        assert chunk.textures[0] == (HIGH.texture_id, HIGH.side_texture_id)
        assert chunk.textures[2] == (LOW.texture_id, LOW.side_texture_id)


def test_missing_mapper_raises():
    with pytest.raises(ValueError):
        paint_chunk(_chunk(), _painter(with_mapper=False))


def test_prepare_chunk_mesh_returns_parts():
    data = MeshChunkData(heights=[0.0] * Chunk.AREA)
    mesh, water, collider, pos, index = prepare_chunk_mesh(data, 0.0, (1, 2), 7, (4, 4))
    assert index == 7
    assert pos == offset_to_world((Chunk.SIZE, 2 * Chunk.SIZE), 0.0)
    assert mesh.positions == generate_chunk_mesh(data).positions
    assert collider == generate_chunk_collider(data)
    assert len(water.positions) > 0