"""Texturing chunks from their biomes and preparing chunk meshes."""

from __future__ import annotations

from phos.biomes import BiomePainter
from phos.chunk import Chunk
from phos.colliders import generate_chunk_collider
from phos.hexgrid import CHUNK_SIZE, offset_to_world
from phos.mesh_chunk import MeshChunkData
from phos.mesh_generator import Mesh, generate_chunk_mesh, generate_chunk_water_mesh
from phos.world_map import Map

Vec3 = tuple[float, float, float]
ColliderData = tuple[list[Vec3], list[tuple[int, int, int]]]


def paint_map(world_map: Map, painter: BiomePainter) -> None:
    """Assign top and side textures to every tile of the map."""
    for chunk in world_map.chunks:
        paint_chunk(chunk, painter)


def paint_chunk(chunk: Chunk, painter: BiomePainter) -> None:
    """Assign each tile the textures its biome's tile mapper picks for its height."""
    for idx, (height, biome_id) in enumerate(zip(chunk.heights, chunk.biome_id)):
        biome = painter.biomes[biome_id]
        mapper = biome.tile_mapper
        if mapper is None:
            raise ValueError(f"Biome {biome.name!r} has no tile mapper")
        tile = mapper.sample_tile(height)
        chunk.textures[idx] = (tile.texture_id, tile.side_texture_id)


def prepare_chunk_mesh(
    chunk: MeshChunkData,
    sealevel: float,
    chunk_offset: tuple[int, int],
    chunk_index: int,
    map_size: tuple[int, int],
) -> tuple[Mesh, Mesh, ColliderData, Vec3, int]:
    """Terrain mesh, water mesh, collider data, world position and index of a chunk."""
    chunk_mesh = generate_chunk_mesh(chunk)
    water_mesh = generate_chunk_water_mesh(chunk, sealevel, map_size[0], map_size[1])
    collider = generate_chunk_collider(chunk)
    pos = offset_to_world((chunk_offset[0] * CHUNK_SIZE, chunk_offset[1] * CHUNK_SIZE), 0.0)
    return chunk_mesh, water_mesh, collider, pos, chunk_index