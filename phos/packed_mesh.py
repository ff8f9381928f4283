"""Compact chunk meshes whose vertices are packed into single integers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from phos.hexgrid import CHUNK_SIZE, HexCoord
from phos.mesh_chunk import MeshChunkData

# Bit layout: 6 bits offset x, 6 bits offset z, 4 bits vertex, 12 bits texture.
_Z_SHIFT = 6
_VERT_SHIFT = 6 + 6
_TEX_SHIFT = 6 + 6 + 4


@dataclass
class PackedMesh:
    """Packed vertex words, per-vertex heights and triangle indices."""

    packed_data: list[int] = field(default_factory=list)
    heights: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


def pack_vertex_data(offset: tuple[int, int], vert: int, tex: int) -> int:
    """Pack a tile offset, a corner number (0 is the centre) and a texture index."""
    return (
        offset[0]
        + (offset[1] << _Z_SHIFT)
        + (vert << _VERT_SHIFT)
        + (tex << _TEX_SHIFT)
    )


def generate_packed_chunk_mesh(chunk: MeshChunkData) -> PackedMesh:
    """A packed triangle-fan mesh of every tile with walls toward lower neighbours."""
    mesh = PackedMesh()
    for z in range(CHUNK_SIZE):
        for x in range(CHUNK_SIZE):
            idx = x + z * CHUNK_SIZE
            neighbors = chunk.get_neighbors(HexCoord.from_offset_pos(x, z))
            top, side = chunk.textures[idx]
            _create_packed_tile(mesh, (x, z), chunk.heights[idx], neighbors, top, side)
    return mesh


def _create_packed_tile(
    mesh: PackedMesh,
    offset: tuple[int, int],
    height: float,
    neighbors: Sequence[float],
    texture_index: int,
    side_texture_index: int,
) -> None:
    idx = len(mesh.packed_data)
    mesh.packed_data.append(pack_vertex_data(offset, 0, texture_index))
    mesh.heights.append(height)
    for i in range(6):
        mesh.packed_data.append(pack_vertex_data(offset, i + 1, texture_index))
        mesh.indices.extend((idx, idx + 1 + i, idx + 1 + (i + 1) % 6))
        mesh.heights.append(height)

    for side, n_height in enumerate(neighbors):
        if n_height < height:
            _create_packed_tile_wall(mesh, offset, height, n_height, side, side_texture_index)


def _create_packed_tile_wall(
    mesh: PackedMesh,
    offset: tuple[int, int],
    height_top: float,
    height_bottom: float,
    side: int,
    side_texture_index: int,
) -> None:
    idx = len(mesh.packed_data)
    side_2 = (side + 1) % 6 + 1
    first = pack_vertex_data(offset, side + 1, side_texture_index)
    second = pack_vertex_data(offset, side_2, side_texture_index)
    mesh.packed_data.extend((first, second, first, second))
    mesh.heights.extend((height_top, height_top, height_bottom, height_bottom))
    mesh.indices.extend((idx, idx + 2, idx + 1, idx + 1, idx + 2, idx + 3))