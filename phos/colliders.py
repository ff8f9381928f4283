"""Collision triangles for a terrain chunk."""

from __future__ import annotations

from collections.abc import Sequence

from phos.geometry import HEX_CORNERS
from phos.hexgrid import CHUNK_SIZE, OUTER_RADIUS, HexCoord, offset3d_to_world
from phos.mesh_chunk import MeshChunkData

Vec3 = tuple[float, float, float]
Triangle = tuple[int, int, int]


def _add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def generate_chunk_collider(chunk: MeshChunkData) -> tuple[list[Vec3], list[Triangle]]:
    """Vertices and triangles covering every tile top and its lower walls."""
    verts: list[Vec3] = []
    triangles: list[Triangle] = []
    for z in range(CHUNK_SIZE):
        for x in range(CHUNK_SIZE):
            height = chunk.heights[x + z * CHUNK_SIZE]
            neighbors = chunk.get_neighbors(HexCoord.from_offset_pos(x, z))
            tile_pos = offset3d_to_world((float(x), height, float(z)))
            _create_tile_collider(tile_pos, verts, triangles, neighbors)
    return verts, triangles


def _create_tile_collider(
    pos: Vec3, verts: list[Vec3], triangles: list[Triangle], neighbors: Sequence[float]
) -> None:
    idx = len(verts)
    verts.extend(_add(pos, corner) for corner in HEX_CORNERS)
    triangles.extend(
        (
            (idx, idx + 1, idx + 5),
            (idx + 1, idx + 2, idx + 5),
            (idx + 2, idx + 4, idx + 5),
            (idx + 2, idx + 3, idx + 4),
        )
    )
    for direction, n_height in enumerate(neighbors):
        if n_height < pos[1]:
            bottom = min(n_height, pos[1] - OUTER_RADIUS / 2.0)
            _create_tile_wall_collider(
                idx, (pos[0], bottom, pos[2]), direction, verts, triangles
            )


def _create_tile_wall_collider(
    idx: int, pos: Vec3, direction: int, verts: list[Vec3], triangles: list[Triangle]
) -> None:
    idx2 = len(verts)
    verts.append(_add(pos, HEX_CORNERS[direction % 6]))
    verts.append(_add(pos, HEX_CORNERS[(direction + 1) % 6]))
    triangles.append((idx + direction, idx + (direction + 1) % 6, idx2 + 1))
    triangles.append((idx + direction, idx2 + 1, idx2))