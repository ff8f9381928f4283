"""Triangle meshes for terrain chunks and their water surfaces."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from phos.geometry import HEX_CORNERS, HEX_NORMALS, TEX_MULTI, WATER_HEX_CORNERS
from phos.hexgrid import CHUNK_SIZE, HexCoord, offset3d_to_world
from phos.mesh_chunk import MeshChunkData

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

UP: Vec3 = (0.0, 1.0, 0.0)

# Distance to land at which water reaches its deepest shade.
_MAX_WATER_DEPTH = 4.0


@dataclass
class Mesh:
    """An indexed triangle list with per-vertex uvs and normals."""

    positions: list[Vec3] = field(default_factory=list)
    uvs: list[Vec2] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3


def _add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _depth_uv(distance: float) -> float:
    """Map a distance to land in [0, 4] onto a depth coordinate running from 1 to 0."""
    return 1.0 - distance / _MAX_WATER_DEPTH


def generate_chunk_mesh(chunk: MeshChunkData) -> Mesh:
    """Top faces and walls for every tile of a chunk."""
    mesh = Mesh()
    for z in range(CHUNK_SIZE):
        for x in range(CHUNK_SIZE):
            idx = x + z * CHUNK_SIZE
            tile_pos = offset3d_to_world((float(x), chunk.heights[idx], float(z)))
            neighbors = chunk.get_neighbors(HexCoord.from_offset_pos(x, z))
            top, side = chunk.textures[idx]
            create_tile(mesh, tile_pos, neighbors, top, side)
    return mesh


def create_tile(
    mesh: Mesh,
    pos: Vec3,
    neighbors: Sequence[float],
    texture_index: int,
    side_texture_index: int,
) -> None:
    """Append one hex top face, plus a wall toward each lower neighbour."""
    idx = len(mesh.positions)
    for corner in HEX_CORNERS:
        mesh.positions.append(_add(pos, corner))
        u = corner[0] / 2.0 + 0.5
        v = corner[2] / 2.0 + 0.5
        mesh.uvs.append((u / TEX_MULTI[0] + texture_index, v / TEX_MULTI[1]))
        mesh.normals.append(UP)
    for off in (0, 2, 4):
        mesh.indices.extend((idx + off, idx + (off + 1) % 6, idx + (off + 2) % 6))
    mesh.indices.extend((idx, idx + 2, idx + 4))

    side_offset = (float(side_texture_index), 0.0)
    for direction, n_height in enumerate(neighbors):
        if n_height < pos[1]:
            create_tile_wall(mesh, pos, direction, n_height, side_offset)


def create_tile_wall(
    mesh: Mesh, pos: Vec3, direction: int, height: float, tex_offset: Vec2
) -> None:
    """Append a quad dropping from the tile edge in direction down to height."""
    p1 = _add(HEX_CORNERS[direction % 6], pos)
    p2 = _add(HEX_CORNERS[(direction + 1) % 6], pos)
    p3 = (p1[0], height, p1[2])
    p4 = (p2[0], height, p2[2])

    idx = len(mesh.positions)
    mesh.positions.extend((p1, p2, p3, p4))
    mesh.normals.extend([HEX_NORMALS[direction]] * 4)
    mesh.indices.extend((idx, idx + 2, idx + 1, idx + 1, idx + 2, idx + 3))

    tu, tv = tex_offset
    du = 1.0 / TEX_MULTI[0]
    dv = (pos[1] - height) / TEX_MULTI[1]
    mesh.uvs.extend(
        (
            (tu, tv),
            (du + tu, tv),
            (tu, dv + tv),
            (du + tu, dv + tv),
        )
    )


def generate_chunk_water_mesh(
    chunk: MeshChunkData, sealevel: float, map_width: int, map_height: int
) -> Mesh:
    """Water surface at sealevel over every tile at or below it."""
    mesh = Mesh()
    for z in range(CHUNK_SIZE):
        for x in range(CHUNK_SIZE):
            idx = x + z * CHUNK_SIZE
            if chunk.heights[idx] > sealevel:
                continue
            tile_pos = offset3d_to_world((float(x), sealevel, float(z)))
            neighbors, has_land = chunk.get_neighbors_with_water_info(
                HexCoord.from_offset_pos(x, z)
            )
            dist = chunk.distance_to_land[idx]
            if has_land:
                _create_water_shore_surface(mesh, tile_pos, dist, neighbors)
            else:
                _create_water_inner_surface(mesh, tile_pos, dist, neighbors)
    return mesh


def _create_water_inner_surface(
    mesh: Mesh,
    pos: Vec3,
    dist_to_land: float,
    neighbors: Sequence[tuple[float, Optional[float]]],
) -> None:
    idx = len(mesh.positions)
    for i, corner in enumerate(HEX_CORNERS):
        mesh.positions.append(_add(pos, corner))
        n1 = neighbors[i][1]
        n2 = neighbors[(i + 5) % 6][1]
        n1 = dist_to_land if n1 is None else n1
        n2 = dist_to_land if n2 is None else n2
        d = (n1 + n2 + dist_to_land) / 3.0
        mesh.uvs.append((0.0, _depth_uv(d)))
        mesh.normals.append(UP)
    for off in (0, 2, 4):
        mesh.indices.extend((idx + off, idx + (off + 1) % 6, idx + (off + 2) % 6))
    mesh.indices.extend((idx, idx + 2, idx + 4))


def _create_water_shore_surface(
    mesh: Mesh,
    pos: Vec3,
    dist_to_land: float,
    neighbors: Sequence[tuple[float, Optional[float]]],
) -> None:
    idx = len(mesh.positions)
    mesh.positions.append(pos)
    mesh.uvs.append((0.0, _depth_uv(dist_to_land)))
    mesh.normals.append(UP)

    corner_count = len(WATER_HEX_CORNERS)
    for i, corner in enumerate(WATER_HEX_CORNERS):
        mesh.positions.append(_add(pos, corner))
        ni = i // 2
        n_height, n_dist = neighbors[ni]
        nn_height, nn_dist = neighbors[(ni + 5) % 6]
        d = dist_to_land if n_dist is None else n_dist

        u = 1.0 if (nn_height > pos[1] or n_height > pos[1]) else 0.0
        if i % 2:
            if n_height <= pos[1]:
                u = 0.0
            v = _depth_uv((d + dist_to_land) / 2.0)
        else:
            d2 = dist_to_land if nn_dist is None else nn_dist
            v = _depth_uv((d + d2 + dist_to_land) / 3.0)

        mesh.indices.extend((idx, idx + 1 + i, idx + 1 + (i + 1) % corner_count))
        mesh.uvs.append((u, v))
        mesh.normals.append(UP)


def _is_finite(mesh: Mesh) -> bool:
    return all(math.isfinite(c) for p in mesh.positions for c in p)