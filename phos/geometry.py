"""Fixed hex tile geometry shared by the mesh and collider generators."""

from __future__ import annotations

from dataclasses import dataclass

from phos.hexgrid import INNER_RADIUS, OUTER_RADIUS

Vec3 = tuple[float, float, float]

TEX_MULTI: tuple[float, float] = (1000.0, 1.0)

HEX_CORNERS: tuple[Vec3, ...] = (
    (0.0, 0.0, OUTER_RADIUS),
    (INNER_RADIUS, 0.0, 0.5 * OUTER_RADIUS),
    (INNER_RADIUS, 0.0, -0.5 * OUTER_RADIUS),
    (0.0, 0.0, -OUTER_RADIUS),
    (-INNER_RADIUS, 0.0, -0.5 * OUTER_RADIUS),
    (-INNER_RADIUS, 0.0, 0.5 * OUTER_RADIUS),
)

WATER_HEX_CORNERS: tuple[Vec3, ...] = (
    (0.0, 0.0, OUTER_RADIUS),
    (INNER_RADIUS / 2.0, 0.0, 0.75 * OUTER_RADIUS),
    (INNER_RADIUS, 0.0, 0.5 * OUTER_RADIUS),
    (INNER_RADIUS, 0.0, 0.0),
    (INNER_RADIUS, 0.0, -0.5 * OUTER_RADIUS),
    (INNER_RADIUS / 2.0, 0.0, -0.75 * OUTER_RADIUS),
    (0.0, 0.0, -OUTER_RADIUS),
    (-INNER_RADIUS / 2.0, 0.0, -0.75 * OUTER_RADIUS),
    (-INNER_RADIUS, 0.0, -0.5 * OUTER_RADIUS),
    (-INNER_RADIUS, 0.0, 0.0),
    (-INNER_RADIUS, 0.0, 0.5 * OUTER_RADIUS),
    (-INNER_RADIUS / 2.0, 0.0, 0.75 * OUTER_RADIUS),
)

_SIDE_Z = (OUTER_RADIUS + 0.5 * OUTER_RADIUS) / 2.0

HEX_NORMALS: tuple[Vec3, ...] = (
    (INNER_RADIUS / 2.0, 0.0, _SIDE_Z),
    (0.0, 0.0, 1.0),
    (INNER_RADIUS / -2.0, 0.0, _SIDE_Z),
    (INNER_RADIUS / -2.0, 0.0, -_SIDE_Z),
    (0.0, 0.0, -1.0),
    (INNER_RADIUS / 2.0, 0.0, -_SIDE_Z),
)


@dataclass(frozen=True)
class VertexAttribute:
    """A named custom vertex attribute with its shader id and data format."""

    name: str
    id: int
    format: str


ATTRIBUTE_PACKED_VERTEX_DATA = VertexAttribute("PackedVertexData", 7, "uint32")
ATTRIBUTE_VERTEX_HEIGHT = VertexAttribute("VertexHeight", 8, "float32")
ATTRIBUTE_TEXTURE_INDEX = VertexAttribute("TextureIndex", 988540917, "uint32")