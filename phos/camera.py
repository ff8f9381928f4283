"""Camera settings, bounds, render distance and ground sampling."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from phos.chunk import Chunk
from phos.hexgrid import HexCoord
from phos.world_map import Map

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


def _default_forward() -> Vec3:
    x, y, z = 0.0, -0.5, 0.5
    length = math.sqrt(x * x + y * y + z * z)
    return (x / length, y / length, z / length)


@dataclass
class PhosCamera:
    min_height: float = 10.0
    max_height: float = 420.0
    speed: float = 100.0
    zoom_speed: float = 20.0
    pan_speed: Vec2 = (0.8, 0.5)
    min_angle: float = math.radians(20.0)
    max_angle: float = 1.0


@dataclass
class OrbitCamera:
    """A camera orbiting a target point along a forward direction."""

    target: Vec3 = (0.0, 0.0, 0.0)
    distance: float = 40.0
    forward: Vec3 = field(default_factory=_default_forward)


@dataclass
class CameraBounds:
    min: Vec2 = (0.0, 0.0)
    max: Vec2 = (0.0, 0.0)

    @classmethod
    def from_size(cls, world_size: Sequence[float]) -> CameraBounds:
        """Bounds around a world of the given size, padded by one chunk."""
        px, pz = Chunk.WORLD_SIZE
        return cls(
            min=(-px, -pz),
            max=(world_size[0] + px, world_size[1] + pz),
        )


@dataclass
class RenderDistanceSettings:
    render_distance: float = 500.0

    def is_visible(
        self,
        camera_pos: Sequence[float],
        object_pos: Sequence[float],
        offset: Sequence[float] = (0.0, 0.0, 0.0),
    ) -> bool:
        """Whether an object is within render distance of the camera's ground point."""
        cam = (camera_pos[0], 0.0, camera_pos[2])
        target = tuple(o + d for o, d in zip(object_pos, offset))
        return not self.render_distance < math.dist(cam, target)


def sample_ground(pos: Sequence[float], world_map: Map) -> float:
    """Highest ground under pos and its neighbours, never below sea level."""
    tile = HexCoord.from_world_pos(tuple(pos))
    ground = world_map.sample_height(tile) if world_map.is_in_bounds(tile) else world_map.sealevel
    for h in world_map.get_neighbors(tile):
        if h is not None and h > ground:
            ground = h
    return max(ground, world_map.sealevel)