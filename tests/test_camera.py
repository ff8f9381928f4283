import math

import pytest

from phos.camera import CameraBounds, OrbitCamera, PhosCamera, RenderDistanceSettings, sample_ground
from phos.chunk import Chunk
from phos.hexgrid import HexCoord
from phos.world_map import Map


@pytest.fixture
def world():
    return Map(chunks=[Chunk()], height=1, width=1, sealevel=2.0)


def test_camera_defaults():
    cam = PhosCamera()
    assert cam.min_height == 10.0
    assert cam.max_height == 420.0
    assert math.isclose(cam.min_angle, math.radians(20.0))


def test_orbit_forward_is_normalized():
    forward = OrbitCamera().forward
    assert math.isclose(math.hypot(*forward), 1.0)
    assert forward[0] == 0.0
    assert forward[1] < 0.0 < forward[2]


def test_bounds_padding():
    size = (100.0, 80.0)
    bounds = CameraBounds.from_size(size)
    px, pz = Chunk.WORLD_SIZE
    assert bounds.min == (-px, -pz)
    assert bounds.max == (size[0] + px, size[1] + pz)


def test_render_distance_ignores_camera_height():
    settings = RenderDistanceSettings()
    assert settings.render_distance == 500.0
    assert settings.is_visible((0.0, 10000.0, 0.0), (100.0, 0.0, 0.0))
    assert not settings.is_visible((0.0, 0.0, 0.0), (600.0, 0.0, 0.0))
    assert not settings.is_visible((0.0, 0.0, 0.0), (400.0, 0.0, 0.0), (200.0, 0.0, 0.0))


def test_sample_ground_floor_is_sealevel(world):
    pos = HexCoord.from_offset_pos(10, 10).to_world(0.0)
    assert sample_ground(pos, world) == world.sealevel


def test_sample_ground_takes_highest_neighbor(world):
    center = HexCoord.from_offset_pos(10, 10)
    world.set_height(center.get_neighbor(2), 5.0)
    assert sample_ground(center.to_world(0.0), world) == 5.0


def test_sample_ground_off_map(world):
    assert sample_ground((-500.0, 0.0, -500.0), world) == world.sealevel