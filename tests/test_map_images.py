import pytest
from PIL import Image

from phos.biome_map import BiomeChunk, BiomeData, BiomeMap
from phos.chunk import Chunk
from phos.hexgrid import CHUNK_SIZE, HexCoord
from phos.map_images import (
    render_biome_map,
    render_biome_noise_map,
    render_image,
    render_map,
    update_image,
)
from phos.world_map import Map

AREA = CHUNK_SIZE * CHUNK_SIZE


def flat_map(height=10.0, sealevel=5.0, biome_count=1):
    return Map(
        chunks=[Chunk(heights=[height] * AREA)],
        height=1,
        width=1,
        sealevel=sealevel,
        biome_count=biome_count,
    )


def test_render_image_gradient_endpoints():
    data = [float(i) for i in range(AREA)]
    image = render_image((1, 1), data, (1.0, 0.0, 0.0, 1.0), (0.0, 0.0, 1.0, 1.0))
    assert image.size == (CHUNK_SIZE, CHUNK_SIZE)
    assert image.getpixel((0, 0)) == (255, 0, 0, 255)
    assert image.getpixel((CHUNK_SIZE - 1, CHUNK_SIZE - 1)) == (0, 0, 255, 255)


def test_update_image_rejects_wrong_mode():
    image = Image.new("RGB", (CHUNK_SIZE, CHUNK_SIZE))
    with pytest.raises(ValueError):
        update_image((1, 1), [0.0] * AREA, (0, 0, 0, 1), (1, 1, 1, 1), image)


def test_flat_land_is_uniform_green():
    image = render_map(flat_map(), 0.1)
    pixels = set(image.getdata())
    assert len(pixels) == 1
    r, g, b, a = pixels.pop()
    assert g > r and g > b and a == 255


def test_water_is_blue():
    image = render_map(flat_map(height=1.0, sealevel=5.0), 0.1)
    r, g, b, _ = image.getpixel((3, 3))
    assert b > g and b > r


def test_height_difference_shades_tiles():
    world = flat_map()
    world.set_height(HexCoord.from_offset_pos(11, 10), 20.0)
    image = render_map(world, 0.1)
    base = sum(image.getpixel((0, 0))[:3])
    assert sum(image.getpixel((10, 10))[:3]) > base
    assert sum(image.getpixel((11, 10))[:3]) < base


def test_biome_noise_map_channels():
    data = [BiomeData(moisture=100.0, temperature=100.0, continentality=100.0)] * AREA
    biome_map = BiomeMap(size=(1, 1), biome_count=1, chunks=[BiomeChunk(tiles=[[1.0]] * AREA, data=data)])
    image = render_biome_noise_map(biome_map, (1.0, 0.0, 0.0))
    assert set(image.getdata()) == {(255, 0, 0, 255)}


def test_biome_map_distinguishes_biomes():
    tiles = [[1.0, 0.0] if i < AREA // 2 else [0.0, 1.0] for i in range(AREA)]
    biome_map = BiomeMap(size=(1, 1), biome_count=2, chunks=[BiomeChunk(tiles=tiles)])
    image = render_biome_map(flat_map(biome_count=2), biome_map)
    top = image.getpixel((5, 2))
    bottom = image.getpixel((5, CHUNK_SIZE - 2))
    assert top == image.getpixel((20, 5))
    assert top != bottom