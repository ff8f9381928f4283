import pytest

from phos.biome_map import BiomeChunk, BiomeData, BiomeMap
from phos.hexgrid import CHUNK_SIZE

AREA = CHUNK_SIZE * CHUNK_SIZE


class ConstantNoise:
    def __init__(self, value):
        self.value = value

    def get(self, point):
        return self.value


def generate_chunk(x, y, biome):
    return BiomeChunk(offset=(x, y), tiles=[list(biome) for _ in range(AREA)])


def one_hot(index, count):
    b = [0.0] * count
    b[index] = 1.0
    return b


def test_biome_blend_keeps_all_tiles():
    biome = BiomeMap((4, 4), 8)
    w, h = biome.size
    for y in range(h):
        for x in range(w):
            biome.chunks.append(generate_chunk(x, y, one_hot((x + y) % biome.biome_count, 8)))
    biome.blend(8)
    assert all(len(c.tiles) == AREA for c in biome.chunks), "Data Lost"
    assert all(sum(t) == pytest.approx(1.0) for c in biome.chunks for t in c.tiles)


def test_blend_zero_count_raises():
    with pytest.raises(ValueError):
        BiomeMap((1, 1), 2).blend(0)


def test_uniform_map_is_unchanged():
    biome = BiomeMap((1, 1), 3, [generate_chunk(0, 0, [0.0, 1.0, 0.0])])
    biome.blend(2)
    assert all(t == [0.0, 1.0, 0.0] for t in biome.chunks[0].tiles)


def test_blend_across_vertical_chunk_border():
    biome = BiomeMap((1, 2), 2, [generate_chunk(0, 0, [1.0, 0.0]), generate_chunk(0, 1, [0.0, 1.0])])
    biome.blend(1)
    assert biome.chunks[0].get_biome(10, 63) == pytest.approx([2 / 3, 1 / 3])
    assert biome.chunks[1].get_biome(10, 0) == pytest.approx([1 / 3, 2 / 3])
    assert biome.chunks[0].get_biome(10, 10) == pytest.approx([1.0, 0.0])


def test_blend_across_horizontal_chunk_border():
    biome = BiomeMap((2, 1), 2, [generate_chunk(0, 0, [1.0, 0.0]), generate_chunk(1, 0, [0.0, 1.0])])
    biome.blend(1)
    assert biome.get_biome(63, 5) == pytest.approx([2 / 3, 1 / 3])
    assert biome.get_biome(64, 5) == pytest.approx([1 / 3, 2 / 3])


def test_blend_keeps_data():
    chunk = generate_chunk(0, 0, [1.0])
    chunk.data[7] = BiomeData(moisture=1.0, temperature=2.0, continentality=3.0)
    biome = BiomeMap((1, 1), 1, [chunk])
    biome.blend(1)
    assert biome.get_biome_data(7, 0).as_vector() == (1.0, 2.0, 3.0)


def test_get_biome_out_of_bounds():
    biome = BiomeMap((1, 1), 2, [generate_chunk(0, 0, [1.0, 0.0])])
    assert biome.get_biome(-1, 0) is None
    assert biome.get_biome(0, CHUNK_SIZE) is None
    assert biome.get_biome(3, 3) == [1.0, 0.0]


def test_map_dimensions():
    biome = BiomeMap((3, 2), 4)
    assert biome.width == 3 * CHUNK_SIZE
    assert biome.height == 2 * CHUNK_SIZE


def test_biome_id_picks_strongest():
    chunk = generate_chunk(0, 0, [0.2, 0.7, 0.1])
    assert chunk.get_biome_id(0, 0) == 1
    zero = generate_chunk(0, 0, [0.0, 0.0])
    assert zero.get_biome_id(5, 5) == 0


def test_map_biome_id_uses_right_chunk():
    biome = BiomeMap((2, 1), 2, [generate_chunk(0, 0, [1.0, 0.0]), generate_chunk(1, 0, [0.0, 1.0])])
    assert biome.get_biome_id(3, 3) == 0
    assert biome.get_biome_id(CHUNK_SIZE + 3, 3) == 1


def test_dither_with_neutral_noise_matches_plain_choice():
    biome = BiomeMap((1, 1), 3, [generate_chunk(0, 0, [0.3, 0.5, 0.2])])
    noise = ConstantNoise(0.5)
    assert biome.get_biome_id_dithered(4, 4, noise, 10.0) == biome.get_biome_id(4, 4)


def test_dither_can_switch_biome():
    chunk = generate_chunk(0, 0, [0.6, 0.4])
    assert chunk.get_biome_id_dithered(1, 1, ConstantNoise(-1.0), 10.0) == 1


def test_biome_data_vector_order():
    data = BiomeData(moisture=1.0, temperature=2.0, continentality=3.0)
    assert data.as_vector() == (data.moisture, data.temperature, data.continentality)