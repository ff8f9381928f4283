"""Terrain and biome generation from layered noise."""

from __future__ import annotations

import math

from phos.biome_map import BiomeChunk, BiomeData, BiomeMap
from phos.biomes import BiomePainter
from phos.chunk import Chunk
from phos.config import GenerationConfig, NoiseConfig
from phos.hexgrid import CHUNK_SIZE
from phos.noise import Simplex, sample_point
from phos.world_map import Map


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def generate_heightmap(
    cfg: GenerationConfig, seed: int, painter: BiomePainter
) -> tuple[Map, BiomeMap]:
    """Generate the biome map and then the terrain chunks that follow from it."""
    biomes = generate_biomes(cfg, seed, painter)
    size_x, size_y = cfg.size
    chunks = [
        generate_chunk(x, z, cfg, seed, biomes.chunks[x + z * size_x], painter)
        for z in range(size_y)
        for x in range(size_x)
    ]
    min_level = min((c.min_level for c in chunks), default=math.inf)
    max_level = max((c.max_level for c in chunks), default=-math.inf)
    world = Map(
        chunks=chunks,
        height=size_y,
        width=size_x,
        sealevel=float(cfg.sea_level),
        min_level=min_level,
        max_level=max_level,
        biome_count=len(painter.biomes),
    )
    return world, biomes


def generate_biomes(cfg: GenerationConfig, seed: int, painter: BiomePainter) -> BiomeMap:
    """Sample climate for every tile, pick biomes and blend them cfg.biome_blend times."""
    biome_map = BiomeMap(size=cfg.size, biome_count=len(painter.biomes))
    size_x, size_y = cfg.size
    biome_map.chunks = [
        generate_biome_chunk(x, y, cfg, seed, painter)
        for y in range(size_y)
        for x in range(size_x)
    ]
    biome_map.blend(cfg.biome_blend)
    return biome_map


def generate_biome_chunk(
    chunk_x: int, chunk_y: int, cfg: GenerationConfig, seed: int, painter: BiomePainter
) -> BiomeChunk:
    """Climate data and one-hot biome weights for one chunk."""
    noise_m = Simplex(seed + 1)
    noise_t = Simplex(seed + 2)
    noise_c = Simplex(seed + 3)
    size = (float(cfg.size[0]), float(cfg.size[1]))
    biome_count = len(painter.biomes)

    def sample(x: float, z: float, noise_cfg: NoiseConfig, noise: Simplex, border: float) -> float:
        value = sample_point(x, z, noise_cfg, noise, size, cfg.border_size, border)
        return _clamp(value, 0.0, 100.0)

    data: list[BiomeData] = []
    tiles: list[list[float]] = []
    for z in range(CHUNK_SIZE):
        wz = float(z + chunk_y * CHUNK_SIZE)
        for x in range(CHUNK_SIZE):
            wx = float(x + chunk_x * CHUNK_SIZE)
            climate = BiomeData(
                moisture=sample(wx, wz, cfg.moisture_noise, noise_m, 100.0),
                temperature=sample(wx, wz, cfg.temperature_noise, noise_t, 50.0),
                continentality=sample(wx, wz, cfg.continent_noise, noise_c, 0.0),
            )
            weights = [0.0] * biome_count
            weights[painter.sample_biome_index(climate)] = 1.0
            data.append(climate)
            tiles.append(weights)

    return BiomeChunk(tiles=tiles, offset=(chunk_x, chunk_y), data=data)


def generate_noise_map(
    size: tuple[int, int], seed: int, cfg: NoiseConfig, border_size: float
) -> list[float]:
    """Row-major noise values for a map of size chunks."""
    noise = Simplex(seed)
    fsize = (float(size[0]), float(size[1]))
    width = size[0] * CHUNK_SIZE
    height = size[1] * CHUNK_SIZE
    return [
        sample_point(float(x), float(y), cfg, noise, fsize, border_size, 0.0)
        for y in range(height)
        for x in range(width)
    ]


def generate_chunk(
    chunk_x: int,
    chunk_z: int,
    cfg: GenerationConfig,
    seed: int,
    biome_chunk: BiomeChunk,
    painter: BiomePainter,
) -> Chunk:
    """Heights and dithered biome ids of one chunk, blending each biome's noise."""
    noise = Simplex(seed)
    size = (float(cfg.size[0]), float(cfg.size[1]))
    heights: list[float] = []
    biome_ids: list[int] = []
    for z in range(CHUNK_SIZE):
        wz = float(z + chunk_z * CHUNK_SIZE)
        for x in range(CHUNK_SIZE):
            wx = float(x + chunk_x * CHUNK_SIZE)
            weights = biome_chunk.get_biome(x, z)
            sample = 0.0
            for biome, blend in zip(painter.biomes, weights):
                if blend == 0.0:
                    continue
                sample += (
                    sample_point(wx, wz, biome.noise, noise, size, cfg.border_size, 0.0) * blend
                )
            biome_ids.append(biome_chunk.get_biome_id_dithered(x, z, noise, cfg.biome_dither))
            heights.append(sample)

    return Chunk(
        heights=heights,
        biome_id=biome_ids,
        chunk_offset=(chunk_x, chunk_z),
        min_level=min(heights),
        max_level=max(heights),
    )