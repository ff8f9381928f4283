# phos

Building blocks for a hex-grid real-time strategy game: hexagonal coordinates,
noise-driven terrain and biome generation, chunk mesh and collider generation,
map rendering to Pillow images, building placement maps, unit navigation and
path finding, and a spatial index for units.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Overview

| Module | What it provides |
| --- | --- |
| `phos.hexgrid` | `HexCoord` cube coordinates, offset/world conversions, neighbour, ring and area selection |
| `phos.chunk` | `Chunk`, a 64×64 block of tile heights, textures and biome ids |
| `phos.geometry` | Hex corner, water corner and wall normal tables, vertex attribute descriptions |
| `phos.config` | `GenerationConfig`, `NoiseConfig`, `GeneratorLayer` |
| `phos.noise` | Seeded `Simplex` noise and layered sampling (`sample_point`, `sample_simple`, `sample_rigid`) |
| `phos.biomes` | `BiomeAsset`, `BiomePainter`, `TileAsset`, `TileManager`, `TileMapperAsset` |
| `phos.biome_map` | `BiomeMap`, `BiomeChunk`, `BiomeData`, with repeated 3×3 blending of biome weights |
| `phos.heightmap` | `generate_heightmap`, `generate_biomes`, `generate_biome_chunk`, `generate_chunk`, `generate_noise_map` |
| `phos.world_map` | `Map` with height sampling, area and ring selection, and `create_crater` |
| `phos.mesh_chunk` | `MeshChunkData`, the per-chunk input to mesh and collider generation |
| `phos.mesh_generator` | `Mesh`, `generate_chunk_mesh`, `generate_chunk_water_mesh`, `create_tile`, `create_tile_wall` |
| `phos.colliders` | `generate_chunk_collider`, returning vertices and triangles |
| `phos.packed_mesh` | `PackedMesh`, `generate_packed_chunk_mesh`, `pack_vertex_data` |
| `phos.painting` | `paint_map`, `paint_chunk`, `prepare_chunk_mesh` |
| `phos.map_images` | `render_map`, `render_biome_map`, `render_biome_noise_map`, `render_image` and their `update_*` forms |
| `phos.coords` | `CoordsCollection` for translated and rotated groups of hexes |
| `phos.footprint` | `BuildingFootprint` |
| `phos.buildings` | `BuildingMap`, `BuildingChunk`, `BuildingEntry`, `BuildQueue`, `QueueEntry`, `BuildingIdentifier` |
| `phos.building_types` | `BuildingAsset`, `BuildingType`, `Tier`, `StatusEffect`, `ResourceIdentifier` and building info records |
| `phos.states` | Game state enums and the `HeightChanged`, `TypeChanged` and `ChunkModifiedEvent` messages |
| `phos.nav_data` | `NavData`, `NavTile` |
| `phos.pathing` | `calculate_path` (A* with squared height difference as step cost), `get_end_points`, `group_requests_by_target` |
| `phos.spatial` | `UnitSpatialSet`, a grid index of `UnitEntity` values queried by rectangle or circle |
| `phos.camera` | `PhosCamera`, `OrbitCamera`, `CameraBounds`, `RenderDistanceSettings`, `sample_ground` |

## Example

```python
from phos.hexgrid import HexCoord

center = HexCoord.from_offset_pos(3, 3)
ring = center.select_ring(2)          # the 12 tiles at ring 2
area = center.hex_select(2, True)     # center plus everything within 2
assert all(center.distance(c) == 4 for c in ring)  # distance sums all three cube axes
```

Generating a world needs a `GenerationConfig` and a `BiomePainter` holding
`BiomeAsset` values; `generate_heightmap(cfg, seed, painter)` returns the `Map`
and its `BiomeMap`. Once every biome has a `TileMapperAsset` attached,
`paint_map(world_map, painter)` assigns tile textures. A map can be turned into
a Pillow image with `render_map(world_map, smooth)` and saved with Pillow.

Definitions such as `BiomeAsset`, `TileAsset`, `GeneratorLayer`, `NoiseConfig`
and `BuildingAsset` are read from plain mappings with their `from_dict`
class methods.

## What this package does not do

- It has no window, renderer, game loop or input handling; meshes and colliders
  are returned as plain lists of vertices, uvs, normals and indices.
- It does not read definition files from disk; `from_dict` takes mappings
  that the caller has already parsed.
- It does not spawn buildings or units into a scene and has no command-line
  program.