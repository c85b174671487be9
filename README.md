# voxelcraft

Building blocks for a block-based voxel world, with no window or graphics
stack required. Everything is plain Python with no third-party dependencies.

## Modules

- `voxelcraft.math_utils` — `lerp`, `clamp`, `int_floor` and `mod`
  (non-negative modulo, so `mod(-1, 16) == 15`).
- `voxelcraft.noise` — `PerlinNoise(seed)` with `noise2d`, `noise3d`,
  `octave_noise2d` and `octave_noise3d`. The octave functions raise
  `ValueError` when `octaves` is below 1.
- `voxelcraft.game_loop` — `GameLoop`, a fixed-timestep accumulator (20 ticks
  per second by default) with `accumulate`, `interpolation`, `accumulator`,
  `tick_duration`, `total_ticks` and `reset`; plus `compute_ao` (ambient
  occlusion factor from 0–3 solid neighbours) and `compute_linear_fog`.
- `voxelcraft.mesh` — `Vertex` and `MeshData` containers (`empty`, `clear`).
- `voxelcraft.chunk` — the `Block` ids, `is_solid`, and `Chunk`, a
  16×256×16 column holding one byte each of block id, light and fluid level,
  with a dirty flag (`is_dirty`, `clear_dirty`). Out-of-range local
  coordinates raise `IndexError`.
- `voxelcraft.region` — `RegionFile`, which stores up to 32×32 chunks in one
  file, zlib-compressed behind an 8192-byte offset table;
  `chunk_to_region_coord` and `chunk_to_region_offset`. Undecodable files
  raise `CorruptRegionError`.
- `voxelcraft.ore_generator` — `OreGenerator(seed)` grows coal, iron, gold and
  diamond veins into stone, deterministically per seed and chunk position.
  Its `ore_configs` list each ore's maximum height and vein sizes.
- `voxelcraft.particle` — `ParticleEmitter`, a fixed-size pool of `Particle`
  slots; `emit`, `emit_block_break`, `update`, `alive_count` and
  `block_color`. Emissions into a full pool are dropped.
- `voxelcraft.raycast` — `cast_ray`, a voxel grid traversal returning a
  `RaycastResult` with the block hit, the face normal and the distance.
- `voxelcraft.player` — `Player` with gravity, jumping and axis-by-axis
  collision against solid blocks, built on `AABB.sweep` and `SweptResult`.

## Installing

```
pip install .
```

## Examples

Fill a chunk with stone, grow ores, and look down into it:

```python
from voxelcraft.chunk import Block, Chunk, is_solid
from voxelcraft.ore_generator import OreGenerator
from voxelcraft.raycast import cast_ray

chunk = Chunk(0, 0)
for x in range(16):
    for z in range(16):
        for y in range(1, 60):
            chunk.set_block(x, y, z, Block.STONE)

OreGenerator(42).generate_ores(chunk)

def query(x, y, z):
    if 0 <= x < 16 and 0 <= y < 256 and 0 <= z < 16:
        return chunk.get_block(x, y, z)
    return Block.AIR

hit = cast_ray((0.5, 70.5, 0.5), (0.0, -1.0, 0.0), 20.0, query, is_solid)
print(hit.hit, hit.block_position, hit.face_normal)  # True (0, 59, 0) (0, 1, 0)
```

Store the chunk and read it back:

```python
from voxelcraft.region import RegionFile

region = RegionFile("region_0_0.dat")
region.save_chunk(chunk)
restored = region.load_chunk(0, 0)
assert restored.blocks == chunk.blocks
```

Let a player fall onto the stone, one tick at a time:

```python
from voxelcraft.game_loop import GameLoop
from voxelcraft.player import Player

player = Player((0.5, 65.0, 0.5))
loop = GameLoop()
for _ in range(loop.accumulate(1.0)):
    player.update(query)
print(player.position, player.is_grounded())
```

## What this package does not do

It has no window, renderer, input handling or command to start a game. It
does not generate terrain, biomes, caves or trees, does not mesh chunks (the
`mesh` module only holds vertex data), and has no multi-chunk world manager,
lighting, fluid flow or whole-world save format; region files store single
chunks only.

## Running the tests

```
pip install .[test]
pytest
```