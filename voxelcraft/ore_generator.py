"""Deterministic placement of ore veins inside generated chunks."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from .chunk import CHUNK_SIZE_X, CHUNK_SIZE_Y, CHUNK_SIZE_Z, Block, Chunk

_MASK = 0xFFFFFFFF
_VEIN_GROWTH_PROBABILITY = 0.6
_NEIGHBOURS = (
    (1, 0, 0),
    (-1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
    (0, 0, 1),
    (0, 0, -1),
)


@dataclass(frozen=True)
class OreConfig:
    """Distribution of one ore type."""

    ore_block: Block
    max_y: int
    min_vein_size: int
    max_vein_size: int
    veins_per_chunk: int


_DEFAULT_CONFIGS = (
    OreConfig(Block.COAL_ORE, 128, 3, 8, 20),
    OreConfig(Block.IRON_ORE, 64, 3, 6, 15),
    OreConfig(Block.GOLD_ORE, 32, 3, 5, 6),
    OreConfig(Block.DIAMOND_ORE, 16, 2, 4, 3),
)


def _hash_state(state: int) -> int:
    state &= _MASK
    state ^= state >> 16
    state = (state * 0x45D9F3B) & _MASK
    state ^= state >> 16
    state = (state * 0x45D9F3B) & _MASK
    state ^= state >> 16
    return state


class _Rng:
    """Hash-chained 32-bit random stream."""

    __slots__ = ("state",)

    def __init__(self, state: int) -> None:
        self.state = state & _MASK

    def random(self) -> float:
        self.state = _hash_state(self.state + 1)
        return (self.state & 0xFFFF) / 65536.0

    def randint(self, lo: int, hi: int) -> int:
        if lo >= hi:
            return lo
        self.state = _hash_state(self.state + 1)
        return lo + self.state % (hi - lo + 1)


def _in_bounds(x: int, y: int, z: int) -> bool:
    return 0 <= x < CHUNK_SIZE_X and 1 <= y < CHUNK_SIZE_Y and 0 <= z < CHUNK_SIZE_Z


class OreGenerator:
    """Grows ore veins into the stone of a chunk, deterministically per seed."""

    def __init__(self, seed: int) -> None:
        self._seed = seed & _MASK
        self._configs = _DEFAULT_CONFIGS

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def ore_configs(self) -> tuple[OreConfig, ...]:
        """Ore types in placement order, most common first."""
        return self._configs

    def generate_ores(self, chunk: Chunk) -> None:
        """Place every ore type into ``chunk``, replacing stone only."""
        base = self._seed ^ 0xABCDEF01
        base ^= ((chunk.chunk_x & _MASK) * 374761393) & _MASK
        base ^= ((chunk.chunk_z & _MASK) * 668265263) & _MASK
        base = _hash_state(base)

        for config in self._configs:
            rng = _Rng(_hash_state(base ^ ((int(config.ore_block) * 1103515245) & _MASK)))
            for _ in range(config.veins_per_chunk):
                lx = rng.randint(0, CHUNK_SIZE_X - 1)
                y = rng.randint(1, config.max_y)
                lz = rng.randint(0, CHUNK_SIZE_Z - 1)
                self._place_vein(chunk, config, lx, y, lz, rng)

    @staticmethod
    def _place_vein(chunk: Chunk, config: OreConfig,
                    start_x: int, start_y: int, start_z: int, rng: _Rng) -> None:
        target = rng.randint(config.min_vein_size, config.max_vein_size)
        frontier: deque[tuple[int, int, int]] = deque()
        placed = 0

        if (_in_bounds(start_x, start_y, start_z) and start_y <= config.max_y
                and chunk.get_block(start_x, start_y, start_z) == Block.STONE):
            chunk.set_block(start_x, start_y, start_z, config.ore_block)
            placed += 1
            frontier.append((start_x, start_y, start_z))

        while frontier and placed < target:
            cx, cy, cz = frontier.popleft()
            for dx, dy, dz in _NEIGHBOURS:
                if placed >= target:
                    break
                nx, ny, nz = cx + dx, cy + dy, cz + dz
                if not _in_bounds(nx, ny, nz) or ny > config.max_y:
                    continue
                if chunk.get_block(nx, ny, nz) != Block.STONE:
                    continue
                if rng.random() < _VEIN_GROWTH_PROBABILITY:
                    chunk.set_block(nx, ny, nz, config.ore_block)
                    placed += 1
                    frontier.append((nx, ny, nz))