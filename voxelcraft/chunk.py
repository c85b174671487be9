"""Block identifiers and the 16x256x16 chunk storage."""

from __future__ import annotations

from enum import IntEnum

CHUNK_SIZE_X = 16
CHUNK_SIZE_Y = 256
CHUNK_SIZE_Z = 16
CHUNK_COLUMNS = CHUNK_SIZE_X * CHUNK_SIZE_Z
CHUNK_VOLUME = CHUNK_SIZE_X * CHUNK_SIZE_Y * CHUNK_SIZE_Z


class Block(IntEnum):
    """Block type identifiers stored in chunks (one byte each)."""

    AIR = 0
    STONE = 1
    GRASS = 2
    DIRT = 3
    COBBLESTONE = 4
    OAK_PLANKS = 5
    BEDROCK = 6
    SAND = 7
    GRAVEL = 8
    GOLD_ORE = 9
    IRON_ORE = 10
    COAL_ORE = 11
    DIAMOND_ORE = 12
    OAK_LOG = 13
    OAK_LEAVES = 14
    GLASS = 15
    SNOW = 16
    OBSIDIAN = 17
    WATER = 18
    LAVA = 19
    TORCH = 20


_NON_SOLID = frozenset({Block.AIR, Block.WATER, Block.LAVA, Block.TORCH})


def is_solid(block_id: int) -> bool:
    """True for blocks that collide and stop rays."""
    return block_id not in _NON_SOLID


def _index(x: int, y: int, z: int) -> int:
    if not (0 <= x < CHUNK_SIZE_X and 0 <= y < CHUNK_SIZE_Y and 0 <= z < CHUNK_SIZE_Z):
        raise IndexError(f"local coordinates out of range: ({x}, {y}, {z})")
    return (y * CHUNK_SIZE_Z + z) * CHUNK_SIZE_X + x


class Chunk:
    """A column of blocks with per-block light and fluid levels.

    ``blocks``, ``light`` and ``fluid`` each hold one byte per block.
    """

    def __init__(self, chunk_x: int = 0, chunk_z: int = 0) -> None:
        self.chunk_x = chunk_x
        self.chunk_z = chunk_z
        self.blocks = bytearray(CHUNK_VOLUME)
        self.light = bytearray(CHUNK_VOLUME)
        self.fluid = bytearray(CHUNK_VOLUME)
        self._dirty = True

    def __repr__(self) -> str:
        return f"Chunk({self.chunk_x}, {self.chunk_z})"

    def get_block(self, x: int, y: int, z: int) -> int:
        return self.blocks[_index(x, y, z)]

    def set_block(self, x: int, y: int, z: int, block_id: int) -> None:
        self.blocks[_index(x, y, z)] = block_id
        self._dirty = True

    def get_light(self, x: int, y: int, z: int) -> int:
        return self.light[_index(x, y, z)]

    def set_light(self, x: int, y: int, z: int, value: int) -> None:
        self.light[_index(x, y, z)] = value
        self._dirty = True

    def get_fluid(self, x: int, y: int, z: int) -> int:
        return self.fluid[_index(x, y, z)]

    def set_fluid(self, x: int, y: int, z: int, value: int) -> None:
        self.fluid[_index(x, y, z)] = value
        self._dirty = True

    def is_dirty(self) -> bool:
        """True when the chunk changed since the last ``clear_dirty``."""
        return self._dirty

    def clear_dirty(self) -> None:
        self._dirty = False