"""Region files: up to 32x32 zlib-compressed chunks in one file.

Layout: an 8192-byte header of 1024 entries (uint32 offset, uint32 length,
little-endian; offset 0 means empty), followed by compressed chunk blobs.
Each blob inflates to block ids, light and fluid levels, one byte per block.
"""

from __future__ import annotations

import os
import struct
import zlib
from pathlib import Path

from .chunk import CHUNK_VOLUME, Chunk

REGION_SIZE = 32
REGION_CHUNK_COUNT = REGION_SIZE * REGION_SIZE
REGION_HEADER_SIZE = REGION_CHUNK_COUNT * 8
RAW_CHUNK_SIZE = CHUNK_VOLUME * 3

_ENTRY = struct.Struct("<II")
_TABLE = struct.Struct("<" + "II" * REGION_CHUNK_COUNT)


class CorruptRegionError(ValueError):
    """Raised when a region file cannot be decoded."""


def chunk_to_region_coord(chunk_coord: int) -> int:
    """Region coordinate holding a chunk coordinate (floor division by 32)."""
    return chunk_coord // REGION_SIZE


def chunk_to_region_offset(chunk_coord: int) -> int:
    """Local offset of a chunk coordinate within its region, in ``[0, 31]``."""
    return chunk_coord % REGION_SIZE


def _slot_index(cx: int, cz: int) -> int:
    return chunk_to_region_offset(cx) + chunk_to_region_offset(cz) * REGION_SIZE


def _serialize(chunk: Chunk) -> bytes:
    return bytes(chunk.blocks) + bytes(chunk.light) + bytes(chunk.fluid)


def _deserialize(raw: bytes, cx: int, cz: int) -> Chunk:
    chunk = Chunk(cx, cz)
    chunk.blocks[:] = raw[:CHUNK_VOLUME]
    chunk.light[:] = raw[CHUNK_VOLUME:2 * CHUNK_VOLUME]
    chunk.fluid[:] = raw[2 * CHUNK_VOLUME:]
    return chunk


class RegionFile:
    """Reads and writes chunks in a single region file on disk."""

    def __init__(self, file_path: str | os.PathLike[str]) -> None:
        self._path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._path

    @property
    def file_size(self) -> int:
        """Size of the file in bytes, or 0 when it does not exist."""
        try:
            return self._path.stat().st_size
        except FileNotFoundError:
            return 0

    def _read_table(self) -> list[tuple[int, int]] | None:
        try:
            with self._path.open("rb") as f:
                header = f.read(REGION_HEADER_SIZE)
        except FileNotFoundError:
            return None
        if len(header) < REGION_HEADER_SIZE:
            raise CorruptRegionError(f"{self._path}: header is truncated")
        return list(_ENTRY.iter_unpack(header))

    def has_chunk(self, cx: int, cz: int) -> bool:
        """True when a chunk is stored in the slot for ``(cx, cz)``."""
        table = self._read_table()
        return table is not None and table[_slot_index(cx, cz)][0] != 0

    def save_chunk(self, chunk: Chunk) -> None:
        """Compress ``chunk`` and append it, pointing its slot at the new data."""
        blob = zlib.compress(_serialize(chunk))
        table = self._read_table()
        if table is None:
            table = [(0, 0)] * REGION_CHUNK_COUNT
            self._path.write_bytes(bytes(REGION_HEADER_SIZE))
        with self._path.open("r+b") as f:
            offset = max(f.seek(0, os.SEEK_END), REGION_HEADER_SIZE)
            f.seek(offset)
            f.write(blob)
            table[_slot_index(chunk.chunk_x, chunk.chunk_z)] = (offset, len(blob))
            f.seek(0)
            f.write(_TABLE.pack(*(v for entry in table for v in entry)))

    def load_chunk(self, cx: int, cz: int) -> Chunk | None:
        """Load the chunk at ``(cx, cz)``, or ``None`` if none is stored."""
        table = self._read_table()
        if table is None:
            return None
        offset, length = table[_slot_index(cx, cz)]
        if offset == 0:
            return None
        with self._path.open("rb") as f:
            f.seek(offset)
            blob = f.read(length)
        if len(blob) != length:
            raise CorruptRegionError(f"{self._path}: chunk data is truncated")
        try:
            raw = zlib.decompress(blob)
        except zlib.error as exc:
            raise CorruptRegionError(f"{self._path}: cannot inflate chunk") from exc
        if len(raw) != RAW_CHUNK_SIZE:
            raise CorruptRegionError(f"{self._path}: unexpected chunk size {len(raw)}")
        return _deserialize(raw, cx, cz)