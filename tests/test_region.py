import pytest

from voxelcraft.chunk import Block, Chunk
from voxelcraft.region import (
    REGION_HEADER_SIZE,
    CorruptRegionError,
    RegionFile,
    chunk_to_region_coord,
    chunk_to_region_offset,
)


def _sample_chunk(cx, cz):
    chunk = Chunk(cx, cz)
    for x in range(16):
        chunk.set_block(x, 0, x, Block.BEDROCK)
        chunk.set_block(x, 10 + x, 15 - x, Block.STONE)
    chunk.set_light(3, 70, 4, 14)
    chunk.set_fluid(8, 60, 8, 7)
    return chunk


def _same_contents(a, b):
    return a.blocks == b.blocks and a.light == b.light and a.fluid == b.fluid


def test_region_coordinate_examples():
    assert chunk_to_region_coord(-1) == -1
    assert chunk_to_region_offset(-1) == 31
    assert chunk_to_region_coord(32) == 1


@pytest.mark.parametrize("c", range(-100, 100))
def test_region_coordinate_decomposition(c):
    off = chunk_to_region_offset(c)
    assert 0 <= off < 32
    assert chunk_to_region_coord(c) * 32 + off == c


def test_missing_file(tmp_path):
    region = RegionFile(tmp_path / "r.dat")
    assert region.file_size == 0
    assert region.has_chunk(0, 0) is False
    assert region.load_chunk(0, 0) is None


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "r.dat"
    region = RegionFile(path)
    original = _sample_chunk(3, -5)
    region.save_chunk(original)

    assert region.file_path == path
    assert region.file_size > REGION_HEADER_SIZE
    assert region.has_chunk(3, -5) is True
    assert region.has_chunk(4, -5) is False

    loaded = RegionFile(path).load_chunk(3, -5)
    assert (loaded.chunk_x, loaded.chunk_z) == (3, -5)
    assert _same_contents(loaded, original)
    assert loaded.get_block(3, 13, 12) == Block.STONE


def test_empty_slot_returns_none(tmp_path):
    region = RegionFile(tmp_path / "r.dat")
    region.save_chunk(_sample_chunk(0, 0))
    assert region.load_chunk(1, 0) is None


def test_several_chunks_are_independent(tmp_path):
    region = RegionFile(tmp_path / "r.dat")
    a = _sample_chunk(0, 0)
    b = Chunk(31, 31)
    b.set_block(1, 1, 1, Block.GLASS)
    region.save_chunk(a)
    region.save_chunk(b)

    loaded_a = region.load_chunk(0, 0)
    loaded_b = region.load_chunk(31, 31)
    assert (loaded_a.chunk_x, loaded_a.chunk_z) == (0, 0)
    assert (loaded_b.chunk_x, loaded_b.chunk_z) == (31, 31)
    assert loaded_a.blocks == a.blocks
    assert loaded_a.light == a.light
    assert loaded_a.fluid == a.fluid
    assert loaded_b.blocks == b.blocks
    assert loaded_a.get_block(1, 1, 1) == Block.AIR
    assert loaded_b.get_block(1, 1, 1) == Block.GLASS
    assert loaded_a.get_block(0, 0, 0) == Block.BEDROCK
    assert loaded_b.get_block(0, 0, 0) == Block.AIR


def test_resave_replaces_chunk(tmp_path):
    region = RegionFile(tmp_path / "r.dat")
    first = _sample_chunk(2, 2)
    region.save_chunk(first)
    size_after_first = region.file_size
    second = _sample_chunk(2, 2)
    second.set_block(0, 200, 0, Block.SNOW)
    region.save_chunk(second)
    assert region.file_size > size_after_first
    loaded = region.load_chunk(2, 2)
    assert loaded.get_block(0, 200, 0) == Block.SNOW
    assert _same_contents(loaded, second)


def test_truncated_header_is_corrupt(tmp_path):
    path = tmp_path / "r.dat"
    path.write_bytes(b"abc")
    with pytest.raises(CorruptRegionError):
        RegionFile(path).load_chunk(0, 0)


def test_truncated_data_is_corrupt(tmp_path):
    path = tmp_path / "r.dat"
    region = RegionFile(path)
    region.save_chunk(_sample_chunk(0, 0))
    data = path.read_bytes()
    path.write_bytes(data[:REGION_HEADER_SIZE + 5])
    with pytest.raises(CorruptRegionError):
        region.load_chunk(0, 0)


def test_garbage_data_is_corrupt(tmp_path):
    path = tmp_path / "r.dat"
    region = RegionFile(path)
    region.save_chunk(_sample_chunk(0, 0))
    data = bytearray(path.read_bytes())
    data[REGION_HEADER_SIZE:] = b"\xff" * (len(data) - REGION_HEADER_SIZE)
    path.write_bytes(bytes(data))
    with pytest.raises(CorruptRegionError):
        region.load_chunk(0, 0)