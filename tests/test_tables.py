import numpy as np
import pytest

from morton3d import tables


def test_table_sizes():
    for table in (tables.ENCODE_X_256, tables.ENCODE_Y_256, tables.ENCODE_Z_256):
        assert len(table) == 256
    for table in (tables.DECODE_X_512, tables.DECODE_Y_512, tables.DECODE_Z_512):
        assert len(table) == 512


def test_encode_tables_are_lane_shifted():
    assert tables.ENCODE_X_256[1] == 0b001
    assert tables.ENCODE_Y_256[1] == 0b010
    assert tables.ENCODE_Z_256[1] == 0b100
    # bit 7 of a chunk lands on bit 21 of its block
    assert tables.ENCODE_X_256[0x80] == 1 << 21
    assert tables.ENCODE_Z_256[0xFF] == 0x924924
    for i in range(256):
        assert tables.ENCODE_Y_256[i] == tables.ENCODE_X_256[i] << 1
        assert tables.ENCODE_Z_256[i] == tables.ENCODE_X_256[i] << 2
        assert tables.ENCODE_X_256[i] < 1 << 24


def test_decode_tables_invert_encode_tables():
    for i in range(8):
        chunk = tables.ENCODE_X_256[i] | tables.ENCODE_Y_256[7 - i] | tables.ENCODE_Z_256[i ^ 5]
        assert tables.DECODE_X_512[chunk] == i
        assert tables.DECODE_Y_512[chunk] == 7 - i
        assert tables.DECODE_Z_512[chunk] == i ^ 5


def test_decode_tables_fit_three_bits():
    for table in (tables.DECODE_X_512, tables.DECODE_Y_512, tables.DECODE_Z_512):
        assert max(table) == 7
        assert min(table) == 0


def test_tables_are_immutable():
    with pytest.raises(TypeError):
        tables.ENCODE_X_256[0] = 1
    with pytest.raises(ValueError):
        tables.DECODE_X_512_NP[0] = 1


def test_numpy_mirrors_match():
    assert tables.ENCODE_Y_256_NP.dtype == np.uint64
    assert tables.DECODE_Z_512_NP.dtype == np.uint32
    assert tables.ENCODE_Y_256_NP.tolist() == list(tables.ENCODE_Y_256)
    assert tables.DECODE_Z_512_NP.tolist() == list(tables.DECODE_Z_512)
