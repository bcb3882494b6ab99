"""
Table-driven 3D Morton (Z-order) codec for 21-bit coordinates and 64-bit codes.

Bit 3i of a code is bit i of x, bit 3i + 1 is bit i of y and bit 3i + 2 is
bit i of z. Only the low 21 bits of each coordinate are packed: anything above
bit 20 is dropped silently, it is never reported as an error.
"""
from . import config
from .utils import highest_set_bit
from .tables import (
    DECODE_X_512,
    DECODE_Y_512,
    DECODE_Z_512,
    ENCODE_X_256,
    ENCODE_Y_256,
    ENCODE_Z_256,
)

# Only bits 16-20 of the top byte fit in a 64-bit code
_TOP_CHUNK_MASK = 0x1F
_BYTE_MASK = 0xFF
_CHUNK_MASK = 0x1FF

# (code offset, coordinate shift) of the seven 9-bit decode chunks
DECODE_CHUNKS = ((0, 0), (9, 3), (18, 6), (27, 9), (36, 12), (45, 15), (54, 18))


# --- Encoding ---

def encode_lut(x: int, y: int, z: int) -> int:
    """
    Encodes (x, y, z) into a 64-bit Morton code, one byte of each axis per lookup.

    The three 24-bit blocks are accumulated most significant first. Bits 21 and
    above of every axis are truncated, so encode_lut(2**21, 0, 0) == 0.
    """
    code = (ENCODE_Z_256[(z >> 16) & _TOP_CHUNK_MASK]
            | ENCODE_Y_256[(y >> 16) & _TOP_CHUNK_MASK]
            | ENCODE_X_256[(x >> 16) & _TOP_CHUNK_MASK])
    code = (code << 24) | (ENCODE_Z_256[(z >> 8) & _BYTE_MASK]
                           | ENCODE_Y_256[(y >> 8) & _BYTE_MASK]
                           | ENCODE_X_256[(x >> 8) & _BYTE_MASK])
    code = (code << 24) | (ENCODE_Z_256[z & _BYTE_MASK]
                           | ENCODE_Y_256[y & _BYTE_MASK]
                           | ENCODE_X_256[x & _BYTE_MASK])
    return code


def encode_lut_xshifted(x: int, y: int, z: int) -> int:
    """
    Same as encode_lut but reads only the x table, moving y and z into their
    lanes with a shift instead of a dedicated table.
    """
    code = ((ENCODE_X_256[(z >> 16) & _TOP_CHUNK_MASK] << 2)
            | (ENCODE_X_256[(y >> 16) & _TOP_CHUNK_MASK] << 1)
            | ENCODE_X_256[(x >> 16) & _TOP_CHUNK_MASK])
    code = (code << 24) | ((ENCODE_X_256[(z >> 8) & _BYTE_MASK] << 2)
                           | (ENCODE_X_256[(y >> 8) & _BYTE_MASK] << 1)
                           | ENCODE_X_256[(x >> 8) & _BYTE_MASK])
    code = (code << 24) | ((ENCODE_X_256[z & _BYTE_MASK] << 2)
                           | (ENCODE_X_256[y & _BYTE_MASK] << 1)
                           | ENCODE_X_256[x & _BYTE_MASK])
    return code


# --- Decoding ---

def _split_chunks(code: int) -> tuple[int, int, int, int, int, int, int]:
    return (code & _CHUNK_MASK,
            (code >> 9) & _CHUNK_MASK,
            (code >> 18) & _CHUNK_MASK,
            (code >> 27) & _CHUNK_MASK,
            (code >> 36) & _CHUNK_MASK,
            (code >> 45) & _CHUNK_MASK,
            (code >> 54) & _CHUNK_MASK)


def _gather(table: tuple[int, ...], c0: int, c1: int, c2: int, c3: int, c4: int, c5: int, c6: int) -> int:
    return (table[c0]
            | (table[c1] << 3)
            | (table[c2] << 6)
            | (table[c3] << 9)
            | (table[c4] << 12)
            | (table[c5] << 15)
            | (table[c6] << 18))


def decode_lut(code: int) -> tuple[int, int, int]:
    """
    Decodes a 64-bit Morton code into (x, y, z) with seven 9-bit table lookups.
    Bit 63 and anything above it carry no coordinate bits and are ignored.
    """
    chunks = _split_chunks(code)
    return (_gather(DECODE_X_512, *chunks),
            _gather(DECODE_Y_512, *chunks),
            _gather(DECODE_Z_512, *chunks))


def decode_lut_bitscan(code: int) -> tuple[int, int, int]:
    """
    Decodes like decode_lut, but stops at the chunk holding the highest set bit
    of the code. Small codes take fewer lookups; the result is the same.
    """
    code = int(code) & config.CODE_MASK
    top = highest_set_bit(code)
    x = y = z = 0
    for offset, shift in DECODE_CHUNKS:
        if top < offset:
            break
        chunk = (code >> offset) & _CHUNK_MASK
        x |= DECODE_X_512[chunk] << shift
        y |= DECODE_Y_512[chunk] << shift
        z |= DECODE_Z_512[chunk] << shift
    return x, y, z


def decode_x_lut(code: int) -> int:
    """Decodes only the x coordinate of a Morton code."""
    return _gather(DECODE_X_512, *_split_chunks(code))


def decode_y_lut(code: int) -> int:
    """Decodes only the y coordinate of a Morton code."""
    return _gather(DECODE_Y_512, *_split_chunks(code))


def decode_z_lut(code: int) -> int:
    """Decodes only the z coordinate of a Morton code."""
    return _gather(DECODE_Z_512, *_split_chunks(code))


# --- Default entry points ---

encode = encode_lut
decode = decode_lut_bitscan if config.USE_BITSCAN else decode_lut
decode_x = decode_x_lut
decode_y = decode_y_lut
decode_z = decode_z_lut
