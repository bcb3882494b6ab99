import numpy as np

from .tables import (
    DECODE_X_512_NP,
    DECODE_Y_512_NP,
    DECODE_Z_512_NP,
    ENCODE_X_256_NP,
    ENCODE_Y_256_NP,
    ENCODE_Z_256_NP,
)

# --- Vectorised Morton Codec ---

_TOP_CHUNK_MASK = np.uint64(0x1F)
_BYTE_MASK = np.uint64(0xFF)
_CHUNK_MASK = np.uint64(0x1FF)
_BLOCK_SHIFT = np.uint64(24)

_CHUNK_OFFSETS = tuple(np.uint64(offset) for offset in (0, 9, 18, 27, 36, 45, 54))
_AXIS_SHIFTS = tuple(np.uint32(shift) for shift in (0, 3, 6, 9, 12, 15, 18))


def _as_uint64(values) -> np.ndarray:
    # Negative inputs wrap around, like a cast to an unsigned C integer
    return np.asarray(values).astype(np.uint64)


def _byte(values: np.ndarray, shift: int, mask: np.uint64) -> np.ndarray:
    return ((values >> np.uint64(shift)) & mask).astype(np.intp)


def encode_array(x, y, z) -> np.ndarray:
    """
    Encodes arrays of x, y and z coordinates into an array of uint64 Morton codes.
    Inputs broadcast against each other. Bits 21 and above of every coordinate are dropped.
    """
    x, y, z = np.broadcast_arrays(_as_uint64(x), _as_uint64(y), _as_uint64(z))

    codes = (ENCODE_Z_256_NP[_byte(z, 16, _TOP_CHUNK_MASK)]
             | ENCODE_Y_256_NP[_byte(y, 16, _TOP_CHUNK_MASK)]
             | ENCODE_X_256_NP[_byte(x, 16, _TOP_CHUNK_MASK)])
    codes = (codes << _BLOCK_SHIFT) | (ENCODE_Z_256_NP[_byte(z, 8, _BYTE_MASK)]
                                       | ENCODE_Y_256_NP[_byte(y, 8, _BYTE_MASK)]
                                       | ENCODE_X_256_NP[_byte(x, 8, _BYTE_MASK)])
    codes = (codes << _BLOCK_SHIFT) | (ENCODE_Z_256_NP[_byte(z, 0, _BYTE_MASK)]
                                       | ENCODE_Y_256_NP[_byte(y, 0, _BYTE_MASK)]
                                       | ENCODE_X_256_NP[_byte(x, 0, _BYTE_MASK)])
    return codes


def _decode_axis(codes: np.ndarray, table: np.ndarray) -> np.ndarray:
    result = np.zeros(codes.shape, dtype=np.uint32)
    for offset, shift in zip(_CHUNK_OFFSETS, _AXIS_SHIFTS):
        chunk = ((codes >> offset) & _CHUNK_MASK).astype(np.intp)
        result |= table[chunk] << shift
    return result


def decode_array(codes) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Decodes an array of Morton codes into three uint32 arrays (x, y, z).
    """
    codes = _as_uint64(codes)
    return (_decode_axis(codes, DECODE_X_512_NP),
            _decode_axis(codes, DECODE_Y_512_NP),
            _decode_axis(codes, DECODE_Z_512_NP))


def decode_x_array(codes) -> np.ndarray:
    """Decodes only the x coordinates of an array of Morton codes."""
    return _decode_axis(_as_uint64(codes), DECODE_X_512_NP)


def decode_y_array(codes) -> np.ndarray:
    """Decodes only the y coordinates of an array of Morton codes."""
    return _decode_axis(_as_uint64(codes), DECODE_Y_512_NP)


def decode_z_array(codes) -> np.ndarray:
    """Decodes only the z coordinates of an array of Morton codes."""
    return _decode_axis(_as_uint64(codes), DECODE_Z_512_NP)
