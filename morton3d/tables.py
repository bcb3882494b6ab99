import numpy as np

from .utils import coords_to_z_order, z_order_to_coords

# --- Lookup Tables ---
# Built once at import from the reference interleave and never written afterwards.


def _encode_table(axis: int) -> tuple[int, ...]:
    """
    256 entries: an 8-bit coordinate chunk spread over 24 bits,
    already shifted into the lane of the given axis (0=x, 1=y, 2=z).
    """
    return tuple(coords_to_z_order(i, 0, 0, bits=8) << axis for i in range(256))


def _decode_table(axis: int) -> tuple[int, ...]:
    """
    512 entries: the 3 bits of the given axis held by a 9-bit code chunk.
    """
    return tuple(z_order_to_coords(i, bits=3)[axis] for i in range(512))


def _frozen_array(table: tuple[int, ...], dtype) -> np.ndarray:
    arr = np.array(table, dtype=dtype)
    arr.flags.writeable = False
    return arr


ENCODE_X_256 = _encode_table(0)
ENCODE_Y_256 = _encode_table(1)
ENCODE_Z_256 = _encode_table(2)

DECODE_X_512 = _decode_table(0)
DECODE_Y_512 = _decode_table(1)
DECODE_Z_512 = _decode_table(2)

# numpy mirrors for the batch codec
ENCODE_X_256_NP = _frozen_array(ENCODE_X_256, np.uint64)
ENCODE_Y_256_NP = _frozen_array(ENCODE_Y_256, np.uint64)
ENCODE_Z_256_NP = _frozen_array(ENCODE_Z_256, np.uint64)

DECODE_X_512_NP = _frozen_array(DECODE_X_512, np.uint32)
DECODE_Y_512_NP = _frozen_array(DECODE_Y_512, np.uint32)
DECODE_Z_512_NP = _frozen_array(DECODE_Z_512, np.uint32)
