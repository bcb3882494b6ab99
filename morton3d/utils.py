# --- Z-Order Curve Reference Implementation ---

def coords_to_z_order(x: int, y: int, z: int, bits: int = 21) -> int:
    """
    Converts 3D coordinates to a 1D Z-order value by interleaving bits.
    Bit i of x lands on bit 3i, bit i of y on 3i + 1 and bit i of z on 3i + 2.
    Only the low `bits` bits of each axis are used.
    """
    code = 0
    for i in range(bits):
        # Interleave bits from x, y and z
        code |= (x & (1 << i)) << (2 * i) | (y & (1 << i)) << (2 * i + 1) | (z & (1 << i)) << (2 * i + 2)
    return code


def z_order_to_coords(code: int, bits: int = 21) -> tuple[int, int, int]:
    """
    Inverse of coords_to_z_order: splits a Z-order value back into (x, y, z).
    """
    x = y = z = 0
    for i in range(bits):
        x |= ((code >> (3 * i)) & 1) << i
        y |= ((code >> (3 * i + 1)) & 1) << i
        z |= ((code >> (3 * i + 2)) & 1) << i
    return x, y, z


def highest_set_bit(value: int) -> int:
    """Index of the most significant set bit of a non-negative int, -1 for zero."""
    return value.bit_length() - 1
