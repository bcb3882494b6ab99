import os

# Fixed size class: 21 bits per axis packed into a 64-bit code
COORD_BITS = 21
CODE_BITS = 64

COORD_MASK = (1 << COORD_BITS) - 1
CODE_MASK = (1 << CODE_BITS) - 1

_FALSE_VALUES = ("0", "false", "no", "off")


def read_flag(name: str, default: bool) -> bool:
    """
    Reads a boolean switch from the environment.
    Unset or empty variables fall back to `default`; 0/false/no/off disable.
    """
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() not in _FALSE_VALUES


# Decode through the highest-set-bit short circuit by default
USE_BITSCAN = read_flag("MORTON3D_USE_BITSCAN", True)
