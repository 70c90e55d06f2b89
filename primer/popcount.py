"""Population count of 64-bit values by table lookup."""

_MASK64 = (1 << 64) - 1

# _PC[i] is the population count of i.
_PC = bytes(bin(i).count("1") for i in range(256))


def pop_count(x: int) -> int:
    """Return the number of set bits in ``x`` taken as an unsigned 64-bit value."""
    x &= _MASK64
    return sum(_PC[(x >> shift) & 0xFF] for shift in range(0, 64, 8))