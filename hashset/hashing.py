# Table sizing. Capacities are always powers of two
DEFAULT_INITIAL_CAPACITY: int = 4
MAXIMUM_CAPACITY: int = 1 << 30
DEFAULT_MAX_LOAD_FACTOR: float = 0.75

# Python hashes are arbitrary precision and can be negative, so mix on a 32-bit unsigned view
_HASH_MASK: int = 0xFFFFFFFF


def supplemental_hash(h: int) -> int:
    """
    Spread the entropy of the high bits of a hash code into the low bits.

    Only the low bits survive the capacity mask, so without this, hash codes that differ
    only in their high bits would all land in the same bucket of a small table.
    """
    h &= _HASH_MASK
    h ^= (h >> 20) ^ (h >> 12)
    return h ^ (h >> 7) ^ (h >> 4)


def bucket_index(hash_code: int, capacity: int) -> int:
    """
    Return the bucket a hash code maps to in a table of the given capacity.

    Masking with (capacity - 1) is the same as modulo because capacity is a power of two.
    """
    return supplemental_hash(hash_code) & (capacity - 1)


def trim_to_power_of_2(initial_capacity: int) -> int:
    """
    Return the smallest power of two >= initial_capacity (1 for anything <= 1).
    """
    capacity = 1
    while capacity < initial_capacity:
        capacity <<= 1

    return capacity
