from .hash_set import (
    HashSet as HashSet,
    HashSetIterator as HashSetIterator,
    CapacityExceededError as CapacityExceededError,
    InvalidLoadFactorError as InvalidLoadFactorError,
    IteratorStateError as IteratorStateError,
)

from .hashing import (
    DEFAULT_INITIAL_CAPACITY as DEFAULT_INITIAL_CAPACITY,
    DEFAULT_MAX_LOAD_FACTOR as DEFAULT_MAX_LOAD_FACTOR,
    MAXIMUM_CAPACITY as MAXIMUM_CAPACITY,
)
