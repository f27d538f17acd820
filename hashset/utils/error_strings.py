CAPACITY_EXCEEDED_STRING: str = "Exceeding maximum capacity"
INVALID_LOAD_FACTOR_STRING: str = "Load factor threshold must be a positive number"
ITERATOR_REMOVE_BEFORE_NEXT: str = "remove() called before next()"
ITERATOR_REMOVE_TWICE: str = "remove() already called for the current element"
MAXIMUM_CAPACITY_NOT_POWER_OF_2: str = "MAXIMUM_CAPACITY must be a power of two"
