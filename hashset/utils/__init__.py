from .error_strings import (
    CAPACITY_EXCEEDED_STRING as CAPACITY_EXCEEDED_STRING,
    INVALID_LOAD_FACTOR_STRING as INVALID_LOAD_FACTOR_STRING,
    ITERATOR_REMOVE_BEFORE_NEXT as ITERATOR_REMOVE_BEFORE_NEXT,
    ITERATOR_REMOVE_TWICE as ITERATOR_REMOVE_TWICE,
    MAXIMUM_CAPACITY_NOT_POWER_OF_2 as MAXIMUM_CAPACITY_NOT_POWER_OF_2,
)

from .profiler import profile as profile
