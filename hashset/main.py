import argparse
import logging
import sys
import time

# Internal imports
from hashset.hash_set import HashSet, CapacityExceededError, InvalidLoadFactorError
from hashset.hashing import DEFAULT_INITIAL_CAPACITY, DEFAULT_MAX_LOAD_FACTOR
from hashset.utils.profiler import profile


def fill(hash_set: HashSet[int], count: int) -> int:
    """
    Insert 0..count-1 into the set.

    Return how many times the table was resized along the way.
    """
    resizes = 0
    for i in range(count):
        capacity_before: int = hash_set.capacity
        hash_set.add(i)
        if hash_set.capacity != capacity_before:
            resizes += 1
    return resizes


def _parse_args(args: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fill a HashSet with integers and report how the table grew.")
    parser.add_argument(
        "--count", type=int, default=1000, help="Number of integers to insert (default: 1000)"
    )
    parser.add_argument(
        "--capacity", type=int, default=DEFAULT_INITIAL_CAPACITY,
        help=f"Initial capacity, rounded up to a power of two (default: {DEFAULT_INITIAL_CAPACITY})"
    )
    parser.add_argument(
        "--load-factor", type=float, default=DEFAULT_MAX_LOAD_FACTOR,
        help=f"Load factor threshold that triggers a resize (default: {DEFAULT_MAX_LOAD_FACTOR})"
    )
    parser.add_argument(
        "--debug", action="store_true", default=False, help="Enable debug logging (default: False)"
    )
    parser.add_argument(
        "--profile", action="store_true", default=False, help="Profile the insertions with cProfile (default: False)"
    )
    parser.add_argument(
        "--profile-output", default=None, help="File to dump the profile stats to (only used with --profile)"
    )
    return parser.parse_args(args)


def main(argv: list[str] | None = None) -> int:
    """
    Returns the process exit code: 0 on success, 1 if the run failed, 2 for a bad configuration.
    """
    args = _parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
        logging.debug("Debug logging enabled")
    else:
        logging.basicConfig(level=logging.INFO)

    try:
        hash_set: HashSet[int] = HashSet(args.capacity, args.load_factor)
    except InvalidLoadFactorError as e:
        logging.error(str(e))
        return 2

    logging.info(f"Starting with {hash_set.capacity} buckets, load factor threshold {hash_set.load_factor_threshold}")

    run = profile(fill, output_file=args.profile_output, enabled=args.profile)

    start = time.perf_counter()
    try:
        resizes = run(hash_set, args.count)
    except CapacityExceededError as e:
        logging.error(f"Stopped after {len(hash_set)} insertions: {e}")
        return 1
    elapsed = time.perf_counter() - start

    missing = [i for i in range(args.count) if i not in hash_set]
    if missing:
        logging.error(f"{len(missing)} inserted elements not found, first one: {missing[0]}")
        return 1

    logging.info(f"Inserted {args.count} elements in {elapsed:.3f}s")
    print(f"size={len(hash_set)} capacity={hash_set.capacity} resizes={resizes}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
