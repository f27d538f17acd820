import cProfile
import pstats
import io
import logging
from functools import wraps


def profile(func=None, output_file=None, enabled=True):
    """
    Run the decorated function under cProfile and log the 20 most expensive calls by cumulative time.

    With enabled=False the function is returned untouched, so the decorator can stay in place
    and be switched on from a CLI flag.
    """
    def decorator(f):
        if not enabled:
            return f

        @wraps(f)
        def wrapper(*args, **kwargs):
            pr = cProfile.Profile()
            pr.enable()
            try:
                return f(*args, **kwargs)
            finally:
                pr.disable()
                s = io.StringIO()
                ps = pstats.Stats(pr, stream=s).sort_stats('cumulative')
                ps.print_stats(20)
                logging.info(f"Profile of {f.__name__}:\n{s.getvalue()}")
                if output_file:
                    ps.dump_stats(output_file)
                    logging.info(f"Profile data saved to {output_file}")
        return wrapper

    if func is None:
        return decorator
    return decorator(func)
