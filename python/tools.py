"""
Tools used while working on the line breaking algorithms.
"""
import cProfile
import functools
import logging
import os
import pstats
import time
from io import StringIO

logger = logging.getLogger(__name__)

PROFILE_ENV_VAR = 'KNUTH_PLASS_PROFILE'

_enabled = os.environ.get(PROFILE_ENV_VAR, '').strip().lower() in ('1', 'true', 'yes', 'on')

def enable_profiling(flag:bool=True):
    global _enabled
    _enabled = bool(flag)

def profiling_enabled() -> bool:
    return _enabled

def _timed(func, args, kwargs):
    start = time.perf_counter()
    try:
        return func(*args, **kwargs)
    finally:
        logger.debug('%s took %.6fs', func.__qualname__, time.perf_counter() - start)

def profile(sort_by:str='cumulative', limit:int=20):
    """
    Decorator that profiles every call to the decorated function.

    When profiling is enabled (see enable_profiling() or set the
        KNUTH_PLASS_PROFILE environment variable), the call is run under
        cProfile and the `limit` most expensive entries, sorted by `sort_by`,
        are logged. Otherwise, or when some other profiler is already running,
        only the time the call took is logged at the DEBUG level.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not _enabled:
                return _timed(func, args, kwargs)

            profiler = cProfile.Profile()
            try:
                profiler.enable()
            except ValueError:
                # Only one profiler can run at a time (python -m cProfile ...)
                logger.debug('another profiler is active, only timing %s', func.__qualname__)
                return _timed(func, args, kwargs)

            try:
                return func(*args, **kwargs)
            finally:
                profiler.disable()
                stream = StringIO()
                pstats.Stats(profiler, stream=stream).sort_stats(sort_by).print_stats(limit)
                logger.info('profile of %s:\n%s', func.__qualname__, stream.getvalue())
        return wrapper
    return decorator
