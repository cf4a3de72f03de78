import functools
import logging
import re
import threading
import time
import typing

logger = logging.getLogger(__name__)


def seconds_to_str(seconds: float) -> str:
    """Convert seconds to a string (e.g. `1m 30s 100ms`)."""
    milliseconds = int((seconds % 1) * 1000)
    seconds = int(seconds)
    minutes, seconds = divmod(seconds, 60)
    if minutes > 0:
        return "%dm %ds %dms" % (minutes, seconds, milliseconds)
    elif seconds > 0:
        return "%ds %dms" % (seconds, milliseconds)
    else:
        return "%dms" % (milliseconds)


# NOTE: `str.split` also splits on the information separators U+001C to U+001F, which are not
# Unicode `White_Space`.
_WHITESPACE_PATTERN = re.compile(r"[^\S\x1c-\x1f]+")


def split_whitespace(text: str) -> typing.List[str]:
    """Split `text` on runs of Unicode `White_Space`, ignoring leading and trailing whitespace."""
    return [t for t in _WHITESPACE_PATTERN.split(text) if t]


AnyCallable = typing.Callable[..., typing.Any]

_LogRuntimeFunction = typing.TypeVar("_LogRuntimeFunction", bound=AnyCallable)


def log_runtime(function: _LogRuntimeFunction) -> _LogRuntimeFunction:
    """Decorator for measuring the execution time of a function."""

    @functools.wraps(function)
    def decorator(*args, **kwargs):
        start = time.time()
        result = function(*args, **kwargs)
        elapsed = seconds_to_str(time.time() - start)
        logger.info("`%s` ran for %s", function.__qualname__, elapsed)
        return result

    return typing.cast(_LogRuntimeFunction, decorator)


_CacheOnceReturnType = typing.TypeVar("_CacheOnceReturnType")


def cache_once(
    function: typing.Callable[[], _CacheOnceReturnType]
) -> typing.Callable[[], _CacheOnceReturnType]:
    """Decorator for computing the return value of `function`, without arguments, exactly once.

    NOTE: Unlike `functools.lru_cache`, concurrent first calls wait for the first call to finish,
    instead of each computing a result. After that, the cached value is returned without locking.
    NOTE: `clear_cache` is only meant for tests, it does not coordinate with in-flight calls.
    """
    lock = threading.Lock()
    cache: typing.List[_CacheOnceReturnType] = []

    @functools.wraps(function)
    def wrapper() -> _CacheOnceReturnType:
        if len(cache) == 0:
            with lock:
                if len(cache) == 0:
                    cache.append(function())
        return cache[0]

    wrapper.clear_cache = cache.clear  # type: ignore

    return wrapper
