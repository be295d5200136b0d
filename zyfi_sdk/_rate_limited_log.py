"""
Thread-safe rate-limited logging for repeated API failures.

A caller polling with an unfunded fee token gets the same error back on
every call; the exception is raised each time, but the log line is emitted
at most once per interval.
"""
import logging
import threading
from typing import Optional

from cachetools import TTLCache

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 60

_log_caches = {}
_log_caches_lock = threading.RLock()


def _cache_for(interval: int) -> TTLCache:
    with _log_caches_lock:
        cache = _log_caches.get(interval)
        if cache is None:
            cache = TTLCache(maxsize=100, ttl=interval)
            _log_caches[interval] = cache
        return cache


def rate_limited_log(
    message: str,
    level: str = "error",
    interval: int = DEFAULT_INTERVAL,
    logger_instance: Optional[logging.Logger] = None
) -> bool:
    """
    Log a message unless the same message was logged within ``interval`` seconds.

    Args:
        message: Message to log
        level: Log level (debug, info, warning, error, critical)
        interval: Minimum interval between identical messages in seconds
        logger_instance: Logger to use (defaults to module logger)

    Returns:
        True if the message was emitted, False if it was suppressed
    """
    log_instance = logger_instance or logger
    log_method = getattr(log_instance, level.lower(), log_instance.error)

    key = f"{log_instance.name}:{level}:{message}"
    cache = _cache_for(interval)
    with _log_caches_lock:
        if key in cache:
            return False
        cache[key] = True
    log_method(message)
    return True


def reset_rate_limits() -> None:
    """Forget every recently logged message."""
    with _log_caches_lock:
        for cache in _log_caches.values():
            cache.clear()
