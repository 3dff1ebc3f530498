"""Logging helpers for rate limiting repeated warnings."""
from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Dict, Iterable, Tuple


class RateLimitedLogger:
    """Wrapper that rate-limits log messages by an arbitrary key."""

    def __init__(
        self,
        logger: logging.Logger,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._logger = logger
        self._window = float(max(window_seconds, 0))
        self._clock = clock
        self._last_logged: Dict[Tuple[Any, ...], float] = {}
        self._lock = threading.Lock()

    def _should_emit(self, key: Tuple[Any, ...]) -> bool:
        now = self._clock()
        with self._lock:
            last = self._last_logged.get(key)
            if last is not None and (now - last) < self._window:
                return False
            self._last_logged[key] = now
            return True

    def log(self, level: int, key: Iterable[Any], msg: str, *args: Any, **kwargs: Any) -> bool:
        key_tuple = tuple(key)
        if not self._should_emit(key_tuple):
            self._logger.debug(msg, *args, **kwargs)
            return False
        self._logger.log(level, msg, *args, **kwargs)
        return True

    def warning(self, key: Iterable[Any], msg: str, *args: Any, **kwargs: Any) -> bool:
        return self.log(logging.WARNING, key, msg, *args, **kwargs)

    def error(self, key: Iterable[Any], msg: str, *args: Any, **kwargs: Any) -> bool:
        return self.log(logging.ERROR, key, msg, *args, **kwargs)

    def reset(self) -> None:
        with self._lock:
            self._last_logged.clear()
