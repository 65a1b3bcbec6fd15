"""Fixed-window request counter keyed by client address."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional


@dataclass
class _Window:
    count: int
    reset_at: float


class FixedWindowRateLimiter:
    """Allow ``limit`` hits per key within each ``window_seconds`` window."""

    def __init__(
        self,
        limit: int = 10,
        window_seconds: float = 60.0,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.limit = max(1, int(limit))
        self.window_seconds = float(window_seconds)
        self._clock = clock
        self._windows: Dict[str, _Window] = {}

    def hit(self, key: str) -> Optional[int]:
        """Record a hit for ``key``.

        Returns ``None`` when the hit is allowed, otherwise the number of whole
        seconds until the key's window resets.
        """

        now = self._clock()
        window = self._windows.get(key)
        if window is None or now >= window.reset_at:
            self._windows[key] = _Window(count=1, reset_at=now + self.window_seconds)
            return None
        if window.count >= self.limit:
            return max(1, math.ceil(window.reset_at - now))
        window.count += 1
        return None

    def reset(self) -> None:
        self._windows.clear()


__all__ = ["FixedWindowRateLimiter"]
