"""Request rate limiters: fixed window, sliding window, leaky bucket and token bucket."""

from __future__ import annotations

import threading
import time
from collections import deque
from typing import Callable, Optional

Clock = Callable[[], float]


class FixedWindowLimiter:
    """Allows at most ``max_requests`` per window of ``window_size`` seconds.

    Window boundaries are tracked in whole seconds of the clock, and the
    window size is truncated to whole seconds.
    """

    def __init__(
        self,
        window_size: float,
        max_requests: int,
        clock: Optional[Clock] = None,
    ) -> None:
        self.window_size = window_size
        self.max_requests = max_requests
        self._clock = clock or time.time
        self._requests = 0
        self._last_reset = int(self._clock())
        self._lock = threading.Lock()

    def allow_request(self) -> bool:
        """Return True if a request may pass in the current window."""
        with self._lock:
            now = int(self._clock())
            if now - self._last_reset >= int(self.window_size):
                self._requests = 0
                self._last_reset = int(self._clock())
            if self._requests >= self.max_requests:
                return False
            self._requests += 1
            return True


class SlidingWindowLimiter:
    """Allows at most ``max_requests`` within any trailing ``window_size`` seconds."""

    def __init__(
        self,
        window_size: float,
        max_requests: int,
        clock: Optional[Clock] = None,
    ) -> None:
        self.window_size = window_size
        self.max_requests = max_requests
        self._clock = clock or time.monotonic
        self._requests: deque[float] = deque()
        self._lock = threading.Lock()

    def allow_request(self) -> bool:
        """Return True if a request may pass; records it when it does."""
        with self._lock:
            now = self._clock()
            while self._requests and now - self._requests[0] > self.window_size:
                self._requests.popleft()
            if len(self._requests) >= self.max_requests:
                return False
            self._requests.append(now)
            return True


class LeakyBucket:
    """Leaky bucket limiter.

    Elapsed time is measured in whole seconds of the clock and divided by
    1000 before being multiplied by ``rate`` to get the amount leaked.
    """

    def __init__(
        self,
        rate: float,
        capacity: int,
        clock: Optional[Clock] = None,
    ) -> None:
        self.rate = rate
        self.capacity = capacity
        self.water = 0
        self._clock = clock or time.time
        self._last_leak = int(self._clock())

    def allow(self) -> bool:
        """Return True if a request may pass."""
        now = int(self._clock())
        elapsed = now - self._last_leak

        leak_amount = int(elapsed / 1000 * self.rate)
        if leak_amount > 0:
            self.water = max(self.water - leak_amount, 0)

        if self.water > self.capacity:
            self.water -= 1
            return False

        self.water += 1
        self._last_leak = now
        return True


class TokenBucket:
    """Token bucket limiter; starts full and refills at ``rate`` tokens per second."""

    def __init__(
        self,
        rate: float,
        capacity: float,
        clock: Optional[Clock] = None,
    ) -> None:
        self.rate = rate
        self.capacity = capacity
        self.tokens = capacity
        self._clock = clock or time.monotonic
        self._last_update = self._clock()
        self._lock = threading.Lock()

    def allow(self) -> bool:
        """Take one token if available and return True, otherwise return False."""
        with self._lock:
            now = self._clock()
            elapsed = now - self._last_update
            self.tokens = min(self.tokens + elapsed * self.rate, self.capacity)
            if self.tokens >= 1.0:
                self.tokens -= 1
                self._last_update = now
                return True
            return False