"""Politeness delays applied after every request."""

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable


class RateLimiter(ABC):
    """Decides how long to pause after a request before returning control.

    Implement this interface to plug in a custom throttling strategy.
    """

    def mark(self) -> None:
        """Record the start of a request. No-op unless the strategy needs it."""
        pass

    @abstractmethod
    def wait(self) -> float:
        """Pause the calling flow after a request.

        Returns:
            Number of seconds slept

        """
        pass


class FixedDelay(RateLimiter):
    """Sleeps for the same amount of time after every request.

    Attributes:
        seconds: Pause after each request in seconds

    """

    def __init__(self, seconds: float = 2.0, sleep: Callable[[float], None] = time.sleep):
        """Initialize the fixed delay.

        Args:
            seconds: Pause after each request in seconds. Defaults to 2.0.
            sleep: Sleep function, replaceable in tests

        """
        if seconds < 0:
            raise ValueError(f'Delay must be non-negative, got {seconds}')
        self.seconds = seconds
        self._sleep = sleep
        self.logger = logging.getLogger(__name__)

    def wait(self) -> float:
        if self.seconds > 0:
            self.logger.debug(f'Sleeping {self.seconds:.2f}s after request')
            self._sleep(self.seconds)
        return self.seconds


class MinimumInterval(RateLimiter):
    """Keeps at least a minimum interval between consecutive requests.

    Only the part of the interval not already spent on the request itself is slept.

    Attributes:
        seconds: Minimum interval between request starts in seconds
        last_request_time: Clock value when the previous interval started

    """

    def __init__(
        self,
        seconds: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the interval limiter.

        Args:
            seconds: Minimum interval between requests in seconds. Defaults to 2.0.
            sleep: Sleep function, replaceable in tests
            clock: Monotonic clock function, replaceable in tests

        """
        if seconds < 0:
            raise ValueError(f'Interval must be non-negative, got {seconds}')
        self.seconds = seconds
        self._sleep = sleep
        self._clock = clock
        self.last_request_time: float | None = None
        self.logger = logging.getLogger(__name__)

    def mark(self) -> None:
        self.last_request_time = self._clock()

    def wait(self) -> float:
        if self.last_request_time is None:
            delay = self.seconds
        else:
            elapsed = self._clock() - self.last_request_time
            delay = max(0.0, self.seconds - elapsed)

        if delay > 0:
            self.logger.debug(f'Sleeping {delay:.2f}s to keep a {self.seconds:.2f}s interval')
            self._sleep(delay)

        self.last_request_time = None
        return delay


def create_rate_limiter(kind: str = 'fixed', seconds: float = 2.0) -> RateLimiter:
    """Create a rate limiter.

    Args:
        kind: Type of limiter ('fixed' or 'interval')
        seconds: Delay or interval in seconds

    Returns:
        RateLimiter instance

    """
    limiters: dict[str, type[RateLimiter]] = {
        'fixed': FixedDelay,
        'interval': MinimumInterval,
    }

    if kind not in limiters:
        raise ValueError(f'Unknown rate limiter: {kind}. Choose from: {list(limiters.keys())}')

    return limiters[kind](seconds)
