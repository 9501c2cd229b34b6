"""Time operations abstraction for testing.

The menu pauses briefly after an invalid selection; routing that pause through
this ABC keeps tests fast.
"""

from abc import ABC, abstractmethod


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """Sleep for specified number of seconds.

        Args:
            seconds: Number of seconds to sleep
        """
        ...
