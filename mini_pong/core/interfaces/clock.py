"""
Clock protocol - defines interface for frame clocks driving the simulation
"""

from collections.abc import Iterator
from typing import Protocol


class ClockProtocol(Protocol):
    """
    Protocol for frame clock implementations.

    A clock paces the game: each value it yields is one tick, and the value
    is the time elapsed since the previous tick (conventionally in
    milliseconds, the unit of the entity velocities).
    """

    def ticks(self) -> Iterator[float]:
        """
        Yield elapsed times, one per frame.

        The iterator blocks until the next frame is due. Consumers stop
        iterating to unsubscribe from the clock.

        Example:
            >>> for delta in clock.ticks():
            ...     state = step(delta, state)
        """
        ...
