"""The fixed-length game tick clock."""

GAME_TICK_SECONDS = 0.6

_NANOS_PER_SECOND = 1_000_000_000


def _to_nanos(seconds: float) -> int:
    return round(seconds * _NANOS_PER_SECOND)


class GameTickTimer:
    """A repeating timer that reports when a new game tick starts.

    Time is kept in whole nanoseconds so that tick boundaries are exact.
    """

    def __init__(self, duration: float = GAME_TICK_SECONDS) -> None:
        nanos = _to_nanos(duration)
        if nanos <= 0:
            raise ValueError(f"tick duration must be positive, got {duration!r}")
        self._duration = nanos
        self._elapsed = 0

    @property
    def duration(self) -> float:
        """Length of one tick in seconds."""
        return self._duration / _NANOS_PER_SECOND

    @property
    def elapsed(self) -> float:
        """Seconds elapsed since the current tick started."""
        return self._elapsed / _NANOS_PER_SECOND

    def tick(self, delta: float) -> bool:
        """Advance the clock by ``delta`` seconds.

        Returns True if at least one tick boundary was crossed.
        """
        nanos = _to_nanos(delta)
        if nanos < 0:
            raise ValueError(f"time cannot run backwards, got {delta!r}")
        self._elapsed += nanos
        if self._elapsed >= self._duration:
            self._elapsed %= self._duration
            return True
        return False