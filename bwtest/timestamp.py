"""A wall-clock timestamp held as whole seconds plus microseconds."""

from __future__ import annotations

import dataclasses
import time
from dataclasses import dataclass

MILLION = 1_000_000


@dataclass(order=True)
class Timestamp:
    """Seconds and microseconds since the epoch, kept normalised."""

    sec: int = 0
    usec: int = 0

    def __post_init__(self) -> None:
        if self.sec < 0:
            raise ValueError("seconds must not be negative")
        if not 0 <= self.usec < MILLION:
            raise ValueError("microseconds must be in [0, 1000000)")

    @classmethod
    def now(cls) -> Timestamp:
        """Return a timestamp holding the current time."""
        stamp = cls()
        stamp.set_now()
        return stamp

    @classmethod
    def from_seconds(cls, seconds: float) -> Timestamp:
        """Build a timestamp from floating-point seconds."""
        whole = int(seconds)
        return cls(whole, int((seconds - whole) * MILLION))

    def set_now(self) -> None:
        """Set this timestamp to the current time."""
        self.sec, self.usec = divmod(time.time_ns() // 1000, MILLION)

    def get(self) -> float:
        """Return the timestamp as floating-point seconds."""
        return self.sec + self.usec / MILLION

    def sub_usec(self, other: Timestamp) -> int:
        """Return ``self - other`` in microseconds."""
        return (self.sec - other.sec) * MILLION + (self.usec - other.usec)

    def sub_sec(self, other: Timestamp) -> float:
        """Return ``self - other`` in floating-point seconds."""
        return (self.sec - other.sec) + (self.usec - other.usec) / MILLION

    def delta_usec(self) -> int:
        """Reset to now and return the microseconds elapsed since the last setting."""
        previous = dataclasses.replace(self)
        self.set_now()
        return self.sub_usec(previous)

    def _normalise(self) -> None:
        carry, self.usec = divmod(self.usec, MILLION)
        self.sec += carry

    def add(self, other: Timestamp) -> None:
        """Add another timestamp to this one in place."""
        self.sec += other.sec
        self.usec += other.usec
        self._normalise()

    def add_seconds(self, seconds: float) -> None:
        """Add floating-point seconds to this timestamp in place."""
        whole = int(seconds)
        self.sec += whole
        self.usec += int((seconds - whole) * MILLION)
        self._normalise()

    def before(self, other: Timestamp) -> bool:
        """Return True if this timestamp is strictly earlier than ``other``."""
        return (self.sec, self.usec) < (other.sec, other.usec)

    def after(self, other: Timestamp) -> bool:
        """Return True if this timestamp is strictly later than ``other``."""
        return (self.sec, self.usec) > (other.sec, other.usec)

    def fraction(self, current: Timestamp, end: Timestamp) -> float:
        """Return the elapsed share of the span from self to ``end``, or -1.0."""
        if current.after(self) and end.after(current):
            return current.sub_usec(self) / end.sub_usec(self)
        return -1.0