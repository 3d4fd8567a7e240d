"""Periodic gates turning continuous elapsed time into discrete firings."""

from __future__ import annotations

_NS_PER_SECOND = 1_000_000_000


class RepeatingTimer:
    """Fires once accumulated time reaches ``interval`` seconds, then repeats.

    Time is accumulated in integer nanoseconds so that many small frame
    deltas add up exactly. :attr:`finished` reflects only the most recent
    :meth:`tick` and stays readable for the rest of the frame. Overshoot
    carries into the next period; a single tick fires at most once even if
    it spans several intervals.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("Timer interval must be positive.")
        self.interval_ns = round(interval * _NS_PER_SECOND)
        self.elapsed_ns = 0
        self.finished = False

    @property
    def interval(self) -> float:
        return self.interval_ns / _NS_PER_SECOND

    @property
    def elapsed(self) -> float:
        return self.elapsed_ns / _NS_PER_SECOND

    def tick(self, delta: float) -> bool:
        """Accumulate ``delta`` seconds and return whether the timer fired."""
        if delta < 0:
            raise ValueError("Elapsed time cannot be negative.")
        self.elapsed_ns += round(delta * _NS_PER_SECOND)
        self.finished = self.elapsed_ns >= self.interval_ns
        if self.finished:
            self.elapsed_ns %= self.interval_ns
        return self.finished

    def reset(self) -> None:
        self.elapsed_ns = 0
        self.finished = False

    def to_dict(self) -> dict:
        return {
            "interval": self.interval,
            "elapsed": self.elapsed,
            "finished": self.finished,
        }
