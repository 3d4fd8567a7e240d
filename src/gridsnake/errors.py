"""Exceptions raised by the simulation core."""

from __future__ import annotations


class InvariantViolation(RuntimeError):
    """Internal state became inconsistent between two simulation steps.

    Raised instead of silently repairing state; the current frame is
    aborted and the caller decides whether to reset or stop.
    """
