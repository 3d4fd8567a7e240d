"""Tests for the RepeatingTimer."""

import pytest

from gridsnake.timer import RepeatingTimer


class TestRepeatingTimer:
    def test_invalid_interval(self):
        with pytest.raises(ValueError, match="positive"):
            RepeatingTimer(0)

    def test_negative_delta(self):
        with pytest.raises(ValueError, match="negative"):
            RepeatingTimer(1.0).tick(-0.5)

    def test_fires_when_interval_reached(self):
        timer = RepeatingTimer(1.5)
        assert not timer.tick(0.5)
        assert not timer.tick(0.5)
        assert timer.tick(0.5)
        assert timer.finished

    def test_finished_only_for_firing_frame(self):
        timer = RepeatingTimer(1.0)
        timer.tick(1.0)
        assert timer.finished
        timer.tick(0.25)
        assert not timer.finished

    def test_repeats_and_carries_overshoot(self):
        timer = RepeatingTimer(1.0)
        assert timer.tick(1.25)
        assert timer.elapsed == 0.25
        assert not timer.tick(0.5)
        assert timer.tick(0.25)

    def test_fires_once_for_long_frame(self):
        timer = RepeatingTimer(1.0)
        assert timer.tick(3.5)
        assert timer.elapsed == 0.5

    def test_reset(self):
        timer = RepeatingTimer(1.0)
        timer.tick(1.5)
        timer.reset()
        assert timer.elapsed == 0.0
        assert not timer.finished


class TestRepeatingTimerFrameDeltas:
    def test_sixty_fps_fires_on_exact_frame(self):
        timer = RepeatingTimer(1.5)
        fired = [frame for frame in range(1, 181) if timer.tick(1 / 60)]
        assert fired == [90, 180]

    def test_no_ticks_lost_over_time(self):
        timer = RepeatingTimer(0.1)
        fired = sum(timer.tick(1 / 60) for _ in range(600))
        assert fired == 100
