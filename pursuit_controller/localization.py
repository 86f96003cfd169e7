"""A differential-drive kinematic simulator."""

from __future__ import annotations

import math
import random
import time
from collections.abc import Callable
from dataclasses import replace

from .messages import Pose2D


class DifferentialDriveSimulator:
    """Integrate velocity commands into a planar pose using elapsed wall time."""

    def __init__(
        self,
        clock: Callable[[], float] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self._rng = rng if rng is not None else random.Random()
        self._pose = Pose2D()
        self._last_update_time: float | None = None
        self.noise_enabled = False
        self.noise_std_dev = 0.0

    @property
    def pose(self) -> Pose2D:
        """A copy of the current pose."""
        return replace(self._pose)

    def enable_noise(self, std_dev: float) -> None:
        """Add uniform noise in [-std_dev, std_dev) to every velocity command."""
        self.noise_enabled = True
        self.noise_std_dev = std_dev

    def update(self, linear_velocity: float, angular_velocity: float) -> None:
        """Advance the pose by the time elapsed since the previous update."""
        now = self._clock()
        dt = 0.0 if self._last_update_time is None else now - self._last_update_time
        self._last_update_time = now
        if dt == 0.0:
            return

        v = linear_velocity
        w = angular_velocity
        if self.noise_enabled:
            spread = self.noise_std_dev
            if not spread > 0.0:
                raise ValueError(f"noise range is empty for std_dev {spread}")
            v += self._rng.uniform(-spread, spread)
            w += self._rng.uniform(-spread, spread)

        pose = self._pose
        pose.x += v * dt * math.cos(pose.theta)
        pose.y += v * dt * math.sin(pose.theta)
        pose.theta += w * dt
        pose.theta = math.fmod(pose.theta + math.pi, 2.0 * math.pi) - math.pi

    def reset(self) -> None:
        """Return to the origin and forget the last update time."""
        self._pose = Pose2D()
        self._last_update_time = None