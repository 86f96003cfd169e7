"""Generators for reference paths of several shapes."""

from __future__ import annotations

import math
import sys
from enum import Enum

Waypoint = tuple[float, float]


class TypePath(Enum):
    """Shape of a generated path; values are the configuration names."""

    LINEARE = "lineare"
    CIRCLE = "circle"
    SINUSOID = "sinusoid"
    S_CURVE = "s_curve"


def _point_count(length: float) -> int:
    """Truncate a length to a non-negative count, as a saturating cast does."""
    if math.isnan(length) or length <= 0:
        return 0
    return int(length)


class PathGenerator:
    """Produce a list of (x, y) waypoints for the selected path shape."""

    _S_STEP = 0.1
    _S_A = 2.0
    _S_B = 1.0
    _S_F = 0.2
    _S_G = 0.6

    def __init__(self, path_type: TypePath) -> None:
        self.path_type = path_type

    def generate_path(self, length: float) -> list[Waypoint]:
        """Generate the waypoints of the current shape for ``length``."""
        generators = {
            TypePath.LINEARE: self._generate_lineare_path,
            TypePath.CIRCLE: self._generate_circle_path,
            TypePath.SINUSOID: self._generate_sinusoid_path,
            TypePath.S_CURVE: self.generate_s_curve_path,
        }
        return generators[self.path_type](length)

    def _generate_lineare_path(self, length: float) -> list[Waypoint]:
        return [(float(i), float(i)) for i in range(1, _point_count(length))]

    def _generate_circle_path(self, length: float) -> list[Waypoint]:
        count = _point_count(length)
        if count == 0:
            return []
        radius = length / (2.0 * math.pi)
        step = 2.0 * math.pi / length
        return [
            (radius * math.cos(i * step), radius * math.sin(i * step))
            for i in range(count)
        ]

    def _generate_sinusoid_path(self, length: float) -> list[Waypoint]:
        return [(float(i), math.cos(i)) for i in range(1, _point_count(length))]

    def generate_s_curve_path(self, length: float) -> list[Waypoint]:
        """Generate an S-shaped curve shifted so that it starts at x = 1, min y = 1."""
        samples: list[Waypoint] = []
        min_y = sys.float_info.max
        x = 0.0
        while x < length:
            y = self._S_A * math.sin(self._S_F * x) + self._S_B * math.sin(self._S_G * x)
            min_y = min(min_y, y)
            samples.append((x, y))
            x += self._S_STEP
        return [(sx + 1.0, sy + (1.0 - min_y)) for sx, sy in samples]