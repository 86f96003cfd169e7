"""Plain message types for poses, paths and velocity commands."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

_NANOS_PER_SEC = 1_000_000_000


@dataclass
class Time:
    """A timestamp split into whole seconds and nanoseconds."""

    sec: int = 0
    nanosec: int = 0

    @classmethod
    def from_nanos(cls, total_nanos: int) -> Time:
        """Build a timestamp from a total count of nanoseconds."""
        sec, nanosec = divmod(total_nanos, _NANOS_PER_SEC)
        return cls(sec=sec, nanosec=nanosec)


@dataclass
class Header:
    frame_id: str = ""
    stamp: Time = field(default_factory=Time)


@dataclass
class Point:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass
class Pose:
    position: Point = field(default_factory=Point)
    orientation: Quaternion = field(default_factory=Quaternion)


@dataclass
class PoseStamped:
    header: Header = field(default_factory=Header)
    pose: Pose = field(default_factory=Pose)


@dataclass
class Path:
    header: Header = field(default_factory=Header)
    poses: list[PoseStamped] = field(default_factory=list)


@dataclass
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Twist:
    linear: Vector3 = field(default_factory=Vector3)
    angular: Vector3 = field(default_factory=Vector3)


@dataclass
class Pose2D:
    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0


def quaternion_to_yaw(quat: Quaternion) -> float:
    """Return the rotation about the z axis encoded by a quaternion."""
    siny_cosp = 2.0 * (quat.w * quat.z + quat.x * quat.y)
    cosy_cosp = 1.0 - 2.0 * (quat.y * quat.y + quat.z * quat.z)
    return math.atan2(siny_cosp, cosy_cosp)


def yaw_to_quaternion(theta: float) -> Quaternion:
    """Return the quaternion for a planar rotation of ``theta`` radians."""
    return Quaternion(x=0.0, y=0.0, z=math.sin(theta / 2.0), w=math.cos(theta / 2.0))