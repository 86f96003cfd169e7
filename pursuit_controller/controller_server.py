"""A lifecycle-managed pure-pursuit path-following controller."""

from __future__ import annotations

import logging
import math
import os
import time
from collections.abc import Callable
from dataclasses import replace

from .config import Config
from .lifecycle import LifecycleManager, LifecycleState
from .localization import DifferentialDriveSimulator
from .messages import (
    Header,
    Path,
    Point,
    Pose,
    Pose2D,
    PoseStamped,
    Quaternion,
    Time,
    Twist,
    quaternion_to_yaw,
    yaw_to_quaternion,
)
from .path_handler import PathGenerator, TypePath

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "src/rust_controller/config/params.yaml"

_FRAME_ID = "map"
_PRUNE_THRESHOLD = 0.5
_NOISE_STD_DEV = 0.01
_MAX_ANGULAR_VELOCITY = 1.0

Sink = Callable[[object], None]


class ControllerError(Exception):
    """Raised when the controller cannot run or compute a command."""


class ControllerServer:
    """Follow a generated path with a pure-pursuit controller.

    Outgoing messages are handed to the optional sinks: velocity commands to
    ``cmd_vel_sink``, inspected path poses to ``pose_sink`` and the pruned path
    to ``path_sink``. ``clock`` returns the current time in nanoseconds.
    """

    def __init__(
        self,
        config_path: str | os.PathLike[str] = DEFAULT_CONFIG_PATH,
        cmd_vel_sink: Sink | None = None,
        pose_sink: Sink | None = None,
        path_sink: Sink | None = None,
        clock: Callable[[], int] | None = None,
        simulator: DifferentialDriveSimulator | None = None,
    ) -> None:
        self.config_path = config_path
        self._cmd_vel_sink = cmd_vel_sink
        self._pose_sink = pose_sink
        self._path_sink = path_sink
        self._clock = clock if clock is not None else time.time_ns
        self._provided_simulator = simulator
        self._lifecycle = LifecycleManager()

        self.current_path: Path | None = None
        self.current_pose: PoseStamped | None = None
        self.controller_name = "purepursuit"
        self.desired_linear_vel = 0.1
        self.lookahead_distance = 0.5
        self.min_lookahead_dist = 0.3
        self.max_lookahead_dist = 1.0
        self.path_length = 0.0
        self.path_type = "s_curve"
        self.use_case = "turtle"
        self.simulator: DifferentialDriveSimulator | None = None
        self.pose: Pose2D | None = None
        self.pose_turtle: Pose2D | None = None

    @property
    def current_state(self) -> LifecycleState:
        return self._lifecycle.state

    def configure(self) -> None:
        """Load parameters, set up the simulator and reset the poses."""
        self._lifecycle.transition(LifecycleState.INACTIVE)

        config = Config.from_yaml_file(self.config_path)

        def pick(value, default):
            return default if value is None else value

        self.controller_name = pick(config.controller_name, "purepursuit")
        self.desired_linear_vel = pick(config.desired_linear_vel, 0.1)
        self.lookahead_distance = pick(config.lookahead_distance, 0.5)
        self.min_lookahead_dist = pick(config.min_lookahead_dist, 0.1)
        self.max_lookahead_dist = pick(config.max_lookahead_dist, 3.0)
        self.path_length = pick(config.path_length, 30.0)
        self.path_type = pick(config.path_type, "s_curve")
        self.use_case = pick(config.use_case, "turtle")

        self.simulator = (
            self._provided_simulator
            if self._provided_simulator is not None
            else DifferentialDriveSimulator()
        )
        self.simulator.enable_noise(_NOISE_STD_DEV)

        self.pose = Pose2D()
        self.pose_turtle = Pose2D()
        logger.info("[Lifecycle] Configured successfully")

    def activate(self) -> None:
        """Become active and generate the reference path."""
        self._lifecycle.transition(LifecycleState.ACTIVE)
        try:
            self._generate_path()
        except ControllerError as exc:
            logger.error("%s", exc)
        logger.info("[Lifecycle] Activated")

    def deactivate(self) -> None:
        self._lifecycle.transition(LifecycleState.INACTIVE)
        logger.info("[Lifecycle] Deactivated")

    def cleanup(self) -> None:
        self._lifecycle.transition(LifecycleState.FINALIZED)
        logger.info("[Lifecycle] Cleaned up")

    def run(self) -> Twist:
        """Perform one control step and return the velocity command."""
        if self.current_state is not LifecycleState.ACTIVE:
            raise ControllerError("Controller is not active")
        logger.info("[Lifecycle] Controller is active")

        if self.simulator is not None:
            self.pose = self.simulator.pose
        else:
            logger.warning("No simulator present; pose not refreshed")

        self.current_pose = self._pose2d_to_posestamped(_FRAME_ID)

        cmd_vel = self._compute_velocity()
        if cmd_vel is None:
            logger.error("Failed to compute velocity")
            raise ControllerError("Failed to compute velocity")

        self._update_path()
        return cmd_vel

    def _pose2d_to_posestamped(self, frame_id: str) -> PoseStamped:
        sources = {"sim": self.pose, "turtle": self.pose_turtle}
        if self.use_case not in sources:
            raise ControllerError(f"unknown use_case: {self.use_case}")
        pose2d = sources[self.use_case]
        if pose2d is None:
            raise ControllerError(f"no pose available for use_case {self.use_case}")
        return PoseStamped(
            header=Header(frame_id=frame_id, stamp=Time()),
            pose=Pose(
                position=Point(x=pose2d.x, y=pose2d.y, z=0.0),
                orientation=yaw_to_quaternion(pose2d.theta),
            ),
        )

    def _generate_path(self) -> None:
        try:
            path_type = TypePath(self.path_type)
        except ValueError:
            raise ControllerError("Invalid path type") from None

        waypoints = PathGenerator(path_type).generate_path(self.path_length)
        if not waypoints:
            raise ControllerError("Path is empty")

        stamp = Time.from_nanos(self._clock())
        self.current_path = Path(
            header=Header(frame_id=_FRAME_ID, stamp=replace(stamp)),
            poses=[
                PoseStamped(
                    header=Header(frame_id=_FRAME_ID, stamp=replace(stamp)),
                    pose=Pose(
                        position=Point(x=x, y=y, z=0.0),
                        orientation=Quaternion(x=0.0, y=0.0, z=0.0, w=0.0),
                    ),
                )
                for x, y in waypoints
            ],
        )
        logger.info("Path generated successfully")

    def _update_path(self) -> None:
        if self.current_pose is None:
            logger.warning("No pose available; update_path ignored")
            return
        if self.current_path is None:
            logger.warning("No path available; update_path ignored")
            return

        robot = self.current_pose.pose.position
        self.current_path.poses = [
            stamped
            for stamped in self.current_path.poses
            if math.hypot(
                stamped.pose.position.x - robot.x, stamped.pose.position.y - robot.y
            )
            >= _PRUNE_THRESHOLD
        ]
        logger.info(
            "[update_path] %d points remaining", len(self.current_path.poses)
        )
        if self._path_sink is not None:
            self._path_sink(
                replace(self.current_path, poses=list(self.current_path.poses))
            )

    def _compute_velocity(self) -> Twist | None:
        if self.controller_name == "purepursuit":
            return self._pure_pursuit()
        logger.error("Controller: unknown")
        return None

    def _pure_pursuit(self) -> Twist | None:
        path = self.current_path
        current = self.current_pose
        if path is None or current is None:
            return None
        if not path.poses:
            logger.error("Empty path; stop robot")
            return None

        robot = current.pose.position
        target: tuple[float, float] | None = None
        for stamped in path.poses:
            dx = stamped.pose.position.x - robot.x
            dy = stamped.pose.position.y - robot.y
            if self._pose_sink is not None:
                self._pose_sink(stamped)
            if math.hypot(dx, dy) >= self.lookahead_distance:
                target = (dx, dy)
                break

        if target is None:
            logger.warning("No target point found, using the last point in the path")
            last = path.poses[-1].pose.position
            target = (last.x - robot.x, last.y - robot.y)

        dx, dy = target
        heading = quaternion_to_yaw(current.pose.orientation)
        x_r = dx * math.cos(heading) + dy * math.sin(heading)
        y_r = -dx * math.sin(heading) + dy * math.cos(heading)

        dist_sq = x_r * x_r + y_r * y_r
        curvature = 2.0 * y_r / dist_sq if dist_sq != 0.0 else 0.0
        linear_velocity = self.desired_linear_vel
        angular_velocity = curvature * linear_velocity

        cmd_vel = Twist()
        cmd_vel.linear.x = linear_velocity
        cmd_vel.angular.z = max(
            -_MAX_ANGULAR_VELOCITY, min(_MAX_ANGULAR_VELOCITY, angular_velocity)
        )

        if self._cmd_vel_sink is not None:
            self._cmd_vel_sink(cmd_vel)
        if self.simulator is not None:
            self.simulator.update(cmd_vel.linear.x, cmd_vel.angular.z)

        logger.info("[pure_pursuit] v = %s, w = %s", cmd_vel.linear.x, cmd_vel.angular.z)
        return cmd_vel