# pursuit_controller

This package is a path-following controller for a planar, differential-drive
robot. It builds a reference path and follows it with a pure pursuit law. In
place of a real robot it can drive a built-in kinematic simulator.

## Modules

- `pursuit_controller.messages` holds plain dataclasses for poses, paths and
  velocity commands: `Time`, `Header`, `Point`, `Quaternion`, `Pose`,
  `PoseStamped`, `Path`, `Vector3`, `Twist` and `Pose2D`. It also has
  `quaternion_to_yaw` and `yaw_to_quaternion`. `Time.from_nanos` splits a
  nanosecond count into seconds and nanoseconds.
- `pursuit_controller.path_handler` holds `PathGenerator`. It returns a list
  of `(x, y)` waypoints for a `TypePath`, which is one of `LINEARE`, `CIRCLE`,
  `SINUSOID` or `S_CURVE`. Each value is the name used in the configuration.
- `pursuit_controller.lifecycle` holds `LifecycleManager` and the
  `LifecycleState` enum. The manager allows only four transitions:
  Unconfigured → Inactive, Inactive → Active, Active → Inactive and
  Inactive → Finalized. Any other transition raises `LifecycleError`.
- `pursuit_controller.localization` holds `DifferentialDriveSimulator`, a
  unicycle-model simulator.
  - `update(v, w)` moves the pose forward by the time that has passed since
    the previous call. The first call after creation or `reset()` only
    records the time.
  - `enable_noise(std_dev)` adds uniform noise in `[-std_dev, std_dev)` to
    both velocities.
  - `pose` returns a copy of the current `Pose2D`.
  - You can inject the clock and the random generator.
- `pursuit_controller.config` holds `Config.from_yaml_file`, which reads the
  controller parameters from a YAML mapping. A key that is missing comes back
  as `None`, and an unknown key is ignored. `ConfigError` is raised in three
  cases:
  - the file cannot be opened;
  - the file cannot be parsed;
  - the top level is not a mapping, or a value has the wrong type.
- `pursuit_controller.controller_server` holds `ControllerServer`, which ties
  all of the above together.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Configuration

Every key is optional. When the server is configured, a missing key takes the
default shown here:

```yaml
controller_name: purepursuit   # the only controller available
desired_linear_vel: 0.1
lookahead_distance: 0.5
min_lookahead_dist: 0.1
max_lookahead_dist: 3.0
path_length: 30.0
path_type: s_curve             # lineare, circle, sinusoid or s_curve
use_case: turtle               # turtle (pose_turtle) or sim (simulator pose)
```

## Usage

```python
from pursuit_controller.path_handler import PathGenerator, TypePath

points = PathGenerator(TypePath.CIRCLE).generate_path(10.0)
```

The controller server hands its output to callables that you pass in:

- `cmd_vel_sink` receives each velocity command.
- `pose_sink` receives each path pose that the server looks at while it
  searches for a target.
- `path_sink` receives the path that is left after pruning.

`clock` returns the current time in nanoseconds and is used to stamp the path.
You can also pass your own `simulator`.

```python
from pursuit_controller.controller_server import ControllerServer
from pursuit_controller.messages import Pose2D

commands = []
server = ControllerServer(config_path="params.yaml", cmd_vel_sink=commands.append)
server.configure()   # Unconfigured -> Inactive, loads parameters, noise 0.01
server.activate()    # Inactive -> Active, generates the path
server.pose_turtle = Pose2D(x=1.0, y=2.0, theta=0.0)   # with use_case "turtle"
cmd = server.run()   # one control step; returns the Twist
print(cmd.linear.x, cmd.angular.z)
```

Each call to `run`:

1. Reads the robot pose. With `use_case` set to `sim`, the pose comes from
   the simulator. With `turtle`, it comes from `pose_turtle`.
2. Aims at the first path point that is at least `lookahead_distance` away.
   If no point is that far, it aims at the last point.
3. Sends a command with linear velocity `desired_linear_vel` and an angular
   velocity clamped to [-1, 1]. The same command is fed to the simulator.
4. Drops every path point that lies within 0.5 m of the robot.

`run` raises `ControllerError` in three cases:

- the server is not active;
- `use_case` is unknown;
- no command can be computed, for example because the path is empty, no path
  exists, or `controller_name` is unknown.

If `path_type` is invalid, or the path comes out empty, `activate` logs an
error and leaves the server without a path. `deactivate` and `cleanup` move
the lifecycle to Inactive and Finalized. `current_state` reports the current
state.

## What this package does not do

The package does not include a command-line program, an event loop or any
messaging transport. Nothing in it receives pose updates or runs the control
step on a schedule. The caller must set `pose_turtle` (or rely on the
simulator), call `run` for each step, and send the output from the sinks
wherever it needs to go.