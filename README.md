# robosim

Kinematic models for robots and ground vehicles, one-step state propagation
with an integrator of your choice, and two simple controllers. States, inputs
and matrices are NumPy arrays.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Models (`robosim.models`)

- `base.System`: the abstract interface every model implements.
  - `propagate(x, u, t, dt, integrator)` returns the state at `t + dt`. The
    integrator is called as `integrator(f, x, t, t + dt)`, where `f(x, t)`
    returns the state derivative with the input `u` held fixed.
  - `get_derivatives(x, u, t)` returns `x_dot`.
  - `calculate_jacobian(x, u, t)` returns `(A, B)`, the partial derivatives
    of `x_dot` with respect to the state (N x N) and the input (N x M).
  - `calculate_input(x, x_dot_desired, t)` returns the input that produces
    the desired derivative.
- `base.SystemH`: an extra abstract interface for articulated models:
  `num_states_to_num_dim_ratio()`, `calculate_feasible_state_initial(angles_desired)`
  and `inverse_kinematics(position_desired, x)`.
- `ca_1dof.ConstantAcceleration1Dof`: state `[position, velocity, acceleration]`,
  no inputs. `ca_1dof.calculate_f()` gives the constant 3 x 3 matrix with
  `x_dot = F x`.
- `ca_3dof.ConstantAcceleration3Dof`: the same for the x, y and z axes in
  turn (9 states, no inputs); `ca_3dof.calculate_f()` gives the 9 x 9 matrix.
- `bicycle_kinematic.BicycleKinematic(length_front, length_rear)`: kinematic
  bicycle with sideslip at the centre of gravity. State `[x, y, heading]`,
  input `[velocity, road_wheel_angle]`. Has a `wheelbase` property and
  `calculate_sideslip(road_wheel_angle)`. Its `calculate_input` raises
  `ValueError` when the desired yaw rate cannot be reached.
- `basic_bicycle_kinematic.BasicBicycleKinematic(length_front, length_rear)`:
  the same model without sideslip, also with a `wheelbase` property.
  Its `calculate_input` raises `ValueError` when a yaw rate is asked for
  without forward motion.
- `n_joint_arm2.NJointArm2(link_lengths)`: a planar arm of N links. Each joint
  has four global-frame states `[x, y, theta, theta_dot]`; the inputs are one
  angular acceleration per joint. `calculate_feasible_state_initial` builds a
  state from relative joint angles, and `inverse_kinematics` returns the joint
  angle changes toward a target point using a pseudo-inverse of the position
  Jacobian. States and inputs of the wrong size raise `ValueError`.

## Controls (`robosim.controls`)

- `path_tracking.RecordPoint`: a dataclass with `time`, `x`, `y`, `z`.
- `path_tracking.calculate_lookahead_point(path, position_current, start_index, lookahead_distance)`
  returns `(index, distance, point)` for the first path point at least the
  lookahead distance away, or the last point if none is; an empty path
  raises `ValueError`.
- `path_tracking.calculate_desired_yaw(position_current, position_target)`
  returns the heading toward the target.
- `path_tracking.pure_pursuit(position_current, position_target, yaw_current, target_distance, wheelbase)`
  returns the road wheel angle that steers toward the target.
- `pid.Controller(kp, ki, kd, lower_bound, upper_bound)`: an element-wise PID
  controller whose accumulated error is clipped to the bounds. `compute(error)`
  returns the control output; `update_gains(kp, ki, kd)` replaces the gains.
  Vectors of mismatched shape raise `ValueError`.

## Example

```python
import numpy as np
from robosim.models.bicycle_kinematic import BicycleKinematic

def rk4(f, x, t0, tf):
    h = tf - t0
    k1 = f(x, t0)
    k2 = f(x + h / 2 * k1, t0 + h / 2)
    k3 = f(x + h / 2 * k2, t0 + h / 2)
    k4 = f(x + h * k3, tf)
    return x + h / 6 * (k1 + 2 * k2 + 2 * k3 + k4)

bike = BicycleKinematic(length_front=1.0, length_rear=1.0)
state = np.zeros(3)
control = np.array([3.0, 0.0])
for step in range(1000):
    state = bike.propagate(state, control, step * 0.01, 0.01, rk4)
print(state)  # about [30, 0, 0]
```

## What the package does not do

- It ships no integrator: `propagate` takes one from the caller, as in the
  example above.
- It does not read model or plot parameters from configuration files, and it
  has no command-line programs, windows or live animation. Paths given to
  `calculate_lookahead_point` are plain sequences of points; loading or saving
  them (for example as CSV of `RecordPoint` rows) is left to the caller.