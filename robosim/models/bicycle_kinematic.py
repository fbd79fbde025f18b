"""Kinematic bicycle model with sideslip at the centre of gravity."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from robosim.models.base import System

NUM_STATES = 3
NUM_INPUTS = 2


@dataclass
class BicycleKinematic(System):
    """Bicycle kinematic model with 3 states and 2 inputs.

    x = [pos_x, pos_y, heading] in the global frame;
    u = [vel_x, road_wheel_angle] in the body frame.
    ``length_front`` and ``length_rear`` are the distances from the front and
    rear axle centres to the centre of gravity.
    """

    length_front: float
    length_rear: float

    @property
    def wheelbase(self) -> float:
        """Total length between the axles."""
        return self.length_front + self.length_rear

    def calculate_sideslip(self, road_wheel_angle: float) -> float:
        """Angle between the vehicle heading and its velocity direction."""
        return math.atan(self.length_rear * math.tan(road_wheel_angle) / self.wheelbase)

    def get_derivatives(self, x, u, t) -> np.ndarray:
        x = np.asarray(x, dtype=float)
        u = np.asarray(u, dtype=float)
        velocity, rwa = u[0], u[1]
        sideslip = self.calculate_sideslip(rwa)
        course = x[2] + sideslip
        return np.array(
            [
                velocity * math.cos(course),
                velocity * math.sin(course),
                velocity * math.tan(rwa) * math.cos(sideslip) / self.wheelbase,
            ]
        )

    def calculate_jacobian(self, x, u, t) -> tuple[np.ndarray, np.ndarray]:
        x = np.asarray(x, dtype=float)
        u = np.asarray(u, dtype=float)
        return self._calculate_a(x, u), self._calculate_b(x, u)

    def _calculate_a(self, x: np.ndarray, u: np.ndarray) -> np.ndarray:
        course = x[2] + self.calculate_sideslip(u[1])
        a = np.zeros((NUM_STATES, NUM_STATES))
        a[0, 2] = -u[0] * math.sin(course)
        a[1, 2] = u[0] * math.cos(course)
        return a

    def _calculate_b(self, x: np.ndarray, u: np.ndarray) -> np.ndarray:
        length_total = self.wheelbase
        lr = self.length_rear
        velocity, rwa = u[0], u[1]
        course = x[2] + self.calculate_sideslip(rwa)
        tan_rwa = math.tan(rwa)
        cos_sq = math.cos(rwa) ** 2

        df2u0 = tan_rwa / (
            length_total * math.sqrt(lr**2 * tan_rwa**2 / length_total**2 + 1.0)
        )

        # derivative of the sideslip with respect to the road wheel angle
        coeff = lr * length_total / cos_sq
        denom = lr * lr * tan_rwa * tan_rwa + length_total * length_total

        df2u1 = (length_total**3 * velocity / cos_sq) / (
            denom**1.5 * abs(length_total)
        )

        return np.array(
            [
                [math.cos(course), -velocity * coeff * math.sin(course) / denom],
                [math.sin(course), velocity * coeff * math.cos(course) / denom],
                [df2u0, df2u1],
            ]
        )

    def calculate_input(self, x, x_dot_desired, t) -> np.ndarray:
        """Return [velocity, road_wheel_angle] that yields ``x_dot_desired``.

        The speed comes from the planar rate, its sign from whether the motion
        points ahead of or behind the heading, and the wheel angle from the
        yaw rate. Raises ValueError when the yaw rate cannot be reached.
        """
        x = np.asarray(x, dtype=float)
        x_dot, y_dot, yaw_dot = (float(v) for v in np.asarray(x_dot_desired, dtype=float))
        speed = math.hypot(x_dot, y_dot)
        if speed == 0.0:
            if yaw_dot != 0.0:
                raise ValueError("a yaw rate cannot be produced without moving")
            return np.zeros(NUM_INPUTS)

        relative = math.remainder(math.atan2(y_dot, x_dot) - x[2], math.tau)
        velocity = speed if abs(relative) <= math.pi / 2 else -speed

        k = yaw_dot * self.wheelbase / velocity
        ratio = k * self.length_rear / self.wheelbase
        if abs(ratio) >= 1.0:
            raise ValueError("desired yaw rate is beyond what the model can reach")
        rwa = math.atan(k / math.sqrt(1.0 - ratio * ratio))
        return np.array([velocity, rwa])