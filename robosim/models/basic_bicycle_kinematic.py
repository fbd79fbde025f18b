"""Kinematic bicycle model without sideslip."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from robosim.models.base import System

NUM_STATES = 3
NUM_INPUTS = 2


@dataclass
class BasicBicycleKinematic(System):
    """Bicycle kinematic model that ignores sideslip.

    x = [pos_x, pos_y, heading] in the global frame;
    u = [vel_x, road_wheel_angle] in the body frame.
    """

    length_front: float
    length_rear: float

    @property
    def wheelbase(self) -> float:
        """Total length between the axles."""
        return self.length_front + self.length_rear

    def get_derivatives(self, x, u, t) -> np.ndarray:
        x = np.asarray(x, dtype=float)
        u = np.asarray(u, dtype=float)
        velocity, rwa = u[0], u[1]
        return np.array(
            [
                velocity * math.cos(x[2]),
                velocity * math.sin(x[2]),
                velocity * math.tan(rwa) / self.wheelbase,
            ]
        )

    def calculate_jacobian(self, x, u, t) -> tuple[np.ndarray, np.ndarray]:
        x = np.asarray(x, dtype=float)
        u = np.asarray(u, dtype=float)
        velocity, rwa = u[0], u[1]
        yaw = x[2]

        a = np.zeros((NUM_STATES, NUM_STATES))
        a[0, 2] = -velocity * math.sin(yaw)
        a[1, 2] = velocity * math.cos(yaw)

        b = np.array(
            [
                [math.cos(yaw), 0.0],
                [math.sin(yaw), 0.0],
                [
                    math.tan(rwa) / self.wheelbase,
                    velocity / (math.cos(rwa) ** 2 * self.wheelbase),
                ],
            ]
        )
        return a, b

    def calculate_input(self, x, x_dot_desired, t) -> np.ndarray:
        """Return [velocity, road_wheel_angle] that yields ``x_dot_desired``.

        The velocity is the planar rate projected on the heading. Raises
        ValueError when a yaw rate is asked for without forward motion.
        """
        x = np.asarray(x, dtype=float)
        x_dot, y_dot, yaw_dot = (float(v) for v in np.asarray(x_dot_desired, dtype=float))
        velocity = x_dot * math.cos(x[2]) + y_dot * math.sin(x[2])
        if velocity == 0.0:
            if yaw_dot != 0.0:
                raise ValueError("a yaw rate cannot be produced without moving")
            return np.zeros(NUM_INPUTS)
        return np.array([velocity, math.atan(yaw_dot * self.wheelbase / velocity)])