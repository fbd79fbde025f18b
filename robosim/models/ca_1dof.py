"""Constant acceleration model in one degree of freedom."""

from __future__ import annotations

import numpy as np

from robosim.models.base import System

NUM_STATES = 3
NUM_INPUTS = 0


def calculate_f() -> np.ndarray:
    """State matrix F such that x_dot = F x."""
    return np.array(
        [
            [0.0, 1.0, 0.0],
            [0.0, 0.0, 1.0],
            [0.0, 0.0, 0.0],
        ]
    )


class ConstantAcceleration1Dof(System):
    """State x = [position, velocity, acceleration]; no inputs."""

    def get_derivatives(self, x, u, t) -> np.ndarray:
        x = np.asarray(x, dtype=float)
        return np.array([x[1], x[2], 0.0])

    def calculate_jacobian(self, x, u, t) -> tuple[np.ndarray, np.ndarray]:
        return calculate_f(), np.zeros((NUM_STATES, NUM_INPUTS))

    def calculate_input(self, x, x_dot_desired, t) -> np.ndarray:
        return np.zeros(NUM_INPUTS)