"""Constant acceleration model in three degrees of freedom."""

from __future__ import annotations

import numpy as np

from robosim.models.base import System

NUM_STATES = 9
NUM_INPUTS = 0


def calculate_f() -> np.ndarray:
    """State matrix F such that x_dot = F x, one 3x3 block per axis."""
    block = np.array(
        [
            [0.0, 1.0, 0.0],
            [0.0, 0.0, 1.0],
            [0.0, 0.0, 0.0],
        ]
    )
    return np.kron(np.eye(3), block)


class ConstantAcceleration3Dof(System):
    """State x = [pos, vel, acc] for x, y and z in turn; no inputs."""

    def get_derivatives(self, x, u, t) -> np.ndarray:
        x = np.asarray(x, dtype=float)
        return np.array([x[1], x[2], 0.0, x[4], x[5], 0.0, x[7], x[8], 0.0])

    def calculate_jacobian(self, x, u, t) -> tuple[np.ndarray, np.ndarray]:
        return calculate_f(), np.zeros((NUM_STATES, NUM_INPUTS))

    def calculate_input(self, x, x_dot_desired, t) -> np.ndarray:
        return np.zeros(NUM_INPUTS)