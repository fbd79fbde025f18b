"""Planar kinematic arm made of N revolute joints."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from robosim.models.base import System, SystemH

STATES_PER_JOINT = 4
_PSEUDO_INVERSE_EPS = 1e-12


def _pseudo_inverse(matrix: np.ndarray, eps: float) -> np.ndarray:
    """Moore-Penrose inverse ignoring singular values not above ``eps``."""
    u, singular, vt = np.linalg.svd(matrix, full_matrices=False)
    inverted = np.array([1.0 / s if s > eps else 0.0 for s in singular])
    return vt.T @ np.diag(inverted) @ u.T


@dataclass
class NJointArm2(System, SystemH):
    """Kinematic 2D arm; every state is in the global frame.

    x = [joint_x, joint_y, joint_theta, joint_theta_dot] for each joint in turn;
    u = one angular acceleration per joint.
    """

    link_lengths: list[float] = field(default_factory=list)

    @property
    def dof(self) -> int:
        """Number of joints."""
        return len(self.link_lengths)

    @property
    def num_states(self) -> int:
        return STATES_PER_JOINT * self.dof

    @property
    def num_inputs(self) -> int:
        return self.dof

    def num_states_to_num_dim_ratio(self) -> int:
        return STATES_PER_JOINT

    def _check_state(self, x) -> np.ndarray:
        x = np.asarray(x, dtype=float)
        ratio = self.num_states_to_num_dim_ratio()
        if len(x) % ratio != 0:
            raise ValueError(f"number of states {len(x)} is not a multiple of {ratio}")
        if len(x) // ratio != self.dof:
            raise ValueError(
                f"state describes {len(x) // ratio} joints but the arm has {self.dof}"
            )
        return x

    def _check_input(self, u) -> np.ndarray:
        u = np.asarray(u, dtype=float)
        if len(u) != self.dof:
            raise ValueError(f"expected {self.dof} inputs, got {len(u)}")
        return u

    def calculate_feasible_state_initial(self, angles_desired: Sequence[float]) -> np.ndarray:
        """Joint positions for relative angles, with zero rates."""
        if len(angles_desired) != self.dof:
            raise ValueError(
                f"expected {self.dof} angles, got {len(angles_desired)}"
            )
        ratio = self.num_states_to_num_dim_ratio()
        x = np.zeros(self.num_states)
        prev_x, prev_y = 0.0, 0.0
        angle_sum = 0.0
        for i, (length, angle) in enumerate(zip(self.link_lengths, angles_desired)):
            angle_sum += angle
            prev_x += length * math.cos(angle_sum)
            prev_y += length * math.sin(angle_sum)
            x[ratio * i : ratio * i + 3] = (prev_x, prev_y, angle_sum)
        return x

    def inverse_kinematics(self, position_desired: Sequence[float], x) -> list[float]:
        """Joint angle changes that move the end effector toward the target."""
        if len(position_desired) != 2:
            raise ValueError("desired position must have two coordinates")
        x = self._check_state(x)
        ratio = self.num_states_to_num_dim_ratio()

        jacobian = np.zeros((2, self.dof))
        for i in range(self.dof):
            reach = sum(self.link_lengths[i:])
            angle = x[ratio * i + 2]
            jacobian[0, i] = -reach * math.sin(angle)
            jacobian[1, i] = reach * math.cos(angle)

        end_effector = x[ratio * self.dof - 4 : ratio * self.dof - 2]
        error = np.asarray(position_desired, dtype=float) - end_effector
        return list(_pseudo_inverse(jacobian, _PSEUDO_INVERSE_EPS) @ error)

    def get_derivatives(self, x, u, t) -> np.ndarray:
        x = self._check_state(x)
        u = self._check_input(u)
        ratio = self.num_states_to_num_dim_ratio()
        x_dot = np.zeros(len(x))
        vx = vy = 0.0
        for i, length in enumerate(self.link_lengths):
            angle = x[ratio * i + 2]
            rate = x[ratio * i + 3] + u[i]
            vx += -length * math.sin(angle) * rate
            vy += length * math.cos(angle) * rate
            x_dot[ratio * i : ratio * i + 4] = (vx, vy, rate, 0.0)
        return x_dot

    def calculate_jacobian(self, x, u, t) -> tuple[np.ndarray, np.ndarray]:
        x = self._check_state(x)
        u = self._check_input(u)
        ratio = self.num_states_to_num_dim_ratio()
        a = np.zeros((self.num_states, self.num_states))
        b = np.zeros((self.num_states, self.num_inputs))
        for i in range(self.dof):
            row = ratio * i
            for j in range(i + 1):
                length = self.link_lengths[j]
                angle = x[ratio * j + 2]
                rate = x[ratio * j + 3] + u[j]
                sin_a, cos_a = math.sin(angle), math.cos(angle)
                a[row, ratio * j + 2] = -length * cos_a * rate
                a[row, ratio * j + 3] = -length * sin_a
                b[row, j] = -length * sin_a
                a[row + 1, ratio * j + 2] = -length * sin_a * rate
                a[row + 1, ratio * j + 3] = length * cos_a
                b[row + 1, j] = length * cos_a
            a[row + 2, row + 3] = 1.0
            b[row + 2, i] = 1.0
        return a, b

    def calculate_input(self, x, x_dot_desired, t) -> np.ndarray:
        """Angular accelerations that give the desired joint angle rates."""
        x = self._check_state(x)
        x_dot_desired = self._check_state(x_dot_desired)
        ratio = self.num_states_to_num_dim_ratio()
        return x_dot_desired[2::ratio] - x[3::ratio]