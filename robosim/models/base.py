"""Interfaces shared by every dynamic model."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Sequence

import numpy as np

Derivative = Callable[[np.ndarray, float], np.ndarray]
Integrator = Callable[[Derivative, np.ndarray, float, float], np.ndarray]


class System(ABC):
    """A dynamic system x_dot = f(x, u, t) with N states and M inputs."""

    def propagate(self, x, u, t, dt, integrator: Integrator) -> np.ndarray:
        """Integrate the system from ``t`` to ``t + dt`` and return x(t + dt).

        ``integrator`` is called as ``integrator(f, x, t0, tf)`` where
        ``f(x, t)`` gives the state derivative with the input held fixed.
        """
        u = np.asarray(u, dtype=float)

        def derivative(state: np.ndarray, time: float) -> np.ndarray:
            return self.get_derivatives(state, u, time)

        return integrator(derivative, np.asarray(x, dtype=float), t, t + dt)

    @abstractmethod
    def get_derivatives(self, x, u, t) -> np.ndarray:
        """Return the rate of change of the state."""

    @abstractmethod
    def calculate_jacobian(self, x, u, t) -> tuple[np.ndarray, np.ndarray]:
        """Return (df/dx, df/du) as (N x N, N x M) matrices."""

    @abstractmethod
    def calculate_input(self, x, x_dot_desired, t) -> np.ndarray:
        """Return the input that produces the desired state derivative."""


class SystemH(ABC):
    """Extra behaviour for articulated (humanoid) models; paired with System."""

    @abstractmethod
    def num_states_to_num_dim_ratio(self) -> int:
        """Number of states per joint."""

    @abstractmethod
    def calculate_feasible_state_initial(self, angles_desired: Sequence[float]) -> np.ndarray:
        """Return a consistent state for the given relative joint angles."""

    @abstractmethod
    def inverse_kinematics(self, position_desired: Sequence[float], x) -> list[float]:
        """Return the joint angle changes that move the end effector toward a target."""