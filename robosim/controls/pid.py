"""Vector PID controller with a bounded integral term."""

from __future__ import annotations

import numpy as np


def _vector(values) -> np.ndarray:
    return np.array(values, dtype=float)


class Controller:
    """Element-wise PID controller over R channels."""

    def __init__(self, kp, ki, kd, lower_bound, upper_bound):
        self.kp = _vector(kp)
        size = self.kp.shape
        self.ki = _vector(ki)
        self.kd = _vector(kd)
        self.error_total_lower_bound = _vector(lower_bound)
        self.error_total_upper_bound = _vector(upper_bound)
        for name in ("ki", "kd", "error_total_lower_bound", "error_total_upper_bound"):
            if getattr(self, name).shape != size:
                raise ValueError(f"{name} must have shape {size}")
        self.error_previous = np.zeros(size)
        self.error_current = np.zeros(size)
        self.error_total = np.zeros(size)

    def update_gains(self, kp, ki, kd) -> None:
        """Replace the three gain vectors."""
        gains = [_vector(kp), _vector(ki), _vector(kd)]
        if any(g.shape != self.kp.shape for g in gains):
            raise ValueError(f"gains must have shape {self.kp.shape}")
        self.kp, self.ki, self.kd = gains

    def compute(self, error) -> np.ndarray:
        """Feed one error sample and return the control output."""
        error = _vector(error)
        if error.shape != self.kp.shape:
            raise ValueError(f"error must have shape {self.kp.shape}")
        self.error_previous = self.error_current
        self.error_current = error
        self.error_total = np.clip(
            self.error_total + error,
            self.error_total_lower_bound,
            self.error_total_upper_bound,
        )
        return (
            self.kp * self.error_current
            + self.ki * self.error_total
            + self.kd * (self.error_current - self.error_previous)
        )