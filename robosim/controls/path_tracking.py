"""Lookahead point search and pure pursuit steering."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass
class RecordPoint:
    """A timestamped point on a recorded path."""

    time: float
    x: float
    y: float
    z: float


def calculate_lookahead_point(
    path: Sequence[Sequence[float]],
    position_current: Sequence[float],
    start_index: int,
    lookahead_distance: float,
) -> tuple[int, float, np.ndarray]:
    """Return (index, distance, point) of the first path point at least
    ``lookahead_distance`` away, searching from ``start_index``.

    Falls back to the last point of the path when none is far enough.
    """
    if len(path) == 0:
        raise ValueError("path is empty")
    position = np.asarray(position_current, dtype=float)
    threshold = lookahead_distance * lookahead_distance
    for index in range(start_index, len(path)):
        point = np.asarray(path[index], dtype=float)
        distance_squared = float(np.sum((point - position) ** 2))
        if distance_squared >= threshold:
            return index, math.sqrt(distance_squared), point
    last = np.asarray(path[-1], dtype=float)
    return len(path) - 1, float(np.linalg.norm(last - position)), last


def calculate_desired_yaw(
    position_current: Sequence[float], position_target: Sequence[float]
) -> float:
    """Heading from the current position toward the target."""
    return math.atan2(
        position_target[1] - position_current[1],
        position_target[0] - position_current[0],
    )


def pure_pursuit(
    position_current: Sequence[float],
    position_target: Sequence[float],
    yaw_current: float,
    target_distance: float,
    wheelbase: float,
) -> float:
    """Road wheel angle that steers toward the target point."""
    yaw_relative = calculate_desired_yaw(position_current, position_target) - yaw_current
    curvature = 2.0 * math.sin(yaw_relative) / target_distance
    return math.atan2(wheelbase * curvature, 1.0)