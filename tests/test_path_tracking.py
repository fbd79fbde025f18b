import math

import numpy as np
import pytest

from robosim.controls.path_tracking import (
    RecordPoint,
    calculate_desired_yaw,
    calculate_lookahead_point,
    pure_pursuit,
)

PATH = [
    (0.0, 0.0, 0.0),
    (3.0, 3.0, 0.0),
    (6.0, 6.0, 0.0),
    (9.0, 9.0, 0.0),
    (12.0, 12.0, 0.0),
    (15.0, 15.0, 0.0),
]


def test_lookahead_from_beginning():
    index, distance, point = calculate_lookahead_point(PATH, (0.0, 0.0, 0.0), 0, 5.0)
    assert index == 2
    assert distance == pytest.approx(math.sqrt(72.0), abs=1e-12)
    np.testing.assert_allclose(point, PATH[2], atol=1e-12)


def test_lookahead_falls_back_to_last_point():
    index, distance, point = calculate_lookahead_point(PATH, (13.0, 13.0, 0.0), 4, 5.0)
    assert index == 5
    assert distance == pytest.approx(math.sqrt(8.0), abs=1e-12)
    np.testing.assert_allclose(point, PATH[5], atol=1e-12)


def test_lookahead_start_index_past_end():
    index, _, point = calculate_lookahead_point(PATH, (0.0, 0.0, 0.0), 10, 5.0)
    assert index == 5
    np.testing.assert_allclose(point, PATH[5])


def test_lookahead_empty_path():
    with pytest.raises(ValueError):
        calculate_lookahead_point([], (0.0, 0.0, 0.0), 0, 5.0)


def test_desired_yaw():
    assert calculate_desired_yaw((0.0, 0.0), (1.0, 1.0)) == pytest.approx(
        math.radians(45.0), abs=1e-12
    )
    assert calculate_desired_yaw((0.0, 0.0), (-1.0, -1.0)) == pytest.approx(
        math.radians(-135.0), abs=1e-12
    )


def test_pure_pursuit_straight_ahead():
    assert pure_pursuit((0.0, 0.0), (1.0, 0.0), 0.0, 5.0, 2.5) == pytest.approx(0.0, abs=1e-12)


def test_pure_pursuit_steers_toward_target():
    left = pure_pursuit((0.0, 0.0), (3.0, 3.0), 0.0, 5.0, 2.5)
    right = pure_pursuit((0.0, 0.0), (3.0, -3.0), 0.0, 5.0, 2.5)
    assert left > 0.0
    assert right == pytest.approx(-left)


def test_record_point_fields():
    point = RecordPoint(1.0, 2.0, 3.0, 4.0)
    assert (point.time, point.x, point.y, point.z) == (1.0, 2.0, 3.0, 4.0)