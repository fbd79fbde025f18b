import numpy as np
import pytest

from robosim.controls.pid import Controller

ZEROS = [0.0, 0.0]


def make(kp=ZEROS, ki=ZEROS, kd=ZEROS, low=(-1.0, -1.0), high=(1.0, 1.0)):
    return Controller(kp, ki, kd, low, high)


def test_proportional_only():
    controller = make(kp=[2.0, 3.0])
    np.testing.assert_allclose(controller.compute([0.5, -1.0]), [2.0 * 0.5, 3.0 * -1.0])


def test_integral_is_clamped_to_bounds():
    controller = make(ki=[1.0, 1.0], low=(-0.1, -0.1), high=(0.1, 0.1))
    for _ in range(5):
        output = controller.compute([1.0, -1.0])
    np.testing.assert_allclose(output, [0.1, -0.1])


def test_integral_accumulates_within_bounds():
    controller = make(ki=[1.0, 1.0], low=(-10.0, -10.0), high=(10.0, 10.0))
    controller.compute([0.5, 0.25])
    output = controller.compute([0.5, 0.25])
    np.testing.assert_allclose(output, [0.5 + 0.5, 0.25 + 0.25])


def test_derivative_uses_previous_error():
    controller = make(kd=[1.0, 1.0])
    first = controller.compute([0.2, 0.4])
    second = controller.compute([0.5, 0.1])
    np.testing.assert_allclose(first, [0.2, 0.4])
    np.testing.assert_allclose(second, [0.5 - 0.2, 0.1 - 0.4])


def test_update_gains_changes_output():
    controller = make(kp=[1.0, 1.0])
    controller.update_gains([4.0, 5.0], ZEROS, ZEROS)
    np.testing.assert_allclose(controller.compute([1.0, 1.0]), [4.0, 5.0])


def test_shape_mismatch_raises():
    controller = make()
    with pytest.raises(ValueError):
        controller.compute([1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        controller.update_gains([1.0], ZEROS, ZEROS)
    with pytest.raises(ValueError):
        Controller([1.0, 1.0], [1.0], ZEROS, ZEROS, ZEROS)