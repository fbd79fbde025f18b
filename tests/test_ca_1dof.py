import numpy as np

from robosim.models.ca_1dof import ConstantAcceleration1Dof, calculate_f


def _rk4(f, x, t0, tf):
    h = tf - t0
    k1 = f(x, t0)
    k2 = f(x + 0.5 * h * k1, t0 + 0.5 * h)
    k3 = f(x + 0.5 * h * k2, t0 + 0.5 * h)
    k4 = f(x + h * k3, tf)
    return x + h / 6.0 * (k1 + 2.0 * k2 + 2.0 * k3 + k4)


def test_ca1dof_prop():
    x0, vel0, accel0 = 0.0, 1.0, 1.0
    start, end, step = 0.0, 10.0, 0.01
    total_time = end - start

    t0 = start
    tf = t0 + step
    result = np.array([x0, vel0, accel0])
    expected = np.array(
        [
            x0 + vel0 * total_time + 0.5 * accel0 * total_time * total_time,
            vel0 + accel0 * total_time,
            accel0,
        ]
    )
    veh = ConstantAcceleration1Dof()

    while tf <= end:
        result = veh.propagate(result, np.zeros(0), t0, step, _rk4)
        t0 = tf
        tf += step

    assert np.all(np.abs(expected - result) < 1e-11)


def test_ca1dof_f_matrix():
    answer = np.array(
        [
            [0.0, 1.0, 0.0],
            [0.0, 0.0, 1.0],
            [0.0, 0.0, 0.0],
        ]
    )
    np.testing.assert_array_equal(calculate_f(), answer)


def test_derivatives_match_f_matrix():
    veh = ConstantAcceleration1Dof()
    x = np.array([2.0, -3.0, 4.5])
    np.testing.assert_allclose(veh.get_derivatives(x, np.zeros(0), 0.0), calculate_f() @ x)


def test_jacobian_shapes_and_values():
    veh = ConstantAcceleration1Dof()
    a, b = veh.calculate_jacobian(np.ones(3), np.zeros(0), 1.0)
    np.testing.assert_array_equal(a, calculate_f())
    assert b.shape == (3, 0)


def test_calculate_input_is_empty():
    veh = ConstantAcceleration1Dof()
    assert veh.calculate_input(np.ones(3), np.ones(3), 0.0).shape == (0,)