import math

import pytest

from sumkit.matrix import Matrix4
from sumkit.quaternion import Quaternion
from sumkit.scalar import HALF_PI
from sumkit.vector import Vector3


def _approx(value, tol=1e-6):
    return pytest.approx(list(value), abs=tol)


def test_identity_and_zero_constants():
    assert list(Matrix4.rotation_quaternion(Quaternion.IDENTITY)) == _approx(Matrix4.IDENTITY)
    assert Quaternion.IDENTITY.magnitude() == 1.0
    assert Quaternion.ZERO.magnitude_squared() == 0.0


def test_conjugate_negates_vector_part():
    q = Quaternion(1.0, -2.0, 3.0, 4.0)
    assert q.conjugate() == Quaternion(-1.0, 2.0, -3.0, 4.0)
    assert q.conjugate().conjugate() == q


def test_inverse_of_unit_is_conjugate():
    q = Quaternion.from_axis_angle(Vector3(1.0, 2.0, 3.0), 0.7)
    assert list(q.inverse()) == _approx(q.conjugate())


def test_inverse_scales_by_magnitude_squared():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    inv = q.inverse()
    assert list(inv * q.magnitude_squared()) == _approx(q.conjugate())


def test_magnitude_relation():
    q = Quaternion(1.0, 2.0, 2.0, 4.0)
    assert math.isclose(q.magnitude() ** 2, q.magnitude_squared())
    assert q.magnitude_squared() == q.dot(q)


def test_normalized_has_unit_length():
    q = Quaternion(3.0, -1.0, 2.0, 5.0).normalized()
    assert math.isclose(q.magnitude(), 1.0)


def test_normalize_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Quaternion.ZERO.normalized()


def test_axis_angle_matches_axis_rotation_matrix():
    axis = Vector3(0.0, 1.0, 1.0)
    q = Quaternion.from_axis_angle(axis, 1.1)
    assert math.isclose(q.magnitude(), 1.0)
    assert list(Matrix4.rotation_quaternion(q)) == _approx(Matrix4.rotation_axis(axis, 1.1))


def test_yaw_pitch_roll_zero_is_identity():
    assert list(Quaternion.from_yaw_pitch_roll(0.0, 0.0, 0.0)) == _approx(Quaternion.IDENTITY)


def test_yaw_pitch_roll_is_unit():
    q = Quaternion.from_yaw_pitch_roll(0.3, -0.8, 1.9)
    assert math.isclose(q.magnitude(), 1.0)


def test_rotation_matrix_identity():
    assert list(Quaternion.from_rotation_matrix(Matrix4.IDENTITY)) == _approx(Quaternion.IDENTITY)


def test_rotation_matrix_round_trip():
    q = Quaternion.from_axis_angle(Vector3(1.0, 2.0, -1.0), 0.9)
    back = Quaternion.from_rotation_matrix(Matrix4.rotation_quaternion(q))
    assert list(back) == _approx(q)


def test_rotation_matrix_half_turn_about_x():
    q = Quaternion(1.0, 0.0, 0.0, 0.0)
    back = Quaternion.from_rotation_matrix(Matrix4.rotation_quaternion(q))
    assert list(back) == _approx(q)


def test_lerp_endpoints():
    q0 = Quaternion(1.0, 2.0, 3.0, 4.0)
    q1 = Quaternion(-1.0, 0.0, 5.0, 2.0)
    assert list(Quaternion.lerp(q0, q1, 0.0)) == _approx(q0)
    assert list(Quaternion.lerp(q0, q1, 1.0)) == _approx(q1)
    assert list(Quaternion.lerp(q0, q0, 0.37)) == _approx(q0)


def test_slerp_endpoints_and_midpoint():
    q0 = Quaternion.IDENTITY
    q1 = Quaternion.from_axis_angle(Vector3.Z_AXIS, HALF_PI)
    assert list(Quaternion.slerp(q0, q1, 0.0)) == _approx(q0)
    assert list(Quaternion.slerp(q0, q1, 1.0)) == _approx(q1)
    mid = Quaternion.slerp(q0, q1, 0.5)
    assert list(mid) == _approx(Quaternion.from_axis_angle(Vector3.Z_AXIS, HALF_PI * 0.5))


def test_slerp_takes_short_arc():
    q0 = Quaternion.IDENTITY
    q1 = Quaternion.from_axis_angle(Vector3.Y_AXIS, 0.8) * -1.0
    result = Quaternion.slerp(q0, q1, 1.0)
    assert list(result) == _approx(q1 * -1.0)
    assert math.isclose(result.magnitude(), 1.0)


def test_slerp_nearly_equal_uses_lerp():
    q0 = Quaternion.IDENTITY
    q1 = Quaternion.from_axis_angle(Vector3.X_AXIS, 0.001)
    result = Quaternion.slerp(q0, q1, 0.5)
    assert list(result) == _approx(Quaternion.lerp(q0, q1, 0.5).normalized())