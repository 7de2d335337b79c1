import pytest

from sumkit.matrix import Matrix4, get_scale, get_translation, transform_coord
from sumkit.quaternion import Quaternion
from sumkit.scalar import HALF_PI
from sumkit.transform import Transform
from sumkit.vector import Vector3


def _approx(value, tol=1e-9):
    return pytest.approx(list(value), abs=tol)


def test_default_is_identity():
    t = Transform()
    assert t.position == Vector3.ZERO
    assert t.rotation == Quaternion.IDENTITY
    assert t.scale == Vector3.ONE
    assert list(t.matrix()) == _approx(Matrix4.IDENTITY)


def test_translation_only():
    t = Transform(position=Vector3(1.0, 2.0, 3.0))
    m = t.matrix()
    assert get_translation(m) == Vector3(1.0, 2.0, 3.0)
    assert transform_coord(Vector3.ZERO, m) == Vector3(1.0, 2.0, 3.0)


def test_scale_only():
    t = Transform(scale=Vector3(2.0, 3.0, 4.0))
    assert get_scale(t.matrix()) == Vector3(2.0, 3.0, 4.0)


def test_scale_applied_before_rotation_and_translation():
    rotation = Quaternion.from_axis_angle(Vector3.Y_AXIS, HALF_PI)
    t = Transform(position=Vector3(5.0, 0.0, 0.0), rotation=rotation, scale=Vector3(2.0, 2.0, 2.0))
    point = Vector3(1.0, 0.0, 0.0)
    expected = transform_coord(
        transform_coord(transform_coord(point, Matrix4.scaling(2.0)), Matrix4.rotation_quaternion(rotation)),
        Matrix4.translation(t.position),
    )
    assert list(transform_coord(point, t.matrix())) == _approx(expected)


def test_rotation_matches_axis_rotation():
    t = Transform(rotation=Quaternion.from_axis_angle(Vector3.Z_AXIS, 0.6))
    assert list(t.matrix()) == _approx(Matrix4.rotation_z(0.6))


def test_instances_do_not_share_state():
    a = Transform()
    b = Transform()
    a.position = Vector3(1.0, 1.0, 1.0)
    assert b.position == Vector3.ZERO