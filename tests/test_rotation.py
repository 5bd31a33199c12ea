import math

import pytest
from spatial import Vector3

SAMPLES = [
    Vector3(1.0, 2.0, 3.0),
    Vector3(-4.5, 0.25, 7.0),
    Vector3(0.1, -0.2, 0.3),
]

AXES = [
    Vector3(0, 0, 1),
    Vector3(1, 1, 0),
    Vector3(-2, 0.5, 3),
]


@pytest.mark.unittest
def test_quarter_turn_about_z(x_axis, z_axis):
    assert x_axis.get_rotated(90, z_axis).match(Vector3(0, 1, 0))
    assert x_axis.get_rotated_rad(math.pi / 2, z_axis).match(Vector3(0, 1, 0))


@pytest.mark.unittest
def test_axis_is_normalized(x_axis):
    assert x_axis.get_rotated(90, Vector3(0, 0, 10)).match(Vector3(0, 1, 0))


@pytest.mark.unittest
@pytest.mark.parametrize("v", SAMPLES)
@pytest.mark.parametrize("axis", AXES)
@pytest.mark.parametrize("angle", [17.0, 90.0, -135.0, 301.5])
def test_rotation_preserves_length(v, axis, angle):
    assert v.get_rotated(angle, axis).length() == pytest.approx(v.length())


@pytest.mark.unittest
@pytest.mark.parametrize("v", SAMPLES)
@pytest.mark.parametrize("axis", AXES)
def test_full_turn_is_identity(v, axis):
    assert v.get_rotated(360, axis).match(v)
    assert v.get_rotated_rad(2 * math.pi, axis).match(v)


@pytest.mark.unittest
def test_degree_and_radian_variants_agree():
    v = Vector3(1, 2, 3)
    axis = Vector3(0.3, -1, 2)
    assert v.get_rotated(33, axis).match(v.get_rotated_rad(math.radians(33), axis), 1e-12)


@pytest.mark.unittest
def test_rotate_mutates_and_get_rotated_does_not(x_axis, z_axis):
    v = Vector3(x_axis)
    r = v.get_rotated(90, z_axis)
    assert v == x_axis
    assert v.rotate(90, z_axis) is v
    assert v == r


@pytest.mark.unittest
def test_euler_single_axes(x_axis, z_axis):
    assert x_axis.get_rotated(0, 0, 90).match(Vector3(0, 1, 0))
    assert z_axis.get_rotated(90, 0, 0).match(Vector3(0, -1, 0))
    assert x_axis.get_rotated(0, 90, 0).match(Vector3(0, 0, -1))


@pytest.mark.unittest
def test_euler_matches_composed_axis_rotations(x_axis, y_axis, z_axis):
    v = Vector3(1, 2, 3)
    ax, ay, az = 30.0, -45.0, 60.0
    composed = v.get_rotated(az, z_axis).rotate(ay, y_axis).rotate(ax, x_axis)
    assert v.get_rotated(ax, ay, az).match(composed, 1e-9)
    assert v.get_rotated_euler(ax, ay, az).match(composed, 1e-9)


@pytest.mark.unittest
def test_euler_radians_and_in_place():
    v = Vector3(1, 2, 3)
    expected = v.get_rotated(10, 20, 30)
    assert v.get_rotated_rad(math.radians(10), math.radians(20), math.radians(30)).match(expected, 1e-12)
    assert v.rotate_euler(10, 20, 30) is v
    assert v.match(expected, 1e-12)


@pytest.mark.unittest
def test_rotation_about_pivot(z_axis):
    p = Vector3(2, 1, 0)
    pivot = Vector3(1, 1, 0)
    assert p.get_rotated(90, pivot, z_axis).match(Vector3(1, 2, 0))
    assert p.get_rotated_about(180, pivot, z_axis).match(Vector3(0, 1, 0))
    assert p.get_rotated_rad(math.pi, pivot, z_axis).match(Vector3(0, 1, 0))


@pytest.mark.unittest
def test_pivot_on_origin_matches_plain_rotation():
    v = Vector3(1, 2, 3)
    axis = Vector3(1, 1, 1)
    assert v.get_rotated(40, Vector3.zero(), axis).match(v.get_rotated(40, axis), 1e-12)


@pytest.mark.unittest
def test_rotate_about_pivot_in_place(z_axis):
    p = Vector3(2, 1, 0)
    assert p.rotate(90, Vector3(1, 1, 0), z_axis) is p
    assert p.match(Vector3(1, 2, 0))


@pytest.mark.unittest
def test_infinite_angle_gives_nan_without_raising(z_axis):
    v = Vector3(1, 0, 0).get_rotated_rad(math.inf, z_axis)
    assert math.isnan(v.x)


@pytest.mark.unittest
def test_wrong_arity():
    with pytest.raises(TypeError):
        Vector3(1, 0, 0).rotate(90)


@pytest.mark.unittest
def test_mapping_identity_basis(x_axis, y_axis, z_axis):
    v = Vector3(1, 2, 3)
    origin = Vector3(10, 20, 30)
    assert v.get_mapped(origin, x_axis, y_axis, z_axis) == Vector3(11, 22, 33)


@pytest.mark.unittest
def test_mapping_is_affine_combination():
    v = Vector3(2, 3, -1)
    origin = Vector3(1, 0, 0)
    vx, vy, vz = Vector3(0, 1, 0), Vector3(2, 0, 0), Vector3(0, 0, 5)
    expected = origin + vx * 2 + vy * 3 + vz * -1
    assert v.get_mapped(origin, vx, vy, vz) == expected
    assert v.map(origin, vx, vy, vz) is v
    assert v == expected
