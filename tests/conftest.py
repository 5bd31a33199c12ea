from collections import namedtuple

import pytest
from spatial import Vector3

Vec2 = namedtuple("Vec2", "x y")
Vec4 = namedtuple("Vec4", "x y z w")


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unittest: mark test as an Unit Test"
    )


@pytest.fixture
def x_axis():
    return Vector3(1, 0, 0)


@pytest.fixture
def y_axis():
    return Vector3(0, 1, 0)


@pytest.fixture
def z_axis():
    return Vector3(0, 0, 1)


@pytest.fixture
def zero():
    return Vector3.zero()


@pytest.fixture
def vec2_shape():
    return Vec2(1.5, -2.0)


@pytest.fixture
def vec4_shape():
    return Vec4(1.0, 2.0, 3.0, 4.0)


