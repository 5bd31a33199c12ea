import pytest
from spatial import Vector3


@pytest.mark.unittest
@pytest.mark.parametrize("alias, current, args", [
    ("rescaled", "get_scaled", (4.0,)),
    ("rotated", "get_rotated", (30.0, Vector3(0, 0, 1))),
    ("rotated", "get_rotated", (10.0, 20.0, 30.0)),
    ("rotated", "get_rotated", (45.0, Vector3(1, 1, 1), Vector3(0, 1, 0))),
    ("normalized", "get_normalized", ()),
    ("limited", "get_limited", (1.5,)),
    ("crossed", "get_crossed", (Vector3(0, 1, 0),)),
    ("perpendiculared", "get_perpendicular", (Vector3(0, 1, 0),)),
    ("mapped", "get_mapped", (Vector3(1, 1, 1), Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1))),
    ("distance_squared", "square_distance", (Vector3(4, 4, 4),)),
    ("interpolated", "get_interpolated", (Vector3(4, 4, 4), 0.3)),
    ("middled", "get_middle", (Vector3(4, 4, 4),)),
])
def test_alias_forwards_with_warning(alias, current, args):
    v = Vector3(1, 2, 3)
    with pytest.warns(DeprecationWarning, match=current):
        old = getattr(v, alias)(*args)
    assert old == getattr(v, current)(*args)
    assert v == Vector3(1, 2, 3)


@pytest.mark.unittest
def test_rescale_mutates():
    v = Vector3(0, 3, 4)
    with pytest.warns(DeprecationWarning):
        r = v.rescale(10)
    assert r is v
    assert v.length() == pytest.approx(10.0)
