# spatial/vector.py
import math
from typing import Optional

import numpy as np

from spatial.constants import DEG_TO_RAD, RAD_TO_DEG, DEFAULT_TOLERANCE, FIELD_SEPARATOR
from spatial.deprecation import LegacyAliases

_SCALAR_TYPES = (int, float, np.integer, np.floating)


def _is_scalar(value) -> bool:
    return isinstance(value, _SCALAR_TYPES)


def _operand(value):
    """
    Reads (x, y, z) from a Vector3 or anything shaped like one. Two-component
    shapes get z = 0, a fourth component is ignored. Returns None when the
    value has no x/y attributes.
    """
    if isinstance(value, Vector3):
        return value._xyz()
    try:
        return (float(value.x), float(value.y), float(getattr(value, "z", 0.0)))
    except AttributeError:
        return None


def _sin_cos(angle: float):
    # infinite angles give NaN instead of raising
    if math.isinf(angle):
        return math.nan, math.nan
    return math.sin(angle), math.cos(angle)


def _axis_angle(x, y, z, angle, axis):
    """
    Rodrigues rotation of (x, y, z) around ``axis`` by ``angle`` radians.
    The axis is normalized first; a zero axis degenerates to scaling by cos(angle).
    """
    ax, ay, az = Vector3(axis).get_normalized()._xyz()
    sina, cosa = _sin_cos(angle)
    cosb = 1.0 - cosa
    return (
        x * (ax * ax * cosb + cosa) + y * (ax * ay * cosb - az * sina) + z * (ax * az * cosb + ay * sina),
        x * (ay * ax * cosb + az * sina) + y * (ay * ay * cosb + cosa) + z * (ay * az * cosb - ax * sina),
        x * (az * ax * cosb - ay * sina) + y * (az * ay * cosb + ax * sina) + z * (az * az * cosb + cosa),
    )


def _is_euler(args) -> bool:
    return len(args) == 3 and _is_scalar(args[1])


def _to_radians(args):
    # Euler angles convert all three, the other forms only the leading angle
    if _is_euler(args):
        return tuple(a * DEG_TO_RAD for a in args)
    return (args[0] * DEG_TO_RAD,) + tuple(args[1:])


class Vector3(LegacyAliases):
    """
    A double precision 3D vector used for points, directions and velocities.

    The three components live in a contiguous float64 buffer (see get_ptr()).
    Mutating methods return self so calls can be chained; their get_* twins
    return a new vector and leave the receiver untouched.

    Degenerate inputs never raise: dividing by a zero scalar leaves the vector
    unchanged, normalizing the zero vector yields the zero vector, and so on.
    """
    DIM = 3

    # keep numpy from broadcasting over us in mixed expressions like np.float64(2) * v
    __array_ufunc__ = None

    def __init__(self, x=0.0, y=None, z=0.0):
        if y is not None:
            components = (x, y, z)
        elif _is_scalar(x):
            components = (x, x, x)
        else:
            components = _operand(x)
            if components is None:
                raise TypeError(f"cannot build a Vector3 from {type(x).__name__}")
        self._data = np.array(components, dtype=np.float64)

    @classmethod
    def _from_array(cls, data) -> "Vector3":
        vec = cls.__new__(cls)
        vec._data = np.array(data, dtype=np.float64)
        return vec

    @classmethod
    def from_vec2(cls, vec) -> "Vector3":
        """Widens a two-component vector, z is set to 0."""
        return cls(vec.x, vec.y, 0.0)

    @classmethod
    def from_vec4(cls, vec) -> "Vector3":
        """Narrows a four-component vector, w is dropped."""
        return cls(vec.x, vec.y, vec.z)

    @classmethod
    def from_string(cls, text: str) -> "Vector3":
        from spatial.textio import parse_vector
        return parse_vector(text)

    @staticmethod
    def zero() -> "Vector3":
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def one() -> "Vector3":
        return Vector3(1.0, 1.0, 1.0)

    # ------------------------------------------------------------------
    # component access
    # ------------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._data[0])

    @x.setter
    def x(self, value: float):
        self._data[0] = value

    @property
    def y(self) -> float:
        return float(self._data[1])

    @y.setter
    def y(self, value: float):
        self._data[1] = value

    @property
    def z(self) -> float:
        return float(self._data[2])

    @z.setter
    def z(self, value: float):
        self._data[2] = value

    def _xyz(self):
        return tuple(self._data.tolist())

    def _assign(self, x, y, z) -> "Vector3":
        self._data[0] = x
        self._data[1] = y
        self._data[2] = z
        return self

    def get_ptr(self) -> np.ndarray:
        """
        Returns the live (3,) float64 buffer backing this vector. Writes to the
        buffer change the vector.
        """
        return self._data

    def __array__(self, dtype=None, copy=None):
        if dtype is None or np.dtype(dtype) == self._data.dtype:
            return self._data.copy() if copy else self._data
        if copy is False:
            raise ValueError(f"cannot view a Vector3 as {np.dtype(dtype)} without copying")
        return self._data.astype(dtype)

    def __getitem__(self, n):
        return float(self._data[n])

    def __setitem__(self, n, value):
        self._data[n] = value

    def __len__(self) -> int:
        return 3

    def __iter__(self):
        return iter(self._xyz())

    def __copy__(self) -> "Vector3":
        return type(self)._from_array(self._data)

    def __deepcopy__(self, memo) -> "Vector3":
        return type(self)._from_array(self._data)

    def set(self, x, y=None, z=0.0):
        """
        Overwrites all three components from (x, y, z=0), a scalar broadcast
        to every axis, or another vector.
        """
        if y is not None:
            self._assign(x, y, z)
        elif _is_scalar(x):
            self._assign(x, x, x)
        else:
            self._assign(*Vector3(x)._xyz())

    # ------------------------------------------------------------------
    # comparison
    # ------------------------------------------------------------------
    def __eq__(self, other):
        o = _operand(other)
        if o is None:
            return NotImplemented
        x, y, z = self._xyz()
        return x == o[0] and y == o[1] and z == o[2]

    def __ne__(self, other):
        o = _operand(other)
        if o is None:
            return NotImplemented
        x, y, z = self._xyz()
        return x != o[0] or y != o[1] or z != o[2]

    __hash__ = None

    def match(self, other, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """
        True when every axis differs by less than ``tolerance``. This is a
        per-axis bound, not a Euclidean distance.
        """
        x, y, z = self._xyz()
        ox, oy, oz = _operand(other)
        return abs(x - ox) < tolerance and abs(y - oy) < tolerance and abs(z - oz) < tolerance

    def is_aligned(self, other, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """
        True when the angle to ``other`` is below ``tolerance`` degrees.
        A zero vector sits at 90 degrees to everything, so it never aligns.
        """
        return self.angle(other) < tolerance

    def align(self, other, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return self.is_aligned(other, tolerance)

    def is_aligned_rad(self, other, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return self.angle_rad(other) < tolerance

    def align_rad(self, other, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return self.is_aligned_rad(other, tolerance)

    # ------------------------------------------------------------------
    # arithmetic
    # ------------------------------------------------------------------
    def __add__(self, other) -> "Vector3":
        x, y, z = self._xyz()
        if _is_scalar(other):
            return Vector3(x + other, y + other, z + other)
        o = _operand(other)
        if o is None:
            return NotImplemented
        return Vector3(x + o[0], y + o[1], z + o[2])

    def __radd__(self, other) -> "Vector3":
        return self.__add__(other)

    def __sub__(self, other) -> "Vector3":
        x, y, z = self._xyz()
        if _is_scalar(other):
            return Vector3(x - other, y - other, z - other)
        o = _operand(other)
        if o is None:
            return NotImplemented
        return Vector3(x - o[0], y - o[1], z - o[2])

    def __rsub__(self, other) -> "Vector3":
        x, y, z = self._xyz()
        if _is_scalar(other):
            return Vector3(other - x, other - y, other - z)
        o = _operand(other)
        if o is None:
            return NotImplemented
        return Vector3(o[0] - x, o[1] - y, o[2] - z)

    def __mul__(self, other) -> "Vector3":
        x, y, z = self._xyz()
        # Allow scalar multiplication.
        if _is_scalar(other):
            return Vector3(x * other, y * other, z * other)
        # Element-wise multiplication.
        o = _operand(other)
        if o is None:
            return NotImplemented
        return Vector3(x * o[0], y * o[1], z * o[2])

    def __rmul__(self, other) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, other) -> "Vector3":
        """
        Vector / scalar: a zero scalar returns an unchanged copy.
        Vector / vector: each zero divisor component leaves that axis unchanged.
        """
        x, y, z = self._xyz()
        if _is_scalar(other):
            if other == 0:
                return Vector3(x, y, z)
            return Vector3(x / other, y / other, z / other)
        o = _operand(other)
        if o is None:
            return NotImplemented
        return Vector3(
            x / o[0] if o[0] != 0 else x,
            y / o[1] if o[1] != 0 else y,
            z / o[2] if o[2] != 0 else z,
        )

    def __rtruediv__(self, other) -> "Vector3":
        # scalar / vector is unguarded: zero components give inf or nan
        if _is_scalar(other):
            with np.errstate(divide="ignore", invalid="ignore"):
                return Vector3._from_array(np.float64(other) / self._data)
        o = _operand(other)
        if o is None:
            return NotImplemented
        return Vector3(*o) / self

    def __neg__(self) -> "Vector3":
        x, y, z = self._xyz()
        return Vector3(-x, -y, -z)

    def _update(self, result) -> "Vector3":
        if result is NotImplemented:
            return NotImplemented
        self._data[:] = result._data
        return self

    def __iadd__(self, other) -> "Vector3":
        return self._update(self.__add__(other))

    def __isub__(self, other) -> "Vector3":
        return self._update(self.__sub__(other))

    def __imul__(self, other) -> "Vector3":
        return self._update(self.__mul__(other))

    def __itruediv__(self, other) -> "Vector3":
        return self._update(self.__truediv__(other))

    def add(self, other) -> "Vector3":
        return self + other

    def subtract(self, other) -> "Vector3":
        return self - other

    def multiply(self, other) -> "Vector3":
        return self * other

    def divide(self, other) -> "Vector3":
        return self / other

    # ------------------------------------------------------------------
    # rotation
    # ------------------------------------------------------------------
    def rotate_rad(self, *args) -> "Vector3":
        """
        Rotates in place and returns self. Angles are in radians.

        Accepts three forms:
            rotate_rad(angle, axis)          axis-angle (Rodrigues)
            rotate_rad(ax, ay, az)           Euler angles about x, then y, then z
            rotate_rad(angle, pivot, axis)   axis-angle around a pivot point
        """
        if len(args) == 2:
            x, y, z = self._xyz()
            return self._assign(*_axis_angle(x, y, z, args[0], args[1]))
        if _is_euler(args):
            return self.rotate_euler_rad(*args)
        if len(args) == 3:
            return self.rotate_about_rad(*args)
        raise TypeError(f"rotate_rad() takes 2 or 3 arguments ({len(args)} given)")

    def rotate(self, *args) -> "Vector3":
        """Degree version of rotate_rad()."""
        if len(args) not in (2, 3):
            raise TypeError(f"rotate() takes 2 or 3 arguments ({len(args)} given)")
        return self.rotate_rad(*_to_radians(args))

    def get_rotated_rad(self, *args) -> "Vector3":
        return Vector3(self).rotate_rad(*args)

    def get_rotated(self, *args) -> "Vector3":
        return Vector3(self).rotate(*args)

    def rotate_euler_rad(self, ax: float, ay: float, az: float) -> "Vector3":
        # one combined matrix, equivalent to rotating about x, then y, then z
        b, a = _sin_cos(ax)
        d, c = _sin_cos(ay)
        f, e = _sin_cos(az)
        x, y, z = self._xyz()
        return self._assign(
            c * e * x - c * f * y + d * z,
            (a * f + b * d * e) * x + (a * e - b * d * f) * y - b * c * z,
            (b * f - a * d * e) * x + (a * d * f + b * e) * y + a * c * z,
        )

    def rotate_euler(self, ax: float, ay: float, az: float) -> "Vector3":
        return self.rotate_euler_rad(ax * DEG_TO_RAD, ay * DEG_TO_RAD, az * DEG_TO_RAD)

    def get_rotated_euler_rad(self, ax: float, ay: float, az: float) -> "Vector3":
        return Vector3(self).rotate_euler_rad(ax, ay, az)

    def get_rotated_euler(self, ax: float, ay: float, az: float) -> "Vector3":
        return Vector3(self).rotate_euler(ax, ay, az)

    def rotate_about_rad(self, angle: float, pivot, axis) -> "Vector3":
        """
        Treats self as a point and rotates it around the line through ``pivot``
        along ``axis``.
        """
        px, py, pz = _operand(pivot)
        x, y, z = self._xyz()
        rx, ry, rz = _axis_angle(x - px, y - py, z - pz, angle, axis)
        return self._assign(rx + px, ry + py, rz + pz)

    def rotate_about(self, angle: float, pivot, axis) -> "Vector3":
        return self.rotate_about_rad(angle * DEG_TO_RAD, pivot, axis)

    def get_rotated_about_rad(self, angle: float, pivot, axis) -> "Vector3":
        return Vector3(self).rotate_about_rad(angle, pivot, axis)

    def get_rotated_about(self, angle: float, pivot, axis) -> "Vector3":
        return Vector3(self).rotate_about(angle, pivot, axis)

    # ------------------------------------------------------------------
    # mapping
    # ------------------------------------------------------------------
    def map(self, origin, vx, vy, vz) -> "Vector3":
        """
        Reads the components as coefficients along the basis (vx, vy, vz)
        placed at ``origin``: origin + x*vx + y*vy + z*vz. The basis is used
        as given, orthonormal or not.
        """
        x, y, z = self._xyz()
        o, bx, by, bz = _operand(origin), _operand(vx), _operand(vy), _operand(vz)
        return self._assign(
            o[0] + x * bx[0] + y * by[0] + z * bz[0],
            o[1] + x * bx[1] + y * by[1] + z * bz[1],
            o[2] + x * bx[2] + y * by[2] + z * bz[2],
        )

    def get_mapped(self, origin, vx, vy, vz) -> "Vector3":
        return Vector3(self).map(origin, vx, vy, vz)

    # ------------------------------------------------------------------
    # measurement
    # ------------------------------------------------------------------
    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        x, y, z = self._xyz()
        return x * x + y * y + z * z

    def distance(self, point) -> float:
        return math.sqrt(self.square_distance(point))

    def square_distance(self, point) -> float:
        x, y, z = self._xyz()
        px, py, pz = _operand(point)
        dx, dy, dz = x - px, y - py, z - pz
        return dx * dx + dy * dy + dz * dz

    def dot(self, other) -> float:
        x, y, z = self._xyz()
        ox, oy, oz = _operand(other)
        return x * ox + y * oy + z * oz

    def cross(self, other) -> "Vector3":
        """Replaces self with self x other (right-hand rule) and returns self."""
        x, y, z = self._xyz()
        ox, oy, oz = _operand(other)
        return self._assign(y * oz - z * oy, z * ox - x * oz, x * oy - y * ox)

    def get_crossed(self, other) -> "Vector3":
        return Vector3(self).cross(other)

    def perpendicular(self, other) -> "Vector3":
        """
        Replaces self with the normalized cross product. When the cross
        product has no positive length (parallel, zero, underflowing or NaN
        inputs) self becomes the zero vector.
        """
        x, y, z = self._xyz()
        ox, oy, oz = _operand(other)
        cx, cy, cz = y * oz - z * oy, z * ox - x * oz, x * oy - y * ox
        length = math.sqrt(cx * cx + cy * cy + cz * cz)
        if length > 0:
            return self._assign(cx / length, cy / length, cz / length)
        return self._assign(0.0, 0.0, 0.0)

    def get_perpendicular(self, other) -> "Vector3":
        return Vector3(self).perpendicular(other)

    def angle_rad(self, other) -> float:
        """
        Unsigned angle in [0, pi] between the two directions.

        Both sides are normalized first, and a zero vector normalizes to
        itself, so an angle involving the zero vector is pi / 2.
        """
        d = self.get_normalized().dot(Vector3(other).get_normalized())
        # rounding can push |d| a hair above 1
        return float(np.arccos(np.clip(d, -1.0, 1.0)))

    def angle(self, other) -> float:
        """Degree version of angle_rad(), in [0, 180]."""
        return self.angle_rad(other) * RAD_TO_DEG

    # ------------------------------------------------------------------
    # normalization and limiting
    # ------------------------------------------------------------------
    def normalize(self) -> "Vector3":
        x, y, z = self._xyz()
        length = math.sqrt(x * x + y * y + z * z)
        if length > 0:
            self._assign(x / length, y / length, z / length)
        return self

    def get_normalized(self) -> "Vector3":
        return Vector3(self).normalize()

    def scale(self, length: float) -> "Vector3":
        """
        Rescales to ``length`` keeping the direction. The zero vector stays zero.
        """
        x, y, z = self._xyz()
        l = math.sqrt(x * x + y * y + z * z)
        if l > 0:
            self._assign((x / l) * length, (y / l) * length, (z / l) * length)
        return self

    def get_scaled(self, length: float) -> "Vector3":
        return Vector3(self).scale(length)

    def limit(self, max_length: float) -> "Vector3":
        """
        Shrinks the vector to ``max_length`` if it is longer, keeping the
        direction. Compares squared lengths so short vectors skip the sqrt.
        """
        x, y, z = self._xyz()
        length_squared = x * x + y * y + z * z
        if length_squared > max_length * max_length and length_squared > 0:
            ratio = max_length / math.sqrt(length_squared)
            self._assign(x * ratio, y * ratio, z * ratio)
        return self

    def get_limited(self, max_length: float) -> "Vector3":
        return Vector3(self).limit(max_length)

    # ------------------------------------------------------------------
    # interpolation and aggregation
    # ------------------------------------------------------------------
    def interpolate(self, point, p: float) -> "Vector3":
        """
        Linear interpolation towards ``point``: p == 0 keeps self, p == 1 gives
        ``point``. p is not clamped, values outside [0, 1] extrapolate.
        """
        x, y, z = self._xyz()
        px, py, pz = _operand(point)
        return self._assign(x * (1 - p) + px * p, y * (1 - p) + py * p, z * (1 - p) + pz * p)

    def get_interpolated(self, point, p: float) -> "Vector3":
        return Vector3(self).interpolate(point, p)

    def middle(self, point) -> "Vector3":
        x, y, z = self._xyz()
        px, py, pz = _operand(point)
        return self._assign((x + px) / 2.0, (y + py) / 2.0, (z + pz) / 2.0)

    def get_middle(self, point) -> "Vector3":
        return Vector3(self).middle(point)

    def average(self, points, count: Optional[int] = None) -> "Vector3":
        """
        Sets self to the mean of the first ``count`` points (all of them when
        count is None) and returns self.

        A count of zero divides by zero and leaves NaN components.
        """
        if count is None:
            count = len(points)
        total = np.zeros(3, dtype=np.float64)
        for i in range(count):
            total += _operand(points[i])
        with np.errstate(divide="ignore", invalid="ignore"):
            self._data[:] = total / np.float64(count)
        return self

    # ------------------------------------------------------------------
    # text
    # ------------------------------------------------------------------
    def __format__(self, format_spec: str) -> str:
        return FIELD_SEPARATOR.join(format(c, format_spec) for c in self._xyz())

    def __str__(self) -> str:
        return self.__format__("")

    def __repr__(self) -> str:
        x, y, z = self._xyz()
        return f"Vector3({x}, {y}, {z})"
