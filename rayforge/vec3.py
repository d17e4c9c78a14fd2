"""Three-component vectors, points and vector sampling helpers."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator

from .utility import PI, random_double

__all__ = [
    "Vec3",
    "Point3",
    "unit_vector",
    "random_in_unit_disk",
    "random_in_unit_sphere",
    "random_unit_vector",
    "random_on_hemisphere",
    "random_cosine_direction",
    "reflect",
    "refract",
    "is_longer",
    "is_parallel",
]


class Vec3:
    """An immutable 3D vector."""

    __slots__ = ("_e",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._e = (float(x), float(y), float(z))

    @classmethod
    def splat(cls, value: float) -> "Vec3":
        """Build a vector with every component set to ``value``."""
        return cls(value, value, value)

    @classmethod
    def random(cls, minimum: float = 0.0, maximum: float = 1.0) -> "Vec3":
        """Build a vector whose components are random in [minimum, maximum)."""
        return cls(
            random_double(minimum, maximum),
            random_double(minimum, maximum),
            random_double(minimum, maximum),
        )

    @property
    def x(self) -> float:
        return self._e[0]

    @property
    def y(self) -> float:
        return self._e[1]

    @property
    def z(self) -> float:
        return self._e[2]

    def __getitem__(self, index: int) -> float:
        return self._e[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._e)

    def __len__(self) -> int:
        return 3

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self._e == other._e

    def __hash__(self) -> int:
        return hash(self._e)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r})"

    def __str__(self) -> str:
        return " ".join(f"{value:g}" for value in self._e)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: object) -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return type(self)(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return type(self)(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: object) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            t = float(other)
            return Vec3(t * self.x, t * self.y, t * self.z)
        return NotImplemented

    def __rmul__(self, other: object) -> "Vec3":
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, other: object) -> "Vec3":
        if not isinstance(other, Real):
            return NotImplemented
        return (1.0 / float(other)) * self

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def near_zero(self) -> bool:
        """True when every component is within 1e-8 of zero."""
        s = 1e-8
        return all(abs(value) < s for value in self._e)

    def normalized(self) -> "Vec3":
        length = self.length()
        return Vec3(self.x / length, self.y / length, self.z / length)

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


class Point3(Vec3):
    """A position in 3D space; adding or subtracting a vector yields a point."""

    __slots__ = ()

    def unit(self) -> Vec3:
        """Return the unit vector pointing from the origin to this point."""
        length = self.length()
        return Vec3(self.x / length, self.y / length, self.z / length)


def unit_vector(v: Vec3) -> Vec3:
    """Return ``v`` scaled to length one."""
    return v / v.length()


def random_in_unit_disk() -> Vec3:
    """Return a random point inside the unit disk of the z = 0 plane."""
    while True:
        p = Vec3(random_double(-1, 1), random_double(-1, 1), 0)
        if p.length_squared() < 1:
            return p


def random_in_unit_sphere() -> Vec3:
    """Return a random point inside the unit sphere."""
    while True:
        p = Vec3.random(-1, 1)
        if p.length_squared() < 1:
            return p


def random_unit_vector() -> Vec3:
    """Return a random direction of length one."""
    return unit_vector(random_in_unit_sphere())


def random_on_hemisphere(normal: Vec3) -> Vec3:
    """Return a random unit vector in the hemisphere around ``normal``."""
    on_unit_sphere = random_unit_vector()
    if on_unit_sphere.dot(normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere


def random_cosine_direction() -> Vec3:
    """Return a cosine-weighted random direction around the +z axis."""
    r1 = random_double()
    r2 = random_double()
    phi = 2 * PI * r1
    x = math.cos(phi) * math.sqrt(r2)
    y = math.sin(phi) * math.sqrt(r2)
    z = math.sqrt(1 - r2)
    return Vec3(x, y, z)


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Reflect ``v`` about the normal ``n``."""
    return v - 2 * v.dot(n) * n


def refract(uv: Vec3, n: Vec3, etai_over_etat: float) -> Vec3:
    """Refract the unit vector ``uv`` through a surface with normal ``n``."""
    cos_theta = min((-uv).dot(n), 1.0)
    r_out_perp = etai_over_etat * (uv + cos_theta * n)
    r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.length_squared())) * n
    return r_out_perp + r_out_parallel


def is_longer(a: Vec3, b: Vec3) -> bool:
    """True when ``a`` is strictly longer than ``b``."""
    return a.length() > b.length()


def _ieee_div(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def is_parallel(a: Vec3, b: Vec3) -> bool:
    """True when the component-wise ratios of ``a`` to ``b`` are all equal."""
    rx = _ieee_div(a.x, b.x)
    ry = _ieee_div(a.y, b.y)
    rz = _ieee_div(a.z, b.z)
    return rx == ry and ry == rz