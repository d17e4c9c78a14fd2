"""Orthonormal frames built around a given direction."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .vec3 import Vec3, unit_vector

__all__ = ["OrthonormalFrame"]


@dataclass(frozen=True)
class OrthonormalFrame:
    """Three axes ``u``, ``v`` and ``w`` forming a basis."""

    u: Vec3 = field(default_factory=Vec3)
    v: Vec3 = field(default_factory=Vec3)
    w: Vec3 = field(default_factory=Vec3)

    @classmethod
    def from_w(cls, w: Vec3) -> "OrthonormalFrame":
        """Build a right-handed frame whose ``w`` axis points along ``w``."""
        unit_w = unit_vector(w)
        a = Vec3(0, 1, 0) if abs(unit_w.x) > 0.9 else Vec3(1, 0, 0)
        v = unit_vector(unit_w.cross(a))
        u = unit_w.cross(v)
        return cls(u, v, unit_w)

    def __getitem__(self, index: int) -> Vec3:
        return (self.u, self.v, self.w)[index]

    def __iter__(self) -> Iterator[Vec3]:
        return iter((self.u, self.v, self.w))

    def local(self, a: float, b: float, c: float) -> Vec3:
        """Map frame coordinates ``(a, b, c)`` to world space."""
        return a * self.u + b * self.v + c * self.w

    def local_vector(self, a: Vec3) -> Vec3:
        """Map a vector expressed in frame coordinates to world space."""
        return self.local(a.x, a.y, a.z)