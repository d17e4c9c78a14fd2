"""Rays with an origin, a direction and a time."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vec3 import Point3, Vec3

__all__ = ["Ray"]


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` and heading along ``direction``."""

    origin: Point3 = field(default_factory=Point3)
    direction: Vec3 = field(default_factory=Vec3)
    time: float = 0.0

    def at(self, t: float) -> Point3:
        """Return the point reached after travelling ``t`` along the ray."""
        return self.origin + t * self.direction