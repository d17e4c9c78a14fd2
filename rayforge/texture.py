"""Surface textures: solid colours, checkers and noise."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .perlin import Perlin
from .vec3 import Point3, Vec3

__all__ = ["Texture", "SolidColor", "CheckerTexture", "NoiseTexture"]


class Texture(ABC):
    """Maps surface coordinates and a point to a colour."""

    @abstractmethod
    def value(self, u: float, v: float, p: Point3) -> Vec3:
        """Return the colour at ``(u, v)`` and point ``p``."""


class SolidColor(Texture):
    """A texture of one uniform colour."""

    def __init__(self, albedo: Vec3) -> None:
        self.albedo = albedo

    @classmethod
    def from_rgb(cls, red: float, green: float, blue: float) -> "SolidColor":
        """Build a solid colour from its red, green and blue components."""
        return cls(Vec3(red, green, blue))

    def value(self, u: float, v: float, p: Point3) -> Vec3:
        return self.albedo


class CheckerTexture(Texture):
    """A 3D checkerboard alternating between two textures."""

    def __init__(self, scale: float, even: Texture, odd: Texture) -> None:
        self.inv_scale = 1.0 / scale
        self.even = even
        self.odd = odd

    @classmethod
    def from_colors(cls, scale: float, c1: Vec3, c2: Vec3) -> "CheckerTexture":
        """Build a checkerboard of two solid colours."""
        return cls(scale, SolidColor(c1), SolidColor(c2))

    def value(self, u: float, v: float, p: Point3) -> Vec3:
        x = int(math.floor(self.inv_scale * p.x))
        y = int(math.floor(self.inv_scale * p.y))
        z = int(math.floor(self.inv_scale * p.z))
        chosen = self.even if (x + y + z) % 2 == 0 else self.odd
        return chosen.value(u, v, p)


class NoiseTexture(Texture):
    """A marble-like pattern driven by Perlin turbulence."""

    def __init__(self, scale: float = 1.0, noise: Perlin | None = None) -> None:
        self.scale = scale
        self.noise = noise if noise is not None else Perlin()

    def value(self, u: float, v: float, p: Point3) -> Vec3:
        return Vec3(0.5, 0.5, 0.5) * (
            1 + math.sin(self.scale * p.z + 10 * self.noise.turb(p, 7))
        )