"""Probability density functions over scattering directions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from .ortho import OrthonormalFrame
from .utility import PI, random_double
from .vec3 import Point3, Vec3, random_cosine_direction, unit_vector

__all__ = ["Pdf", "CosinePdf", "HittablePdf", "MixturePdf", "SampledHittable"]


class SampledHittable(Protocol):
    """An object that can be sampled for directions from a point."""

    def pdf_value(self, origin: Point3, direction: Vec3) -> float: ...

    def random(self, origin: Point3) -> Vec3: ...


class Pdf(ABC):
    """A density over directions that can also draw samples."""

    @abstractmethod
    def value(self, direction: Vec3) -> float:
        """Return the density for ``direction``."""

    @abstractmethod
    def generate(self) -> Vec3:
        """Draw a direction distributed according to this density."""


class CosinePdf(Pdf):
    """Cosine-weighted density around a surface normal."""

    def __init__(self, w: Vec3) -> None:
        self.frame = OrthonormalFrame.from_w(w)

    def value(self, direction: Vec3) -> float:
        cosine_theta = unit_vector(direction).dot(self.frame.w)
        return max(0.0, cosine_theta / PI)

    def generate(self) -> Vec3:
        return self.frame.local_vector(random_cosine_direction())


class HittablePdf(Pdf):
    """Density of directions from ``origin`` towards ``objects``."""

    def __init__(self, objects: SampledHittable, origin: Point3) -> None:
        self.objects = objects
        self.origin = origin

    def value(self, direction: Vec3) -> float:
        return self.objects.pdf_value(self.origin, direction)

    def generate(self) -> Vec3:
        return self.objects.random(self.origin)


class MixturePdf(Pdf):
    """Equal-weight mixture of two densities."""

    def __init__(self, p0: Pdf, p1: Pdf) -> None:
        self.components = (p0, p1)

    def value(self, direction: Vec3) -> float:
        p0, p1 = self.components
        return 0.5 * p0.value(direction) + 0.5 * p1.value(direction)

    def generate(self) -> Vec3:
        p0, p1 = self.components
        if random_double() < 0.5:
            return p0.generate()
        return p1.generate()