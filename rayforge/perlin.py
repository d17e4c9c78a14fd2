"""Gradient (Perlin) noise and turbulence over 3D space."""

from __future__ import annotations

import math

from .utility import random_int
from .vec3 import Point3, Vec3, unit_vector

__all__ = ["Perlin"]

_POINT_COUNT = 256


def _generate_perm() -> list[int]:
    """Return a shuffled permutation of ``range(_POINT_COUNT)``."""
    p = list(range(_POINT_COUNT))
    for i in range(_POINT_COUNT - 1, 0, -1):
        target = random_int(0, i)
        p[i], p[target] = p[target], p[i]
    return p


def _interp(c: dict[tuple[int, int, int], Vec3], u: float, v: float, w: float) -> float:
    """Blend the eight corner gradients with Hermite smoothing."""
    uu = u * u * (3 - 2 * u)
    vv = v * v * (3 - 2 * v)
    ww = w * w * (3 - 2 * w)
    accum = 0.0
    for (i, j, k), gradient in c.items():
        weight_v = Vec3(u - i, v - j, w - k)
        accum += (
            (i * uu + (1 - i) * (1 - uu))
            * (j * vv + (1 - j) * (1 - vv))
            * (k * ww + (1 - k) * (1 - ww))
            * gradient.dot(weight_v)
        )
    return accum


class Perlin:
    """A noise generator with random gradients and lattice permutations."""

    point_count = _POINT_COUNT

    def __init__(self) -> None:
        self._randvec = [
            unit_vector(Vec3.random(-1, 1)) for _ in range(_POINT_COUNT)
        ]
        self._perm_x = _generate_perm()
        self._perm_y = _generate_perm()
        self._perm_z = _generate_perm()

    def noise(self, p: Vec3) -> float:
        """Return the noise value at ``p``."""
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        i, j, k = int(fx), int(fy), int(fz)
        corners = {
            (di, dj, dk): self._randvec[
                self._perm_x[(i + di) & 255]
                ^ self._perm_y[(j + dj) & 255]
                ^ self._perm_z[(k + dk) & 255]
            ]
            for di in (0, 1)
            for dj in (0, 1)
            for dk in (0, 1)
        }
        return _interp(corners, u, v, w)

    def turb(self, p: Point3, depth: int) -> float:
        """Return the absolute sum of ``depth`` octaves of noise at ``p``."""
        accum = 0.0
        temp_p: Vec3 = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)