"""Fixed-size numeric vectors of any dimension."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Iterator

from .utility import random_double

__all__ = ["VectorN"]


class VectorN:
    """A mutable vector whose size is fixed when it is built."""

    __slots__ = ("_e",)

    def __init__(self, values: Iterable[float]) -> None:
        self._e = list(values)

    @classmethod
    def filled(cls, size: int, value: float) -> "VectorN":
        """Build a vector of ``size`` components, all equal to ``value``."""
        return cls([value] * size)

    @classmethod
    def zeros(cls, size: int) -> "VectorN":
        """Build a vector of ``size`` zero components."""
        return cls.filled(size, 0)

    @classmethod
    def random(
        cls, size: int, minimum: float = 0.0, maximum: float = 1.0
    ) -> "VectorN":
        """Build a vector whose components are random in [minimum, maximum)."""
        return cls(random_double(minimum, maximum) for _ in range(size))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._e):
            raise IndexError("Index out of range")

    def _check_size(self, other: "VectorN") -> None:
        if len(other) != len(self):
            raise ValueError(
                f"size mismatch: {len(self)} and {len(other)} components"
            )

    def __len__(self) -> int:
        return len(self._e)

    def __iter__(self) -> Iterator[float]:
        return iter(self._e)

    def __getitem__(self, index: int) -> float:
        self._check_index(index)
        return self._e[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._check_index(index)
        self._e[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorN):
            return NotImplemented
        return self._e == other._e

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._e!r})"

    def __str__(self) -> str:
        return "(" + ", ".join(f"{value:g}" for value in self._e) + ")"

    def __neg__(self) -> "VectorN":
        return VectorN(-value for value in self._e)

    def __add__(self, other: object) -> "VectorN":
        if not isinstance(other, VectorN):
            return NotImplemented
        self._check_size(other)
        return VectorN(a + b for a, b in zip(self._e, other._e))

    def __sub__(self, other: object) -> "VectorN":
        if not isinstance(other, VectorN):
            return NotImplemented
        self._check_size(other)
        return VectorN(a - b for a, b in zip(self._e, other._e))

    def __mul__(self, other: object) -> "VectorN":
        if not isinstance(other, Real):
            return NotImplemented
        return VectorN(value * other for value in self._e)

    def __rmul__(self, other: object) -> "VectorN":
        return self.__mul__(other)

    def __truediv__(self, other: object) -> "VectorN":
        if not isinstance(other, Real):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("Division by zero")
        return VectorN(value / other for value in self._e)

    def __iadd__(self, other: object) -> "VectorN":
        if not isinstance(other, VectorN):
            return NotImplemented
        self._check_size(other)
        self._e = [a + b for a, b in zip(self._e, other._e)]
        return self

    def __isub__(self, other: object) -> "VectorN":
        if not isinstance(other, VectorN):
            return NotImplemented
        self._check_size(other)
        self._e = [a - b for a, b in zip(self._e, other._e)]
        return self

    def __imul__(self, other: object) -> "VectorN":
        if not isinstance(other, Real):
            return NotImplemented
        self._e = [value * other for value in self._e]
        return self

    def __itruediv__(self, other: object) -> "VectorN":
        if not isinstance(other, Real):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("Division by zero")
        self._e = [value / other for value in self._e]
        return self

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return sum(value * value for value in self._e)

    def near_zero(self) -> bool:
        """True when every component is within 1e-8 of zero."""
        s = 1e-8
        return all(abs(value) < s for value in self._e)

    def normalized(self) -> "VectorN":
        """Return this vector scaled to length one."""
        return self / self.length()

    def dot(self, other: "VectorN") -> float:
        self._check_size(other)
        return sum(a * b for a, b in zip(self._e, other._e))

    def cross(self, other: "VectorN") -> "VectorN":
        """Cross product; only defined for three-component vectors."""
        if len(self) != 3 or len(other) != 3:
            raise ValueError(
                "Cross product is only defined for 3-dimensional vectors"
            )
        ax, ay, az = self._e
        bx, by, bz = other._e
        return VectorN((ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx))