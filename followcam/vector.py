"""Lightweight 3D vector math for follow-camera updates.

Vectors are immutable values so every per-tick computation stays a pure
function of its inputs. Only the operations the camera helpers need are
implemented.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable, Iterator, Optional, Tuple


@dataclass(frozen=True)
class Vector3:
    """Immutable world-space point or displacement."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(*(a - b for a, b in zip(self, other)))

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(*(component * scalar for component in self))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector3":
        return Vector3(*(component / scalar for component in self))

    def __neg__(self) -> "Vector3":
        return self * -1.0

    def dot(self, other: "Vector3") -> float:
        return sum(a * b for a, b in zip(self, other))

    def length(self) -> float:
        # hypot scales internally, so tiny and huge displacements keep a finite non-zero norm.
        return math.hypot(self.x, self.y, self.z)

    def normalized(self, fallback: Optional["Vector3"] = None) -> "Vector3":
        """Return the unit vector, or ``fallback`` (zero) for a zero-length vector."""

        length = self.length()
        if length == 0.0:
            return fallback if fallback is not None else Vector3.zero()
        return self / length

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @staticmethod
    def zero() -> "Vector3":
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def from_iter(values: Iterable[float]) -> "Vector3":
        components = tuple(values)
        if len(components) != 3:
            raise ValueError("Vector3 requires exactly three components")
        x, y, z = components
        return Vector3(float(x), float(y), float(z))
