"""A small immutable two-dimensional vector."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Union

Operand = Union["Vector", float, int]


@dataclass(frozen=True)
class Vector:
    """A 2-D vector with component-wise arithmetic.

    Multiplication and division accept either another vector, applied per
    component, or a plain number, applied to both components.
    """

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Operand) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vector(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Operand) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x / other.x, self.y / other.y)
        if isinstance(other, Real):
            return Vector(self.x / other, self.y / other)
        return NotImplemented