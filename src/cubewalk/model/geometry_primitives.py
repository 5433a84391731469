"""
Geometric Primitives for the tile grid and the folded cube.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """A tile coordinate on the grid. +x is right, +y is down."""
    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: int) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def __mod__(self, modulus: int) -> Point:
        # Component-wise, always non-negative for a positive modulus
        return Point(self.x % modulus, self.y % modulus)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)


@dataclass(frozen=True)
class Vector3:
    """
    An integer vector in 3D space, used as an orientation axis of a cube face.
    """
    x: int
    y: int
    z: int

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: Vector3) -> int:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    @property
    def magnitude(self) -> float:
        return float(np.linalg.norm(self.to_array()))

    def to_array(self) -> npt.NDArray[np.int64]:
        return np.array([self.x, self.y, self.z], dtype=np.int64)


UNIT_X = Vector3(1, 0, 0)
UNIT_Y = Vector3(0, 1, 0)
UNIT_Z = Vector3(0, 0, 1)


class Direction(Enum):
    """
    The four headings of the walker, listed clockwise starting at RIGHT.

    The member order doubles as the facing score of the password.
    """
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    UP = (0, -1)

    @property
    def vector(self) -> Point:
        return Point(*self.value)

    @property
    def score(self) -> int:
        return _CLOCKWISE.index(self)

    def clockwise(self) -> Direction:
        return _CLOCKWISE[(self.score + 1) % 4]

    def counter_clockwise(self) -> Direction:
        return _CLOCKWISE[(self.score - 1) % 4]

    def opposite(self) -> Direction:
        return _CLOCKWISE[(self.score + 2) % 4]


_CLOCKWISE: list[Direction] = list(Direction)
