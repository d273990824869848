"""Small geometric value types: vectors, rectangles, points and boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Optional

_PARALLEL_EPSILON = 1e-6


@dataclass(frozen=True)
class Vector3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def dot(self, other: Vector3) -> float:
        """Scalar product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Vector product with another vector."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.magnitude()
        if length == 0.0:
            return Vector3()
        return self * (1.0 / length)


@dataclass(frozen=True)
class Vector2:
    """A two-component vector, used for texture coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left_top_x: float = 0.0
    left_top_y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def __post_init__(self) -> None:
        self.left_top_x = float(self.left_top_x)
        self.left_top_y = float(self.left_top_y)
        self.width = float(self.width)
        self.height = float(self.height)


@dataclass
class Point:
    """A point in screen space; integer coordinates are stored as floats."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)


@dataclass
class BoundingBox:
    """An axis-aligned bounding box."""

    minimum: Vector3 = field(default_factory=Vector3)
    maximum: Vector3 = field(default_factory=Vector3)

    def intersect(self, ray_origin: Vector3, ray_dir: Vector3) -> Optional[float]:
        """Distance along the ray to the box, or None if the ray misses it.

        A ray that starts inside the box hits it at distance 0.
        """
        t_min = -math.inf
        t_max = math.inf
        for origin, direction, low, high in zip(
            ray_origin, ray_dir, self.minimum, self.maximum
        ):
            if abs(direction) < _PARALLEL_EPSILON:
                if origin < low or origin > high:
                    return None
                continue
            t1 = (low - origin) / direction
            t2 = (high - origin) / direction
            if t1 > t2:
                t1, t2 = t2, t1
            t_min = max(t_min, t1)
            t_max = min(t_max, t2)
            if t_min > t_max:
                return None

        if t_max < 0.0:
            return None
        return t_min if t_min >= 0.0 else 0.0