from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Vector2D:
    """Immutable 2D vector. Every operation returns a new instance."""
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> "Vector2D":
        return cls(0.0, 0.0)

    @classmethod
    def from_array(cls, a: Sequence[float] | NDArray[np.float64]) -> "Vector2D":
        if len(a) != 2:
            raise ValueError(f"expected 2 components, got {len(a)}")
        return cls(float(a[0]), float(a[1]))

    def add(self, v: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + v.x, self.y + v.y)

    def sub(self, v: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - v.x, self.y - v.y)

    def mul(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def div(self, scalar: float) -> "Vector2D":
        # exact comparison: tiny divisors are allowed through
        if scalar == 0:
            raise ZeroDivisionError("Division by zero")
        return Vector2D(self.x / scalar, self.y / scalar)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> "Vector2D":
        """Unit vector in the same direction; the zero vector maps to itself."""
        mag = self.magnitude()
        if mag == 0:
            return Vector2D(0.0, 0.0)
        return self.div(mag)

    def dot(self, v: "Vector2D") -> float:
        return self.x * v.x + self.y * v.y

    def distance_to(self, v: "Vector2D") -> float:
        return self.sub(v).magnitude()

    def clone(self) -> "Vector2D":
        return Vector2D(self.x, self.y)

    def to_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    def to_vector3d(self, z: float = 0.0) -> "Vector3D":
        return Vector3D(self.x, self.y, z)

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __rmul__ = mul
    __truediv__ = div

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def __str__(self) -> str:
        return f"Vector2D({self.x}, {self.y})"


@dataclass(frozen=True)
class Vector3D:
    """Immutable 3D vector with a right-handed cross product."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> "Vector3D":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, a: Sequence[float] | NDArray[np.float64]) -> "Vector3D":
        if len(a) != 3:
            raise ValueError(f"expected 3 components, got {len(a)}")
        return cls(float(a[0]), float(a[1]), float(a[2]))

    @classmethod
    def from_vector2d(cls, v: Vector2D, z: float = 0.0) -> "Vector3D":
        return cls(v.x, v.y, z)

    def add(self, v: "Vector3D") -> "Vector3D":
        return Vector3D(self.x + v.x, self.y + v.y, self.z + v.z)

    def sub(self, v: "Vector3D") -> "Vector3D":
        return Vector3D(self.x - v.x, self.y - v.y, self.z - v.z)

    def mul(self, scalar: float) -> "Vector3D":
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def div(self, scalar: float) -> "Vector3D":
        if scalar == 0:
            raise ZeroDivisionError("Division by zero")
        return Vector3D(self.x / scalar, self.y / scalar, self.z / scalar)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> "Vector3D":
        mag = self.magnitude()
        if mag == 0:
            return Vector3D(0.0, 0.0, 0.0)
        return self.div(mag)

    def dot(self, v: "Vector3D") -> float:
        return self.x * v.x + self.y * v.y + self.z * v.z

    def cross(self, v: "Vector3D") -> "Vector3D":
        return Vector3D(
            self.y * v.z - self.z * v.y,
            self.z * v.x - self.x * v.z,
            self.x * v.y - self.y * v.x,
        )

    def distance_to(self, v: "Vector3D") -> float:
        return self.sub(v).magnitude()

    def clone(self) -> "Vector3D":
        return Vector3D(self.x, self.y, self.z)

    def to_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_vector2d(self) -> Vector2D:
        """Project onto the xy-plane (drops z)."""
        return Vector2D(self.x, self.y)

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __rmul__ = mul
    __truediv__ = div

    def __neg__(self) -> "Vector3D":
        return Vector3D(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"Vector3D({self.x}, {self.y}, {self.z})"
