"""Vector mathematics for airport surface and approach geometry.

All facility coordinates are local cartesian metres:
x grows east, y grows north and z is elevation.

Typical usage example:
    from airnav.physics.vectors import Vector3

    threshold = Vector3(-1336.0, -2434.0, 13.9)
    offset = Vector3(50.0, 0.0, 0.0)
    hold_short = threshold - offset
"""

import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D point or direction.

    Attributes:
        x: East component in meters.
        y: North component in meters.
        z: Up component (elevation) in meters.

    Examples:
        >>> a = Vector3(0.0, 0.0, 0.0)
        >>> b = Vector3(3.0, 4.0, 0.0)
        >>> a.distance_to(b)
        5.0
    """

    x: float
    y: float
    z: float

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> "Vector3":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector3":
        """Divide every component by a scalar.

        Raises:
            ZeroDivisionError: If scalar is zero.
        """
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide vector by zero")
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def magnitude(self) -> float:
        """Length of the vector.

        Examples:
            >>> Vector3(3.0, 4.0, 0.0).magnitude()
            5.0
        """
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance_to(self, other: "Vector3") -> float:
        """Euclidean distance to another point, elevation included."""
        return (self - other).magnitude()

    def horizontal_distance_to(self, other: "Vector3") -> float:
        """Distance to another point ignoring elevation.

        Examples:
            >>> Vector3(0.0, 0.0, 100.0).horizontal_distance_to(Vector3(0.0, 10.0, 0.0))
            10.0
        """
        return math.hypot(self.x - other.x, self.y - other.y)

    def lerp(self, other: "Vector3", t: float) -> "Vector3":
        """Linear interpolation between this point and another.

        Args:
            other: Target point.
            t: Interpolation factor (0.0 returns self, 1.0 returns other).

        Returns:
            Interpolated point.
        """
        return self + (other - self) * t

    def to_array(self) -> npt.NDArray[np.float64]:
        """Convert to a numpy array [x, y, z]."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: npt.NDArray[np.float64]) -> "Vector3":
        """Create a vector from the first three elements of a numpy array."""
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_heading(cls, heading_deg: float, distance: float, up: float = 0.0) -> "Vector3":
        """Build an offset along a compass heading.

        Headings follow compass convention: 0 degrees is north (+y) and
        angles grow clockwise, so 90 degrees is east (+x).

        Args:
            heading_deg: Compass heading in degrees.
            distance: Horizontal length of the offset in meters.
            up: Vertical component in meters.

        Returns:
            Offset vector (distance * sin(heading), distance * cos(heading), up).

        Examples:
            >>> v = Vector3.from_heading(90.0, 100.0)
            >>> round(v.x, 6), round(v.y, 6)
            (100.0, 0.0)
        """
        radians = math.radians(heading_deg)
        return cls(math.sin(radians) * distance, math.cos(radians) * distance, up)

    def __str__(self) -> str:
        return f"({self.x:.1f}, {self.y:.1f}, {self.z:.1f})"
