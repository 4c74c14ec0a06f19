"""
Point: two or three real coordinates.

This is the value the mesh and grid layers exchange with the kernel. Points
support distances and translation by vectors but not vector algebra.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .core.errors import DimensionMismatchError, OutOfRangeError, StructuralError
from .numeric import fuzzy_compare
from .scalar import REAL
from .value import LinearValue
from .vector import Vector


class Point(BaseModel, LinearValue):
    """
    Point in the plane or in space.

    Represented as ordered coordinates (x, y) or (x, y, z).
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    coordinates: list[Any] = Field(default_factory=list, frozen=True)

    def __init__(self, *args: Any, coordinates: Iterable[Any] | None = None, **kwargs: Any) -> None:
        if coordinates is not None and args:
            raise ValueError("Point accepts either coordinates or positional arguments, not both")

        if coordinates is None:
            coordinates = list(args[0]) if len(args) == 1 and isinstance(args[0], (list, tuple, Vector)) else list(args)

        super().__init__(coordinates=self._coerce_coordinates(coordinates), **kwargs)

    @staticmethod
    def _coerce_coordinates(raw: Iterable[Any]) -> list[Any]:
        coords = [REAL.coerce(c) for c in raw]
        if len(coords) not in (2, 3):
            raise StructuralError(
                f"Point requires 2 or 3 coordinates, got {len(coords)}",
                details={"dimension": len(coords)},
            )
        return coords

    @field_validator("coordinates", mode="before")
    @classmethod
    def _validate_coordinates(cls, value):
        return cls._coerce_coordinates(value if value is not None else [])

    @classmethod
    def from_vector(cls, vector: Vector) -> Point:
        return cls(coordinates=vector.components)

    def to_vector(self) -> Vector:
        return Vector(self.coordinates)

    @property
    def x(self) -> Any:
        return self.coordinates[0]

    @property
    def y(self) -> Any:
        return self.coordinates[1]

    @property
    def z(self) -> Any | None:
        """Third coordinate, None for planar points."""
        return self.coordinates[2] if len(self.coordinates) == 3 else None

    @property
    def dimension(self) -> int:
        return len(self.coordinates)

    def __len__(self) -> int:
        return len(self.coordinates)

    def __iter__(self) -> Iterator[Any]:
        """Supports unpacking: x, y = point."""
        return iter(list(self.coordinates))

    def __getitem__(self, index: int) -> Any:
        if not 0 <= index < len(self.coordinates):
            raise OutOfRangeError(index, (0, len(self.coordinates)))
        return self.coordinates[index]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.coordinates == other.coordinates

    def __hash__(self) -> int:
        return hash(tuple(self.coordinates))

    def compare(self, other: Any, tolerance: float | None = None, mode: str | None = None) -> bool:
        """Compare points coordinate-wise within tolerance."""
        if not isinstance(other, Point) or len(self) != len(other):
            return False
        tolerance, mode = self._comparison_defaults(tolerance, mode)
        return all(fuzzy_compare(a, b, tolerance, mode) for a, b in zip(self.coordinates, other.coordinates))

    def to_string(self) -> str:
        """Tab separated coordinates."""
        return "\t".join(REAL.format(c) for c in self.coordinates)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Point({', '.join(repr(c) for c in self.coordinates)})"

    def to_tex(self) -> str:
        coords_str = ", ".join(REAL.format(c) for c in self.coordinates)
        return f"\\left({coords_str}\\right)"

    def distance(self, other: Point) -> float:
        """Euclidean distance to another point."""
        if len(self) != len(other):
            raise DimensionMismatchError("distance", len(self), len(other))
        return math.sqrt(sum(float(a - b) ** 2 for a, b in zip(self.coordinates, other.coordinates)))

    def norm(self) -> float:
        """Distance from the origin."""
        return math.sqrt(sum(float(c) ** 2 for c in self.coordinates))

    # Arithmetic operators (limited for points)

    def _offsets(self, other: Any, operation: str) -> list[Any] | None:
        if isinstance(other, Point):
            values = other.coordinates
        elif isinstance(other, Vector):
            values = other.components
        else:
            return None
        if len(values) != len(self.coordinates):
            raise DimensionMismatchError(operation, len(self.coordinates), len(values))
        return values

    def __add__(self, other: Any) -> Point:
        """Translation: point + vector = point."""
        if not isinstance(other, Vector):
            return NotImplemented
        offsets = self._offsets(other, "+")
        return Point(coordinates=[a + b for a, b in zip(self.coordinates, offsets)])

    def __radd__(self, other: Any) -> Point:
        return self.__add__(other)

    def __sub__(self, other: Any):
        """point - point = vector, point - vector = point."""
        offsets = self._offsets(other, "-")
        if offsets is None:
            return NotImplemented
        differences = [a - b for a, b in zip(self.coordinates, offsets)]
        if isinstance(other, Point):
            return Vector(differences)
        return Point(coordinates=differences)

    def __mul__(self, other: Any) -> Any:
        raise TypeError("Point does not support multiplication")

    def __rmul__(self, other: Any) -> Any:
        raise TypeError("Point does not support multiplication")

    def __truediv__(self, other: Any) -> Point:
        """Scalar division: point / scalar = point."""
        if not REAL.is_scalar(other):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("Cannot divide point by zero")
        return Point(coordinates=[c / other for c in self.coordinates])

    def __neg__(self) -> Point:
        return Point(coordinates=[-c for c in self.coordinates])

    def __pos__(self) -> Point:
        return Point(coordinates=list(self.coordinates))
