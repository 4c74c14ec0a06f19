"""
Base LinearValue class for the vector and matrix containers.

Provides:
- Operator surface every container implements
- Fuzzy comparison with tolerances
- Multiple output formats (string, TeX)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ToleranceMode:
    """Modes for fuzzy comparison."""

    RELATIVE = "relative"  # |a - b| / max(|a|, |b|) <= tol
    ABSOLUTE = "absolute"  # |a - b| <= tol
    SIGFIGS = "sigfigs"  # Significant figures


class LinearValue(ABC):
    """
    Base class for the dense containers.

    Subclasses must implement the output formats, compare() and the
    arithmetic operators.

    Note: Concrete subclasses inherit from both BaseModel and LinearValue,
    e.g., `class BaseVector(BaseModel, LinearValue):`. LinearValue itself is
    abstract and does not inherit from BaseModel to avoid MRO conflicts.
    """

    @abstractmethod
    def compare(self, other: Any, tolerance: float | None = None, mode: str | None = None) -> bool:
        """
        Fuzzy comparison with tolerance.

        Args:
            other: Value to compare against
            tolerance: Tolerance for comparison (None = configured default)
            mode: Tolerance mode (None = configured default)

        Returns:
            True if values are equal within tolerance
        """
        pass

    # String representations

    @abstractmethod
    def to_string(self) -> str:
        """Convert to human-readable string."""
        pass

    @abstractmethod
    def to_tex(self) -> str:
        """Convert to LaTeX representation."""
        pass

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_string()!r})"

    # Operator overloading

    @abstractmethod
    def __add__(self, other: Any) -> LinearValue:
        pass

    @abstractmethod
    def __sub__(self, other: Any) -> LinearValue:
        pass

    @abstractmethod
    def __mul__(self, other: Any) -> Any:
        pass

    @abstractmethod
    def __rmul__(self, other: Any) -> LinearValue:
        pass

    @abstractmethod
    def __truediv__(self, other: Any) -> LinearValue:
        pass

    @abstractmethod
    def __neg__(self) -> LinearValue:
        pass

    @abstractmethod
    def __pos__(self) -> LinearValue:
        pass

    def __rtruediv__(self, other: Any) -> LinearValue:
        """Right division not supported."""
        raise TypeError(f"Cannot divide scalar by {self.__class__.__name__}")

    def __rpow__(self, other: Any) -> LinearValue:
        """Right power not supported."""
        raise TypeError(f"{self.__class__.__name__} does not support right exponentiation")

    # Helpers

    @staticmethod
    def _comparison_defaults(tolerance: float | None, mode: str | None) -> tuple[float, str]:
        """Fill unset comparison arguments from settings."""
        from .core.config import get_settings

        config = get_settings()
        return (
            config.TOLERANCE if tolerance is None else tolerance,
            config.TOL_TYPE if mode is None else mode,
        )
