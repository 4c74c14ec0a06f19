"""
Kernel exceptions.

Every failure raised by the vector and matrix types derives from
NumericsError, and additionally from the builtin exception a Python caller
would expect (IndexError for bad indices, ValueError for shape problems,
TypeError for impossible conversions).
"""

from typing import Any, Dict, Optional


class NumericsError(Exception):
    """Base exception for kernel errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class OutOfRangeError(NumericsError, IndexError):
    """Raised when an index falls outside a container's bounds"""

    def __init__(self, index: Any, bounds: Any):
        super().__init__(
            message=f"Index {index} out of range for bounds {bounds}",
            details={"index": index, "bounds": bounds}
        )


class StructuralError(NumericsError, ValueError):
    """Raised when operand shapes violate an operation's algebraic preconditions"""


class DimensionMismatchError(StructuralError):
    """Raised when two operands must have equal dimensions but do not"""

    def __init__(self, operation: str, left: Any, right: Any):
        super().__init__(
            message=f"Cannot apply '{operation}' to operands of dimension {left} and {right}",
            details={"operation": operation, "left": left, "right": right}
        )


class SingularMatrixError(StructuralError):
    """Raised when inverting a matrix whose determinant is zero"""

    def __init__(self, dim: int):
        super().__init__(
            message=f"Matrix of dimension {dim} is singular (not invertible)",
            details={"dim": dim}
        )


class RangeError(NumericsError, ValueError):
    """Raised when an argument violates an operation's precondition"""


class InvalidCastError(NumericsError, TypeError):
    """Raised when converting between representations the shape does not allow"""

    def __init__(self, source: str, target: str, shape: Any):
        super().__init__(
            message=f"Cannot convert {source} of shape {shape} to {target}",
            details={"source": source, "target": target, "shape": shape}
        )
