"""Configuration, logging and exceptions shared by the kernel"""

from .config import Settings, settings, get_settings
from .logging import setup_logging, get_logger, get_context_logger
from .errors import (
    NumericsError,
    OutOfRangeError,
    StructuralError,
    DimensionMismatchError,
    SingularMatrixError,
    RangeError,
    InvalidCastError,
)

__all__ = [
    "Settings",
    "settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "NumericsError",
    "OutOfRangeError",
    "StructuralError",
    "DimensionMismatchError",
    "SingularMatrixError",
    "RangeError",
    "InvalidCastError",
]
