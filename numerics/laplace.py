"""
Cofactor (Laplace) expansion over row-major nested lists.

These functions implement determinant, minor extraction, cofactors and the
adjugate for any ScalarField. Every minor is a fresh list of lists; nothing
returned here aliases its input.

Complexity: the determinant recurses over dim minors of size dim-1, so it
costs O(dim!) and the adjugate costs O(dim^2) such determinants. That is
only practical for dimensions in the single digits; determinant() logs one
warning for a matrix larger than ``Settings.LAPLACE_WARN_DIM``. Cofactors
and the adjugate expand their minors without logging.
"""

from __future__ import annotations

from typing import Any, Sequence

from .core.config import get_settings
from .core.errors import OutOfRangeError, StructuralError
from .core.logging import get_context_logger
from .scalar import ScalarField

logger = get_context_logger(__name__, component="laplace")

Rows = Sequence[Sequence[Any]]


def is_square(entries: Rows, columns: int | None = None) -> bool:
    """Whether the nested list has as many columns as rows."""
    n_rows = len(entries)
    n_cols = columns if columns is not None else (len(entries[0]) if n_rows else 0)
    return n_rows == n_cols


def minor(entries: Rows, i: int, j: int) -> list[list[Any]]:
    """
    Copy of a square matrix with row i and column j deleted.

    Raises:
        StructuralError: If the matrix is not square
        OutOfRangeError: If i or j is outside the matrix
    """
    dim = len(entries)
    if not is_square(entries):
        raise StructuralError(
            f"Minor requires a square matrix, got {dim}x{len(entries[0])}",
            details={"rows": dim, "columns": len(entries[0])},
        )
    if not (0 <= i < dim and 0 <= j < dim):
        raise OutOfRangeError((i, j), (dim, dim))

    return [
        [value for col, value in enumerate(row) if col != j]
        for r, row in enumerate(entries)
        if r != i
    ]


def determinant(entries: Rows, field: ScalarField, columns: int | None = None) -> Any:
    """
    Determinant by Laplace expansion along the first column.

    A non-square or empty matrix yields ``field.zero`` rather than an error.

    Args:
        entries: Row-major matrix entries
        field: Scalar field supplying the identities
        columns: Column count, needed when entries has no rows

    Returns:
        The determinant as a field element
    """
    dim = len(entries)
    if dim < 1 or not is_square(entries, columns):
        return field.zero

    warn_dim = get_settings().LAPLACE_WARN_DIM
    if dim > warn_dim:
        logger.warning(
            "Laplace expansion of a %dx%d matrix costs O(n!) operations",
            dim,
            dim,
            extra_data={"dim": dim, "warn_dim": warn_dim},
        )
    return _expand(entries, dim, field)


def _expand(entries: Rows, dim: int, field: ScalarField) -> Any:
    if dim < 1:
        return field.zero
    if dim == 1:
        return entries[0][0]
    if dim == 2:
        return entries[0][0] * entries[1][1] - entries[1][0] * entries[0][1]

    det = field.zero
    sign = field.one
    for i in range(dim):
        det += sign * entries[i][0] * _expand(minor(entries, i, 0), dim - 1, field)
        sign = -sign
    return det


def cofactor(entries: Rows, i: int, j: int, field: ScalarField) -> Any:
    """(-1)^(i+j) times the determinant of minor(i, j)."""
    reduced = minor(entries, i, j)
    value = _expand(reduced, len(reduced), field)
    return value if (i + j) % 2 == 0 else -value


def adjugate(entries: Rows, field: ScalarField) -> list[list[Any]]:
    """
    Transpose of the cofactor matrix.

    Raises:
        StructuralError: If the matrix is not square
    """
    dim = len(entries)
    if not is_square(entries):
        raise StructuralError(
            f"Adjugate requires a square matrix, got {dim}x{len(entries[0])}",
            details={"rows": dim, "columns": len(entries[0])},
        )
    if dim == 1:
        # adj([[a]]) = [[1]]
        return [[field.one]]

    logger.debug("Building %dx%d adjugate", dim, dim, extra_data={"dim": dim})
    cofactors = [[cofactor(entries, i, j, field) for j in range(dim)] for i in range(dim)]
    return [[cofactors[j][i] for j in range(dim)] for i in range(dim)]
