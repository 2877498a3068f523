"""Matrix rules that are independent from HTTP and session storage.

Validation, deterministic generation and element-wise addition live here.
Nothing in this module keeps state between calls.
"""
import numpy as np

from src.models.dc_models import (
    MAX_DIMENSION,
    MIN_DIMENSION,
    GenerationFormulaModel,
    MatrixKindModel,
    MatrixModel,
    ValidationResultModel,
)

REASON_MISSING = "both dimensions required"
REASON_ROWS_RANGE = "rows out of range"
REASON_COLUMNS_RANGE = "columns out of range"

SUM_MATRIX_NAME = "Sum Matrix (i + j)"
PRODUCT_MATRIX_NAME = "Product Matrix (i × j)"
RESULT_MATRIX_NAME = "Sum + Product Matrix"


class DimensionMismatchError(ValueError):
    """Raised when two matrices of different shape are added."""

    def __init__(self, a: MatrixModel, b: MatrixModel):
        super().__init__(
            f"cannot add {a.rows}x{a.columns} matrix to {b.rows}x{b.columns} matrix"
        )
        self.a_shape = (a.rows, a.columns)
        self.b_shape = (b.rows, b.columns)


def coerce_dimension(value) -> int | None:
    """Turn a raw form value into an int, or None when it is missing/non-numeric.

    Strings follow the same rule as numbers: "3" and "3.0" give 3, "2.5" is missing.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
        try:
            return coerce_dimension(float(value))
        except ValueError:
            return None
    return None


def validate_dimensions(rows, columns) -> ValidationResultModel:
    """Check a (rows, columns) pair without raising.

    Checks run in order (presence, rows range, columns range) and the first
    failing check decides the reason.
    """
    rows = coerce_dimension(rows)
    columns = coerce_dimension(columns)
    if rows is None or columns is None:
        return ValidationResultModel(valid=False, reason=REASON_MISSING)
    if rows < MIN_DIMENSION or rows > MAX_DIMENSION:
        return ValidationResultModel(valid=False, reason=REASON_ROWS_RANGE)
    if columns < MIN_DIMENSION or columns > MAX_DIMENSION:
        return ValidationResultModel(valid=False, reason=REASON_COLUMNS_RANGE)
    return ValidationResultModel(valid=True)


def generate(rows: int, columns: int, formula: GenerationFormulaModel) -> MatrixModel:
    """Generate a rows x columns matrix from zero-based indices.

    Dimensions must already have passed validate_dimensions.

    Args:
        rows (int): Row count
        columns (int): Column count
        formula (GenerationFormulaModel): "sum" for i + j, "product" for i * j

    Returns:
        MatrixModel: A new matrix with a fresh id
    """
    formula = GenerationFormulaModel(formula)
    row_index = np.arange(rows, dtype=np.int64)
    column_index = np.arange(columns, dtype=np.int64)
    if formula == GenerationFormulaModel.sum:
        grid = np.add.outer(row_index, column_index)
        name, kind = SUM_MATRIX_NAME, MatrixKindModel.sum_generated
    else:
        grid = np.multiply.outer(row_index, column_index)
        name, kind = PRODUCT_MATRIX_NAME, MatrixKindModel.product_generated

    return MatrixModel(
        name=name,
        data=grid.tolist(),
        rows=rows,
        columns=columns,
        kind=kind,
    )


def add(a: MatrixModel, b: MatrixModel) -> MatrixModel:
    """Element-wise sum of two matrices of identical shape.

    Raises:
        DimensionMismatchError: The shapes of a and b differ
    """
    if a.rows != b.rows or a.columns != b.columns:
        raise DimensionMismatchError(a, b)

    # Python ints: wire matrices may carry cells beyond any fixed-width dtype.
    data = [
        [left + right for left, right in zip(row_a, row_b)]
        for row_a, row_b in zip(a.data, b.data)
    ]
    return MatrixModel(
        name=RESULT_MATRIX_NAME,
        data=data,
        rows=a.rows,
        columns=a.columns,
        kind=MatrixKindModel.addition_result,
    )
