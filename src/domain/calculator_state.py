"""Calculator state transitions: Empty -> Generated -> Summed, Reset from anywhere.

Every transition takes a state and returns a new one; the input is never
modified. Failed transitions raise after attaching the failed state, so the
caller can store the recorded error and still report it.
"""
from src.domain.matrix_rules import (
    DimensionMismatchError,
    add,
    coerce_dimension,
    generate,
    validate_dimensions,
)
from src.models.dc_models import (
    CalculatorPhaseModel,
    CalculatorStateModel,
    DimensionsModel,
    GenerationFormulaModel,
)

ERROR_NEED_TWO_MATRICES = "need exactly two matrices"
ERROR_ALREADY_SUMMED = "matrices already summed"
ERROR_DIMENSION_MISMATCH = "matrices must have identical dimensions"


class CalculatorStateError(ValueError):
    """A transition was refused. `state` holds the state with the error recorded."""

    def __init__(self, message: str, state: CalculatorStateModel):
        super().__init__(message)
        self.state = state


class InvalidDimensionsError(CalculatorStateError):
    pass


def _update(state: CalculatorStateModel, **changes) -> CalculatorStateModel:
    return state.model_copy(update=changes)


def apply_generate(state: CalculatorStateModel, rows, columns) -> CalculatorStateModel:
    """Generate the sum and product matrices for the given dimensions.

    Allowed from any phase; a previous pair and result are replaced.

    Raises:
        InvalidDimensionsError: The dimensions failed validation
    """
    validation = validate_dimensions(rows, columns)
    if not validation.valid:
        failed = _update(state, error=validation.reason)
        raise InvalidDimensionsError(validation.reason, failed)

    rows = coerce_dimension(rows)
    columns = coerce_dimension(columns)
    matrices = (
        generate(rows, columns, GenerationFormulaModel.sum),
        generate(rows, columns, GenerationFormulaModel.product),
    )
    return _update(
        state,
        dimensions=DimensionsModel(rows=rows, columns=columns),
        matrices=matrices,
        result=None,
        error=None,
    )


def apply_add(state: CalculatorStateModel) -> CalculatorStateModel:
    """Add the two held matrices. Only valid in the Generated phase.

    Raises:
        CalculatorStateError: Not exactly two matrices, already summed, or shapes differ
    """
    if len(state.matrices) != 2:
        raise CalculatorStateError(
            ERROR_NEED_TWO_MATRICES, _update(state, error=ERROR_NEED_TWO_MATRICES)
        )
    if state.phase == CalculatorPhaseModel.summed:
        raise CalculatorStateError(
            ERROR_ALREADY_SUMMED, _update(state, error=ERROR_ALREADY_SUMMED)
        )

    first, second = state.matrices
    try:
        result = add(first, second)
    except DimensionMismatchError as e:
        raise CalculatorStateError(
            ERROR_DIMENSION_MISMATCH, _update(state, error=ERROR_DIMENSION_MISMATCH)
        ) from e
    return _update(state, result=result, error=None)


def apply_reset(state: CalculatorStateModel) -> CalculatorStateModel:
    """Drop every held matrix. Dimensions are kept for the next generation."""
    return _update(state, matrices=(), result=None, error=None)
