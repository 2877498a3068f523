import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from src.converter import DataConverter
from src.domain.matrix_rules import (
    DimensionMismatchError,
    add,
    generate,
    validate_dimensions,
)
from src.models.dc_models import (
    AddRequestModel,
    DimensionsInputModel,
    GenerateRequestModel,
    MatrixModel,
    ValidationResultModel,
)

matrix_router = APIRouter()
data_converter = DataConverter()


class MatrixAPI:
    @staticmethod
    @matrix_router.post("/matrix/validate", response_model=ValidationResultModel)
    async def validate(dimensions: DimensionsInputModel) -> ValidationResultModel:
        """Validate raw dimensions. Invalid input is a normal response, not an error."""
        return validate_dimensions(dimensions.rows, dimensions.columns)

    @staticmethod
    @matrix_router.post("/matrix/generate", response_model=MatrixModel)
    async def generate_matrix(request: GenerateRequestModel) -> MatrixModel:
        """Generate one matrix with the requested formula

        Args:
            request (GenerateRequestModel):
                    rows: int
                    columns: int
                    formula: "sum" | "product"

        Raises:
            HTTPException: The dimensions are out of range

        Returns:
            MatrixModel: The generated matrix
        """
        validation = validate_dimensions(request.rows, request.columns)
        if not validation.valid:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=validation.reason,
            )
        matrix = generate(request.rows, request.columns, request.formula)
        logging.info(f"generated {matrix.kind.value} matrix: {matrix.id}")
        return matrix

    @staticmethod
    @matrix_router.post("/matrix/add", response_model=MatrixModel)
    async def add_matrices(request: AddRequestModel) -> MatrixModel:
        """Add two matrices element-wise

        Raises:
            HTTPException: The matrices do not have identical dimensions
        """
        try:
            return add(request.a, request.b)
        except DimensionMismatchError as e:
            logging.warning(f"dimension mismatch: {e}")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=str(e),
            )

    @staticmethod
    @matrix_router.post("/matrix/render", response_class=PlainTextResponse)
    async def render(matrix: MatrixModel) -> str:
        return data_converter.render_matrix(matrix)
