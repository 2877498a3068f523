from pydantic import BaseModel, Field, model_validator
from enum import Enum
from uuid import UUID
from datetime import datetime
from typing import Annotated, Any, Optional, List, Tuple
from uuid6 import uuid7

MIN_DIMENSION = 1
MAX_DIMENSION = 10

Dimension = Annotated[int, Field(ge=MIN_DIMENSION, le=MAX_DIMENSION)]


class MatrixKindModel(str, Enum):
    sum_generated = "sum-generated"
    product_generated = "product-generated"
    addition_result = "addition-result"


class GenerationFormulaModel(str, Enum):
    sum = "sum"  # cell(i, j) = i + j
    product = "product"  # cell(i, j) = i * j


class CalculatorPhaseModel(str, Enum):
    empty = "empty"
    generated = "generated"
    summed = "summed"


class MatrixModel(BaseModel):
    id: UUID = Field(default_factory=uuid7)
    name: str
    data: Tuple[Tuple[int, ...], ...]
    rows: Dimension
    columns: Dimension
    kind: MatrixKindModel

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_shape(self) -> "MatrixModel":
        if len(self.data) != self.rows:
            raise ValueError(f"data has {len(self.data)} rows, expected {self.rows}")
        for row in self.data:
            if len(row) != self.columns:
                raise ValueError(
                    f"data row has {len(row)} columns, expected {self.columns}"
                )
        return self


class ValidationResultModel(BaseModel):
    valid: bool
    reason: Optional[str] = None


class DimensionsModel(BaseModel):
    rows: int
    columns: int

    class Config:
        frozen = True


class DimensionsInputModel(BaseModel):
    # Raw form input: may be missing, zero or non-numeric.
    rows: Any = None
    columns: Any = None


class GenerateRequestModel(BaseModel):
    rows: int
    columns: int
    formula: GenerationFormulaModel


class AddRequestModel(BaseModel):
    a: MatrixModel
    b: MatrixModel


class CalculatorStateModel(BaseModel):
    session_id: UUID = Field(default_factory=uuid7)
    dimensions: DimensionsModel = DimensionsModel(rows=3, columns=3)
    matrices: Tuple[MatrixModel, ...] = ()
    result: Optional[MatrixModel] = None
    error: Optional[str] = None
    updated_at: datetime = Field(default_factory=datetime.now)

    class Config:
        frozen = True

    @property
    def phase(self) -> CalculatorPhaseModel:
        if self.result is not None:
            return CalculatorPhaseModel.summed
        if self.matrices:
            return CalculatorPhaseModel.generated
        return CalculatorPhaseModel.empty


class CalculatorStateResponseModel(BaseModel):
    session_id: UUID
    phase: CalculatorPhaseModel
    dimensions: DimensionsModel
    matrices: List[MatrixModel]
    result: Optional[MatrixModel] = None
    error: Optional[str] = None
    updated_at: datetime
