from typing import List

from src.models.dc_models import (
    CalculatorStateModel,
    CalculatorStateResponseModel,
    MatrixModel,
)

INSTRUCTIONS = """How to Use This Calculator

Matrix Generation
  - Enter desired rows and columns (1-10 each)
  - Generate to create two matrices
  - Sum Matrix: each cell value = row index + column index
  - Product Matrix: each cell value = row index x column index

Matrix Operations
  - After generation, add the matrices to combine them
  - The result shows element-wise addition of both matrices
  - Reset clears all matrices so you can start over
"""


class DataConverter:
    """This class is used to convert data between different formats."""

    def convert_state_to_response(
        self, state: CalculatorStateModel
    ) -> CalculatorStateResponseModel:
        """Convert the CalculatorStateModel to the response model to send client

        Args:
            state (CalculatorStateModel): The latest state of the session

        Returns:
            CalculatorStateResponseModel: The state with its derived phase, a type for transmission to the client
        """
        return CalculatorStateResponseModel(
            session_id=state.session_id,
            phase=state.phase,
            dimensions=state.dimensions,
            matrices=list(state.matrices),
            result=state.result,
            error=state.error,
            updated_at=state.updated_at,
        )

    def render_matrix(self, matrix: MatrixModel) -> str:
        """Render a matrix as a text grid with its name and a "rows × columns" footer

        Args:
            matrix (MatrixModel): The matrix to render

        Returns:
            str: Rendered grid, cells right-aligned to the widest value
        """
        width = max(len(str(cell)) for row in matrix.data for cell in row)
        border = "+" + "+".join("-" * (width + 2) for _ in range(matrix.columns)) + "+"
        lines = [matrix.name, border]
        for row in matrix.data:
            lines.append("| " + " | ".join(str(cell).rjust(width) for cell in row) + " |")
            lines.append(border)
        lines.append(f"{matrix.rows} × {matrix.columns}")
        return "\n".join(lines)

    def render_state(self, state: CalculatorStateModel) -> str:
        """Render every matrix the session holds, the result last

        Args:
            state (CalculatorStateModel): The latest state of the session

        Returns:
            str: Rendered matrices, or the instructions when nothing is generated yet
        """
        matrices: List[MatrixModel] = list(state.matrices)
        if state.result is not None:
            matrices.append(state.result)
        if not matrices:
            return INSTRUCTIONS
        return "\n\n".join(self.render_matrix(matrix) for matrix in matrices) + "\n"
