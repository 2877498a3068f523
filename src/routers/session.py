import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, Response, status
from fastapi.responses import PlainTextResponse

from src import load_settings
from src.converter import INSTRUCTIONS, DataConverter
from src.domain.calculator_state import CalculatorStateError, InvalidDimensionsError
from src.models.dc_models import CalculatorStateResponseModel, DimensionsInputModel
from src.services import calculator
from src.services.calculator import SessionNotFoundError

session_router = APIRouter()
data_converter = DataConverter()


def _not_found(e: SessionNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


class SessionServer:
    @staticmethod
    @session_router.post(
        "/sessions",
        response_model=CalculatorStateResponseModel,
        status_code=status.HTTP_201_CREATED,
    )
    async def create_session() -> CalculatorStateResponseModel:
        """Start an empty calculator session and send its state to the client"""
        state = await calculator.create_session()
        logging.info(f"Created session: {state.session_id}")
        return data_converter.convert_state_to_response(state)

    @staticmethod
    @session_router.get("/sessions/{session_id}", response_model=CalculatorStateResponseModel)
    async def get_session(session_id: UUID) -> CalculatorStateResponseModel:
        try:
            state = await calculator.read_session(session_id)
        except SessionNotFoundError as e:
            raise _not_found(e)
        return data_converter.convert_state_to_response(state)

    @staticmethod
    @session_router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_session(session_id: UUID) -> Response:
        try:
            await calculator.delete_session(session_id)
        except SessionNotFoundError as e:
            raise _not_found(e)
        logging.info(f"Deleted session: {session_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @staticmethod
    @session_router.post(
        "/sessions/{session_id}/generate", response_model=CalculatorStateResponseModel
    )
    async def generate_matrices(
        session_id: UUID, dimensions: DimensionsInputModel
    ) -> CalculatorStateResponseModel:
        """Generate the sum and product matrices for this session

        Args:
            session_id (UUID): To identify the session
            dimensions (DimensionsInputModel): Raw rows/columns from the client form

        Raises:
            HTTPException: 404 if the session is unknown, 422 if the dimensions are invalid.
                           The validation reason is also stored as the session error.

        Returns:
            CalculatorStateResponseModel: State in the generated phase
        """
        try:
            state = await calculator.generate_matrices(
                session_id,
                dimensions.rows,
                dimensions.columns,
                delay_seconds=load_settings.generation_delay_seconds,
            )
        except SessionNotFoundError as e:
            raise _not_found(e)
        except InvalidDimensionsError as e:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=str(e),
            )
        return data_converter.convert_state_to_response(state)

    @staticmethod
    @session_router.post(
        "/sessions/{session_id}/add", response_model=CalculatorStateResponseModel
    )
    async def add_matrices(session_id: UUID) -> CalculatorStateResponseModel:
        """Add the two generated matrices of this session

        Raises:
            HTTPException: 404 if the session is unknown, 409 if the session is not in the generated phase
                           or the matrices do not have identical dimensions
        """
        try:
            state = await calculator.add_matrices(session_id)
        except SessionNotFoundError as e:
            raise _not_found(e)
        except CalculatorStateError as e:
            logging.info(f"Refused addition for session {session_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=str(e),
            )
        return data_converter.convert_state_to_response(state)

    @staticmethod
    @session_router.post(
        "/sessions/{session_id}/reset", response_model=CalculatorStateResponseModel
    )
    async def reset_session(session_id: UUID) -> CalculatorStateResponseModel:
        try:
            state = await calculator.reset_session(session_id)
        except SessionNotFoundError as e:
            raise _not_found(e)
        return data_converter.convert_state_to_response(state)

    @staticmethod
    @session_router.get("/sessions/{session_id}/render", response_class=PlainTextResponse)
    async def render_session(session_id: UUID) -> str:
        try:
            state = await calculator.read_session(session_id)
        except SessionNotFoundError as e:
            raise _not_found(e)
        return data_converter.render_state(state)

    @staticmethod
    @session_router.get("/instructions", response_class=PlainTextResponse)
    async def instructions() -> str:
        return INSTRUCTIONS
