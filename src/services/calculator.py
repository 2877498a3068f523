"""Service layer for calculator session use cases.

- Routers should not touch the session store directly; they call this module.
- Domain transitions stay pure; this layer loads, saves and stamps states.
- A refused transition still stores the recorded error before re-raising.
"""

from asyncio import sleep
from uuid import UUID

from src.domain.calculator_state import (
    CalculatorStateError,
    apply_add,
    apply_generate,
    apply_reset,
)
from src.domain.matrix_rules import validate_dimensions
from src.models.dc_models import CalculatorStateModel
from src.session_store import SessionStore

# Centralized store to avoid creating it in router modules.
store = SessionStore()


class SessionNotFoundError(LookupError):
    def __init__(self, session_id: UUID):
        super().__init__(f"Session {session_id} not found")
        self.session_id = session_id


async def _read_state(session_id: UUID) -> CalculatorStateModel:
    state = await store.get(session_id)
    if state is None:
        raise SessionNotFoundError(session_id)
    return state


async def create_session() -> CalculatorStateModel:
    return await store.save(CalculatorStateModel())


async def read_session(session_id: UUID) -> CalculatorStateModel:
    return await _read_state(session_id)


async def delete_session(session_id: UUID) -> None:
    if not await store.delete(session_id):
        raise SessionNotFoundError(session_id)


async def generate_matrices(
    session_id: UUID, rows, columns, delay_seconds: float = 0.0
) -> CalculatorStateModel:
    await _read_state(session_id)
    # The pause is cosmetic and only applies to a known session with valid input.
    if delay_seconds > 0 and validate_dimensions(rows, columns).valid:
        await sleep(delay_seconds)

    state = await _read_state(session_id)
    try:
        new_state = apply_generate(state, rows, columns)
    except CalculatorStateError as e:
        await store.save(e.state)
        raise
    return await store.save(new_state)


async def add_matrices(session_id: UUID) -> CalculatorStateModel:
    state = await _read_state(session_id)
    try:
        new_state = apply_add(state)
    except CalculatorStateError as e:
        await store.save(e.state)
        raise
    return await store.save(new_state)


async def reset_session(session_id: UUID) -> CalculatorStateModel:
    state = await _read_state(session_id)
    return await store.save(apply_reset(state))


async def purge_expired_sessions(expire_hours: float) -> int:
    return await store.purge_expired(expire_hours)
