import logging
from asyncio import Lock
from datetime import datetime, timedelta
from typing import Dict
from uuid import UUID

from src.models.dc_models import CalculatorStateModel


class SessionStore:
    def __init__(self):
        self.sessions: Dict[UUID, CalculatorStateModel] = {}  # session_idごとの最新のstate
        self.lock = Lock()  # sessionsへのアクセスを保護

    async def get(self, session_id: UUID) -> CalculatorStateModel | None:
        """Get the latest state of the specified session_id

        Args:
            session_id (UUID): ID to identify this session

        Returns:
            CalculatorStateModel | None: The stored state, None if the session is unknown
        """
        async with self.lock:
            return self.sessions.get(session_id)

    async def save(self, state: CalculatorStateModel) -> CalculatorStateModel:
        """Store the state under its session_id, stamping the update time

        Args:
            state (CalculatorStateModel): New state of the session

        Returns:
            CalculatorStateModel: The state as stored
        """
        state = state.model_copy(update={"updated_at": datetime.now()})
        async with self.lock:
            self.sessions[state.session_id] = state
        return state

    async def delete(self, session_id: UUID) -> bool:
        """Delete the specified session_id

        Args:
            session_id (UUID): ID to identify this session

        Returns:
            bool: True if the session existed
        """
        async with self.lock:
            return self.sessions.pop(session_id, None) is not None

    async def purge_expired(self, expire_hours: float) -> int:
        """Delete sessions that have not been updated for expire_hours

        Args:
            expire_hours (float): Idle time after which a session is dropped

        Returns:
            int: Number of deleted sessions
        """
        deadline = datetime.now() - timedelta(hours=expire_hours)
        async with self.lock:
            expired = [
                session_id
                for session_id, state in self.sessions.items()
                if state.updated_at < deadline
            ]
            for session_id in expired:
                del self.sessions[session_id]
        if expired:
            logging.info(f"Purged {len(expired)} expired sessions")
        return len(expired)
