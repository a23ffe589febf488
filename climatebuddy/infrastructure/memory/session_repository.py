"""In-memory implementation of the session repository."""

from __future__ import annotations

from typing import Iterable

from climatebuddy.modules.sessions.models import Session
from climatebuddy.modules.sessions.repository import SessionRepository


class InMemorySessionRepository(SessionRepository):
    def __init__(self, sessions: Iterable[Session] = ()) -> None:
        self._sessions: dict[str, Session] = {session.token: session for session in sessions}

    async def add(self, session: Session) -> Session:
        self._sessions[session.token] = session
        return session

    async def get_by_token(self, token: str) -> Session | None:
        return self._sessions.get(token)

    async def delete(self, token: str) -> bool:
        return self._sessions.pop(token, None) is not None
