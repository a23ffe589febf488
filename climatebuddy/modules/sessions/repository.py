"""Repository protocol for sessions."""

from __future__ import annotations

from typing import Protocol

from .models import Session


class SessionRepository(Protocol):
    """Issued session tokens. A token absent from the store is invalid."""

    async def add(self, session: Session) -> Session:
        ...

    async def get_by_token(self, token: str) -> Session | None:
        ...

    async def delete(self, token: str) -> bool:
        ...
