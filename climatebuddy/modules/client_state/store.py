"""Per-session storage for the UI shell's saved state."""

from __future__ import annotations

import copy
import logging
from enum import Enum
from typing import Any

from climatebuddy.modules.common import DomainError, ErrorCode

logger = logging.getLogger(__name__)


class StateKey(str, Enum):
    USER = "user"
    AUTH_TOKEN = "auth_token"
    USER_PROFILE = "user_profile"
    CHAT_HISTORY = "chat_history"
    ACTIONS = "actions"


class ClientStateKeyError(DomainError):
    """Raised for a key outside the fixed set the UI persists."""

    code = ErrorCode.VALIDATION


class ClientStateStore:
    """Opaque JSON blobs keyed by session token and ``StateKey``."""

    def __init__(self) -> None:
        self._entries: dict[str, dict[StateKey, Any]] = {}

    @staticmethod
    def resolve_key(key: str | StateKey) -> StateKey:
        try:
            return StateKey(key)
        except ValueError as exc:
            raise ClientStateKeyError(f"Unknown state key: {key}") from exc

    def get(self, token: str, key: str | StateKey) -> Any:
        state_key = self.resolve_key(key)
        value = self._entries.get(token, {}).get(state_key)
        return copy.deepcopy(value)

    def put(self, token: str, key: str | StateKey, value: Any) -> None:
        state_key = self.resolve_key(key)
        self._entries.setdefault(token, {})[state_key] = copy.deepcopy(value)

    def snapshot(self, token: str) -> dict[str, Any]:
        return {key.value: copy.deepcopy(value) for key, value in self._entries.get(token, {}).items()}

    def clear(self, token: str) -> None:
        if self._entries.pop(token, None) is not None:
            logger.debug("Cleared client state for a revoked session")


__all__ = ["ClientStateKeyError", "ClientStateStore", "StateKey"]
