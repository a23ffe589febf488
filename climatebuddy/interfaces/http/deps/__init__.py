"""Reusable FastAPI dependencies."""

from .account import get_auth_service, get_client_state, get_container
from .session import get_bearer_token, get_current_session, release_rejected_token

__all__ = [
    "get_auth_service",
    "get_bearer_token",
    "get_client_state",
    "get_container",
    "get_current_session",
    "release_rejected_token",
]
