"""Domain modules and shared exports."""

from . import accounts, auth, client_state, common, sessions

__all__ = [
    "accounts",
    "auth",
    "client_state",
    "common",
    "sessions",
]
