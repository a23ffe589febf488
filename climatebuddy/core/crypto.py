"""bcrypt password hashing shared by signup, login and seed loading."""

from __future__ import annotations

import secrets

import bcrypt


class PasswordHasher:
    """Hashes and verifies passwords at a fixed bcrypt cost."""

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds
        self._decoy_hash: str | None = None

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            return False

    def verify_decoy(self, password: str) -> bool:
        """Check ``password`` against a random hash of the same cost.

        Called when no account matches, so a missing account takes as long
        to reject as a wrong password. Always returns False.
        """
        if self._decoy_hash is None:
            self._decoy_hash = self.hash(secrets.token_urlsafe(16))
        self.verify(password, self._decoy_hash)
        return False


__all__ = ["PasswordHasher"]
