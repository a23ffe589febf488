"""Session token minting.

Tokens are signed JWTs so they look like what a real backend would hand out,
but they are never decoded to authorise anything: the session store is the
only source of truth for whether a token is still valid.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime

from jose import jwt

from climatebuddy.core.config import SecuritySettings


@dataclass(slots=True)
class TokenIssuer:
    secret_key: str
    algorithm: str = "HS256"

    @classmethod
    def from_settings(cls, settings: SecuritySettings) -> "TokenIssuer":
        return cls(secret_key=settings.secret_key, algorithm=settings.algorithm)

    def issue(self, user_id: str, issued_at: datetime, expires_at: datetime) -> str:
        payload = {
            "sub": user_id,
            "jti": uuid.uuid4().hex,
            "iat": issued_at,
            "exp": expires_at,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)


__all__ = ["TokenIssuer"]
