"""Bearer token extraction and session checks."""

from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from climatebuddy.interfaces.http.responses import status_for
from climatebuddy.modules.auth import AuthResult, AuthService
from climatebuddy.modules.client_state import ClientStateStore
from climatebuddy.modules.common import ErrorCode

from .account import get_auth_service, get_client_state

security = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    return credentials.credentials


def release_rejected_token(result: AuthResult, token: str, client_state: ClientStateStore) -> None:
    """Drop saved UI state for a token the session store no longer accepts."""
    if not result.success and result.code is not ErrorCode.INTERNAL:
        client_state.clear(token)


async def get_current_session(
    token: str = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
    client_state: ClientStateStore = Depends(get_client_state),
) -> AuthResult:
    result = await auth_service.validate_token(token)
    if not result.success:
        release_rejected_token(result, token, client_state)
        raise HTTPException(status_code=status_for(result), detail=result.error)
    return result


__all__ = ["get_bearer_token", "get_current_session", "release_rejected_token", "security"]
