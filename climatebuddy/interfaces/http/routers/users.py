"""Learner profile endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status

from climatebuddy.interfaces.http.deps import get_auth_service, get_current_session
from climatebuddy.interfaces.http.responses import auth_response
from climatebuddy.modules.auth import AuthResult, AuthService
from climatebuddy.schemas import AuthResultResponse, ProfileResponse, ProfileUpdateRequest

router = APIRouter()


def _ensure_owner(session: AuthResult, user_id: str) -> None:
    if session.user is None or session.user.id != user_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed to access this profile")


@router.get("/{user_id}/profile", response_model=ProfileResponse, summary="Get a learner profile")
async def get_profile(
    user_id: str,
    session: AuthResult = Depends(get_current_session),
    auth_service: AuthService = Depends(get_auth_service),
):
    _ensure_owner(session, user_id)
    profile = await auth_service.get_user_profile(user_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return ProfileResponse.model_validate(profile)


@router.patch("/{user_id}/profile", response_model=AuthResultResponse, summary="Update a learner profile")
async def update_profile(
    user_id: str,
    payload: ProfileUpdateRequest,
    session: AuthResult = Depends(get_current_session),
    auth_service: AuthService = Depends(get_auth_service),
):
    _ensure_owner(session, user_id)
    return auth_response(await auth_service.update_user_profile(user_id, payload.to_input()))
