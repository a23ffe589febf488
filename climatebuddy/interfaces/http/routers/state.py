"""Saved UI state (user, token, profile, chat history, actions) per session."""
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from climatebuddy.interfaces.http.deps import get_client_state, get_current_session
from climatebuddy.modules.auth import AuthResult
from climatebuddy.modules.client_state import ClientStateKeyError, ClientStateStore
from climatebuddy.schemas import StateEntryResponse, StateValue

router = APIRouter()


@router.get("", response_model=dict[str, Any], summary="All saved state for the session")
async def get_all_state(
    session: AuthResult = Depends(get_current_session),
    client_state: ClientStateStore = Depends(get_client_state),
):
    return client_state.snapshot(session.token)


@router.get("/{key}", response_model=StateEntryResponse, summary="Read one saved state entry")
async def get_state(
    key: str,
    session: AuthResult = Depends(get_current_session),
    client_state: ClientStateStore = Depends(get_client_state),
):
    try:
        value = client_state.get(session.token, key)
    except ClientStateKeyError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc
    return StateEntryResponse(key=key, value=value)


@router.put("/{key}", response_model=StateEntryResponse, summary="Replace one saved state entry")
async def put_state(
    key: str,
    payload: StateValue,
    session: AuthResult = Depends(get_current_session),
    client_state: ClientStateStore = Depends(get_client_state),
):
    try:
        client_state.put(session.token, key, payload.value)
    except ClientStateKeyError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc
    return StateEntryResponse(key=key, value=payload.value)
