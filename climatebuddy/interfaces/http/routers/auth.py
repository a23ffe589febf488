"""Authentication endpoints used by the ClimateBuddy web client."""
from fastapi import APIRouter, Depends

from climatebuddy.interfaces.http.deps import (
    get_auth_service,
    get_bearer_token,
    get_client_state,
    release_rejected_token,
)
from climatebuddy.interfaces.http.responses import auth_response
from climatebuddy.modules.auth import AuthService
from climatebuddy.modules.client_state import ClientStateStore
from climatebuddy.schemas import (
    AuthResultResponse,
    DemoCredentialResponse,
    ForgotPasswordRequest,
    LoginRequest,
    SignupRequest,
)

router = APIRouter()


@router.post("/login", response_model=AuthResultResponse, summary="Log in with email and password")
async def login(
    payload: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    return auth_response(await auth_service.login(payload.to_input()))


@router.post("/signup", response_model=AuthResultResponse, summary="Create an account and log in")
async def signup(
    payload: SignupRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    return auth_response(await auth_service.signup(payload.to_input()))


@router.post("/forgot-password", response_model=AuthResultResponse, summary="Request a password reset link")
async def forgot_password(
    payload: ForgotPasswordRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    return auth_response(await auth_service.forgot_password(payload.email))


@router.get("/validate", response_model=AuthResultResponse, summary="Check a session token")
async def validate(
    token: str = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
    client_state: ClientStateStore = Depends(get_client_state),
):
    result = await auth_service.validate_token(token)
    release_rejected_token(result, token, client_state)
    return auth_response(result)


@router.post("/logout", response_model=AuthResultResponse, summary="Revoke a session token")
async def logout(
    token: str = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
    client_state: ClientStateStore = Depends(get_client_state),
):
    result = await auth_service.logout(token)
    if result.success:
        client_state.clear(token)
    return auth_response(result)


@router.get("/demo-credentials", response_model=list[DemoCredentialResponse], summary="Demo accounts for the login page")
async def demo_credentials(auth_service: AuthService = Depends(get_auth_service)):
    return [DemoCredentialResponse.model_validate(item) for item in auth_service.get_demo_credentials()]
