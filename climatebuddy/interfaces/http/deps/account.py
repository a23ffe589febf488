"""Service dependency providers backed by the application container."""

from fastapi import Depends, Request

from climatebuddy.core.container import ApplicationContainer
from climatebuddy.modules.auth import AuthService
from climatebuddy.modules.client_state import ClientStateStore


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_auth_service(container: ApplicationContainer = Depends(get_container)) -> AuthService:
    return container.auth_service


def get_client_state(container: ApplicationContainer = Depends(get_container)) -> ClientStateStore:
    return container.client_state


__all__ = [
    "get_auth_service",
    "get_client_state",
    "get_container",
]
