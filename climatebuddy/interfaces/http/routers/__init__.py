from fastapi import APIRouter

from . import auth, state, users


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(auth.router, prefix="/auth", tags=["auth"])
    router.include_router(users.router, prefix="/users", tags=["users"])
    router.include_router(state.router, prefix="/state", tags=["state"])
    return router


__all__ = ["create_api_router"]
