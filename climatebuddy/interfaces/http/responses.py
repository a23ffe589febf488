"""Translate auth results into HTTP responses."""

from fastapi import status
from fastapi.responses import JSONResponse

from climatebuddy.modules.auth import AuthResult
from climatebuddy.modules.common import ErrorCode
from climatebuddy.schemas import AuthResultResponse

STATUS_BY_CODE = {
    ErrorCode.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(result: AuthResult) -> int:
    if result.success:
        return status.HTTP_200_OK
    return STATUS_BY_CODE.get(result.code, status.HTTP_500_INTERNAL_SERVER_ERROR)


def auth_response(result: AuthResult) -> JSONResponse:
    body = AuthResultResponse.from_domain(result)
    return JSONResponse(
        status_code=status_for(result),
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


__all__ = ["STATUS_BY_CODE", "auth_response", "status_for"]
