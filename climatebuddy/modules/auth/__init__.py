"""Auth use cases over the account and session stores."""

from .exceptions import AuthError, AuthenticationError, AuthValidationError
from .models import AuthResult, DemoCredential, LoginInput, SignupInput
from .service import AuthService

__all__ = [
    "AuthError",
    "AuthenticationError",
    "AuthValidationError",
    "AuthResult",
    "AuthService",
    "DemoCredential",
    "LoginInput",
    "SignupInput",
]
