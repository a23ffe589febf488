"""Session domain models."""

from .models import Session
from .repository import SessionRepository

__all__ = ["Session", "SessionRepository"]
