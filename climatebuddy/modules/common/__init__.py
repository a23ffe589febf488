"""Shared building blocks for the domain modules."""

from .exceptions import DomainError, ErrorCode

__all__ = ["DomainError", "ErrorCode"]
