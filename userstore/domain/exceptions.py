"""Domain errors raised by the user repository and service."""

from __future__ import annotations


class UserStoreError(RuntimeError):
    """Base class for user store errors."""


class AlreadyExistsError(UserStoreError):
    """Raised when creating a user whose id is already taken."""

    def __init__(self, message: str = "user already exists") -> None:
        super().__init__(message)


class NotFoundError(UserStoreError):
    """Raised when a requested user is missing."""

    def __init__(self, message: str = "user not found") -> None:
        super().__init__(message)


class InvalidInputError(UserStoreError, ValueError):
    """Raised when request parameters are missing or malformed."""
