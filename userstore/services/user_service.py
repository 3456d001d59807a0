"""
User service — parameter validation and CRUD orchestration.
Depends on ports only (Dependency Inversion).
"""

import logging
import re

from userstore.domain.exceptions import InvalidInputError, UserStoreError
from userstore.domain.models import User
from userstore.ports.user_port import UserPort

logger = logging.getLogger(__name__)

# Signed base-10 integer, ASCII digits only, no surrounding whitespace
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INT64_MAX_DIGITS = len(str(_INT64_MAX))


def parse_age(raw: str) -> int:
    """Parse the `age` query parameter. Raises InvalidInputError on anything but a 64-bit integer."""
    if not _INT_PATTERN.fullmatch(raw):
        raise InvalidInputError("Invalid age parameter")
    # Leading zeros are insignificant; anything longer than 19 digits is out of range
    digits = raw.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _INT64_MAX_DIGITS:
        raise InvalidInputError("Invalid age parameter")
    age = -int(digits) if raw.startswith("-") else int(digits)
    if not _INT64_MIN <= age <= _INT64_MAX:
        raise InvalidInputError("Invalid age parameter")
    return age


class UserService:
    """Orchestrates user-related business logic."""

    def __init__(self, repo: UserPort) -> None:
        self._repo = repo

    # ── Validation ────────────────────────────────────────────

    @staticmethod
    def build_user(user_id: str, name: str, age: str) -> User:
        """
        Turn raw query-string values into a User.

        Presence is checked before the age is parsed, so a request missing
        any field always reports "Missing parameters".
        """
        if not user_id or not name or not age:
            raise InvalidInputError("Missing parameters")
        return User(id=user_id, name=name, age=parse_age(age))

    @staticmethod
    def require_id(user_id: str) -> str:
        if not user_id:
            raise InvalidInputError("Missing id parameter")
        return user_id

    # ── CRUD ──────────────────────────────────────────────────

    async def create_user(self, user: User) -> None:
        try:
            await self._repo.create(user)
        except UserStoreError as exc:
            logger.warning(f"Create rejected for user {user.id}: {exc}")
            raise
        logger.info(f"Created user {user.id}")

    async def list_users(self) -> list[User]:
        return await self._repo.list()

    async def find_user(self, user_id: str) -> User:
        """Fetch a user, raising NotFoundError when the id is unknown."""
        return await self._repo.find(user_id)

    async def update_user(self, user: User) -> None:
        """Replace the stored record for `user.id` in full."""
        try:
            await self._repo.update(user)
        except UserStoreError as exc:
            logger.warning(f"Update rejected for user {user.id}: {exc}")
            raise
        logger.info(f"Updated user {user.id}")

    async def delete_user(self, user_id: str) -> None:
        try:
            await self._repo.delete(user_id)
        except UserStoreError as exc:
            logger.warning(f"Delete rejected for user {user_id}: {exc}")
            raise
        logger.info(f"Deleted user {user_id}")
