from abc import ABC, abstractmethod

from userstore.domain.models import User


class UserPort(ABC):
    """
    Storage contract for user records.
    Handlers and services depend on this, never on a concrete adapter.
    """

    @abstractmethod
    async def create(self, user: User) -> None:
        """Insert a new user. Raises AlreadyExistsError if the id is taken."""
        ...

    @abstractmethod
    async def list(self) -> list[User]:
        """Return every stored user, in no particular order."""
        ...

    @abstractmethod
    async def find(self, user_id: str) -> User:
        """Fetch a single user by ID. Raises NotFoundError if absent."""
        ...

    @abstractmethod
    async def update(self, user: User) -> None:
        """Replace the whole record for `user.id`. Raises NotFoundError if absent."""
        ...

    @abstractmethod
    async def delete(self, user_id: str) -> None:
        """Remove a user by ID. Raises NotFoundError if absent."""
        ...
