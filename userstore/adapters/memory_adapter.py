"""
In-memory adapter — implements UserPort over a plain dict.
State lives only as long as the process.
"""

from threading import Lock

from userstore.domain.exceptions import AlreadyExistsError, NotFoundError
from userstore.domain.models import User
from userstore.ports.user_port import UserPort


class InMemoryUserAdapter(UserPort):
    """
    Concrete UserPort backed by a dict keyed on user id.

    One lock guards the whole map and is held for the full body of every
    method, so operations are serialized. Bodies never await, which keeps
    the lock safe to use from async handlers and worker threads alike.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = Lock()

    async def create(self, user: User) -> None:
        with self._lock:
            if user.id in self._users:
                raise AlreadyExistsError()
            self._users[user.id] = user.model_copy()

    async def list(self) -> list[User]:
        with self._lock:
            return [user.model_copy() for user in self._users.values()]

    async def find(self, user_id: str) -> User:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise NotFoundError()
            return user.model_copy()

    async def update(self, user: User) -> None:
        with self._lock:
            if user.id not in self._users:
                raise NotFoundError()
            self._users[user.id] = user.model_copy()

    async def delete(self, user_id: str) -> None:
        with self._lock:
            if user_id not in self._users:
                raise NotFoundError()
            del self._users[user_id]
