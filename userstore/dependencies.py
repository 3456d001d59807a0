"""
Dependency wiring.

The repository instance is owned by the application (``app.state``), so
each app built by ``create_app`` gets its own store. To swap the storage
backend, pass a different UserPort implementation to ``create_app``.
Nothing else in the codebase changes.
"""

from fastapi import Depends, Request

from userstore.ports.user_port import UserPort
from userstore.services.user_service import UserService


def get_user_repository(request: Request) -> UserPort:
    """Inject the repository attached to the running application."""
    return request.app.state.user_repository


def get_user_service(repo: UserPort = Depends(get_user_repository)) -> UserService:
    """Injects the repository port into the user domain service."""
    return UserService(repo=repo)
