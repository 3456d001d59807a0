"""
User endpoints — thin HTTP layer, delegates all logic to UserService.

All parameters come from the query string and every route accepts any
HTTP method. Find maps a missing user to 404, while Create, Update and
Delete answer 500 for any repository error.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from userstore.dependencies import get_user_service
from userstore.domain.exceptions import InvalidInputError, UserStoreError
from userstore.domain.models import User
from userstore.services.user_service import UserService

router = APIRouter(tags=["Users"])

ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def _query(request: Request, name: str) -> str:
    """First value of a query parameter, or "" when absent."""
    values = request.query_params.getlist(name)
    return values[0] if values else ""


def _bad_request(exc: InvalidInputError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.api_route("/create", methods=ANY_METHOD, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: Request,
    svc: UserService = Depends(get_user_service),
):
    """Create a user from `id`, `name` and `age`."""
    try:
        user = svc.build_user(
            _query(request, "id"), _query(request, "name"), _query(request, "age")
        )
    except InvalidInputError as exc:
        raise _bad_request(exc)

    try:
        await svc.create_user(user)
    except UserStoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        )

    return Response(status_code=status.HTTP_201_CREATED)


@router.api_route("/list", methods=ANY_METHOD, response_model=list[User])
async def list_users(svc: UserService = Depends(get_user_service)):
    """Every stored user as a JSON array."""
    return await svc.list_users()


@router.api_route("/find", methods=ANY_METHOD, response_model=User)
async def find_user(
    request: Request,
    svc: UserService = Depends(get_user_service),
):
    try:
        user_id = svc.require_id(_query(request, "id"))
    except InvalidInputError as exc:
        raise _bad_request(exc)

    try:
        return await svc.find_user(user_id)
    except UserStoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        )


@router.api_route("/update", methods=ANY_METHOD)
async def update_user(
    request: Request,
    svc: UserService = Depends(get_user_service),
):
    """Overwrite the whole record for `id` with the supplied `name` and `age`."""
    try:
        user = svc.build_user(
            _query(request, "id"), _query(request, "name"), _query(request, "age")
        )
    except InvalidInputError as exc:
        raise _bad_request(exc)

    try:
        await svc.update_user(user)
    except UserStoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        )

    return Response(status_code=status.HTTP_200_OK)


@router.api_route("/delete", methods=ANY_METHOD)
async def delete_user(
    request: Request,
    svc: UserService = Depends(get_user_service),
):
    try:
        user_id = svc.require_id(_query(request, "id"))
    except InvalidInputError as exc:
        raise _bad_request(exc)

    try:
        await svc.delete_user(user_id)
    except UserStoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        )

    return Response(status_code=status.HTTP_200_OK)
