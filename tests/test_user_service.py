from __future__ import annotations

import logging

import pytest

from userstore.domain.exceptions import AlreadyExistsError, InvalidInputError, NotFoundError
from userstore.domain.models import User
from userstore.services.user_service import UserService, parse_age


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("30", 30),
        ("0", 0),
        ("-5", -5),
        ("+7", 7),
        ("007", 7),
        ("9223372036854775807", 2**63 - 1),
        ("-9223372036854775808", -(2**63)),
        ("0" * 5000 + "7", 7),
        ("-" + "0" * 5000, 0),
    ],
)
def test_parse_age_accepts_integers(raw: str, expected: int) -> None:
    assert parse_age(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "abc",
        "",
        " 5",
        "5 ",
        "5.0",
        "1_000",
        "0x1f",
        "+",
        "٣",
        "9223372036854775808",
        "-9223372036854775809",
        "9" * 5000,
        "-" + "1" * 5000,
    ],
)
def test_parse_age_rejects_non_integers(raw: str) -> None:
    with pytest.raises(InvalidInputError, match="Invalid age parameter"):
        parse_age(raw)


def test_build_user_checks_presence_before_age() -> None:
    with pytest.raises(InvalidInputError, match="Missing parameters"):
        UserService.build_user("1", "", "abc")
    with pytest.raises(InvalidInputError, match="Missing parameters"):
        UserService.build_user("", "Alice", "30")
    with pytest.raises(InvalidInputError, match="Missing parameters"):
        UserService.build_user("1", "Alice", "")


def test_build_user_parses_age() -> None:
    assert UserService.build_user("1", "Alice", "30") == User(id="1", name="Alice", age=30)

    with pytest.raises(InvalidInputError, match="Invalid age parameter"):
        UserService.build_user("1", "Alice", "thirty")


def test_require_id() -> None:
    assert UserService.require_id("42") == "42"
    with pytest.raises(InvalidInputError, match="Missing id parameter"):
        UserService.require_id("")


@pytest.mark.asyncio
async def test_crud_round_trip(service: UserService) -> None:
    await service.create_user(User(id="1", name="Alice", age=30))
    await service.update_user(User(id="1", name="Bob", age=31))

    assert await service.find_user("1") == User(id="1", name="Bob", age=31)
    assert await service.list_users() == [User(id="1", name="Bob", age=31)]

    await service.delete_user("1")

    assert await service.list_users() == []


@pytest.mark.asyncio
async def test_repository_errors_propagate(service: UserService) -> None:
    await service.create_user(User(id="1", name="Alice", age=30))

    with pytest.raises(AlreadyExistsError):
        await service.create_user(User(id="1", name="Alice", age=30))
    with pytest.raises(NotFoundError):
        await service.update_user(User(id="2", name="Bob", age=31))
    with pytest.raises(NotFoundError):
        await service.delete_user("2")
    with pytest.raises(NotFoundError):
        await service.find_user("2")


@pytest.mark.asyncio
async def test_mutations_are_logged(
    service: UserService, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger="userstore.services.user_service")

    await service.create_user(User(id="1", name="Alice", age=30))
    with pytest.raises(NotFoundError):
        await service.delete_user("missing")

    messages = [(r.levelno, r.getMessage()) for r in caplog.records]
    assert (logging.INFO, "Created user 1") in messages
    assert (logging.WARNING, "Delete rejected for user missing: user not found") in messages
