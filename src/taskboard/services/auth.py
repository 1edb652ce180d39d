"""Identity gate: login and principal resolution.

Neither path involves real security. Passwords are compared verbatim and the
token is a fixed-format string derived from the user id.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.result import Err, Ok, Result
from ..errors import ErrorKind
from ..repositories import UserStore
from .credentials import validate_login_credentials

logger = logging.getLogger(__name__)

TOKEN_PREFIX = "fake-token-"


@dataclass(frozen=True, slots=True)
class AuthenticatedUser:
    """What a successful login hands back to the caller."""

    id: int
    name: str
    email: str
    token: str


def build_token(user_id: int) -> str:
    return f"{TOKEN_PREFIX}{user_id}"


async def login(users: UserStore, email: str | None, password: str | None) -> Result[AuthenticatedUser]:
    """Authenticate ``email`` and ``password``.

    Blank input and an unknown email both yield ``INVALID_CREDENTIALS``; a known
    email with the wrong password yields the distinct ``WRONG_PASSWORD``.
    """
    checked = validate_login_credentials(email, password)
    if isinstance(checked, Err):
        return checked
    assert email is not None

    user = await users.find_by_email(email)
    if user is None:
        logger.debug("Login rejected: unknown email")
        return Err(ErrorKind.INVALID_CREDENTIALS)
    if user.password != password:
        logger.debug("Login rejected: wrong password", extra={"user_id": user.id})
        return Err(ErrorKind.WRONG_PASSWORD)

    logger.info("User logged in", extra={"user_id": user.id})
    return Ok(AuthenticatedUser(id=user.id, name=user.name, email=user.email, token=build_token(user.id)))


def resolve_principal(raw: str | int | None) -> Result[int]:
    """Turn a caller-supplied user id into a principal.

    Only positive integers pass. The id is trusted as given; nothing checks
    that the user exists or that the caller is who it claims to be.
    """
    if isinstance(raw, bool):
        return Err(ErrorKind.UNAUTHORIZED)
    if isinstance(raw, int):
        user_id = raw
    elif isinstance(raw, str) and raw.strip():
        try:
            user_id = int(raw.strip())
        except ValueError:
            return Err(ErrorKind.UNAUTHORIZED)
    else:
        return Err(ErrorKind.UNAUTHORIZED)
    if user_id <= 0:
        return Err(ErrorKind.UNAUTHORIZED)
    return Ok(user_id)


__all__ = ["AuthenticatedUser", "TOKEN_PREFIX", "build_token", "login", "resolve_principal"]
