"""User registration built on the credential checks."""

from __future__ import annotations

import logging

from ..core.result import Err, Ok, Result
from ..models import UserRecord
from ..repositories import UserStore
from .credentials import (
    check_email_available,
    validate_email_shape,
    validate_password_pair,
    validate_required_fields,
)

logger = logging.getLogger(__name__)


async def register_user(
    users: UserStore,
    *,
    name: str | None,
    email: str | None,
    password: str | None,
    confirm_password: str | None,
) -> Result[UserRecord]:
    """Validate a sign-up request and persist the new account.

    Checks run in this order and stop at the first failure: missing fields,
    email shape, email availability, password mismatch, password length. The
    name and email are stored trimmed; the password is stored as submitted.
    """
    result = validate_required_fields(name, email, password, confirm_password)
    if isinstance(result, Err):
        return _rejected(result)
    assert name is not None and email is not None
    assert password is not None and confirm_password is not None

    clean_name = name.strip()
    clean_email = email.strip()
    result = validate_email_shape(clean_email)
    if isinstance(result, Err):
        return _rejected(result)
    result = await check_email_available(users, clean_email)
    if isinstance(result, Err):
        return _rejected(result)
    result = validate_password_pair(password, confirm_password)
    if isinstance(result, Err):
        return _rejected(result)

    user_id = await users.insert(name=clean_name, email=clean_email, password=password)
    logger.info("User registered", extra={"user_id": user_id})
    return Ok(UserRecord(id=user_id, name=clean_name, email=clean_email, password=password))


def _rejected(result: Err) -> Err:
    logger.debug("Registration rejected", extra={"kind": result.kind.value})
    return result


__all__ = ["register_user"]
