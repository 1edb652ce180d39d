"""Input checks for registration and login, run before any password lookup.

Each check returns ``OK_NONE`` or an ``Err`` carrying the first failing kind.
"""

from __future__ import annotations

from ..core.result import OK_NONE, Err, Result
from ..errors import ErrorKind
from ..repositories import UserStore

MIN_PASSWORD_LENGTH = 6


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_required_fields(*values: str | None) -> Result[None]:
    if any(_is_blank(value) for value in values):
        return Err(ErrorKind.MISSING_FIELDS)
    return OK_NONE


def validate_email_shape(email: str) -> Result[None]:
    """Require an ``@`` and a ``.`` somewhere in the address, nothing more."""
    if "@" not in email or "." not in email:
        return Err(ErrorKind.INVALID_EMAIL)
    return OK_NONE


def validate_password_pair(password: str, confirm_password: str) -> Result[None]:
    # mismatch wins over length: two different five-character passwords report mismatch
    if password != confirm_password:
        return Err(ErrorKind.PASSWORD_MISMATCH)
    if len(password) < MIN_PASSWORD_LENGTH:
        return Err(ErrorKind.WEAK_PASSWORD)
    return OK_NONE


def validate_registration(
    name: str | None,
    email: str | None,
    password: str | None,
    confirm_password: str | None,
) -> Result[None]:
    """Run every storage-free registration check in precedence order.

    ``register_user`` runs the same checks but inserts the email availability
    lookup between the email shape check and the password checks.
    """
    result = validate_required_fields(name, email, password, confirm_password)
    if isinstance(result, Err):
        return result
    assert email is not None and password is not None and confirm_password is not None
    result = validate_email_shape(email)
    if isinstance(result, Err):
        return result
    return validate_password_pair(password, confirm_password)


async def check_email_available(users: UserStore, email: str) -> Result[None]:
    """Fail with ``EMAIL_TAKEN`` if the exact, case-sensitive email is in use."""
    if await users.exists_by_email(email):
        return Err(ErrorKind.EMAIL_TAKEN)
    return OK_NONE


def validate_login_credentials(email: str | None, password: str | None) -> Result[None]:
    if _is_blank(email) or _is_blank(password):
        return Err(ErrorKind.INVALID_CREDENTIALS)
    return OK_NONE


__all__ = [
    "MIN_PASSWORD_LENGTH",
    "check_email_available",
    "validate_email_shape",
    "validate_login_credentials",
    "validate_password_pair",
    "validate_registration",
    "validate_required_fields",
]
