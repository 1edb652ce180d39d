"""Domain service layer package."""

from __future__ import annotations

from . import tasks
from .auth import AuthenticatedUser, login, resolve_principal
from .credentials import (
    check_email_available,
    validate_login_credentials,
    validate_registration,
)
from .users import register_user

__all__ = [
    "AuthenticatedUser",
    "check_email_available",
    "login",
    "register_user",
    "resolve_principal",
    "tasks",
    "validate_login_credentials",
    "validate_registration",
]
