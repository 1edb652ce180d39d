"""Core application utilities."""

from __future__ import annotations

from .config import Settings, get_settings
from .result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result", "Settings", "get_settings"]
