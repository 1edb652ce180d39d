"""Success-or-error values threaded through validation and engine steps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar, Union

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from ..errors import ErrorKind

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful step carrying its value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err:
    """A failed step tagged with the kind of failure."""

    kind: "ErrorKind"


Result = Union[Ok[T], Err]

OK_NONE: Ok[None] = Ok(None)


__all__ = ["Err", "OK_NONE", "Ok", "Result"]
