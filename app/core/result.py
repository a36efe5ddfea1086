"""Explicit service results.

Services never raise for expected failures; they return ``Ok(value)`` or
``Err(kind, message)`` and the routers translate an ``Err`` into an HTTP
status at the boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from app.models.enums import ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the operation's value."""
    value: T


@dataclass(frozen=True)
class Err:
    """Failed outcome with an error category and a client-facing message."""
    kind: ErrorKind
    message: str


Result = Union[Ok[T], Err]


def validation_error(message: str) -> Err:
    return Err(ErrorKind.validation, message)


def auth_error(message: str) -> Err:
    return Err(ErrorKind.auth, message)


def not_found(message: str) -> Err:
    return Err(ErrorKind.not_found, message)


def store_error(message: str) -> Err:
    return Err(ErrorKind.store, message)
