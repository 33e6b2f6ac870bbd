"""Result values for callers that would rather inspect than catch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from .errors import MovieClientError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    error: MovieClientError

    @property
    def ok(self) -> bool:
        return False


Result = Union[Success[T], Failure]


def capture(fn: Callable[..., T], *args, **kwargs) -> Result[T]:
    """Run a client operation and wrap its outcome.

    Only ``MovieClientError`` is captured; anything else propagates.
    """
    try:
        return Success(fn(*args, **kwargs))
    except MovieClientError as exc:
        return Failure(exc)
