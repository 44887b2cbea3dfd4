"""Result values returned by the application services."""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, ParamSpec, TypeVar

from keyward_identity.exceptions import ErrorKind, IdentityError

T = TypeVar("T")
P = ParamSpec("P")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an identity operation: a value or an ``IdentityError``."""

    value: T | None = None
    error: IdentityError | None = None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: IdentityError) -> Result[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value, raising the error if the operation failed."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def returns_result(
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Result[T]]]:
    """Wrap an async service method so expected failures become ``Result``.

    Only ``IdentityError`` is converted. Anything else, including
    ``InfrastructureError``, propagates.
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T]:
        try:
            value = await func(*args, **kwargs)
        except IdentityError as e:
            logger.debug(
                "%s rejected: %s (%s)",
                func.__qualname__,
                type(e).__name__,
                e.kind.value,
            )
            return Result.failure(e)
        return Result.success(value)

    return wrapper
