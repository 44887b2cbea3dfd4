"""Translation of SQLAlchemy failures into ``InfrastructureError``."""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from keyward_identity.exceptions import InfrastructureError

T = TypeVar("T")
P = ParamSpec("P")

logger = logging.getLogger(__name__)


def translate_storage_errors(
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[T]]:
    """Re-raise any ``SQLAlchemyError`` from a repository method as
    ``InfrastructureError``, keeping the original as ``__cause__``."""

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return await func(*args, **kwargs)
        except SQLAlchemyError as e:
            logger.error("Storage failure in %s: %s", func.__qualname__, type(e).__name__)
            raise InfrastructureError from e

    return wrapper
