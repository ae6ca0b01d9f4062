"""Result types returned by the zone and route repositories.

Each repository operation returns exactly one of:
- ``Ok(value)``: the operation succeeded; ``value`` is the record, list or flag.
- ``NotFound()``: no document matches the supplied natural key.
- ``StoreFailure(detail)``: the document store raised; ``detail`` is its message.

Views branch on the type instead of catching exceptions.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Union


@dataclass(frozen=True)
class Ok:
    value: Any = None


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class StoreFailure:
    detail: str


Result = Union[Ok, NotFound, StoreFailure]


def store_guarded(action: str) -> Callable[[Callable[..., Result]], Callable[..., Result]]:
    """Convert any exception raised inside a repository method into StoreFailure."""

    def decorator(fn: Callable[..., Result]) -> Callable[..., Result]:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Result:
            try:
                return fn(*args, **kwargs)
            except Exception as e:
                logging.exception(f"Store failure while trying to {action}")
                return StoreFailure(detail=str(e))

        return wrapper

    return decorator
