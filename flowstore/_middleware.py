"""Ready-made middleware for ``create_store``."""

from __future__ import annotations

import logging

from typing import Any, Optional, TypeVar

from ._action import action_type
from ._store import Store
from ._types import Dispatch, Middleware


__all__ = (
    "logging_middleware",
    "record_middleware",
)


A = TypeVar("A")


def logging_middleware(
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG
) -> Middleware:
    """Log every action together with the state before and after it."""
    log = logger or logging.getLogger(__name__)

    def middleware(store: Store[Any, A], next_dispatch: Dispatch, action: A) -> A:
        if not log.isEnabledFor(level):
            return next_dispatch(action)

        previous_state = store.get_state()
        result = next_dispatch(action)

        log.log(
            level,
            "action %s: %r -> %r",
            action_type(action),
            previous_state,
            store.get_state()
        )

        return result

    return middleware


def record_middleware(history: list[tuple[Any, Any]]) -> Middleware:
    def middleware(store: Store[Any, A], next_dispatch: Dispatch, action: A) -> A:
        result = next_dispatch(action)
        history.append((action, store.get_state()))

        return result

    return middleware
