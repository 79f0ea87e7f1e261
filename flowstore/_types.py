from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar


if TYPE_CHECKING:
    from ._store import Store


__all__ = (
    "Dispatch",
    "Enhancer",
    "Middleware",
    "Reducer",
    "StateFactory",
    "Subscriber",
    "Unsubscribe",
)


A = TypeVar("A")
S = TypeVar("S")


Dispatch = Callable[[Any], Any]
Reducer = Callable[[Optional[S], A], S]
StateFactory = Callable[[], S]
Subscriber = Callable[[], None]
Unsubscribe = Callable[[], None]

Middleware = Callable[["Store[Any, Any]", Dispatch, Any], Any]
Enhancer = Callable[["Store[Any, Any]"], "Store[Any, Any]"]
