from __future__ import annotations

import logging

from typing import Generic, Optional, Sequence, TypeVar

from ._action import INIT_ACTION, action_type
from ._errors import InvalidStateError
from ._types import (
    Dispatch,
    Enhancer,
    Middleware,
    Reducer,
    StateFactory,
    Subscriber,
    Unsubscribe
)


__all__ = (
    "Store",

    "apply_middleware",
    "create_store",
)


A = TypeVar("A")
S = TypeVar("S")


logger = logging.getLogger(__name__)


class Store(Generic[S, A]):
    """Holds one state value and replaces it through ``dispatch``.

    ``dispatch`` must not be called from inside a reducer, or from a
    subscriber notified by the same dispatch.
    """

    @property
    def reducer(self) -> Reducer[S, A]:
        raise NotImplementedError

    def get_state(self) -> S:
        raise NotImplementedError

    def dispatch(self, action: A) -> A:
        raise NotImplementedError

    def subscribe(self, subscriber: Subscriber) -> Unsubscribe:
        raise NotImplementedError


def _reduce(reducer: Reducer[S, A], state: Optional[S], action: A) -> S:
    next_state = reducer(state, action)

    if next_state is None:
        raise InvalidStateError(
            f"Reducer {getattr(reducer, '__name__', reducer)!r} returned None "
            f"for action {action_type(action)!r}"
        )

    return next_state


class _DefaultStore(Store[S, A]):
    _reducer: Reducer[S, A]
    _state: S
    _subscribers: list[Subscriber]

    def __init__(self, reducer: Reducer[S, A], initial_state: S) -> None:
        self._reducer = reducer
        self._state = initial_state
        self._subscribers = []

    @property
    def reducer(self) -> Reducer[S, A]:
        return self._reducer

    def _notify(self) -> None:
        for subscriber in tuple(self._subscribers):
            subscriber()

    def get_state(self) -> S:
        return self._state

    def dispatch(self, action: A) -> A:
        logger.debug("Dispatching %s", action_type(action))

        try:
            self._state = _reduce(self._reducer, self._state, action)
        except Exception:
            logger.warning(
                "Reducer failed on %s; state left unchanged",
                action_type(action)
            )

            raise

        self._notify()

        return action

    def subscribe(self, subscriber: Subscriber) -> Unsubscribe:
        """Register ``subscriber``; each call is a separate registration."""
        def registration() -> None:
            subscriber()

        self._subscribers.append(registration)
        logger.debug("Subscribed %r", subscriber)

        def unsubscribe() -> None:
            if registration not in self._subscribers:
                return

            self._subscribers.remove(registration)
            logger.debug("Unsubscribed %r", subscriber)

        return unsubscribe


def _chain(
    middleware: Middleware,
    store: Store[S, A],
    next_dispatch: Dispatch
) -> Dispatch:
    def dispatch(action: A) -> A:
        return middleware(store, next_dispatch, action)

    return dispatch


def apply_middleware(*middleware: Middleware) -> Enhancer:
    def apply(original_store: Store[S, A]) -> Store[S, A]:
        class EnhancedStore(Store[S, A]):
            @property
            def reducer(self) -> Reducer[S, A]:
                return original_store.reducer

            def get_state(self) -> S:
                return original_store.get_state()

            def dispatch(self, action: A) -> A:
                return enhanced_dispatch(action)

            def subscribe(self, subscriber: Subscriber) -> Unsubscribe:
                return original_store.subscribe(subscriber)

        enhanced_store: Store[S, A] = EnhancedStore()
        enhanced_dispatch: Dispatch = original_store.dispatch

        for function in reversed(middleware):
            enhanced_dispatch = _chain(function, enhanced_store, enhanced_dispatch)

        return enhanced_store

    return apply  # type: ignore[return-value]


def create_store(
    reducer: Reducer[S, A],
    initial_state_factory: Optional[StateFactory[S]] = None,
    middleware: Sequence[Middleware] = (),
    enhancer: Optional[Enhancer] = None
) -> Store[S, A]:
    preloaded_state: Optional[S] = None

    if initial_state_factory is not None:
        preloaded_state = initial_state_factory()

    store: Store[S, A] = _DefaultStore(
        reducer,
        _reduce(reducer, preloaded_state, INIT_ACTION)  # type: ignore[arg-type]
    )

    logger.debug("Created store for %s", getattr(reducer, "__name__", reducer))

    if middleware:
        store = apply_middleware(*middleware)(store)

    if enhancer is not None:
        store = enhancer(store)

    return store
