"""flowstore - a small synchronous store/reducer/dispatch container."""

from ._action import INIT_ACTION, Action, action_payload, action_type
from ._errors import InvalidStateError, StoreError
from ._middleware import logging_middleware, record_middleware
from ._store import Store, apply_middleware, create_store
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
    "INIT_ACTION",
    "Action",
    "Dispatch",
    "Enhancer",
    "InvalidStateError",
    "Middleware",
    "Reducer",
    "StateFactory",
    "Store",
    "StoreError",
    "Subscriber",
    "Unsubscribe",

    "action_payload",
    "action_type",
    "apply_middleware",
    "create_store",
    "logging_middleware",
    "record_middleware",
)
