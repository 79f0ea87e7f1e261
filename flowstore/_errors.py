__all__ = (
    "InvalidStateError",
    "StoreError",
)


class StoreError(Exception):
    pass


class InvalidStateError(StoreError):
    pass
