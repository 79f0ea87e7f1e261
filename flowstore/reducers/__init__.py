from .counter import INCREASE_COUNT, CounterState, counter_reducer, increase_count
from .shopping_list import (
    ADD_ITEM,
    ShoppingListState,
    add_item,
    shopping_list_reducer
)


__all__ = (
    "ADD_ITEM",
    "INCREASE_COUNT",
    "CounterState",
    "ShoppingListState",

    "add_item",
    "counter_reducer",
    "increase_count",
    "shopping_list_reducer",
)
