from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr

from .._action import Action, action_payload, action_type
from .counter import INCREASE_COUNT


__all__ = (
    "ADD_ITEM",
    "ShoppingListState",

    "add_item",
    "shopping_list_reducer",
)


ADD_ITEM = "ADD_ITEM"

Item = Union[StrictStr, StrictInt]


class ShoppingListState(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: tuple[Item, ...] = ()


def add_item(item: Item) -> Action:
    return Action(type=ADD_ITEM, item=item)


def shopping_list_reducer(
    state: Optional[ShoppingListState],
    action: Any
) -> ShoppingListState:
    if state is None:
        state = ShoppingListState()

    kind = action_type(action)

    if kind == INCREASE_COUNT:
        return ShoppingListState(items=(*state.items, len(state.items) + 1))

    if kind == ADD_ITEM:
        item = action_payload(action).get("item")

        if isinstance(item, bool) or not isinstance(item, (str, int)):
            return state

        return ShoppingListState(items=(*state.items, item))

    return state
