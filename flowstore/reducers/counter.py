from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .._action import Action, action_type


__all__ = (
    "INCREASE_COUNT",
    "CounterState",

    "counter_reducer",
    "increase_count",
)


INCREASE_COUNT = "INCREASE_COUNT"


class CounterState(BaseModel):
    model_config = ConfigDict(frozen=True)

    clicks: int = Field(default=0, ge=0)


def increase_count() -> Action:
    return Action(type=INCREASE_COUNT)


def counter_reducer(state: Optional[CounterState], action: Any) -> CounterState:
    if state is None:
        state = CounterState()

    if action_type(action) == INCREASE_COUNT:
        return CounterState(clicks=state.clicks + 1)

    return state
