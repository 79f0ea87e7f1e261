from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


__all__ = (
    "INIT_ACTION",
    "Action",

    "action_payload",
    "action_type",
)


class Action(BaseModel):
    """An immutable action. Fields other than ``type`` form the payload."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str


INIT_ACTION = Action(type="@@flowstore/INIT")


def action_type(action: Any) -> Optional[str]:
    if isinstance(action, Mapping):
        value = action.get("type")
    else:
        value = getattr(action, "type", None)

    if not isinstance(value, str):
        return None

    return value


def action_payload(action: Any) -> dict[str, Any]:
    if isinstance(action, BaseModel):
        return action.model_dump(exclude={"type"})

    if isinstance(action, Mapping):
        return {key: value for key, value in action.items() if key != "type"}

    if not hasattr(action, "__dict__"):
        return {}

    return {
        key: value
        for key, value in vars(action).items()
        if key != "type" and not key.startswith("_")
    }
