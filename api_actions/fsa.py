"""Flux Standard Action shape checks."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr, ValidationError


class FluxStandardAction(BaseModel):
    """Schema of a Flux Standard Action; unknown top-level keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    type: StrictStr
    payload: Any = None
    error: StrictBool | None = None
    meta: dict[str, Any] | None = None


def is_error_payload(value: Any) -> bool:
    """Return True when ``value`` marks a failed operation."""
    return isinstance(value, Exception)


def is_fsa(action: Any) -> bool:
    """Return True when ``action`` is a mapping with the FSA shape."""
    if not isinstance(action, Mapping):
        return False
    if "error" in action and not isinstance(action["error"], bool):
        return False
    if "meta" in action and not isinstance(action["meta"], Mapping):
        return False
    try:
        FluxStandardAction.model_validate(dict(action))
    except ValidationError:
        return False
    return True


def is_error(action: Any) -> bool:
    """Return True for an FSA flagged with ``error: true``."""
    return is_fsa(action) and action.get("error") is True


def is_api_action(action: Any) -> bool:
    """Return True for an FSA that asks the middleware to perform a request."""
    return is_fsa(action) and action.get("meta", {}).get("api") is True
