"""Lifecycle type identifiers dispatched by the middleware around a request."""

from enum import Enum


class Lifecycle(Enum):
    REQUEST = "REQUEST"
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


def lifecycle_types(base_type: str, method: str) -> list[str]:
    """Return a new ``[T_M_REQUEST, T_M_SUCCESS, T_M_FAILURE]`` list."""
    return [f"{base_type}_{method}_{stage.value}" for stage in Lifecycle]
