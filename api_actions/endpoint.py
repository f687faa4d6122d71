"""
Endpoint resolution for action-creator calls.

An endpoint is either a literal path or a resolver function. Both are
resolved together with the payload source, since an identifier argument
feeds the path while a data argument feeds the payload.
"""

import math
import uuid
from dataclasses import dataclass
from typing import Any, Callable

# Methods that address a collection; a lone scalar argument is payload data.
COLLECTION_METHODS = frozenset({"POST"})


@dataclass(frozen=True, slots=True)
class LiteralEndpoint:
    """A fixed path, optionally extended with an identifier at call time."""

    path: str


@dataclass(frozen=True, slots=True)
class ResolverEndpoint:
    """A function computing the path from the first call argument."""

    resolver: Callable[..., str]


EndpointSpec = LiteralEndpoint | ResolverEndpoint


@dataclass(frozen=True, slots=True)
class ResolvedCall:
    """Endpoint and payload source computed for one action-creator call."""

    endpoint: str
    payload_source: Any


def as_endpoint_spec(value: Any) -> EndpointSpec:
    """Wrap a raw path or resolver into an endpoint variant."""
    match value:
        case LiteralEndpoint() | ResolverEndpoint():
            return value
        case str():
            return LiteralEndpoint(value)
        case _ if callable(value):
            return ResolverEndpoint(value)
        case _:
            return LiteralEndpoint(str(value))


def is_identifier(value: Any) -> bool:
    """Return True for scalar values that address a single resource."""
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, (str, int, uuid.UUID))


def _join(path: str, identifier: Any, separator: str) -> str:
    if path.endswith(separator):
        return f"{path}{identifier}"
    return f"{path}{separator}{identifier}"


def resolve_call(
    spec: EndpointSpec,
    method: str,
    args: tuple[Any, ...],
    *,
    path_separator: str = "/",
) -> ResolvedCall:
    """
    Resolve the endpoint and payload source for a call with ``args``.

    ``()`` keeps the endpoint as is and yields an empty payload source.
    ``(value,)`` is passed to a resolver and used as payload; against a
    literal path it is appended as an identifier instead when it is
    scalar and the method does not address a collection.
    ``(identifier, data)`` always routes the identifier to the endpoint
    and ``data`` to the payload. This holds for POST too: a literal POST
    path is left unchanged only when no identifier is passed, so an
    explicit identifier is never dropped.
    """
    if len(args) > 2:
        raise TypeError(
            f"action creator takes at most 2 positional arguments ({len(args)} given)"
        )

    match spec, args:
        case ResolverEndpoint(resolver), ():
            return ResolvedCall(resolver(), {})
        case ResolverEndpoint(resolver), (value,):
            return ResolvedCall(resolver(value), value)
        case ResolverEndpoint(resolver), (identifier, data):
            return ResolvedCall(resolver(identifier), data)
        case LiteralEndpoint(path), ():
            return ResolvedCall(path, {})
        case LiteralEndpoint(path), (value,):
            if method.upper() not in COLLECTION_METHODS and is_identifier(value):
                return ResolvedCall(_join(path, value, path_separator), {})
            return ResolvedCall(path, value)
        case LiteralEndpoint(path), (identifier, data):
            return ResolvedCall(_join(path, identifier, path_separator), data)

    raise TypeError(f"unsupported endpoint spec: {spec!r}")
