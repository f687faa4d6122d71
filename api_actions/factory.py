"""
Factory producing action creators for asynchronous API calls.

Each action creator returns a Flux Standard Action whose ``meta`` carries
everything the API middleware needs: the HTTP method, the resolved endpoint
and the REQUEST/SUCCESS/FAILURE types to dispatch around the request.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable

from api_actions.endpoint import EndpointSpec, as_endpoint_spec, resolve_call
from api_actions.fsa import is_error_payload
from api_actions.lifecycle import lifecycle_types
from api_actions.settings import Settings

logger = logging.getLogger(__name__)

PayloadTransform = Callable[[Any], Any]
MetaTransform = Callable[[Any], Any]


def _identity(value: Any) -> Any:
    return value


def _no_meta(_payload: Any) -> dict[str, Any]:
    return {}


class ActionCreator:
    """Callable building one API action per invocation."""

    def __init__(
        self,
        base_type: str,
        method: str,
        endpoint: EndpointSpec,
        payload_transform: PayloadTransform = _identity,
        meta_transform: MetaTransform = _no_meta,
        settings: Settings = Settings(),
    ) -> None:
        self.type = base_type
        self.method = method
        self.endpoint = endpoint
        self._payload_transform = payload_transform
        self._meta_transform = meta_transform
        self._settings = settings
        self._types = tuple(lifecycle_types(base_type, method))

    @property
    def types(self) -> list[str]:
        return list(self._types)

    def __call__(self, *args: Any) -> dict[str, Any]:
        resolved = resolve_call(
            self.endpoint,
            self.method,
            args,
            path_separator=self._settings.path_separator,
        )
        payload = self._payload_transform(resolved.payload_source)

        meta: dict[str, Any] = {
            "api": True,
            "method": self.method,
            "endpoint": resolved.endpoint,
        }
        extra_meta = self._meta_transform(payload)
        # Only mappings contribute fields; anything else adds nothing.
        if isinstance(extra_meta, Mapping):
            meta.update(extra_meta)
        meta["types"] = self.types

        action: dict[str, Any] = {"type": self.type, "payload": payload}
        if is_error_payload(payload):
            action["error"] = True
        action["meta"] = meta

        logger.debug(
            "Built API action",
            extra={
                "action_type": self.type,
                "method": self.method,
                "endpoint": resolved.endpoint,
                "error": action.get("error", False),
            },
        )
        return action

    def __repr__(self) -> str:
        return f"ActionCreator(type={self.type!r}, method={self.method!r}, endpoint={self.endpoint!r})"


def create_api_action(
    type: str,
    method: str,
    endpoint: str | Callable[..., str] | EndpointSpec,
    payload_transform: PayloadTransform | None = None,
    meta_transform: MetaTransform | None = None,
    *,
    settings: Settings | None = None,
) -> ActionCreator:
    """
    Build an action creator for ``method`` requests against ``endpoint``.

    ``endpoint`` is a literal path or a resolver called with the first
    argument of each action-creator call. ``None`` transforms fall back to
    identity for the payload and to no extra meta fields. Nothing is
    validated here; resolvers and transforms run, and raise, at call time.
    """
    spec = as_endpoint_spec(endpoint)
    creator = ActionCreator(
        type,
        method,
        spec,
        payload_transform=_identity if payload_transform is None else payload_transform,
        meta_transform=_no_meta if meta_transform is None else meta_transform,
        settings=Settings() if settings is None else settings,
    )
    logger.debug(
        "Created API action creator",
        extra={"action_type": type, "method": method, "endpoint_spec": repr(spec)},
    )
    return creator
