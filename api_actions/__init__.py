"""
Action creators describing asynchronous API calls as Flux Standard Actions.

The produced actions are consumed by a middleware that performs the actual
request; this package only builds them.
"""

from api_actions.endpoint import (
    EndpointSpec,
    LiteralEndpoint,
    ResolvedCall,
    ResolverEndpoint,
    as_endpoint_spec,
    resolve_call,
)
from api_actions.factory import ActionCreator, create_api_action
from api_actions.fsa import (
    FluxStandardAction,
    is_api_action,
    is_error,
    is_error_payload,
    is_fsa,
)
from api_actions.settings import Settings
from api_actions.lifecycle import Lifecycle, lifecycle_types

__all__ = [
    "ActionCreator",
    "EndpointSpec",
    "FluxStandardAction",
    "Lifecycle",
    "LiteralEndpoint",
    "ResolvedCall",
    "ResolverEndpoint",
    "Settings",
    "as_endpoint_spec",
    "create_api_action",
    "is_api_action",
    "is_error",
    "is_error_payload",
    "is_fsa",
    "lifecycle_types",
    "resolve_call",
]
