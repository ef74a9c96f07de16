"""Normalized user context and group/scope checks for API Gateway Cognito/JWT authorizers."""

from .core.auth import (
    EventKind,
    JwtEvent,
    classify_event,
    extract_claims,
    extract_http_claims,
    extract_rest_claims,
    require_user,
    user_context_from_event,
    user_context_from_http_event,
    user_context_from_rest_event,
)
from .core.checks import (
    has_any_scope,
    has_scope,
    require_groups,
    require_scopes,
    user_in_any_group,
    user_in_group,
)
from .core.claims import UserContext, build_user_context, normalize_groups, normalize_scopes
from .core.config import AuthConfig, configure_auth, get_config, reset_config
from .core.errors import AuthError, AuthErrorKind
from .core.response import error_response, forbidden_response, json_response, unauthenticated_response
from .handler import with_user_context

__all__ = [
    "AuthConfig",
    "AuthError",
    "AuthErrorKind",
    "EventKind",
    "JwtEvent",
    "UserContext",
    "build_user_context",
    "classify_event",
    "configure_auth",
    "error_response",
    "extract_claims",
    "extract_http_claims",
    "extract_rest_claims",
    "forbidden_response",
    "get_config",
    "has_any_scope",
    "has_scope",
    "json_response",
    "normalize_groups",
    "normalize_scopes",
    "require_groups",
    "require_scopes",
    "require_user",
    "reset_config",
    "unauthenticated_response",
    "user_context_from_event",
    "user_context_from_http_event",
    "user_context_from_rest_event",
    "user_in_any_group",
    "user_in_group",
    "with_user_context",
]
