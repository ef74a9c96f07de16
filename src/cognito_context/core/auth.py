"""Auth helpers.

Claims live at a different path depending on the API Gateway flavour:

- REST API + Cognito user pool authorizer:
  (event['requestContext']['authorizer']['claims'])
- HTTP API + JWT authorizer:
  (event['requestContext']['authorizer']['jwt']['claims'])

The HTTP flavour also reports `jwt.scopes`; we ignore it and read scopes from
the claims so both flavours behave the same.

We keep extraction logic here so handlers don't have to know the event shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .claims import UserContext, build_user_context
from .config import AuthConfig
from .errors import AuthError


class EventKind(str, Enum):
    REST = "rest"
    HTTP = "http"


@dataclass(frozen=True)
class JwtEvent:
    """An API Gateway event tagged with the authorizer flavour that produced it."""

    kind: EventKind
    event: Mapping[str, Any]


def _authorizer(event: Mapping[str, Any]) -> Any:
    try:
        return event["requestContext"]["authorizer"]
    except (KeyError, TypeError):
        return None


def classify_event(event: Mapping[str, Any]) -> JwtEvent:
    """Tag an event as HTTP when it carries a JWT authorizer block, REST otherwise."""
    authorizer = _authorizer(event)
    if isinstance(authorizer, Mapping) and isinstance(authorizer.get("jwt"), Mapping):
        return JwtEvent(EventKind.HTTP, event)
    return JwtEvent(EventKind.REST, event)


def _ensure_object_claims(claims: Any) -> Dict[str, Any]:
    if not isinstance(claims, Mapping):
        raise AuthError.unauthenticated("Authorizer claims missing or malformed")
    return claims


def extract_rest_claims(event: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the Cognito authorizer claims of a REST API event."""
    try:
        claims = event["requestContext"]["authorizer"]["claims"]
    except (KeyError, TypeError):
        claims = None
    return _ensure_object_claims(claims)


def extract_http_claims(event: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the JWT authorizer claims of an HTTP API event."""
    try:
        claims = event["requestContext"]["authorizer"]["jwt"]["claims"]
    except (KeyError, TypeError):
        claims = None
    return _ensure_object_claims(claims)


def extract_claims(jwt_event: JwtEvent) -> Dict[str, Any]:
    if jwt_event.kind is EventKind.HTTP:
        return extract_http_claims(jwt_event.event)
    return extract_rest_claims(jwt_event.event)


def user_context_from_rest_event(
    event: Mapping[str, Any], config: Optional[AuthConfig] = None
) -> UserContext:
    return build_user_context(extract_rest_claims(event), config)


def user_context_from_http_event(
    event: Mapping[str, Any], config: Optional[AuthConfig] = None
) -> UserContext:
    return build_user_context(extract_http_claims(event), config)


def user_context_from_event(
    event: Mapping[str, Any], config: Optional[AuthConfig] = None
) -> UserContext:
    """Resolve the caller of a REST or HTTP API event.

    Raises an unauthenticated `AuthError` when the claims are missing,
    malformed, or lack a usable `sub`.
    """
    return build_user_context(extract_claims(classify_event(event)), config)


def require_user(
    event: Mapping[str, Any], config: Optional[AuthConfig] = None
) -> UserContext:
    return user_context_from_event(event, config)
