"""Response helpers.

API Gateway (REST and HTTP API) expects Lambda proxy responses with:
- statusCode: int
- headers: dict
- body: JSON string

The 401/403 bodies are fixed (`{"message":"Unauthorized"}` and
`{"message":"Forbidden"}`) so clients can rely on them byte for byte.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

from .errors import AuthError, AuthErrorKind


DEFAULT_HEADERS: Dict[str, str] = {
    "Content-Type": "application/json",
}


def json_response(body: Any, status: int = 200, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Return a standard JSON Lambda proxy response."""
    merged_headers = {**DEFAULT_HEADERS, **(headers or {})}
    return {
        "statusCode": status,
        "headers": merged_headers,
        "body": json.dumps(body, ensure_ascii=False, separators=(",", ":")),
    }


# `event` is accepted for symmetry with the REST and HTTP response shapes;
# both take the same proxy response dict.
def unauthenticated_response(event: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    return json_response({"message": "Unauthorized"}, status=401)


def forbidden_response(event: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    return json_response({"message": "Forbidden"}, status=403)


def error_response(error: AuthError, event: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    if error.kind is AuthErrorKind.FORBIDDEN:
        return forbidden_response(event)
    return unauthenticated_response(event)
