"""Claim normalization.

Authorizers hand us claims in several encodings depending on the gateway
mode and the token type. The Cognito REST authorizer flattens every claim to
a string, so `cognito:groups` may arrive as `"admin,editor"`,
`"[admin, editor]"` or `'["admin","editor"]'`, while the HTTP JWT authorizer
may pass a real list. `build_user_context` turns all of them into one
`UserContext`.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Pattern

from .config import AuthConfig, get_config
from .errors import AuthError


logger = logging.getLogger(__name__)

GROUP_SEPARATORS = re.compile(r"[\s,]+")
SCOPE_SEPARATORS = re.compile(r"\s+")


@dataclass
class UserContext:
    """Normalized identity of the caller.

    `sub` is always a non-empty stripped string. `groups` and `scopes` hold no
    blanks and no duplicates, in first-seen order. `raw_claims` is the mapping
    the authorizer supplied, untouched.
    """

    sub: str
    groups: List[str]
    scopes: List[str]
    raw_claims: Mapping[str, Any]
    username: Optional[str] = None
    email: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"sub": self.sub}
        if self.username is not None:
            data["username"] = self.username
        if self.email is not None:
            data["email"] = self.email
        data["groups"] = list(self.groups)
        data["scopes"] = list(self.scopes)
        return data


def _pick_string(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def _token_text(value: Any) -> str:
    """Spell a non-string claim entry the way it appears in JSON (`true`, `null`, `1`)."""
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return json.dumps(value, default=str)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _to_trimmed_strings(values: Iterable[Any]) -> List[str]:
    seen: Dict[str, None] = {}
    for value in values:
        text = _token_text(value).strip()
        if text:
            seen.setdefault(text, None)
    return list(seen)


def _split(text: str, separators: Pattern[str]) -> List[str]:
    return [part.strip() for part in separators.split(text) if part.strip()]


def _parse_string_list(value: str, separators: Pattern[str]) -> List[Any]:
    trimmed = value.strip()
    if not trimmed:
        return []

    if not trimmed.startswith("["):
        return _split(trimmed, separators)

    # '["admin","editor"]'; NaN and Infinity are not JSON and take the fallback
    try:
        parsed = json.loads(trimmed, parse_constant=_reject_constant)
    except ValueError:
        parsed = None
    if isinstance(parsed, list):
        return parsed

    # '[admin]' or '[admin, editor]': not JSON, drop one bracket on each side
    logger.debug("Bracketed claim value is not a JSON array, splitting it instead")
    inner = trimmed[1:]
    if inner.endswith("]"):
        inner = inner[:-1]
    inner = inner.strip()
    if not inner:
        return []
    return _split(inner, separators)


def normalize_claim_values(value: Any, separators: Pattern[str]) -> List[str]:
    """Turn a list, a delimited string or a JSON array string into unique tokens.

    Any other type (numbers, booleans, None, dicts) yields no tokens.
    """
    if isinstance(value, (list, tuple)):
        return _to_trimmed_strings(value)

    if isinstance(value, str):
        return _to_trimmed_strings(_parse_string_list(value, separators))

    return []


def normalize_groups(value: Any) -> List[str]:
    return normalize_claim_values(value, GROUP_SEPARATORS)


def normalize_scopes(value: Any) -> List[str]:
    """Scopes are space-delimited (`"openid profile email"`), never comma-split."""
    return normalize_claim_values(value, SCOPE_SEPARATORS)


def build_user_context(
    raw_claims: Mapping[str, Any],
    config: Optional[AuthConfig] = None,
) -> UserContext:
    """Build a `UserContext` from authorizer claims.

    Raises an unauthenticated `AuthError` when `sub` is missing, not a string
    or blank. Nothing else about the claims is fatal.
    """
    sub = _pick_string(raw_claims.get("sub"))
    if not sub:
        raise AuthError.unauthenticated("Missing sub claim")

    if config is None:
        config = get_config()

    return UserContext(
        sub=sub,
        groups=normalize_groups(raw_claims.get(config.group_claim_key)),
        scopes=normalize_scopes(raw_claims.get(config.scope_claim_key)),
        raw_claims=raw_claims,
        username=_pick_string(raw_claims.get("username")),
        email=_pick_string(raw_claims.get("email")),
    )
