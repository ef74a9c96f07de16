"""Group and scope checks against a `UserContext`.

The `user_*` / `has_*` functions are plain predicates. `require_groups` and
`require_scopes` raise a forbidden `AuthError` instead, and return the user
unchanged on success so checks can be chained::

    require_scopes(require_groups(user, "admins"), ["orders:write"])
"""

from __future__ import annotations

from typing import Iterable, List, Union

from .claims import UserContext
from .errors import AuthError


Requirement = Union[str, Iterable[str]]


def _as_list(required: Requirement) -> List[str]:
    if isinstance(required, str):
        return [required]
    return list(required)


def user_in_group(user: UserContext, group: str) -> bool:
    return group in user.groups


def user_in_any_group(user: UserContext, groups: Iterable[str]) -> bool:
    return any(user_in_group(user, group) for group in groups)


def has_scope(user: UserContext, scope: str) -> bool:
    return scope in user.scopes


def has_any_scope(user: UserContext, scopes: Iterable[str]) -> bool:
    return any(has_scope(user, scope) for scope in scopes)


def require_groups(user: UserContext, required: Requirement) -> UserContext:
    """Require membership in at least one of `required`. An empty list allows everyone."""
    groups = _as_list(required)
    if not groups:
        return user

    if not user_in_any_group(user, groups):
        raise AuthError.forbidden("User is not in the required group")

    return user


def require_scopes(user: UserContext, required: Requirement) -> UserContext:
    """Require at least one of `required` scopes. An empty list allows everyone."""
    scopes = _as_list(required)
    if not scopes:
        return user

    if not has_any_scope(user, scopes):
        raise AuthError.forbidden("User does not have the required scope")

    return user
