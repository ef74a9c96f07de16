"""Authorization failures.

There are exactly two kinds, told apart by `AuthError.kind`:

- UNAUTHENTICATED (401): no usable identity could be established.
- FORBIDDEN (403): an identity exists but lacks a required group or scope.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict


class AuthErrorKind(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"


STATUS_CODES: Dict[AuthErrorKind, int] = {
    AuthErrorKind.UNAUTHENTICATED: 401,
    AuthErrorKind.FORBIDDEN: 403,
}


class AuthError(Exception):
    def __init__(self, kind: AuthErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]

    @property
    def is_unauthenticated(self) -> bool:
        return self.kind is AuthErrorKind.UNAUTHENTICATED

    @property
    def is_forbidden(self) -> bool:
        return self.kind is AuthErrorKind.FORBIDDEN

    @classmethod
    def unauthenticated(cls, message: str = "Unauthenticated") -> "AuthError":
        return cls(AuthErrorKind.UNAUTHENTICATED, message)

    @classmethod
    def forbidden(cls, message: str = "Forbidden") -> "AuthError":
        return cls(AuthErrorKind.FORBIDDEN, message)

    def __repr__(self) -> str:
        return f"AuthError(kind={self.kind.value!r}, message={self.message!r})"
