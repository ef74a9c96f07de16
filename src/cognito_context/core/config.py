"""Claim key configuration.

Which claims carry group and scope information is a per-deployment policy.
It is usually set once at cold start, either through `configure_auth` or by
building an `AuthConfig` and passing it down explicitly.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Optional


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthConfig:
    group_claim_key: str = "cognito:groups"
    scope_claim_key: str = "scope"


DEFAULT_CONFIG = AuthConfig()

_current_config: AuthConfig = DEFAULT_CONFIG


def configure_auth(
    *,
    group_claim_key: Optional[str] = None,
    scope_claim_key: Optional[str] = None,
) -> AuthConfig:
    """Merge the given keys over the current config and return the result.

    Keys left as None keep their current value.
    """
    global _current_config

    changes = {}
    if group_claim_key is not None:
        changes["group_claim_key"] = group_claim_key
    if scope_claim_key is not None:
        changes["scope_claim_key"] = scope_claim_key

    _current_config = dataclasses.replace(_current_config, **changes)
    logger.info(
        "Auth config updated: group_claim_key=%s scope_claim_key=%s",
        _current_config.group_claim_key,
        _current_config.scope_claim_key,
    )
    return _current_config


def get_config() -> AuthConfig:
    """Return the current process-wide config (an immutable snapshot)."""
    return _current_config


def reset_config() -> None:
    global _current_config
    _current_config = DEFAULT_CONFIG
