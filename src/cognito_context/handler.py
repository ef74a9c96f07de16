from __future__ import annotations

import functools
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

from .core.auth import user_context_from_event
from .core.claims import UserContext
from .core.config import AuthConfig
from .core.errors import AuthError
from .core.response import error_response, unauthenticated_response


logger = logging.getLogger(__name__)

Response = Dict[str, Any]
UserHandler = Callable[
    [Mapping[str, Any], UserContext],
    Union[Response, Awaitable[Response]],
]


def with_user_context(
    handler: UserHandler,
    *,
    config: Optional[AuthConfig] = None,
) -> Callable[[Mapping[str, Any]], Awaitable[Response]]:
    """Wrap `handler(event, user)` so auth failures become 401/403 responses.

    The caller is resolved from the event first; if that fails the handler is
    never called. An `AuthError` raised by the handler (usually from
    `require_groups` / `require_scopes`) is mapped by its kind. Any other
    exception propagates. A successful response is returned untouched.
    """

    @functools.wraps(handler)
    async def wrapped(event: Mapping[str, Any]) -> Response:
        try:
            user = user_context_from_event(event, config)
        except AuthError as error:
            logger.info("Rejecting request (%s): %s", error.kind.value, error.message)
            return unauthenticated_response(event)

        try:
            result = handler(event, user)
            if inspect.isawaitable(result):
                result = await result
        except AuthError as error:
            logger.info("Rejecting request (%s): %s", error.kind.value, error.message)
            return error_response(error, event)

        return result

    return wrapped
