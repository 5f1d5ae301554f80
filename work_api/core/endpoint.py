# work_api/core/endpoint.py

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict

from fastapi import Request
from fastapi.responses import JSONResponse

from work_api.core.errors import is_client_error
from work_api.core.responses import error_response, output_response, policy_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EndpointContext:
    """Per-request values handed to a handler alongside its validated input."""

    options: Dict[str, Any] = field(default_factory=dict)
    logger: logging.Logger = logger


Handler = Callable[[Any, EndpointContext], Awaitable[Any]]


async def run_endpoint(
    handler: Handler, input: Any, context: EndpointContext, request: Request
) -> JSONResponse:
    """
    Call *handler* and turn whatever it returns, or raises, into the response.
    This is the one place a request's errors are converted for the client.
    """
    settings = getattr(request.app.state, "settings", None)
    strict = bool(settings and settings.strict_status_codes)

    try:
        output = await handler(input, context)
    except Exception as exc:
        name = getattr(handler, "__name__", handler)
        if is_client_error(exc):
            logger.debug(
                "Handler %s rejected %s %s: %s", name, request.method, request.url.path, exc
            )
        else:
            logger.exception("Handler %s failed for %s %s", name, request.method, request.url.path)
        return error_response(exc, policy_for(request))

    return output_response(output, strict=strict)
