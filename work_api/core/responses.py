# work_api/core/responses.py
"""
Result handling shared by every endpoint.

Successful outputs go out unwrapped: the body is exactly the ``item`` or
``items`` value. Contract violations and raised errors go out as
``{"message": ...}``.
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from work_api.core.errors import (
    DEFAULT_ERROR_STATUS_POLICY,
    ErrorStatusPolicy,
    get_message_from_error,
    get_status_code_from_error,
)
from work_api.core.output import Failure, transform_endpoint_output
from work_api.models.responses import MessageResponse

logger = logging.getLogger(__name__)


def message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=MessageResponse(message=message).model_dump())


def output_response(output: Any, strict: bool = False) -> JSONResponse:
    result = transform_endpoint_output(output, strict=strict)

    if isinstance(result, Failure):
        logger.error("Endpoint output violates the item/items contract: %s", result.message)
        return message_response(result.status_code, result.message)

    return JSONResponse(status_code=result.status_code, content=jsonable_encoder(result.body))


def error_response(
    error: Exception, policy: ErrorStatusPolicy = DEFAULT_ERROR_STATUS_POLICY
) -> JSONResponse:
    status_code = policy.apply(get_status_code_from_error(error))
    return message_response(status_code, get_message_from_error(error))


def policy_for(request: Request) -> ErrorStatusPolicy:
    return getattr(request.app.state, "error_status_policy", DEFAULT_ERROR_STATUS_POLICY)


async def handle_client_error(request: Request, exc: Exception) -> JSONResponse:
    logger.debug("%s %s failed: %s", request.method, request.url.path, exc)
    return error_response(exc, policy_for(request))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error in %s %s", request.method, request.url.path)
    return error_response(exc, policy_for(request))
