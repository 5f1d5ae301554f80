# work_api/api/work.py

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from work_api.core.docs import negative_response, positive_response
from work_api.core.endpoint import EndpointContext, run_endpoint
from work_api.core.output import Single
from work_api.models.responses import (
    BadRequestResponse,
    HelloOutput,
    UnauthorizedResponse,
)
from work_api.models.works import UPDATE_WORKS_EXAMPLE, UpdateWorksInput

router = APIRouter(prefix="/work", tags=["work"])

HELLO_MESSAGE = "Hello, World. Happy coding!"

NEGATIVE_RESPONSES = {
    **negative_response(400, BadRequestResponse, "Bad Request"),
    **negative_response(401, UnauthorizedResponse, "Unauthorized"),
}


async def hello_world(input: UpdateWorksInput, context: EndpointContext) -> Single:
    context.logger.debug("Options: %s", context.options)
    return Single(HELLO_MESSAGE)


@router.put(
    "/hello/{myId}",
    responses={**positive_response(HelloOutput), **NEGATIVE_RESPONSES},
)
async def put_hello(
    myId: str,
    request: Request,
    body: UpdateWorksInput = Body(
        ..., openapi_examples={"works": {"summary": "One work", "value": UPDATE_WORKS_EXAMPLE}}
    ),
) -> JSONResponse:
    """
    Update the works of a girl. Answers with a greeting for now.
    """
    context = EndpointContext(options={"myId": myId})
    return await run_endpoint(hello_world, body, context, request)
