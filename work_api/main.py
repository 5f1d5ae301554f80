from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from work_api.api.work import router as work_router
from work_api.config import Settings, configure_logging, get_settings
from work_api.core.docs import docs_router
from work_api.core.errors import DEFAULT_ERROR_STATUS_POLICY, ErrorStatusPolicy
from work_api.core.responses import (
    handle_client_error,
    handle_unexpected_error,
    message_response,
)


async def not_found(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404 and exc.detail == "Not Found":
        return message_response(404, f"Can not {request.method} {request.url.path}")
    return await handle_client_error(request, exc)


def create_app(
    settings: Optional[Settings] = None,
    error_status_policy: ErrorStatusPolicy = DEFAULT_ERROR_STATUS_POLICY,
) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.title,
        version=settings.version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.error_status_policy = error_status_policy

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, handle_client_error)
    app.add_exception_handler(StarletteHTTPException, not_found)
    app.add_exception_handler(Exception, handle_unexpected_error)

    @app.get("/health", include_in_schema=False)
    def health_check():
        return {"status": "ok"}

    app.include_router(work_router)

    # the document is generated here, after every route is registered
    app.include_router(docs_router(app, settings))

    return app


settings = get_settings()
configure_logging(settings)
app = create_app(settings)
