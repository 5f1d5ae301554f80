# work_api/core/errors.py

from dataclasses import dataclass, field
from typing import Dict

from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException


@dataclass(frozen=True)
class ErrorStatusPolicy:
    """
    Maps the status code derived from a raised error to the one sent to the
    client. The default turns every 500 into a 400.
    """

    remap: Dict[int, int] = field(default_factory=lambda: {500: 400})

    def apply(self, status_code: int) -> int:
        return self.remap.get(status_code, status_code)


DEFAULT_ERROR_STATUS_POLICY = ErrorStatusPolicy()


def _format_validation_errors(errors) -> str:
    parts = []
    for err in errors:
        # drop the "body" / "path" prefix FastAPI puts in front of the location
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in ("body", "path", "query", "header", "cookie"):
            loc = loc[1:]
        where = ".".join(loc)
        parts.append(f"{where}: {err.get('msg')}" if where else str(err.get("msg")))
    return "; ".join(parts)


def get_status_code_from_error(error: Exception) -> int:
    if isinstance(error, StarletteHTTPException):
        return error.status_code
    if isinstance(error, (RequestValidationError, ValidationError)):
        return 400
    return 500


def get_message_from_error(error: Exception) -> str:
    if isinstance(error, (RequestValidationError, ValidationError)):
        return _format_validation_errors(error.errors())
    if isinstance(error, StarletteHTTPException):
        return str(error.detail)
    return str(error) or error.__class__.__name__


def is_client_error(error: Exception) -> bool:
    return isinstance(error, (StarletteHTTPException, RequestValidationError, ValidationError))
