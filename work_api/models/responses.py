# work_api/models/responses.py

from typing import Literal

from pydantic import BaseModel, ConfigDict


class HelloOutput(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={"examples": [{"item": "Hello, World. Happy coding!"}]}
    )

    item: str


class MessageResponse(BaseModel):
    message: str


class BadRequestResponse(BaseModel):
    status: Literal["Bad Request"]


class UnauthorizedResponse(BaseModel):
    # misspelling kept, existing clients match on it
    status: Literal["Unauthorizie"]
