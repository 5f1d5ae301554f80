# work_api/models/works.py

import math
import re
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from work_api.core.output import ParseError, parse_integer

DATE_PATTERN = re.compile(r"([12]\d{3}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01]))")
DEFAULT_WORK_DATE = "2023-11-20"

UPDATE_WORKS_EXAMPLE = {
    "girlId": "12",
    "works": [
        {
            "close_time": "2020-12-13",
            "comment": "this is a comment",
            "leave": 10,
            "open_time": "2020-12-13",
            "created_at": "2023-12-07T08:24:39.634Z",
            "updated_at": "2023-12-07T08:24:39.634Z",
            "date": "2020-12-13",
            "shop_id": 25,
            "id": 12,
        }
    ],
}


class WorkIn(BaseModel):
    id: Optional[int] = None
    shop_id: int = Field(..., ge=0)
    open_time: str = Field(..., max_length=10)
    close_time: str = Field(..., max_length=10)
    comment: str
    leave: float
    date: str = DEFAULT_WORK_DATE
    created_at: datetime
    updated_at: datetime

    @field_validator("date")
    @classmethod
    def check_date(cls, value: str) -> str:
        if not DATE_PATTERN.search(value):
            raise ValueError("must be YYYY-MM-DD")
        return value


class UpdateWorksInput(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"examples": [UPDATE_WORKS_EXAMPLE]},
    )

    girl_id: int = Field(..., alias="girlId")
    works: List[WorkIn]

    @field_validator("girl_id", mode="before")
    @classmethod
    def parse_number_param(cls, value):
        """girlId travels as a numeric string and is used as an int."""
        if not isinstance(value, str):
            raise ValueError("girlId must be a string")
        try:
            number = float(value)
        except ValueError:
            number = math.nan
        if not math.isfinite(number):
            raise ValueError(f"{value} is not a number")
        try:
            return parse_integer(value, "girlId")
        except ParseError as exc:
            # finite numbers like ".5" that do not start with an integer
            raise ValueError(f"{value} is not a number") from exc
