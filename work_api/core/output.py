# work_api/core/output.py
"""
Shaping of endpoint outputs into (status code, body) pairs.

Handlers return either a tagged variant (``Single`` / ``Collection``) or a
plain mapping with ``statusCode``, ``item`` and ``items`` keys. The result
handler turns that into a ``Success`` or a ``Failure`` without raising.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel

DEFAULT_SUCCESS_STATUS_CODE = 200
CONTRACT_VIOLATION_STATUS_CODE = 500

# leading whitespace, optional sign, then the digits we keep
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class ParseError(ValueError):
    pass


@dataclass(frozen=True)
class Single:
    value: Any
    status_code: Optional[str] = None


@dataclass(frozen=True)
class Collection:
    values: Sequence[Any]
    status_code: Optional[str] = None


@dataclass(frozen=True)
class Success:
    status_code: int
    body: Any


@dataclass(frozen=True)
class Failure:
    status_code: int
    message: str


NormalizedResponse = Union[Success, Failure]


def parse_integer(value: Any, field_name: str = "number") -> int:
    """
    Parse a textual integer the lenient way: the longest leading numeric
    prefix wins, so "201 Created" gives 201. The result is not range-checked.
    """
    if not value or not isinstance(value, str):
        raise ParseError(
            f"{field_name} is empty or is not a type that can be converted"
        )

    match = _INT_PREFIX.match(value)
    if match is None:
        raise ParseError(f"Cannot parse {field_name} into integer")

    return int(match.group(1))


def safe_parse_success_status_code(value: Any, strict: bool = False) -> int:
    try:
        status_code = parse_integer(value, "statusCode")
    except ParseError:
        return DEFAULT_SUCCESS_STATUS_CODE

    if strict and not 100 <= status_code <= 599:
        return DEFAULT_SUCCESS_STATUS_CODE
    return status_code


def _empty_output_message(output: Any) -> str:
    return (
        "Output of this endpoint can't be empty, please recheck your code, "
        f"current output: {json.dumps(output)}"
    )


MISSING_ITEM_MESSAGE = (
    "Either 'item' or 'items' must be defined in the output schema in "
    "endpoint. Please revalidate your code"
)


def transform_endpoint_output(
    output: Union[Single, Collection, Mapping[str, Any], BaseModel, None],
    strict: bool = False,
) -> NormalizedResponse:
    """
    Normalize a handler's output.

    First match wins: empty output, then a single item, then a list of items.
    Anything else is a contract violation reported as a 500 ``Failure``.
    """
    if output is None:
        return Failure(CONTRACT_VIOLATION_STATUS_CODE, _empty_output_message(output))

    if isinstance(output, Single):
        if output.value is not None:
            return Success(
                safe_parse_success_status_code(output.status_code, strict),
                output.value,
            )
        return Failure(CONTRACT_VIOLATION_STATUS_CODE, MISSING_ITEM_MESSAGE)

    if isinstance(output, Collection):
        if isinstance(output.values, (list, tuple)):
            return Success(
                safe_parse_success_status_code(output.status_code, strict),
                list(output.values),
            )
        return Failure(CONTRACT_VIOLATION_STATUS_CODE, MISSING_ITEM_MESSAGE)

    if isinstance(output, BaseModel):
        output = output.model_dump(mode="json")

    if not isinstance(output, Mapping):
        return Failure(CONTRACT_VIOLATION_STATUS_CODE, MISSING_ITEM_MESSAGE)

    status_code = output.get("statusCode")
    item = output.get("item")
    items = output.get("items")

    if item is not None:
        return Success(safe_parse_success_status_code(status_code, strict), item)

    if isinstance(items, (list, tuple)):
        items_list: List[Any] = list(items)
        return Success(safe_parse_success_status_code(status_code, strict), items_list)

    return Failure(CONTRACT_VIOLATION_STATUS_CODE, MISSING_ITEM_MESSAGE)
