import pytest
from pydantic import BaseModel

from work_api.core.output import (
    Collection,
    Failure,
    ParseError,
    Single,
    Success,
    parse_integer,
    safe_parse_success_status_code,
    transform_endpoint_output,
)


@pytest.mark.parametrize(
    "value, expected",
    [("404", 404), ("201", 201), ("201 Created", 201), ("  42", 42), ("-5", -5), ("999", 999)],
)
def test_parse_integer_reads_leading_digits(value, expected):
    assert parse_integer(value) == expected


@pytest.mark.parametrize("value", [None, "", 42, 4.2, ["200"]])
def test_parse_integer_rejects_empty_or_non_string(value):
    with pytest.raises(ParseError, match="is empty or is not a type"):
        parse_integer(value)


def test_parse_integer_rejects_text_without_digits():
    with pytest.raises(ParseError, match="Cannot parse statusCode into integer"):
        parse_integer("abc", "statusCode")


@pytest.mark.parametrize(
    "value, expected",
    [("abc", 200), ("404", 404), (42, 200), (None, 200), ("", 200), ("-1", -1)],
)
def test_safe_parse_success_status_code(value, expected):
    assert safe_parse_success_status_code(value) == expected


def test_safe_parse_strict_rejects_out_of_range():
    assert safe_parse_success_status_code("700", strict=True) == 200
    assert safe_parse_success_status_code("-1", strict=True) == 200
    assert safe_parse_success_status_code("204", strict=True) == 204


def test_item_without_status_code_defaults_to_200():
    item = {"id": 1, "name": "shop"}
    assert transform_endpoint_output({"item": item}) == Success(200, item)


def test_item_with_status_code_override():
    assert transform_endpoint_output({"item": "x", "statusCode": "201"}) == Success(201, "x")


@pytest.mark.parametrize("item", [0, False, "", []])
def test_falsy_item_is_still_an_item(item):
    assert transform_endpoint_output({"item": item}) == Success(200, item)


def test_items_keep_order_and_length():
    items = [3, 1, 2]
    result = transform_endpoint_output({"items": items})
    assert result == Success(200, [3, 1, 2])


def test_empty_items_are_a_success():
    assert transform_endpoint_output({"items": []}) == Success(200, [])


def test_item_wins_over_items():
    assert transform_endpoint_output({"item": "a", "items": ["b"]}) == Success(200, "a")


def test_empty_output_is_a_contract_violation():
    result = transform_endpoint_output(None)
    assert isinstance(result, Failure)
    assert result.status_code == 500
    assert "empty" in result.message
    assert result.message.endswith("current output: null")


@pytest.mark.parametrize("output", [{}, {"item": None}, {"items": "abc"}, {"statusCode": "201"}, "text"])
def test_missing_item_and_items_is_a_contract_violation(output):
    result = transform_endpoint_output(output)
    assert isinstance(result, Failure)
    assert result.status_code == 500
    assert "'item'" in result.message and "'items'" in result.message


def test_tagged_variants():
    assert transform_endpoint_output(Single("hi")) == Success(200, "hi")
    assert transform_endpoint_output(Single("hi", status_code="202")) == Success(202, "hi")
    assert transform_endpoint_output(Collection((1, 2), status_code="abc")) == Success(200, [1, 2])
    assert isinstance(transform_endpoint_output(Single(None)), Failure)


@pytest.mark.parametrize("values", [None, "abc", {"a": 1}, 5])
def test_collection_of_non_sequence_is_a_contract_violation(values):
    result = transform_endpoint_output(Collection(values))
    assert isinstance(result, Failure)
    assert result.status_code == 500
    assert "'item'" in result.message and "'items'" in result.message


def test_pydantic_output_is_dumped_first():
    class Output(BaseModel):
        items: list

    assert transform_endpoint_output(Output(items=[1])) == Success(200, [1])


def test_strict_mode_flows_through():
    assert transform_endpoint_output({"item": 1, "statusCode": "1000"}, strict=True) == Success(200, 1)
    assert transform_endpoint_output({"item": 1, "statusCode": "1000"}) == Success(1000, 1)
