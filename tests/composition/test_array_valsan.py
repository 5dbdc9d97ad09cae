# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""
Tests for ArrayValSan.

Key behaviors to verify:
1. every element is checked, bad elements do not stop the run
2. errors are tagged [i] (or [i].path) and kept in index order
3. only lists and tuples count as arrays
"""
from __future__ import annotations

import pytest

from valsan import ArrayValSan, ConfigurationError, ObjectValSan, ValSan
from valsan.primitives import (
    IntegerValidator,
    MinLengthValidator,
    StringToNumberValSan,
    TrimSanitizer,
)


@pytest.mark.anyio
async def test_bad_element_is_tagged_with_its_index():
    result = await ArrayValSan(schema=IntegerValidator()).run([1, "not-a-number", 3])

    assert result.success is False
    assert [e.field for e in result.errors] == ["[1]"]
    assert result.errors[0].code == "number"


@pytest.mark.anyio
async def test_every_bad_element_is_reported_in_order():
    result = await ArrayValSan(schema=IntegerValidator()).run([1, 2.5, "x", 4, 5.5])

    assert [(e.field, e.code) for e in result.errors] == [
        ("[1]", "NUMBER_NOT_INTEGER"),
        ("[2]", "number"),
        ("[4]", "NUMBER_NOT_INTEGER"),
    ]


@pytest.mark.anyio
async def test_sanitized_elements_keep_their_order():
    result = await ArrayValSan(schema=StringToNumberValSan()).run(["3", " 1 ", "2.5"])

    assert result.success is True
    assert result.data == [3, 1, 2.5]


@pytest.mark.anyio
async def test_tuple_input_becomes_a_list():
    result = await ArrayValSan(schema=TrimSanitizer()).run((" a ", "b "))

    assert result.data == ["a", "b"]


@pytest.mark.anyio
async def test_empty_array_is_valid():
    result = await ArrayValSan(schema=IntegerValidator()).run([])

    assert result.success is True
    assert result.data == []


@pytest.mark.anyio
@pytest.mark.parametrize("value", ["abc", {"0": 1}, 7, b"bytes"])
async def test_non_array_is_rejected(value):
    result = await ArrayValSan(schema=TrimSanitizer()).run(value)

    assert result.success is False
    assert [(e.code, e.field) for e in result.errors] == [("array", None)]
    assert result.errors[0].message == "Value must be a valid array"


@pytest.mark.anyio
async def test_nested_object_errors_get_index_prefix():
    people = ArrayValSan(
        schema=ObjectValSan(
            schema={
                "name": MinLengthValidator(min_length=2),
                "age": StringToNumberValSan(),
            }
        )
    )

    result = await people.run(
        [
            {"name": "Ada", "age": "36"},
            {"name": "B", "age": "x"},
        ]
    )

    assert [(e.field, e.code) for e in result.errors] == [
        ("[1].name", "STRING_TOO_SHORT"),
        ("[1].age", "number"),
    ]


@pytest.mark.anyio
async def test_array_inside_object_gets_key_then_index():
    unit = ObjectValSan(schema={"tags": ArrayValSan(schema=MinLengthValidator(min_length=2))})

    result = await unit.run({"tags": ["ok", "x"]})

    assert result.errors[0].field == "tags.[1]"


@pytest.mark.anyio
async def test_none_element_rejected_by_required_child():
    result = await ArrayValSan(schema=TrimSanitizer()).run(["a", None])

    assert [(e.field, e.code) for e in result.errors] == [("[1]", "required")]


@pytest.mark.anyio
async def test_none_element_kept_by_optional_child():
    result = await ArrayValSan(schema=TrimSanitizer(is_optional=True)).run([" a ", None])

    assert result.success is True
    assert result.data == ["a", None]


@pytest.mark.anyio
async def test_input_list_is_not_mutated():
    payload = [" a ", " b "]

    await ArrayValSan(schema=TrimSanitizer()).run(payload)

    assert payload == [" a ", " b "]


@pytest.mark.anyio
async def test_concurrent_run_matches_sequential_run():
    payload = ["1", "x", "3", "", "5"]
    sequential = ArrayValSan(schema=StringToNumberValSan())
    concurrent = ArrayValSan(schema=StringToNumberValSan(), concurrent=True)

    assert await concurrent.run(payload) == await sequential.run(payload)
    assert await concurrent.run(["1", "2"]) == await sequential.run(["1", "2"])


def test_schema_must_be_a_unit():
    with pytest.raises(ConfigurationError):
        ArrayValSan()
    with pytest.raises(ConfigurationError):
        ArrayValSan(schema="not a unit")


def test_metadata_and_rules():
    unit = ArrayValSan(schema=TrimSanitizer())

    assert unit.type == "array"
    assert unit.schema is not None
    assert list(unit.rules()) == ["array"]


class ExplodingValSan(ValSan):
    async def validate(self, value):
        raise ValueError(f"cannot check {value}")

    async def sanitize(self, value):
        return value


@pytest.mark.anyio
@pytest.mark.parametrize("concurrent", [False, True])
async def test_child_exception_propagates_unwrapped(concurrent):
    unit = ArrayValSan(schema=ExplodingValSan(), concurrent=concurrent)

    with pytest.raises(ValueError, match="cannot check 1"):
        await unit.run([1, 2])
