from __future__ import annotations

import math

import pytest

from jsurl import deserialize, serialize

VALUES: list[object] = [
    None,
    True,
    False,
    0,
    -42,
    2**80,
    3.25,
    -0.0,
    1e-300,
    1.7976931348623157e308,
    "",
    "plain",
    "~()'*!$ mixed punctuation",
    "caf\xe9 ☃ \U0001f600 \U0010ffff",
    [],
    {},
    [[], {}, [[]], [{}]],
    {"a": {"b": {"c": [1, "two", 3.0, None]}}},
    {"z": 1, "y": 2, "x": 3},
    {"key with spaces": "value~with~tildes", "$": "$$"},
    {"name": "John Doe", "age": 42, "children": ["Mary", "Bill"]},
]


@pytest.mark.parametrize("value", VALUES)
def test_round_trip(value: object) -> None:
    decoded = deserialize(serialize(value))
    assert decoded == value
    assert type(decoded) is type(value)


def test_round_trip_preserves_key_order() -> None:
    value = {"z": 1, "a": 2, "m": 3}
    assert list(deserialize(serialize(value))) == ["z", "a", "m"]


def test_round_trip_keeps_integer_float_distinction() -> None:
    decoded = deserialize(serialize([1, 1.0, -0.0]))
    assert [type(item) for item in decoded] == [int, float, float]
    assert math.copysign(1.0, decoded[2]) == -1.0


def test_tuples_come_back_as_lists() -> None:
    assert deserialize(serialize((1, (2, 3)))) == [1, [2, 3]]


def test_empty_containers() -> None:
    assert serialize([]) == "~(~)"
    assert serialize({}) == "~()"
    assert deserialize("~(~)") == []
    assert deserialize("~()") == {}


def test_non_finite_floats_degrade_to_null() -> None:
    assert deserialize(serialize({"x": math.inf})) == {"x": None}
