# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from docpatch.values import (
    JsonKind, Missing, kind_of, is_container, dumps, loads, canonical_text,
    clone, id_of, values_equal, child, as_index,
)


def test_kind_of():
    assert kind_of(None) is JsonKind.NULL
    assert kind_of(True) is JsonKind.BOOLEAN
    assert kind_of(False) is JsonKind.BOOLEAN
    assert kind_of(0) is JsonKind.NUMBER
    assert kind_of(1.5) is JsonKind.NUMBER
    assert kind_of("") is JsonKind.STRING
    assert kind_of([]) is JsonKind.ARRAY
    assert kind_of({}) is JsonKind.OBJECT

    assert is_container([1])
    assert is_container({})
    assert not is_container("[]")

    with pytest.raises(TypeError):
        kind_of(object())
    with pytest.raises(TypeError):
        kind_of((1, 2))


def test_dumps_and_canonical_text():
    assert dumps({"b": 1, "a": [1, 2]}) == '{"b":1,"a":[1,2]}'
    assert canonical_text({"b": 1, "a": [1, 2]}) == '{"a":[1,2],"b":1}'
    assert dumps("æøå") == '"æøå"'
    assert loads(dumps({"x": [None, True, 1.5]})) == {"x": [None, True, 1.5]}
    assert dumps([1], indent=2) == '[\n  1\n]'


def test_clone_shares_nothing():
    a = {"x": [{"y": 1}]}
    b = clone(a)
    assert b == a
    b["x"][0]["y"] = 2
    assert a["x"][0]["y"] == 1


def test_values_equal():
    assert values_equal({"a": 1, "b": [1, 2]}, {"b": [1, 2], "a": 1})
    assert not values_equal({"a": 1}, {"a": 1, "b": 2})
    assert not values_equal([1, 2], [2, 1])
    assert not values_equal([1], [1, 1])
    assert values_equal(None, None)

    # bool is not a number
    assert not values_equal(True, 1)
    assert not values_equal(0, False)
    assert not values_equal([0], [False])


def test_values_equal_id_aware():
    a = {"id": "1", "name": "a"}
    b = {"id": "1", "name": "b"}
    assert not values_equal(a, b)
    assert values_equal(a, b, id_aware=True)
    assert values_equal({"key": "x", "v": 1}, {"key": "x"}, id_aware=True, id_key="key")

    # ids must be strings
    assert not values_equal({"id": 1, "v": 1}, {"id": 1, "v": 2}, id_aware=True)
    assert not values_equal({"id": "1"}, {"id": "2"}, id_aware=True)

    # Only applies to the compared values themselves
    assert not values_equal([a], [b], id_aware=True)

    assert id_of(a) == "1"
    assert id_of("1") is None
    assert id_of({"id": None}) is None


def test_child():
    doc = {"a": [10, 20], "1": "one"}
    assert child(doc, "a") == [10, 20]
    assert child(doc, "b") is Missing
    assert child(doc, 1) == "one"
    assert child(doc["a"], "1") == 20
    assert child(doc["a"], 0) == 10
    assert child(doc["a"], "2") is Missing
    assert child(doc["a"], "-") is Missing
    assert child(doc["a"], "x") is Missing
    assert child("scalar", "x") is Missing

    # null is a value, not a missing one
    assert child({"n": None}, "n") is None


def test_as_index():
    assert as_index("0") == 0
    assert as_index("12") == 12
    assert as_index(3) == 3
    assert as_index(-1) is None
    assert as_index("-1") is None
    assert as_index("-") is None
    assert as_index("1a") is None
    assert as_index("") is None
    assert as_index(True) is None
    assert as_index("٣") is None
    # Leading zeros are not allowed
    assert as_index("01") is None
    assert as_index("00") is None
    assert child([10, 20], "01") is Missing
