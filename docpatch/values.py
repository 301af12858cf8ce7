# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Helpers for working with json values as plain python objects.

A json value is one of None, bool, int/float, str, list or dict
with string keys, arbitrarily nested. Every helper here dispatches
on `kind_of`, which puts any such value in exactly one JsonKind.
"""

import copy
import enum
import json


# Sentinel to allow None (json null) as a value
Missing = object()


class JsonKind(enum.Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value):
    "Classify a json value. Note that bool is checked before int."
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError("Not a json value: {!r} of type {}".format(
        value, type(value).__name__))


def is_container(value):
    return kind_of(value) in (JsonKind.ARRAY, JsonKind.OBJECT)


def loads(text):
    "Parse json text into a value."
    return json.loads(text)


def dumps(value, indent=None):
    "Serialize a value to json text, compact unless indent is given."
    if indent is None:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(value, indent=indent, separators=(",", ": "), ensure_ascii=False)


def canonical_text(value):
    """Return the canonical textual form of a value.

    Compact and with sorted keys, so two structurally equal
    objects give the same text regardless of key order.
    """
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def clone(value):
    "Deep copy a value, so the result shares no containers with the input."
    return copy.deepcopy(value)


def id_of(value, id_key="id"):
    "Return the string id member of an object, or None."
    if kind_of(value) is not JsonKind.OBJECT:
        return None
    ident = value.get(id_key)
    if isinstance(ident, str):
        return ident
    return None


def have_equal_ids(a, b, id_key="id"):
    ida = id_of(a, id_key)
    return ida is not None and ida == id_of(b, id_key)


def values_equal(a, b, id_aware=False, id_key="id"):
    """Structural equality of two json values.

    With id_aware, two objects carrying equal string ids under
    id_key are considered equal whatever their other members are.
    The id shortcut only applies at this level, nested values are
    always compared in full.
    """
    ka = kind_of(a)
    kb = kind_of(b)
    if ka is not kb:
        return False

    if ka is JsonKind.OBJECT:
        if id_aware and have_equal_ids(a, b, id_key):
            return True
        if a.keys() != b.keys():
            return False
        return all(values_equal(a[k], b[k]) for k in a)
    elif ka is JsonKind.ARRAY:
        if len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))
    else:
        return a == b


def child(node, segment):
    """Navigate one step into node.

    segment is a pointer segment (str) or an array index (int).
    Returns Missing rather than raising when the step does not resolve.
    """
    kind = kind_of(node)
    if kind is JsonKind.OBJECT:
        if not isinstance(segment, str):
            segment = str(segment)
        return node.get(segment, Missing)
    elif kind is JsonKind.ARRAY:
        index = as_index(segment)
        if index is None or index >= len(node):
            return Missing
        return node[index]
    return Missing


def as_index(segment):
    "Convert a segment to a non-negative array index, or None if it isn't one."
    if isinstance(segment, bool):
        return None
    if isinstance(segment, int):
        return segment if segment >= 0 else None
    if isinstance(segment, str) and segment.isdigit() and segment.isascii():
        # Array indices have no leading zeros
        if len(segment) > 1 and segment.startswith("0"):
            return None
        return int(segment)
    return None
