# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Addressing of locations in a json document.

Two dialects are supported:

 - json pointers, e.g. '/books/0/title', with '-' as the last
   segment addressing the position after the last array item.

 - a small subset of JSONPath for selecting array items by
   predicate, e.g. "$.books[?(@.author == 'John Steinbeck')]"
   or "$.tags[?(@ == 'draft')]". A query can match any number
   of locations.
"""

from collections import namedtuple
import re

import jsonpointer

from .log import PatchFormatError
from .patch_format import UnsupportedQueryError, is_query_path
from .values import JsonKind, Missing, child, kind_of


# Pointer segment addressing the end of an array
APPEND = "-"


# A matched location. parent is None for the document root,
# key is an object key (str) or array index (int).
Location = namedtuple("Location", ("parent", "key", "value"))


def escape_segment(segment):
    "Escape a key for use as a pointer segment."
    return jsonpointer.escape(str(segment))


def unescape_segment(segment):
    return jsonpointer.unescape(segment)


def split_pointer(path):
    """Split a pointer on the form '/foo/bar' into ['foo', 'bar'].

    Only the empty pointer addresses the root, '/' addresses the
    member with the empty key.
    """
    try:
        return jsonpointer.JsonPointer(path).parts
    except jsonpointer.JsonPointerException as e:
        raise PatchFormatError("Invalid pointer {!r}: {}".format(path, e)) from e


def join_pointer(*segments):
    "Join segments on the form ['foo', 0] into '/foo/0'."
    if len(segments) == 1 and isinstance(segments[0], (list, tuple)):
        segments = segments[0]
    return "".join("/" + escape_segment(s) for s in segments)


def extend_pointer(path, segment):
    return path + "/" + escape_segment(segment)


def is_nested_pointer(parent, path):
    "Return True if path addresses a location strictly below parent."
    a = split_pointer(parent)
    b = split_pointer(path)
    return len(b) > len(a) and b[:len(a)] == a


def resolve_pointer(tree, path):
    """Return the value at path, or Missing if it doesn't resolve."""
    node = tree
    for segment in split_pointer(path):
        node = child(node, segment)
        if node is Missing:
            break
    return node


# --- Filtered queries ---

_step_re = re.compile(r"^(?P<name>[^\[\]]*)(?:\[(?P<selector>.*)\])?$", re.DOTALL)

_filter_re = re.compile(r"^\?\((?P<predicate>.*)\)$", re.DOTALL)

_literal = r"""(?:'(?P<single>[^']*)'|"(?P<double>[^"]*)")"""

_field_predicate_re = re.compile(
    r"^@(?P<field>(?:\.[^\s.=!<>'\"()\[\]]+)+)\s*==\s*" + _literal + r"$")

_self_predicate_re = re.compile(r"^@\s*==\s*" + _literal + r"$")


QueryStep = namedtuple("QueryStep", ("name", "predicate"))


class FieldEquals(namedtuple("FieldEquals", ("fields", "literal"))):
    "Predicate @.field == 'literal', field may be a dotted chain."
    __slots__ = ()

    def __call__(self, candidate):
        node = candidate
        for field in self.fields:
            if kind_of(node) is not JsonKind.OBJECT:
                return False
            node = node.get(field, Missing)
            if node is Missing:
                return False
        return isinstance(node, str) and node == self.literal


class SelfEquals(namedtuple("SelfEquals", ("literal",))):
    "Predicate @ == 'literal'."
    __slots__ = ()

    def __call__(self, candidate):
        return isinstance(candidate, str) and candidate == self.literal


def _literal_value(m):
    single = m.group("single")
    return single if single is not None else m.group("double")


def parse_predicate(text):
    text = text.strip()
    m = _field_predicate_re.match(text)
    if m:
        fields = tuple(m.group("field").split(".")[1:])
        return FieldEquals(fields, _literal_value(m))
    m = _self_predicate_re.match(text)
    if m:
        return SelfEquals(_literal_value(m))
    raise UnsupportedQueryError(
        "Unsupported query predicate {!r}, only @.field == '...' "
        "and @ == '...' are supported.".format(text))


def _split_steps(body):
    """Split the query body on '.' outside of brackets and quotes."""
    steps = []
    current = []
    depth = 0
    quote = None
    for c in body:
        if quote:
            if c == quote:
                quote = None
        elif c in ("'", '"'):
            if depth == 0:
                raise PatchFormatError("Quote outside of brackets in query {!r}.".format(body))
            quote = c
        elif c == "[":
            depth += 1
        elif c == "]":
            depth -= 1
            if depth < 0:
                raise PatchFormatError("Unbalanced brackets in query {!r}.".format(body))
        elif c == "." and depth == 0:
            steps.append("".join(current))
            current = []
            continue
        current.append(c)
    if depth != 0 or quote:
        raise PatchFormatError("Unterminated bracket or quote in query {!r}.".format(body))
    steps.append("".join(current))
    return steps


def parse_query(path):
    """Parse a filtered query into a list of QuerySteps."""
    if not (path.startswith("$.") or path.startswith("$[")):
        raise PatchFormatError("Query must start with '$.' or '$[', got {!r}.".format(path))
    body = path[1:]
    if body.startswith("."):
        body = body[1:]
    if not body:
        raise PatchFormatError("Empty query {!r}.".format(path))

    steps = []
    for text in _split_steps(body):
        if not text:
            raise UnsupportedQueryError(
                "Recursive descent is not supported in query {!r}.".format(path))
        m = _step_re.match(text)
        if m is None:
            raise UnsupportedQueryError(
                "Unsupported query step {!r} in {!r}.".format(text, path))
        name = m.group("name") or None
        if name == "*":
            raise UnsupportedQueryError("Wildcards are not supported in query {!r}.".format(path))
        selector = m.group("selector")
        predicate = None
        if selector is not None:
            f = _filter_re.match(selector.strip())
            if f is None:
                raise UnsupportedQueryError(
                    "Unsupported query selector [{}] in {!r}.".format(selector, path))
            predicate = parse_predicate(f.group("predicate"))
        steps.append(QueryStep(name, predicate))
    return steps


def select_query(tree, path):
    """Evaluate a filtered query, returning the list of matched Locations."""
    current = [Location(None, None, tree)]
    for step in parse_query(path):
        if step.name is not None:
            current = [
                Location(loc.value, step.name, loc.value[step.name])
                for loc in current
                if kind_of(loc.value) is JsonKind.OBJECT and step.name in loc.value
            ]
        if step.predicate is not None:
            current = [
                Location(loc.value, i, item)
                for loc in current
                if kind_of(loc.value) is JsonKind.ARRAY
                for i, item in enumerate(loc.value)
                if step.predicate(item)
            ]
    return current


def select(tree, path):
    """Return the list of values addressed by a pointer or a query."""
    if is_query_path(path):
        return [loc.value for loc in select_query(tree, path)]
    value = resolve_pointer(tree, path)
    return [] if value is Missing else [value]


__all__ = [
    "APPEND", "Location", "escape_segment", "unescape_segment",
    "split_pointer", "join_pointer", "extend_pointer", "is_nested_pointer",
    "resolve_pointer", "parse_query", "select_query", "select",
]
