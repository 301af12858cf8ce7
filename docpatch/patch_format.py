# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

from .log import PatchFormatError
from .values import dumps, loads


class PatchOp:
    "Collection of valid values for the op field in patch operations."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


ALL_OPS = (
    PatchOp.ADD,
    PatchOp.REMOVE,
    PatchOp.REPLACE,
    PatchOp.MOVE,
    PatchOp.COPY,
    PatchOp.TEST,
    )

# Ops carrying a value, and ops reading from a second location
VALUE_OPS = (PatchOp.ADD, PatchOp.REPLACE, PatchOp.TEST)
FROM_OPS = (PatchOp.MOVE, PatchOp.COPY)

# Only these ops accept a filtered query ($...) as path
QUERY_OPS = (PatchOp.REMOVE, PatchOp.REPLACE)

QUERY_SIGIL = "$"


class InvalidPatchOperation(ValueError):
    """A well formed operation that cannot be carried out on the document."""
    pass


class UnsupportedQueryError(InvalidPatchOperation, NotImplementedError):
    """A filtered query using a selector or predicate form that isn't implemented."""
    pass


class PatchTestFailed(AssertionError):
    """A test operation did not match.

    Operations before the failing test have already been applied,
    `target` holds the document as it was when the test failed.
    """

    def __init__(self, message, operation=None, target=None):
        super(PatchTestFailed, self).__init__(message)
        self.operation = operation
        self.target = target


def is_query_path(path):
    return path.startswith(QUERY_SIGIL)


class PatchOperation(namedtuple("PatchOperation", ("op", "path", "value", "from_path"))):
    """A single patch operation.

    Use the op_* factories to create these, they check that
    the combination of fields is valid for the op.
    """
    __slots__ = ()

    def to_dict(self):
        d = {"op": self.op, "path": self.path}
        if self.op in VALUE_OPS:
            d["value"] = self.value
        elif self.op in FROM_OPS:
            d["from"] = self.from_path
        return d


def _check_path(op, path, name="path"):
    """Check the syntax of a path, so that a bad path is found before
    any operation of its document is applied.
    """
    from .paths import parse_query, split_pointer

    if not isinstance(path, str):
        raise PatchFormatError(
            "{} operation expects a string {}, not {!r}.".format(op, name, path))
    if is_query_path(path):
        if op not in QUERY_OPS or name != "path":
            raise PatchFormatError(
                "{} operation does not accept the query {} {!r}.".format(op, name, path))
        parse_query(path)
    else:
        split_pointer(path)
    return path


def op_add(path, value):
    "Create a patch operation to add value at path."
    return PatchOperation(PatchOp.ADD, _check_path(PatchOp.ADD, path), value, None)

def op_remove(path):
    "Create a patch operation to remove the value(s) at path."
    return PatchOperation(PatchOp.REMOVE, _check_path(PatchOp.REMOVE, path), None, None)

def op_replace(path, value):
    "Create a patch operation to replace the value(s) at path with value."
    return PatchOperation(PatchOp.REPLACE, _check_path(PatchOp.REPLACE, path), value, None)

def op_move(from_path, path):
    "Create a patch operation to move the value at from_path to path."
    _check_path(PatchOp.MOVE, from_path, "from")
    return PatchOperation(PatchOp.MOVE, _check_path(PatchOp.MOVE, path), None, from_path)

def op_copy(from_path, path):
    "Create a patch operation to copy the value at from_path to path."
    _check_path(PatchOp.COPY, from_path, "from")
    return PatchOperation(PatchOp.COPY, _check_path(PatchOp.COPY, path), None, from_path)

def op_test(path, value):
    "Create a patch operation asserting that the value at path equals value."
    return PatchOperation(PatchOp.TEST, _check_path(PatchOp.TEST, path), value, None)


def validate_patch_entry(e):
    """Check that e is a well formed wire operation (a decoded json object).

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(e, dict):
        raise PatchFormatError("Patch operation {!r} is not an object.".format(e))
    if "op" not in e:
        raise PatchFormatError("Patch operation {!r} is missing 'op'.".format(e))
    op = e["op"]
    if op not in ALL_OPS:
        raise PatchFormatError("Unknown patch op {!r}.".format(op))
    if "path" not in e:
        raise PatchFormatError("{} operation is missing 'path'.".format(op))
    _check_path(op, e["path"])
    if op in FROM_OPS:
        if "from" not in e:
            raise PatchFormatError("{} operation is missing 'from'.".format(op))
        _check_path(op, e["from"], "from")


def validate_patch(obj):
    """Check whether a decoded wire document is well formed.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(obj, list):
        raise PatchFormatError("Patch document must be a list of operations.")
    for e in obj:
        validate_patch_entry(e)


def is_valid_patch(obj):
    try:
        validate_patch(obj)
    except (PatchFormatError, UnsupportedQueryError):
        return False
    return True


def operation_from_dict(e):
    "Build an operation from a single validated wire object."
    op = e["op"]
    if op in FROM_OPS:
        return PatchOperation(op, e["path"], None, e["from"])
    if op in VALUE_OPS:
        return PatchOperation(op, e["path"], e.get("value"), None)
    return PatchOperation(op, e["path"], None, None)


class PatchDocument(object):
    """An ordered sequence of patch operations.

    Operations are applied in order, each one seeing the result
    of the ones before it.
    """

    def __init__(self, operations=()):
        self._operations = []
        self.extend(operations)

    @property
    def operations(self):
        return tuple(self._operations)

    def append(self, operation):
        if not isinstance(operation, PatchOperation):
            raise PatchFormatError(
                "Expected a patch operation, got {!r}.".format(operation))
        self._operations.append(operation)

    def extend(self, operations):
        for operation in operations:
            self.append(operation)

    def add(self, path, value):
        self.append(op_add(path, value))

    def remove(self, path):
        self.append(op_remove(path))

    def replace(self, path, value):
        self.append(op_replace(path, value))

    def move(self, from_path, path):
        self.append(op_move(from_path, path))

    def copy(self, from_path, path):
        self.append(op_copy(from_path, path))

    def test(self, path, value):
        self.append(op_test(path, value))

    def __iter__(self):
        return iter(self._operations)

    def __len__(self):
        return len(self._operations)

    def __bool__(self):
        return bool(self._operations)

    def __getitem__(self, index):
        return self._operations[index]

    def __eq__(self, other):
        if not isinstance(other, PatchDocument):
            return NotImplemented
        return self._operations == other._operations

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    def __repr__(self):
        return "PatchDocument({!r})".format(self._operations)

    def __str__(self):
        return self.to_json(indent=2)

    def to_list(self):
        "Return the wire representation as a list of dicts."
        return [e.to_dict() for e in self._operations]

    def to_json(self, indent=None):
        return dumps(self.to_list(), indent=indent)

    @classmethod
    def from_list(cls, obj):
        """Build a document from a decoded wire document.

        The whole document is validated before any operation is built.
        """
        validate_patch(obj)
        return cls(operation_from_dict(e) for e in obj)

    @classmethod
    def parse(cls, text):
        try:
            obj = loads(text)
        except ValueError as e:
            raise PatchFormatError("Invalid patch document: {}".format(e)) from e
        return cls.from_list(obj)

    @classmethod
    def load(cls, f):
        "Read a document from a file-like object."
        return cls.parse(f.read())


def to_patch_document(patch):
    """Return patch as a PatchDocument.

    Accepts a PatchDocument, a sequence of PatchOperations, or a
    decoded wire document (a list of operation dicts).
    """
    if isinstance(patch, PatchDocument):
        return patch
    if isinstance(patch, (list, tuple)) and patch and all(
            isinstance(e, PatchOperation) for e in patch):
        return PatchDocument(patch)
    return PatchDocument.from_list(patch)


__all__ = [
    "PatchFormatError", "InvalidPatchOperation", "UnsupportedQueryError",
    "PatchTestFailed", "PatchOp", "PatchOperation", "PatchDocument",
    "op_add", "op_remove", "op_replace", "op_move", "op_copy", "op_test",
    "validate_patch", "is_valid_patch", "to_patch_document",
]
