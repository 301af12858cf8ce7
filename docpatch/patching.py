# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import debug
from .patch_format import (
    PatchOp, PatchFormatError, InvalidPatchOperation, PatchTestFailed,
    is_query_path, to_patch_document,
)
from .paths import (
    APPEND, split_pointer, is_nested_pointer, resolve_pointer, select_query,
)
from .values import JsonKind, Missing, as_index, child, clone, kind_of, values_equal


__all__ = ["patch", "apply_operation"]


def _skip(e, reason, strict):
    """Handle a write that cannot be carried out on the document.

    These are silently ignored unless strict is set.
    """
    if strict:
        raise InvalidPatchOperation("Cannot {} at {!r}: {}.".format(e.op, e.path, reason))
    debug("Skipping %s at %r: %s", e.op, e.path, reason)


def _walk_or_create(root, segments, leaf):
    """Find the container addressed by segments, creating missing objects.

    Returns Missing if the container can't be reached or created.
    Nothing is created unless the whole chain can be created, and
    numeric segments are never created since that would need an array.
    When leaf is the append token the innermost created container is
    an array.
    """
    node = root
    for i, segment in enumerate(segments):
        nextnode = child(node, segment)
        if nextnode is Missing:
            break
        node = nextnode
    else:
        return node

    missing = segments[i:]
    if kind_of(node) is not JsonKind.OBJECT:
        return Missing
    if any(as_index(s) is not None for s in missing) or as_index(leaf) is not None:
        return Missing

    for k, segment in enumerate(missing):
        created = [] if (leaf == APPEND and k == len(missing) - 1) else {}
        node[segment] = created
        node = created
    return node


def _resolve_segments(node, segments):
    for segment in segments:
        node = child(node, segment)
        if node is Missing:
            break
    return node


def _insert(parent, key, value):
    "Insert value in parent at key, returns False if key isn't valid for parent."
    kind = kind_of(parent)
    if kind is JsonKind.ARRAY:
        if key == APPEND:
            parent.append(value)
            return True
        index = as_index(key)
        if index is None or index > len(parent):
            return False
        parent.insert(index, value)
        return True
    elif kind is JsonKind.OBJECT:
        parent[key] = value
        return True
    return False


def patch_add(target, e, value, strict=False):
    """Write value at e.path, returns the (possibly new) root.

    Existing object members are overwritten, array items are
    inserted before the addressed index.
    """
    segments = split_pointer(e.path)
    if not segments:
        return value

    parent = _walk_or_create(target, segments[:-1], segments[-1])
    if parent is Missing:
        _skip(e, "parent can not be found or created", strict)
    elif not _insert(parent, segments[-1], value):
        _skip(e, "invalid key for parent", strict)
    return target


def _pop_pointer(target, e, path, strict):
    "Remove and return the value at path, or Missing."
    segments = split_pointer(path)
    if not segments:
        raise InvalidPatchOperation("Cannot remove the document root.")

    parent = _resolve_segments(target, segments[:-1])
    key = segments[-1]
    value = Missing if parent is Missing else child(parent, key)
    if value is Missing:
        _skip(e, "no value at {!r}".format(path), strict)
        return Missing

    if kind_of(parent) is JsonKind.ARRAY:
        del parent[as_index(key)]
    else:
        del parent[key]
    return value


def _delete_locations(locations):
    "Delete all matched locations from their parents."
    by_parent = {}
    for loc in locations:
        by_parent.setdefault(id(loc.parent), (loc.parent, []))[1].append(loc.key)

    for parent, keys in by_parent.values():
        if kind_of(parent) is JsonKind.ARRAY:
            # Delete from the back so indices stay valid
            for index in sorted(keys, reverse=True):
                del parent[index]
        else:
            for key in keys:
                del parent[key]


def patch_remove(target, e, strict=False):
    if is_query_path(e.path):
        locations = select_query(target, e.path)
        debug("Query %r matched %d location(s) to remove", e.path, len(locations))
        _delete_locations(locations)
    else:
        _pop_pointer(target, e, e.path, strict)
    return target


def patch_replace(target, e, strict=False):
    if is_query_path(e.path):
        locations = select_query(target, e.path)
        debug("Query %r matched %d location(s) to replace", e.path, len(locations))
        for loc in locations:
            if loc.parent is None:
                return clone(e.value)
            loc.parent[loc.key] = clone(e.value)
        return target

    segments = split_pointer(e.path)
    if not segments:
        return clone(e.value)

    parent = _resolve_segments(target, segments[:-1])
    key = segments[-1]
    if parent is not Missing and child(parent, key) is not Missing:
        if kind_of(parent) is JsonKind.ARRAY:
            parent[as_index(key)] = clone(e.value)
        else:
            parent[key] = clone(e.value)
        return target

    # Nothing to replace, write it like an add
    return patch_add(target, e, clone(e.value), strict=strict)


def patch_move(target, e, strict=False):
    if is_nested_pointer(e.from_path, e.path):
        raise InvalidPatchOperation(
            "Cannot move {!r} into its own child {!r}.".format(e.from_path, e.path))
    if split_pointer(e.from_path) == split_pointer(e.path):
        return target

    value = _pop_pointer(target, e, e.from_path, strict)
    if value is Missing:
        return target
    return patch_add(target, e, value, strict=strict)


def patch_copy(target, e, strict=False):
    value = resolve_pointer(target, e.from_path)
    value = None if value is Missing else clone(value)
    return patch_add(target, e, value, strict=strict)


def patch_test(target, e):
    value = resolve_pointer(target, e.path)
    if value is Missing or not values_equal(value, e.value):
        raise PatchTestFailed(
            "Value at {!r} does not match.".format(e.path), operation=e, target=target)
    return target


def apply_operation(target, e, strict=False):
    """Apply a single operation to target.

    Returns the patched document, which is a new object only when
    the operation replaced the document root.
    """
    op = e.op
    if op == PatchOp.ADD:
        return patch_add(target, e, clone(e.value), strict=strict)
    elif op == PatchOp.REMOVE:
        return patch_remove(target, e, strict=strict)
    elif op == PatchOp.REPLACE:
        return patch_replace(target, e, strict=strict)
    elif op == PatchOp.MOVE:
        return patch_move(target, e, strict=strict)
    elif op == PatchOp.COPY:
        return patch_copy(target, e, strict=strict)
    elif op == PatchOp.TEST:
        return patch_test(target, e)
    else:
        raise PatchFormatError("Invalid op {}.".format(op))


def patch(obj, document, in_place=False, strict=False):
    """Produce a patched version of obj with the given patch document.

    document is a PatchDocument or its decoded json form (a list of
    operation dicts), which is validated in full before anything is
    changed. Operations are applied in order.

    Unless in_place is given, obj is left untouched and a patched
    copy is returned. Writes to locations that can't be reached
    (e.g. through a missing array) are skipped, or raise an
    InvalidPatchOperation if strict is given.

    A failing test operation raises PatchTestFailed. Operations before
    it are not rolled back, with in_place they are visible in obj and
    in any case the exception carries the partially patched document.
    """
    document = to_patch_document(document)

    target = obj if in_place else clone(obj)
    for e in document:
        target = apply_operation(target, e, strict=strict)
    return target
