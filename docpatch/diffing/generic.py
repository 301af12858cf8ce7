# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..patch_format import PatchDocument, PatchOp, op_add, op_remove, op_replace
from ..paths import APPEND, extend_pointer
from ..values import JsonKind, canonical_text, clone, kind_of

from .config import DiffConfig

__all__ = ["diff"]


def diff(a, b, id_aware=False, config=None):
    """Compute the patch document transforming json value a into b.

    Applying the result to a with docpatch.patch reproduces b.
    """
    if config is None:
        config = DiffConfig(id_aware=id_aware)
    return PatchDocument(diff_values(a, b, path="", config=config))


def diff_values(a, b, path="", config=None):
    "Compute the list of operations transforming a into b at path."
    if config is None:
        config = DiffConfig()

    ka = kind_of(a)
    kb = kind_of(b)
    if ka is not kb:
        return [op_replace(path, clone(b))]

    if ka is JsonKind.OBJECT:
        return diff_objects(a, b, path=path, config=config)
    elif ka is JsonKind.ARRAY:
        return diff_arrays(a, b, path=path, config=config)

    # Two scalars of the same kind
    if canonical_text(a) != canonical_text(b):
        return [op_replace(path, b)]
    return []


def diff_objects(a, b, path="", config=None):
    """Compute diff of two objects.

    Removed keys come first, then added keys, then recursive
    diffs of the keys present in both. Keys are sorted within
    each group to get a deterministic result.
    """
    if config is None:
        config = DiffConfig()

    akeys = set(a.keys())
    bkeys = set(b.keys())

    di = []
    for key in sorted(akeys - bkeys):
        di.append(op_remove(extend_pointer(path, key)))

    for key in sorted(bkeys - akeys):
        di.append(op_add(extend_pointer(path, key), clone(b[key])))

    for key in sorted(akeys & bkeys):
        di.extend(diff_values(a[key], b[key], path=extend_pointer(path, key), config=config))

    return di


def diff_arrays(a, b, path="", config=None):
    """Compute diff of two arrays.

    Items equal at the start (head) and end (tail) of both arrays
    are matched up and diffed recursively. Everything in between
    is removed from a and added from b, unless nothing matched at
    all, in which case the whole array is replaced.
    """
    if config is None:
        config = DiffConfig()

    la = len(a)
    lb = len(b)
    di = []

    head = 0
    while head < la and head < lb and config.items_equal(a[head], b[head]):
        di.extend(diff_values(a[head], b[head], path=extend_pointer(path, head), config=config))
        head += 1

    # Tail items are addressed by their index in a, as they are
    # patched before the middle section changes the length
    tail = 0
    while head + tail < la and head + tail < lb:
        i = la - 1 - tail
        j = lb - 1 - tail
        if not config.items_equal(a[i], b[j]):
            break
        di.extend(diff_values(a[i], b[j], path=extend_pointer(path, i), config=config))
        tail += 1

    if head == 0 and tail == 0 and la > 0 and lb > 0:
        return [op_replace(path, clone(b))]

    # Every removal shifts the rest down, so all hit the same index
    for _ in range(la - head - tail):
        di.append(op_remove(extend_pointer(path, head)))
    added = []
    for k in range(head, lb - tail):
        p = extend_pointer(path, k)
        added.append(p)
        di.append(op_add(p, clone(b[k])))

    di = collapse_replacements(di)

    if tail == 0 and added:
        # Remaining adds all land at the end of the array
        added = set(added)
        append_path = extend_pointer(path, APPEND)
        di = [op_add(append_path, e.value) if e.op == PatchOp.ADD and e.path in added else e
              for e in di]

    return di


def collapse_replacements(di):
    "Turn each remove immediately followed by an add at the same path into a replace."
    collapsed = []
    prev = None
    for e in di:
        if (prev is not None and prev.op == PatchOp.REMOVE and
                e.op == PatchOp.ADD and e.path == prev.path):
            collapsed.append(op_replace(e.path, e.value))
            prev = None
        else:
            if prev is not None:
                collapsed.append(prev)
            prev = e
    if prev is not None:
        collapsed.append(prev)
    return collapsed
