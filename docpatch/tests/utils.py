# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import random

from docpatch import patch, diff
from docpatch.patch_format import is_valid_patch, PatchOp
from docpatch.values import values_equal


def check_diff_and_patch(a, b, id_aware=False):
    "Check that patch(a, diff(a,b)) reproduces b."
    d = diff(a, b, id_aware=id_aware)
    assert is_valid_patch(d.to_list())
    assert values_equal(patch(a, d), b)
    return d


def check_symmetric_diff_and_patch(a, b, id_aware=False):
    "Check that patch(a, diff(a,b)) reproduces b and vice versa."
    check_diff_and_patch(a, b, id_aware)
    check_diff_and_patch(b, a, id_aware)


def ops(d):
    "Return the list of op names in a patch document."
    return [e.op for e in d]


def has_remove_add_pair(d):
    "Whether a remove is directly followed by an add at the same path."
    prev = None
    for e in d:
        if (prev is not None and prev.op == PatchOp.REMOVE and
                e.op == PatchOp.ADD and e.path == prev.path):
            return True
        prev = e
    return False


_keys = ["a", "b", "c", "", "id", "x/y", "t~1"]
_ids = ["1", "2", "3"]


def random_value(rng, depth=0):
    "Generate a random json value, nested at most a few levels."
    choice = rng.randint(0, 7 if depth < 3 else 3)
    if choice == 0:
        return None
    elif choice == 1:
        return rng.choice([True, False])
    elif choice == 2:
        return rng.choice([0, 1, 2, 1.5, -3])
    elif choice == 3:
        return rng.choice(["", "foo", "bar", "1"])
    elif choice in (4, 5):
        return [random_value(rng, depth + 1) for _ in range(rng.randint(0, 4))]
    else:
        obj = {k: random_value(rng, depth + 1)
               for k in rng.sample(_keys, rng.randint(0, 4))}
        if "id" in obj and rng.random() < 0.7:
            obj["id"] = rng.choice(_ids)
        return obj


def random_pair(seed):
    rng = random.Random(seed)
    return random_value(rng), random_value(rng)
