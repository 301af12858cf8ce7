# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, DiffConfig
from .patching import patch
from .patch_format import (
    PatchDocument, PatchOperation, PatchOp,
    PatchFormatError, InvalidPatchOperation, UnsupportedQueryError, PatchTestFailed,
    op_add, op_remove, op_replace, op_move, op_copy, op_test,
)
from .paths import select


__all__ = [
    "__version__",
    "diff", "DiffConfig",
    "patch",
    "select",
    "PatchDocument", "PatchOperation", "PatchOp",
    "PatchFormatError", "InvalidPatchOperation", "UnsupportedQueryError", "PatchTestFailed",
    "op_add", "op_remove", "op_replace", "op_move", "op_copy", "op_test",
    ]
