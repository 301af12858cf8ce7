# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from .args import (
    add_generic_args, add_patch_args, add_filename_args, ConfigBackedParser,
    check_files_exist,
    )
from .log import error, info
from .patch_format import (
    PatchDocument, PatchFormatError, InvalidPatchOperation, PatchTestFailed,
    )
from .patching import patch
from .utils import read_json, write_json, setup_std_streams


_description = "Apply a patch document from docpatch-diff to a json document."


def main_patch(args):
    base_filename = args.base
    patch_filename = args.patch
    output_filename = args.output

    if not check_files_exist((base_filename, patch_filename)):
        return 1

    try:
        before = read_json(base_filename, on_null='empty')
        with open(patch_filename, encoding="utf8") as patch_file:
            document = PatchDocument.load(patch_file)
    except ValueError as e:
        # PatchFormatError is a ValueError as well
        error("Could not read input: %s", e)
        return 1

    try:
        after = patch(before, document, strict=getattr(args, 'strict', False))
    except (PatchFormatError, InvalidPatchOperation, PatchTestFailed) as e:
        error("Patch failed: %s", e)
        return 1

    if output_filename:
        write_json(after, output_filename)
        info("Wrote patched document to %s", output_filename)
    else:
        write_json(after, sys.stdout)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the docpatch-apply command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'docpatch-apply',
        add_help=True,
        )
    add_generic_args(parser)
    add_patch_args(parser)
    add_filename_args(parser, ["base", "patch"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched document is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
