# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from .args import (
    add_generic_args, add_filename_args, add_prettyprint_args,
    ConfigBackedParser, StdoutPrinter, check_files_exist,
    prettyprint_config_from_args,
    )
from .log import error
from .patch_format import PatchDocument, PatchFormatError, InvalidPatchOperation
from .prettyprint import pretty_print_patch
from .utils import read_json, setup_std_streams
from .values import Missing


_description = "Pretty-print a patch document."


def main_show(args):
    patch_filename = args.patch
    base_filename = getattr(args, 'base', None)

    if not check_files_exist((patch_filename, base_filename)):
        return 1

    try:
        with open(patch_filename, encoding="utf8") as patch_file:
            document = PatchDocument.load(patch_file)
        base = read_json(base_filename, on_null='empty') if base_filename else Missing
    except ValueError as e:
        error("Could not read input: %s", e)
        return 1

    config = prettyprint_config_from_args(args, out=StdoutPrinter())
    try:
        pretty_print_patch(document, base, config)
    except (PatchFormatError, InvalidPatchOperation) as e:
        error("Could not show patch: %s", e)
        return 1

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the docpatch-show command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'docpatch-show',
        )
    add_generic_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["patch"])
    parser.add_argument(
        '--base',
        default=None,
        help="if supplied, the json document the patch applies to. "
             "Values removed or replaced from it are shown as well.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_show(arguments)


if __name__ == "__main__":
    sys.exit(main())
