# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from .args import (
    add_generic_args, add_diff_args, add_filename_args, add_prettyprint_args,
    ConfigBackedParser, StdoutPrinter, check_files_exist,
    diff_config_from_args, prettyprint_config_from_args,
    )
from .diffing.generic import diff
from .log import error, info
from .prettyprint import pretty_print_document_diff
from .utils import read_json, write_json, setup_std_streams


_description = "Compute the patch document transforming one json document into another."


def main_diff(args):
    """Main handler of diff CLI"""
    base = args.base
    remote = args.remote
    output = getattr(args, 'out', None)

    # The null file stands for an empty document
    if not check_files_exist((base, remote)):
        return 1

    try:
        a = read_json(base, on_null='empty')
        b = read_json(remote, on_null='empty')
    except ValueError as e:
        error("Could not read json document: %s", e)
        return 1

    d = diff(a, b, config=diff_config_from_args(args))

    if output:
        write_json(d.to_list(), output)
        info("Wrote %d operations to %s", len(d), output)
    else:
        config = prettyprint_config_from_args(args, out=StdoutPrinter())
        pretty_print_document_diff(base, remote, a, d, config)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the docpatch-diff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'docpatch-diff',
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["base", "remote"])

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the patch document is written to this file. "
             "Otherwise it is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
