# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import os
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .log import init_logging, set_docpatch_log_level
from .utils import EXPLICIT_MISSING_FILE


LOG_LEVELS = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')


class ConfigBackedParser(argparse.ArgumentParser):
    """Argument parser taking its defaults from the docpatch config.

    The entrypoint is the first word of the program name, so that
    'docpatch-diff' and 'docpatch-diff sub' share their config.
    Programs without a config section use the argparse defaults.
    """

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        if entrypoint in entrypoint_configurables:
            self.set_defaults(**get_defaults_for_argparse(entrypoint))
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # Logging is set up here, as __call__ only runs when the option is given
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_docpatch_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        set_docpatch_log_level(getattr(logging, values), True)


def modify_config_for_print(config):
    """Turn config values into their json text, for listing them.

    Empty sections are shown as '{}'.
    """
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v) or '{}'
        else:
            output[k] = json.dumps(v)
    return output


def print_config(entrypoints, out=None):
    """List the config options of the entrypoints with their effective values.

    Each entrypoint gets a section named after its configurable.
    """
    from .prettyprint import pretty_print_dict, PrettyPrintConfig

    config = PrettyPrintConfig(out=out or sys.stderr)
    for entrypoint in entrypoints:
        header = entrypoint_configurables[entrypoint].__name__
        values = modify_config_for_print(build_config(entrypoint, True))
        pretty_print_dict({header: values}, config=config)


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        print_config([parser.prog])
        sys.exit(1)


class StdoutPrinter:
    """Writes through print(), so that output captured by
    replacing sys.stdout (e.g. pytest's capsys) sees it.
    """

    def write(self, text):
        print(text, end="")


def check_files_exist(filenames):
    """Report the first missing file, and return False if there is one.

    None entries are optional files that weren't given, and the
    null file marks a document as explicitly missing.
    """
    for fn in filenames:
        if fn is None or fn == EXPLICIT_MISSING_FILE:
            continue
        if not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return False
    return True


def add_generic_args(parser):
    """Adds the --version, --config and --log-level options.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=LOG_LEVELS,
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_diff_args(parser):
    """Adds the options controlling how documents are compared.
    """
    group = parser.add_argument_group('diff', 'Options controlling the diff.')
    group.add_argument(
        '--id-aware',
        dest='id_aware',
        action="store_true",
        default=False,
        help="match array items that are objects with equal ids, and diff "
             "them in place instead of removing and adding them.")
    group.add_argument(
        '--id-key',
        dest='id_key',
        default='id',
        help="the object member holding the id used by --id-aware. "
             "Default is 'id'.")


def add_patch_args(parser):
    parser.add_argument(
        '--strict',
        dest='strict',
        action="store_true",
        default=False,
        help="fail on writes to locations that can't be reached, "
             "instead of skipping them.")


filename_help = {
    "base":   "The json document to start from.",
    "remote": "The modified json document.",
    "patch":  "The patch document, as written by docpatch-diff --out.",
    }


def add_filename_args(parser, names):
    """Add positional filename arguments with consistent help texts.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def add_prettyprint_args(parser):
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help="prevent use of ANSI color code escapes for text output",
    )


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', True),
        **kwargs
    )


def diff_config_from_args(arguments):
    from .diffing import DiffConfig
    return DiffConfig(
        id_aware=getattr(arguments, 'id_aware', False),
        id_key=getattr(arguments, 'id_key', 'id'),
    )
