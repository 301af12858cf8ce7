# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import importlib
import sys

from ._version import __version__

# Subcommand name to the module holding its main()
COMMANDS = {
    "diff": "docpatch.diffapp",
    "apply": "docpatch.patchapp",
    "show": "docpatch.showapp",
}
HELP_MESSAGE_VERBOSE = ("Usage: docpatch [OPTIONS]\n\n"
                       "OPTIONS: -h, --version, --config, COMMANDS{%s}\n\n"
                       "Examples: docpatch --version\n"
                       "          docpatch diff -h\n"
                       "          docpatch diff before.json after.json --out patch.json\n"
                       "          docpatch apply before.json patch.json -o after.json\n"
                       "          docpatch show patch.json --base before.json\n" % ", ".join(COMMANDS))


def list_all_config():
    from .args import print_config
    from .config import entrypoint_configurables
    print("All available config options, and their current values:\n",
          file=sys.stderr)
    print_config(list(entrypoint_configurables))


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if not args:
        sys.exit("Option missing.\n\n%s" % HELP_MESSAGE_VERBOSE)

    cmd, args = args[0], args[1:]
    if cmd in COMMANDS:
        return importlib.import_module(COMMANDS[cmd]).main(args)

    if cmd == '--version':
        sys.exit(__version__)
    elif cmd in ('-h', '--help'):
        sys.exit(HELP_MESSAGE_VERBOSE)
    elif cmd == '--config':
        list_all_config()
        sys.exit(1)
    sys.exit("Unrecognized command '%s'\n\n%s." % (cmd, HELP_MESSAGE_VERBOSE))


if __name__ == "__main__":
    # This is triggered by "python -m docpatch <args>"
    sys.exit(main_dispatch())
