# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import sys

import colorama

from .patch_format import PatchOp, PatchFormatError
from .patching import apply_operation
from .paths import select
from .values import JsonKind, Missing, clone, dumps, is_container, kind_of


# Indentation of nested values
IND = "  "

# Arrays are printed as json on a single line when shorter than this
MAXWIDTH = 78

DIFF_ENTRY_END = '\n'


ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))

col_const = {
    True: ColoredConstants(
        KEEP='   ',
        REMOVE=colorama.Fore.RED + '-  ',
        ADD=colorama.Fore.GREEN + '+  ',
        INFO=colorama.Fore.BLUE + colorama.Style.BRIGHT + '## ',
        RESET=colorama.Style.RESET_ALL,
    ),
    False: ColoredConstants(
        KEEP='   ',
        REMOVE='-  ',
        ADD='+  ',
        INFO='## ',
        RESET='',
    ),
}


class PrettyPrintConfig:
    """Where to print, and whether to use colors.

    The line prefixes of the color mode are available as
    attributes, e.g. config.REMOVE.
    """

    def __init__(self, out=sys.stdout, use_color=True):
        self.out = out
        self.use_color = use_color

    def __getattr__(self, name):
        if name in ColoredConstants._fields:
            return getattr(col_const[self.use_color], name)
        raise AttributeError(name)

DefaultConfig = PrettyPrintConfig()


def file_timestamp(filename):
    "Return modification time for filename as a string."
    try:
        t = os.path.getmtime(filename)
    except OSError:
        return "(no timestamp)"
    return datetime.datetime.fromtimestamp(t).isoformat(" ")


def format_value(v):
    "Format simple value for printing. Strings are printed as is, other values as json."
    if isinstance(v, str):
        return v
    return dumps(v)


def _write_lines(text, prefix, config):
    for line in text.splitlines() or [""]:
        config.out.write(prefix + line + "\n")


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed.

    Non-empty objects are printed one member per line, arrays as
    json when they fit on a line and item by item otherwise.
    """
    kind = kind_of(value)
    if kind is JsonKind.OBJECT and value:
        pretty_print_dict(value, (), prefix, config)
    elif kind is JsonKind.ARRAY and value:
        pretty_print_list(value, prefix, config)
    else:
        _write_lines(format_value(value), prefix, config)


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    "Print 'k: v', with v on indented lines below k unless it fits on one line."
    text = None if (is_container(v) and v) else format_value(v)
    if text is not None and "\n" not in text:
        config.out.write("%s%s: %s\n" % (prefix, k, text))
    else:
        config.out.write("%s%s:\n" % (prefix, k))
        pretty_print_value(v, prefix + IND, config)


def pretty_print_list(li, prefix="", config=DefaultConfig):
    text = dumps(li)
    if len(prefix) + len(text) < MAXWIDTH and "\\n" not in text:
        config.out.write("%s%s\n" % (prefix, text))
    else:
        for i, v in enumerate(li):
            pretty_print_item("item[%d]" % i, v, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print an object without braces, one member per line

        key: value
        key:
          long
          value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        pretty_print_item(k, d[k], prefix, config)


def pretty_print_diff_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path or '""', config.RESET))


def pretty_print_old_values(values, config):
    for value in values:
        pretty_print_value(value, config.REMOVE, config)


def pretty_print_operation(e, before=Missing, config=DefaultConfig):
    """Pretty-print a single patch operation.

    before is the document the operation is applied to, when
    given the values being removed or replaced are shown as well.
    """
    op = e.op
    old = select(before, e.path) if before is not Missing else []

    if op == PatchOp.ADD:
        pretty_print_diff_action("added", e.path, config)
        pretty_print_value(e.value, config.ADD, config)

    elif op == PatchOp.REMOVE:
        pretty_print_diff_action("removed", e.path, config)
        pretty_print_old_values(old, config)

    elif op == PatchOp.REPLACE:
        typechange = ""
        if len(old) == 1 and kind_of(old[0]) is not kind_of(e.value):
            typechange = " (type changed from %s to %s)" % (
                kind_of(old[0]).value, kind_of(e.value).value)
        pretty_print_diff_action("replaced" + typechange, e.path, config)
        pretty_print_old_values(old, config)
        pretty_print_value(e.value, config.ADD, config)

    elif op == PatchOp.MOVE:
        pretty_print_diff_action("moved %s to" % (e.from_path or '""'), e.path, config)

    elif op == PatchOp.COPY:
        pretty_print_diff_action("copied %s to" % (e.from_path or '""'), e.path, config)

    elif op == PatchOp.TEST:
        pretty_print_diff_action("test value at", e.path, config)
        pretty_print_value(e.value, config.KEEP, config)

    else:
        raise PatchFormatError("Unknown patch op {}".format(op))

    config.out.write(DIFF_ENTRY_END + config.RESET)


def pretty_print_patch(document, base=Missing, config=DefaultConfig):
    """Pretty-print a patch document.

    If base is given, each operation is shown along with the
    values it removes or replaces at that point of the patching.
    """
    current = clone(base) if base is not Missing else Missing
    for e in document:
        pretty_print_operation(e, current, config)
        if current is not Missing and e.op != PatchOp.TEST:
            current = apply_operation(current, e)


document_diff_header = """\
docpatch-diff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""

def pretty_print_document_diff(afn, bfn, a, document, config=DefaultConfig):
    """Pretty-print the diff of two json documents

    Parameters
    ----------

    afn: str
        Filename of a, the base document
    bfn: str
        Filename of b, the updated document
    a: json value
        The base document
    document: PatchDocument
        The patch document describing the transformation from a to b
    config: PrettyPrintConfig
        Config object determining how and where output is printed
    """
    if document:
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(document_diff_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        pretty_print_patch(document, a, config)
