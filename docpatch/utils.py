# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import os
import sys

import colorama

from .values import loads, dumps

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


def read_json(f, on_null="empty"):
    """Read and return json document from filename

    Parameters:
        f:  The filename to read from or null filename
            ("/dev/null" on *nix, "nul" on Windows).
            Alternatively a file-like object can be passed.
        on_null: What to return when filename null
            "empty": return empty dict
            "null": return None (json null)
    """
    if f == EXPLICIT_MISSING_FILE:
        if on_null == 'empty':
            return {}
        elif on_null == 'null':
            return None
        else:
            raise ValueError(
                'Not valid value for `on_null`: %r. Valid values '
                'are "empty" or "null"' % (on_null,))
    if isinstance(f, str):
        with io.open(f, encoding='utf-8') as fo:
            return loads(fo.read())
    return loads(f.read())


def write_json(value, f, indent=2):
    """Write json document to filename or file-like object"""
    text = dumps(value, indent=indent) + "\n"
    if isinstance(f, str):
        with io.open(f, "w", encoding='utf-8') as fo:
            fo.write(text)
    else:
        f.write(text)


def setup_std_streams():
    """Setup sys.stdout/err

    - Makes sys.stdout/err escape characters their encoding
      can't represent, rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """
    if not os.getenv('PYTHONIOENCODING'):
        for stream, raw_stream in ((sys.stdout, sys.__stdout__), (sys.stderr, sys.__stderr__)):
            # captured or redirected output is left alone
            if stream is not raw_stream or not hasattr(stream, 'reconfigure'):
                continue
            if stream.errors == 'strict' or stream.errors.startswith('surrogate'):
                stream.reconfigure(errors='backslashreplace')

    if sys.platform.startswith('win'):
        colorama.init()
