# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from io import StringIO

import pytest

from docpatch import __version__
from docpatch._version import version_info
from docpatch.utils import EXPLICIT_MISSING_FILE, read_json, write_json


def test_read_json_null_file():
    assert read_json(EXPLICIT_MISSING_FILE) == {}
    assert read_json(EXPLICIT_MISSING_FILE, on_null='null') is None
    with pytest.raises(ValueError):
        read_json(EXPLICIT_MISSING_FILE, on_null='nothing')


def test_write_and_read_json(tmpdir):
    value = {"title": "Æsop", "tags": ["a", None, 1.5]}
    fn = str(tmpdir.join("value.json"))
    write_json(value, fn)
    assert read_json(fn) == value
    with open(fn, encoding="utf8") as f:
        assert "Æsop" in f.read()

    out = StringIO()
    write_json([1], out, indent=None)
    assert out.getvalue() == "[1]\n"
    assert read_json(StringIO(out.getvalue())) == [1]


def test_version():
    assert __version__.startswith("%d.%d." % version_info[:2])
