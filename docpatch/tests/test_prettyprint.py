# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from io import StringIO

import colorama
import pytest

from docpatch import prettyprint as pp
from docpatch import diff
from docpatch.patch_format import PatchDocument, op_add, op_replace, op_move, op_copy


def TestConfig(use_color=True):
    return pp.PrettyPrintConfig(out=StringIO(), use_color=use_color)


def test_pretty_print_dict_complex():
    d = {
        'a': 5,
        'b': [1, 2, 3],
        'c': {
            'x': 'y',
        },
        'd': 10,
        'short': 'text',
        'long': 'long\ntext',
    }
    prefix = '-'

    config = TestConfig()
    pp.pretty_print_dict(d, {'d'}, prefix, config)
    text = config.out.getvalue()

    for key in d:
        if key != 'd':
            mark = '-%s:' % key
            assert mark in text
    assert "short: text" in text
    assert 'long:\n' in text
    assert 'd:' not in text


def test_pretty_print_long_list():
    li = ['item %d' % i for i in range(20)]
    config = TestConfig()
    pp.pretty_print_value(li, '+', config)
    text = config.out.getvalue()
    assert '+item[0]: item 0\n' in text
    assert '+item[19]: item 19\n' in text

    config = TestConfig()
    pp.pretty_print_value([1, 2], '+', config)
    assert config.out.getvalue() == '+[1,2]\n'


def test_pretty_print_scalars():
    config = TestConfig()
    pp.pretty_print_value(None, '+', config)
    pp.pretty_print_value(True, '+', config)
    pp.pretty_print_value('two\nlines', '+', config)
    pp.pretty_print_value({}, '+', config)
    assert config.out.getvalue() == '+null\n+true\n+two\n+lines\n+{}\n'


def test_pretty_print_operation_colors():
    config = TestConfig(use_color=True)
    pp.pretty_print_operation(op_add('/a', 1), config=config)
    text = config.out.getvalue()
    assert colorama.Fore.GREEN + '+  1' in text
    assert text.endswith(colorama.Style.RESET_ALL)

    config = TestConfig(use_color=False)
    pp.pretty_print_operation(op_add('/a', 1), config=config)
    assert config.out.getvalue() == '## added /a:\n+  1\n\n'


def test_pretty_print_type_change():
    config = TestConfig(use_color=False)
    pp.pretty_print_operation(op_replace('/a', 'x'), {'a': 1}, config)
    text = config.out.getvalue()
    assert '## replaced (type changed from number to string) /a:' in text
    assert '-  1\n' in text
    assert '+  x\n' in text


def test_pretty_print_move_and_copy():
    config = TestConfig(use_color=False)
    pp.pretty_print_operation(op_move('/a', '/b'), config=config)
    pp.pretty_print_operation(op_copy('', '/b'), config=config)
    text = config.out.getvalue()
    assert '## moved /a to /b:' in text
    assert '## copied "" to /b:' in text


def test_pretty_print_root_and_empty_key():
    config = TestConfig(use_color=False)
    pp.pretty_print_operation(op_replace('', 1), {'': 0}, config)
    pp.pretty_print_operation(op_replace('/', 2), {'': 0}, config)
    text = config.out.getvalue()
    assert '## replaced (type changed from object to number) "":' in text
    assert '## replaced /:' in text
    assert '-  0\n' in text


def test_pretty_print_patch_shows_old_values():
    a = {'books': [{'title': 'A'}, {'title': 'B'}]}
    d = PatchDocument()
    d.replace('/books/0/title', 'C')
    d.remove('/books/0')
    d.test('/books/0/title', 'B')

    config = TestConfig(use_color=False)
    pp.pretty_print_patch(d, a, config)
    text = config.out.getvalue()
    assert text == (
        '## replaced /books/0/title:\n'
        '-  A\n'
        '+  C\n'
        '\n'
        '## removed /books/0:\n'
        '-  title: C\n'
        '\n'
        '## test value at /books/0/title:\n'
        '   B\n'
        '\n'
    )
    # The base is not modified
    assert a['books'][0]['title'] == 'A'


def test_pretty_print_document_diff(tmpdir):
    a = {'a': 1, 'b': [1, 2]}
    b = {'a': 2, 'b': [1, 2, 3]}
    config = TestConfig(use_color=False)
    pp.pretty_print_document_diff('a.json', 'b.json', a, diff(a, b), config)
    text = config.out.getvalue()
    assert text.startswith('docpatch-diff a.json b.json\n--- a.json  (no timestamp)\n')
    assert '## replaced /a:\n-  1\n+  2\n' in text
    assert '## added /b/-:\n+  3\n' in text

    config = TestConfig(use_color=False)
    pp.pretty_print_document_diff('a.json', 'b.json', a, diff(a, a), config)
    assert config.out.getvalue() == ''


def test_file_timestamp(tmpdir):
    assert pp.file_timestamp(str(tmpdir.join('missing.json'))) == '(no timestamp)'
    fn = tmpdir.join('exists.json')
    fn.write_text(u'{}', encoding='utf8')
    assert pp.file_timestamp(str(fn)) != '(no timestamp)'
