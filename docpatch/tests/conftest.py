# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def books():
    return {
        "books": [
            {
                "title": "The Great Gatsby",
                "author": "F. Scott Fitzgerald",
            },
            {
                "title": "The Grapes of Wrath",
                "author": "John Steinbeck",
            },
        ]
    }


@fixture
def reset_log_config():
    import logging
    import docpatch.log
    yield
    docpatch.log.logger.setLevel(logging.NOTSET)
    logging.getLogger().setLevel(logging.WARNING)


@fixture(scope='session')
def json_schema_patch(request):
    schema_path = os.path.join(schema_dir, 'patch_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def patch_validator(request, json_schema_patch):
    return Validator(json_schema_patch)
