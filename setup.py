#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

DOCPATCH_PATH = HERE / "docpatch"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(DOCPATCH_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="docpatch",
      version=VERSION,
      description="Diff and patch json documents with json patch operations",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD",
      python_requires=">=3.7",
      packages=find_packages(include=["docpatch", "docpatch.*"]),
      package_data={
          "docpatch": ["*.schema.json"],
          "docpatch.tests": ["files/*.json"],
      },
      install_requires=[
          "colorama",
          "jsonpointer>=2.1",
          "jupyter_core",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "pytest>=6.0",
              "jsonschema",
          ],
      },
      entry_points={
          "console_scripts": [
              "docpatch = docpatch.__main__:main_dispatch",
              "docpatch-diff = docpatch.diffapp:main",
              "docpatch-apply = docpatch.patchapp:main",
              "docpatch-show = docpatch.showapp:main",
          ],
      },
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: BSD License",
          "Programming Language :: Python :: 3",
      ],
    )
